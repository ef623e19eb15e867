from typing import Optional

from fastapi import HTTPException, Request
from fastapi_versionizer.versionizer import api_version
from pydantic import ValidationError
from starlette.datastructures import UploadFile

from meetshare.constants import allowed_transcript_content_types, trimmed_whitespace
from meetshare.env import transcript_max_part_size
from meetshare.logs import get_logger
from meetshare.utils import get_router

from ..processor import summarize
from .models import SummaryPayload, SummaryResult

router = get_router()
log = get_logger(__name__)

form_content_types = ('multipart/form-data', 'application/x-www-form-urlencoded')


async def read_payload(request: Request) -> tuple[SummaryPayload, Optional[UploadFile]]:
    """
    Reads the transcript from a JSON body, a form field or an uploaded file named `transcript`.
    """

    if request.headers.get('content-type', '').startswith(form_content_types):
        form = await request.form(max_part_size=transcript_max_part_size)
        transcript = form.get('transcript')
        custom_prompt = form.get('customPrompt')
        upload = transcript if isinstance(transcript, UploadFile) else None

        return (
            SummaryPayload(
                transcript=None if upload else transcript,
                custom_prompt=custom_prompt if isinstance(custom_prompt, str) else None,
            ),
            upload,
        )

    try:
        return SummaryPayload.model_validate(await request.json()), None
    except (ValueError, ValidationError):
        return SummaryPayload(), None


async def read_upload(upload: UploadFile) -> str:
    media_type = (upload.content_type or '').partition(';')[0].strip().lower()

    if media_type not in allowed_transcript_content_types:
        raise HTTPException(status_code=400, detail='Only text files are allowed')

    return (await upload.read()).decode('utf-8', errors='replace')


@api_version(1)
@router.post('/summarize')
async def create_summary(request: Request) -> SummaryResult:
    """
    Summarizes a meeting transcript, optionally following **customPrompt**.
    """

    payload, upload = await read_payload(request)

    if upload is not None:
        transcript = await read_upload(upload)
    elif payload.transcript:
        transcript = payload.transcript
    else:
        raise HTTPException(status_code=400, detail='No transcript provided')

    if not transcript.strip(trimmed_whitespace):
        raise HTTPException(status_code=400, detail='Transcript is empty')

    try:
        summary = await summarize(transcript, payload.custom_prompt)
    except Exception as e:
        log.error(f'Summarization error: {e}')
        raise HTTPException(status_code=500, detail='Failed to generate summary')

    return SummaryResult(summary=summary, original_text=transcript)
