from fastapi import Depends, HTTPException, Request
from fastapi_versionizer.versionizer import api_version

from meetshare.logs import get_logger
from meetshare.modules.monitoring import SHARE_ERROR_COUNTER
from meetshare.utils import get_router

from ..processor import share
from .models import ShareRequest, ShareResult

router = get_router()
log = get_logger(__name__)


async def get_share_request(request: Request) -> ShareRequest:
    # malformed json and pydantic validation errors are both ValueErrors
    try:
        return ShareRequest.model_validate(await request.json())
    except ValueError:
        raise HTTPException(status_code=400, detail='Invalid request data')


@api_version(1)
@router.post('/share')
async def share_summary(share_request: ShareRequest = Depends(get_share_request)) -> ShareResult:
    """
    Emails the summary to every recipient. Any failed delivery fails the whole request.
    """

    try:
        await share(share_request.summary, share_request.recipients, share_request.subject, share_request.sender)
    except Exception as e:
        log.error(f'Email error: {e}')
        SHARE_ERROR_COUNTER.inc()

        raise HTTPException(status_code=500, detail='Failed to send email')

    return ShareResult()
