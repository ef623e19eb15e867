from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from meetshare.modules.summaries.prompts import default_instructions


class SummaryPayload(BaseModel):
    transcript: Optional[str] = None
    custom_prompt: Optional[str] = Field(default=None, alias='customPrompt')

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            'examples': [
                {
                    'transcript': 'Your meeting transcript here',
                    'customPrompt': default_instructions,
                }
            ]
        },
    )

    @field_validator('transcript', mode='before')
    @classmethod
    def text_transcript_only(cls, transcript: Any) -> Optional[str]:
        # anything but text is treated as a missing transcript
        return transcript if isinstance(transcript, str) else None

    @field_validator('custom_prompt', mode='before')
    @classmethod
    def stringify_custom_prompt(cls, custom_prompt: Any) -> Optional[str]:
        if custom_prompt is None or isinstance(custom_prompt, str):
            return custom_prompt

        if isinstance(custom_prompt, bool):
            return 'true' if custom_prompt else None

        if isinstance(custom_prompt, (int, float)):
            return str(custom_prompt) if custom_prompt else None

        return None


class SummaryResult(BaseModel):
    success: bool = True
    summary: str
    original_text: str = Field(alias='originalText')

    model_config = ConfigDict(populate_by_name=True)
