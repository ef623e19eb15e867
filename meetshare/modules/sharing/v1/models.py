from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from meetshare.constants import default_subject
from meetshare.env import share_default_sender


class ShareRequest(BaseModel):
    summary: str
    recipients: list[str]
    subject: Optional[str] = Field(default=None, validate_default=True)
    sender: Optional[str] = Field(default=None, validate_default=True)

    model_config = ConfigDict(
        json_schema_extra={
            'examples': [
                {
                    'summary': 'Summary:\n• We agreed on the budget',
                    'recipients': ['alice@example.com', 'bob@example.com'],
                    'subject': default_subject,
                    'sender': 'organizer@example.com',
                }
            ]
        }
    )

    @field_validator('summary')
    @classmethod
    def summary_must_not_be_empty(cls, summary: str) -> str:
        if not summary:
            raise ValueError('summary cannot be empty')

        return summary

    @field_validator('recipients')
    @classmethod
    def recipients_must_not_be_empty(cls, recipients: list[str]) -> list[str]:
        # keep the first occurrence of every address, in the order they were added
        unique = list(dict.fromkeys(r.strip() for r in recipients if r.strip()))

        if not unique:
            raise ValueError('at least one recipient is required')

        return unique

    @field_validator('subject')
    @classmethod
    def subject_or_default(cls, subject: Optional[str]) -> str:
        return subject if subject and subject.strip() else default_subject

    @field_validator('sender')
    @classmethod
    def sender_or_default(cls, sender: Optional[str]) -> str:
        return sender.strip() if sender and sender.strip() else share_default_sender


class ShareResult(BaseModel):
    success: bool = True
    message: str = 'Summary shared successfully'
