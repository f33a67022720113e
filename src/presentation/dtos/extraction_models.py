"""Pydantic models for email extraction."""
from pydantic import BaseModel, ConfigDict, Field

MAX_EMAIL_CONTENT_LENGTH = 100_000


class ExtractEmailRequest(BaseModel):
    """Request model for extracting organization data from an email."""
    model_config = ConfigDict(populate_by_name=True)

    email_content: str = Field(
        ...,
        alias="emailContent",
        min_length=1,
        max_length=MAX_EMAIL_CONTENT_LENGTH,
        description="Raw email body"
    )
