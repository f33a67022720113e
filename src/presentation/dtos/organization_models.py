"""Pydantic models for organization operations."""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CreateOrganizationRequest(BaseModel):
    """Request model for creating an organization."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, description="Organization name")
    location: str = Field("", description="Headquarters location")
    owners: str = Field("", description="Comma-separated owners or leaders")
    activities: str = Field("", description="What the organization does")
    age: int = Field(0, ge=0, le=200, description="Years in operation")
    website: str = Field("", description="Website URL")
    industry: str = Field("", description="Industry label")
    attachments: List[str] = Field(default_factory=list, description="Attachment names")
    email_content: Optional[str] = Field(None, alias="emailContent", description="Source email body")

    def to_fields(self) -> Dict[str, Any]:
        """Return snake_case fields for the service layer."""
        return self.model_dump()


class UpdateOrganizationRequest(BaseModel):
    """Request model for a partial organization update."""
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(None, min_length=1)
    location: Optional[str] = None
    owners: Optional[str] = None
    activities: Optional[str] = None
    age: Optional[int] = Field(None, ge=0, le=200)
    website: Optional[str] = None
    industry: Optional[str] = None
    attachments: Optional[List[str]] = None
    email_content: Optional[str] = Field(None, alias="emailContent")

    def to_fields(self) -> Dict[str, Any]:
        """Return only the fields the client sent, excluding explicit nulls."""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }
