"""Organization entity - Domain model for a stored organization record."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Any, List, Optional


@dataclass(frozen=True)
class Organization:
    """Organization entity - immutable domain model."""
    id: str
    name: str
    location: str
    owners: str
    activities: str
    age: int
    website: str
    industry: str
    email_content: Optional[str]
    created_at: datetime
    updated_at: datetime
    attachments: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert organization to the API response shape."""
        return {
            "id": self.id,
            "name": self.name,
            "location": self.location,
            "owners": self.owners,
            "activities": self.activities,
            "age": self.age,
            "website": self.website,
            "industry": self.industry,
            "attachments": list(self.attachments),
            "emailContent": self.email_content,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }
