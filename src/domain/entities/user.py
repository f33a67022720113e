"""User entity - Domain model for dashboard accounts."""
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Any


@dataclass(frozen=True)
class User:
    """User entity - immutable domain model."""
    id: str
    email: str
    name: str
    password_hash: str
    created_at: datetime
    updated_at: datetime

    def to_public_dict(self) -> Dict[str, Any]:
        """Convert user to a dictionary without the password hash."""
        return {
            "_id": self.id,
            "name": self.name,
            "email": self.email,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }
