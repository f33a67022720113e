"""ExtractedOrganization entity - structured record produced from email text."""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any


DEFAULT_ORGANIZATION_NAME = "Organization Name"


class Industry(str, Enum):
    """Industry buckets assigned by the pattern extractor."""
    TECHNOLOGY = "Technology"
    HEALTHCARE = "Healthcare"
    MANUFACTURING = "Manufacturing"
    CONSULTING = "Consulting"
    BUSINESS_SERVICES = "Business Services"


class ExtractionSource(str, Enum):
    """Which extractor produced a record."""
    LLM = "llm"
    PATTERN = "pattern"


@dataclass(frozen=True)
class ExtractedOrganization:
    """ExtractedOrganization value object - immutable once produced."""
    name: str = DEFAULT_ORGANIZATION_NAME
    location: str = ""
    owners: str = ""
    activities: str = ""
    age: int = 0
    website: str = ""
    industry: str = Industry.BUSINESS_SERVICES.value

    def to_dict(self) -> Dict[str, Any]:
        """Convert record to the API response shape."""
        return {
            "name": self.name,
            "location": self.location,
            "owners": self.owners,
            "activities": self.activities,
            "age": self.age,
            "website": self.website,
            "industry": self.industry,
        }
