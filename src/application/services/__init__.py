"""Application services package."""
from .pattern_extractor import extract_with_pattern
from .email_extraction_service import extract_organization_from_email

__all__ = [
    "extract_with_pattern",
    "extract_organization_from_email",
]
