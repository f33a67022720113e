"""Organization service - Use case layer for organization records."""
import logging
import uuid
from typing import Any, Dict, List, Optional

from ...domain.entities.organization import Organization
from ...domain.errors import OrganizationNotFoundError
from ...infrastructure.repositories.organization_repository import (
    create_organization,
    get_organization,
    list_organizations,
    update_organization,
    delete_organization,
    search_organizations,
)

logger = logging.getLogger(__name__)

MAX_AGE = 200
MAX_PAGE_SIZE = 200


def _is_valid_id(id: str) -> bool:
    try:
        uuid.UUID(str(id))
        return True
    except ValueError:
        return False


def _validate_fields(data: Dict[str, Any]) -> None:
    """Raise ValueError for field values the store must not accept."""
    if "name" in data and not str(data["name"] or "").strip():
        raise ValueError("name cannot be empty")
    if "age" in data:
        age = data["age"]
        if not isinstance(age, int) or isinstance(age, bool) or age < 0 or age > MAX_AGE:
            raise ValueError(f"age must be an integer between 0 and {MAX_AGE}")


def create_organization_record(data: Dict[str, Any]) -> Organization:
    """
    Create a new organization record.

    Args:
        data: Organization fields (snake_case)

    Returns:
        Created Organization

    Raises:
        ValueError: If name is missing or age is out of range
    """
    if "name" not in data:
        raise ValueError("name cannot be empty")
    _validate_fields(data)

    organization = create_organization(data)
    logger.info(f"Created organization {organization.id} ({organization.name})")
    return organization


def read_organization(id: str) -> Optional[Organization]:
    """
    Read organization by ID.

    Malformed IDs resolve to None rather than reaching the database.
    """
    if not _is_valid_id(id):
        return None
    return get_organization(id)


def read_organizations(
    limit: int = 50,
    skip: int = 0,
    search: Optional[str] = None,
    industry: Optional[str] = None
) -> List[Organization]:
    """
    List organizations, switching to search when a query or industry is given.

    Args:
        limit: Page size for plain listing
        skip: Offset for plain listing
        search: Free-text query over name, location and owners
        industry: Industry filter

    Returns:
        List of Organization, newest first
    """
    if search or industry:
        return search_organizations(search or "", industry)

    limit = min(max(limit, 1), MAX_PAGE_SIZE)
    skip = max(skip, 0)
    return list_organizations(limit, skip)


def update_organization_record(id: str, updates: Dict[str, Any]) -> Organization:
    """
    Apply a partial update to an organization.

    Raises:
        OrganizationNotFoundError: If no organization has this ID
        ValueError: If an updated field is invalid
    """
    if not _is_valid_id(id):
        raise OrganizationNotFoundError(id)
    _validate_fields(updates)

    updated = update_organization(id, updates)
    if updated is None:
        raise OrganizationNotFoundError(id)

    logger.info(f"Updated organization {id}")
    return updated


def delete_organization_record(id: str) -> None:
    """
    Delete an organization.

    Raises:
        OrganizationNotFoundError: If no organization has this ID
    """
    if not _is_valid_id(id) or not delete_organization(id):
        raise OrganizationNotFoundError(id)
    logger.info(f"Deleted organization {id}")
