"""Organization controller - Request/response handling."""
import logging
from typing import Any, Dict, List, Optional

from ...application.services.organization_service import (
    create_organization_record,
    read_organization,
    read_organizations,
    update_organization_record,
    delete_organization_record,
)
from ...domain.errors import OrganizationNotFoundError
from ..dtos.organization_models import CreateOrganizationRequest, UpdateOrganizationRequest

logger = logging.getLogger(__name__)


def handle_create_organization(payload: CreateOrganizationRequest) -> Dict[str, Any]:
    """Handle create organization request."""
    organization = create_organization_record(payload.to_fields())
    return organization.to_dict()


def handle_list_organizations(
    limit: int,
    skip: int,
    search: Optional[str],
    industry: Optional[str]
) -> List[Dict[str, Any]]:
    """Handle list/search organizations request."""
    organizations = read_organizations(limit=limit, skip=skip, search=search, industry=industry)
    return [organization.to_dict() for organization in organizations]


def handle_get_organization(id: str) -> Dict[str, Any]:
    """
    Handle get organization request.

    Raises:
        OrganizationNotFoundError: If the organization does not exist
    """
    organization = read_organization(id)
    if organization is None:
        raise OrganizationNotFoundError(id)
    return organization.to_dict()


def handle_update_organization(id: str, payload: UpdateOrganizationRequest) -> Dict[str, Any]:
    """Handle update organization request."""
    organization = update_organization_record(id, payload.to_fields())
    return organization.to_dict()


def handle_delete_organization(id: str) -> None:
    """Handle delete organization request."""
    delete_organization_record(id)
