"""Organization router - CRUD and search endpoints."""
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, HTTPException, Query

from ...domain.errors import OrganizationNotFoundError
from ..controllers.organization_controller import (
    handle_create_organization,
    handle_list_organizations,
    handle_get_organization,
    handle_update_organization,
    handle_delete_organization,
)
from ..dtos.organization_models import CreateOrganizationRequest, UpdateOrganizationRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/organizations", tags=["Organizations"])

NOT_FOUND_MESSAGE = "Organization not found"


@router.post("", status_code=201)
def create_organization(payload: CreateOrganizationRequest) -> Dict[str, Any]:
    """Create an organization record."""
    try:
        return {"success": True, "data": handle_create_organization(payload)}
    except ValueError as e:
        logger.warning(f"Validation error in create_organization: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Create organization error: {e}")
        raise HTTPException(status_code=400, detail="Failed to create organization")


@router.get("", status_code=200)
def list_organizations(
    limit: int = Query(50),
    skip: int = Query(0),
    search: Optional[str] = Query(None),
    industry: Optional[str] = Query(None)
) -> Dict[str, Any]:
    """List organizations, or search them when search/industry is given."""
    try:
        return {"success": True, "data": handle_list_organizations(limit, skip, search, industry)}
    except Exception as e:
        logger.error(f"Get organizations error: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch organizations")


@router.get("/{id}", status_code=200)
def get_organization(id: str) -> Dict[str, Any]:
    """Get a single organization."""
    try:
        return {"success": True, "data": handle_get_organization(id)}
    except OrganizationNotFoundError:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)
    except Exception as e:
        logger.error(f"Get organization error: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch organization")


@router.put("/{id}", status_code=200)
def update_organization(id: str, payload: UpdateOrganizationRequest) -> Dict[str, Any]:
    """Partially update an organization."""
    try:
        return {"success": True, "data": handle_update_organization(id, payload)}
    except OrganizationNotFoundError:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)
    except ValueError as e:
        logger.warning(f"Validation error in update_organization: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Update organization error: {e}")
        raise HTTPException(status_code=500, detail="Failed to update organization")


@router.delete("/{id}", status_code=200)
def delete_organization(id: str) -> Dict[str, Any]:
    """Delete an organization."""
    try:
        handle_delete_organization(id)
        return {"success": True, "message": "Organization deleted successfully"}
    except OrganizationNotFoundError:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)
    except Exception as e:
        logger.error(f"Delete organization error: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete organization")
