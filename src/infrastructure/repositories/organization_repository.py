"""Organization repository - Database implementation."""
import json
import logging
import uuid
from typing import Any, Dict, List, Optional

from ...domain.entities.organization import Organization
from ..adapters.postgres import execute_query, execute_returning, execute_update

logger = logging.getLogger(__name__)

_COLUMNS = """
    id, name, location, owners, activities, age, website, industry,
    attachments, email_content, created_at, updated_at
"""

# Columns a caller may change through update_organization
UPDATABLE_COLUMNS = (
    "name", "location", "owners", "activities", "age",
    "website", "industry", "attachments", "email_content",
)

SEARCH_LIMIT = 50
ALL_INDUSTRIES = "All Industries"


def create_organization(data: Dict[str, Any]) -> Organization:
    """
    Create new organization record.

    Args:
        data: Organization fields (snake_case column names)

    Returns:
        Created Organization
    """
    sql = f"""
        INSERT INTO organizations
        (id, name, location, owners, activities, age, website, industry, attachments, email_content)
        VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
        RETURNING {_COLUMNS}
    """
    params = (
        str(uuid.uuid4()),
        data["name"],
        data.get("location", ""),
        data.get("owners", ""),
        data.get("activities", ""),
        data.get("age", 0),
        data.get("website", ""),
        data.get("industry", ""),
        json.dumps(data.get("attachments") or []),
        data.get("email_content"),
    )
    row = execute_returning(sql, params)
    if not row:
        raise RuntimeError("Insert into organizations returned no row")
    return _row_to_organization(row)


def get_organization(id: str) -> Optional[Organization]:
    """
    Get organization by ID.

    Args:
        id: Organization UUID string

    Returns:
        Organization or None
    """
    sql = f"SELECT {_COLUMNS} FROM organizations WHERE id = %s"
    result = execute_query(sql, (id,))

    if not result:
        return None

    return _row_to_organization(result[0])


def list_organizations(limit: int = 50, skip: int = 0) -> List[Organization]:
    """
    List organizations, newest first.

    Args:
        limit: Maximum number of records
        skip: Number of records to skip

    Returns:
        List of Organization
    """
    sql = f"""
        SELECT {_COLUMNS}
        FROM organizations
        ORDER BY created_at DESC
        LIMIT %s OFFSET %s
    """
    result = execute_query(sql, (limit, skip))
    return [_row_to_organization(row) for row in result]


def update_organization(id: str, updates: Dict[str, Any]) -> Optional[Organization]:
    """
    Apply a partial update and bump updated_at.

    Args:
        id: Organization UUID string
        updates: Column -> new value; unknown columns are ignored

    Returns:
        Updated Organization, or None if no record has this id
    """
    assignments = []
    params: List[Any] = []
    for column in UPDATABLE_COLUMNS:
        if column not in updates:
            continue
        value = updates[column]
        if column == "attachments":
            value = json.dumps(value or [])
        assignments.append(f"{column} = %s")
        params.append(value)

    assignments.append("updated_at = NOW()")
    params.append(id)

    sql = f"""
        UPDATE organizations
        SET {", ".join(assignments)}
        WHERE id = %s
        RETURNING {_COLUMNS}
    """
    row = execute_returning(sql, tuple(params))
    return _row_to_organization(row) if row else None


def delete_organization(id: str) -> bool:
    """
    Delete organization by ID.

    Returns:
        True if a record was deleted
    """
    affected_rows = execute_update("DELETE FROM organizations WHERE id = %s", (id,))
    return affected_rows > 0


def search_organizations(query: str, industry: Optional[str] = None) -> List[Organization]:
    """
    Search organizations by name, location or owners, optionally within one industry.

    Args:
        query: Case-insensitive substring; empty matches everything
        industry: Exact industry filter; empty or "All Industries" disables it

    Returns:
        Up to SEARCH_LIMIT organizations, newest first
    """
    conditions = []
    params: List[Any] = []

    if query:
        pattern = f"%{_escape_like(query)}%"
        conditions.append("(name ILIKE %s OR location ILIKE %s OR owners ILIKE %s)")
        params.extend([pattern, pattern, pattern])

    if industry and industry != ALL_INDUSTRIES:
        conditions.append("industry = %s")
        params.append(industry)

    where = f"WHERE {' AND '.join(conditions)}" if conditions else ""
    sql = f"""
        SELECT {_COLUMNS}
        FROM organizations
        {where}
        ORDER BY created_at DESC
        LIMIT %s
    """
    params.append(SEARCH_LIMIT)
    result = execute_query(sql, tuple(params))
    return [_row_to_organization(row) for row in result]


def _escape_like(value: str) -> str:
    """Escape LIKE wildcards so user input matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _row_to_organization(row: Dict[str, Any]) -> Organization:
    """Convert database row to Organization entity."""
    attachments = row.get("attachments") or []
    if isinstance(attachments, str):
        attachments = json.loads(attachments)

    return Organization(
        id=str(row["id"]),
        name=row["name"],
        location=row.get("location") or "",
        owners=row.get("owners") or "",
        activities=row.get("activities") or "",
        age=row.get("age") or 0,
        website=row.get("website") or "",
        industry=row.get("industry") or "",
        attachments=list(attachments),
        email_content=row.get("email_content"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )
