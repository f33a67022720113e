"""User repository - Database implementation."""
import logging
import uuid
from typing import Any, Dict, Optional

from ...domain.entities.user import User
from ...domain.errors import DatabaseError, UserAlreadyExistsError
from ..adapters.postgres import execute_query, execute_returning

logger = logging.getLogger(__name__)

_COLUMNS = "id, email, name, password_hash, created_at, updated_at"


def create_user(email: str, name: str, password_hash: str) -> User:
    """
    Create new user record.

    Args:
        email: Login email (stored lowercased)
        name: Display name
        password_hash: bcrypt hash of the password

    Returns:
        Created User

    Raises:
        UserAlreadyExistsError: If the email is already registered
    """
    sql = f"""
        INSERT INTO users (id, email, name, password_hash)
        VALUES (%s, %s, %s, %s)
        RETURNING {_COLUMNS}
    """
    params = (str(uuid.uuid4()), email.lower(), name, password_hash)
    try:
        row = execute_returning(sql, params)
    except DatabaseError as e:
        error_msg = str(e).lower()
        if "unique" in error_msg or "duplicate" in error_msg:
            raise UserAlreadyExistsError() from e
        raise
    if not row:
        raise RuntimeError("Insert into users returned no row")
    return _row_to_user(row)


def get_user_by_email(email: str) -> Optional[User]:
    """Get user by email, case-insensitively."""
    result = execute_query(f"SELECT {_COLUMNS} FROM users WHERE email = %s", (email.lower(),))
    return _row_to_user(result[0]) if result else None


def get_user_by_id(id: str) -> Optional[User]:
    """Get user by ID."""
    result = execute_query(f"SELECT {_COLUMNS} FROM users WHERE id = %s", (id,))
    return _row_to_user(result[0]) if result else None


def _row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User entity."""
    return User(
        id=str(row["id"]),
        email=row["email"],
        name=row["name"],
        password_hash=row["password_hash"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )
