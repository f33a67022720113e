"""Auth service - registration, login and user lookup."""
import logging
import uuid
from typing import Dict, Optional

from ...domain.entities.user import User
from ...domain.errors import InvalidCredentialsError, UserAlreadyExistsError
from ...infrastructure.repositories.user_repository import (
    create_user,
    get_user_by_email,
    get_user_by_id,
)
from ...infrastructure.security.passwords import hash_password, verify_password
from ...infrastructure.security.tokens import issue_token

logger = logging.getLogger(__name__)


def register_user(email: str, password: str, name: str) -> Dict[str, str]:
    """
    Register a new account and issue its first token.

    Returns:
        Dictionary with token and userId

    Raises:
        UserAlreadyExistsError: If the email is already registered
    """
    if get_user_by_email(email) is not None:
        raise UserAlreadyExistsError()

    user = create_user(email, name, hash_password(password))
    logger.info(f"Registered user {user.id}")
    return {"token": issue_token(user.id), "userId": user.id}


def login_user(email: str, password: str) -> Dict[str, str]:
    """
    Check credentials and issue a token.

    Raises:
        InvalidCredentialsError: If the email is unknown or the password is wrong
    """
    user = get_user_by_email(email)
    if user is None or not verify_password(password, user.password_hash):
        logger.warning("Failed login attempt")
        raise InvalidCredentialsError()

    return {"token": issue_token(user.id), "userId": user.id}


def get_user(user_id: str) -> Optional[User]:
    """Look up a user by ID, or None when it does not exist."""
    try:
        uuid.UUID(str(user_id))
    except ValueError:
        logger.warning(f"Invalid user ID format: {user_id}")
        return None
    return get_user_by_id(user_id)
