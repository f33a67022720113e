"""Auth controller - Request/response handling."""
import logging
from typing import Any, Dict, Optional

from ...application.services.auth_service import get_user, login_user, register_user
from ..dtos.auth_models import LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)


def handle_register(payload: RegisterRequest) -> Dict[str, str]:
    """Handle registration request."""
    return register_user(payload.email, payload.password, payload.name)


def handle_login(payload: LoginRequest) -> Dict[str, str]:
    """Handle login request."""
    return login_user(payload.email, payload.password)


def handle_get_current_user(user_id: str) -> Optional[Dict[str, Any]]:
    """Handle current user request; None when the account no longer exists."""
    user = get_user(user_id)
    if user is None:
        logger.warning(f"User not found with ID: {user_id}")
        return None
    return user.to_public_dict()
