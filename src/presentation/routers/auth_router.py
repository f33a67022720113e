"""Auth router - Registration, login and current user endpoints."""
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from ...domain.errors import InvalidCredentialsError, UserAlreadyExistsError
from ..controllers.auth_controller import handle_get_current_user, handle_login, handle_register
from ..dependencies import require_user_id
from ..dtos.auth_models import LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/register", status_code=201)
def register(payload: RegisterRequest) -> Dict[str, Any]:
    """Register a new account."""
    try:
        return {"success": True, "data": handle_register(payload)}
    except UserAlreadyExistsError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Registration error: {e}")
        raise HTTPException(status_code=400, detail="Registration failed")


@router.post("/login", status_code=200)
def login(payload: LoginRequest) -> Dict[str, Any]:
    """Log in and receive an access token."""
    try:
        return {"success": True, "data": handle_login(payload)}
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=401, detail=str(e))
    except Exception as e:
        logger.error(f"Login error: {e}")
        raise HTTPException(status_code=401, detail="Login failed")


@router.get("/me", status_code=200)
def me(user_id: str = Depends(require_user_id)) -> Dict[str, Any]:
    """Return the authenticated user's profile."""
    try:
        user = handle_get_current_user(user_id)
    except Exception as e:
        logger.error(f"Error in GET /api/auth/me: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch user data")

    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return {"success": True, "data": user}
