"""FastAPI dependencies - service handles and authentication."""
import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..domain.errors import InvalidTokenError
from ..infrastructure.llm.openai_client import LlmClient
from ..infrastructure.security.tokens import verify_token

logger = logging.getLogger(__name__)

_bearer = HTTPBearer(auto_error=False)


def get_llm_client(request: Request) -> Optional[LlmClient]:
    """Return the LLM client built at startup, if any."""
    return getattr(request.app.state, "llm_client", None)


def get_reference_year(request: Request) -> Optional[int]:
    """Return the extraction reference year resolved at startup, if any."""
    return getattr(request.app.state, "reference_year", None)


def require_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer)
) -> str:
    """
    Resolve the authenticated user ID from the bearer token.

    Raises:
        HTTPException: 401 when no token is sent, 403 when it does not verify
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=401, detail="Access token required")
    try:
        return verify_token(credentials.credentials)
    except InvalidTokenError:
        raise HTTPException(status_code=403, detail="Invalid or expired token")
