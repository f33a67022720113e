"""Access token issuing and verification (HS256 JWT)."""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from ...config.config import get_jwt_expiry_days, get_jwt_secret
from ...domain.errors import InvalidTokenError

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


def issue_token(user_id: str, now: Optional[datetime] = None) -> str:
    """
    Issue a signed access token for a user.

    Args:
        user_id: User ID stored in the userId claim
        now: Issue time (default: current UTC time)

    Returns:
        Encoded JWT string
    """
    now = now or datetime.now(timezone.utc)
    payload = {
        "userId": user_id,
        "iat": now,
        "exp": now + timedelta(days=get_jwt_expiry_days()),
    }
    return jwt.encode(payload, get_jwt_secret(), algorithm=ALGORITHM)


def verify_token(token: str) -> str:
    """
    Verify an access token and return its user ID.

    Raises:
        InvalidTokenError: If the token is malformed, expired, badly signed or has no userId
    """
    try:
        payload = jwt.decode(token, get_jwt_secret(), algorithms=[ALGORITHM])
    except jwt.PyJWTError as e:
        logger.warning(f"Rejected access token: {e}")
        raise InvalidTokenError(str(e)) from e

    user_id = payload.get("userId")
    if not user_id:
        raise InvalidTokenError("Token has no userId claim")
    return user_id
