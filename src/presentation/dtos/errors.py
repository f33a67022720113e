"""Error response builders shared by the exception handlers."""
from typing import Any, Dict, List, Sequence

from fastapi.responses import JSONResponse

from .extraction_models import MAX_EMAIL_CONTENT_LENGTH

_LOCATION_PREFIXES = ("body", "query", "path", "header")


def _format_field(loc: Sequence[Any]) -> str:
    """Join an error location, dropping the request-part prefix."""
    parts = list(loc)
    if parts and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(str(part) for part in parts)


def create_validation_error_response(errors: List[Dict[str, Any]]) -> JSONResponse:
    """Convert validation errors (Pydantic or FastAPI request) to a 400 response."""
    formatted = []

    for error in errors:
        field = _format_field(error.get("loc", ()))
        error_type = error.get("type", "")
        error_msg = error.get("msg", "Invalid value")

        # Map specific error types to user-friendly messages
        if field == "emailContent" and error_type in ("missing", "string_too_short"):
            error_msg = "Email content is required"
        elif field == "emailContent" and error_type == "string_too_long":
            error_msg = f"Email content must be at most {MAX_EMAIL_CONTENT_LENGTH} characters"
        elif field == "password" and error_type == "string_too_short":
            error_msg = "Password must be at least 6 characters"
        elif field == "email" and error_type == "value_error":
            error_msg = "Invalid email address"
        elif field == "name" and error_type in ("missing", "string_too_short"):
            error_msg = "Name is required"

        formatted.append({
            "field": field,
            "error": error_msg
        })

    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "message": "Invalid request",
            "errors": formatted
        }
    )


def create_error_response(status_code: int, message: str) -> JSONResponse:
    """Create a failure envelope with the given status."""
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "message": message
        }
    )


def create_internal_error_response() -> JSONResponse:
    """Create standardized internal error response."""
    return create_error_response(500, "Internal error")
