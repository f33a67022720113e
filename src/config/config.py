"""Configuration module for email-intel-api."""
import os
from datetime import datetime
from typing import Dict, List, Optional
from urllib.parse import quote


def _get_required_env(name: str) -> str:
    """Get required environment variable or raise error."""
    value = os.getenv(name)
    if value is None or value == "":
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value


def get_postgres_settings() -> Dict[str, str]:
    """Get Postgres connection settings from environment variables."""
    return {
        "host": _get_required_env("EMAIL_INTEL_DB_HOST"),
        "port": _get_required_env("EMAIL_INTEL_DB_PORT"),
        "user": _get_required_env("EMAIL_INTEL_DB_USER"),
        "password": _get_required_env("EMAIL_INTEL_DB_PASSWORD"),
        "dbname": _get_required_env("EMAIL_INTEL_DB_NAME"),
    }


def get_postgres_dsn(scheme: str = "postgresql") -> str:
    """
    Get Postgres connection URL from environment variables.

    Args:
        scheme: URL scheme; Alembic passes "postgresql+psycopg2"

    Returns:
        URL with user, password and database name percent-encoded
    """
    settings = get_postgres_settings()
    user = quote(settings["user"], safe="")
    password = quote(settings["password"], safe="")
    dbname = quote(settings["dbname"], safe="")
    return f"{scheme}://{user}:{password}@{settings['host']}:{settings['port']}/{dbname}"


def get_openai_api_key() -> Optional[str]:
    """Get OpenAI API key, or None when remote extraction is disabled."""
    value = os.getenv("OPENAI_API_KEY")
    return value or None


def get_openai_model_name() -> str:
    """Get OpenAI model name from environment variables, with safe default."""
    return os.getenv("OPENAI_MODEL_NAME", "gpt-4o")


def get_openai_timeout_seconds() -> float:
    """Get the timeout applied to each OpenAI request."""
    return float(os.getenv("OPENAI_TIMEOUT_SECONDS", "30"))


def get_jwt_secret() -> str:
    """Get the secret used to sign access tokens."""
    return _get_required_env("JWT_SECRET")


def get_jwt_expiry_days() -> int:
    """Get access token lifetime in days."""
    return int(os.getenv("JWT_EXPIRY_DAYS", "7"))


def get_extraction_reference_year() -> int:
    """
    Get the year the pattern extractor treats as "now" when turning a
    founding year into an age.

    Returns:
        EXTRACTION_REFERENCE_YEAR when set, otherwise the current year

    Raises:
        RuntimeError: If EXTRACTION_REFERENCE_YEAR is not an integer
    """
    value = os.getenv("EXTRACTION_REFERENCE_YEAR")
    if value is None or value == "":
        return datetime.now().year
    try:
        return int(value)
    except ValueError:
        raise RuntimeError(f"EXTRACTION_REFERENCE_YEAR must be an integer, got: {value}")


def get_cors_origins() -> List[str]:
    """Get allowed CORS origins for the dashboard and browser extension."""
    raw = os.getenv("CORS_ORIGINS", "http://localhost:5000,http://localhost:5173")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
