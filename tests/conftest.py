"""Pytest configuration and shared fixtures."""
import sys
from pathlib import Path

# Add project root so `src` resolves without an install
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from datetime import datetime
from typing import Any, Dict

from src.domain.entities.organization import Organization
from src.domain.entities.user import User


@pytest.fixture(autouse=True)
def auth_env(monkeypatch):
    """Provide a signing secret and a fixed extraction year for every test."""
    monkeypatch.setenv("JWT_SECRET", "test-secret-for-signing-access-tokens")
    monkeypatch.setenv("EXTRACTION_REFERENCE_YEAR", "2026")
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)


@pytest.fixture
def sample_datetime() -> datetime:
    """Provide a fixed datetime for testing."""
    return datetime(2024, 1, 1, 12, 0, 0)


@pytest.fixture
def sample_organization_id() -> str:
    return "3f2b8c1e-6d4a-4b7e-9a61-0c5d2e8f7a10"


@pytest.fixture
def sample_organization_row(sample_datetime: datetime, sample_organization_id: str) -> Dict[str, Any]:
    """Provide a row as returned by RealDictCursor."""
    return {
        "id": sample_organization_id,
        "name": "Brightwave Technologies",
        "location": "Seattle, WA",
        "owners": "Maria Lopez",
        "activities": "Software development, technology solutions",
        "age": 16,
        "website": "https://brightwave.io",
        "industry": "Technology",
        "attachments": ["deck.pdf"],
        "email_content": "Hi, I'm Maria with Brightwave Technologies.",
        "created_at": sample_datetime,
        "updated_at": sample_datetime,
    }


@pytest.fixture
def sample_organization(sample_datetime: datetime, sample_organization_id: str) -> Organization:
    """Provide a sample Organization entity."""
    return Organization(
        id=sample_organization_id,
        name="Brightwave Technologies",
        location="Seattle, WA",
        owners="Maria Lopez",
        activities="Software development, technology solutions",
        age=16,
        website="https://brightwave.io",
        industry="Technology",
        attachments=["deck.pdf"],
        email_content="Hi, I'm Maria with Brightwave Technologies.",
        created_at=sample_datetime,
        updated_at=sample_datetime,
    )


@pytest.fixture
def sample_user(sample_datetime: datetime) -> User:
    """Provide a sample User entity with a placeholder hash."""
    return User(
        id="8d1f7c4e-2b3a-4e5f-9c6d-7a8b9c0d1e2f",
        email="maria@brightwave.io",
        name="Maria Lopez",
        password_hash="$2b$10$placeholderplaceholderplaceholderplaceholderpla",
        created_at=sample_datetime,
        updated_at=sample_datetime,
    )
