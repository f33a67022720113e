"""Health router."""
from typing import Dict

from fastapi import APIRouter

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health() -> Dict[str, str]:
    """Liveness check."""
    return {"status": "ok"}
