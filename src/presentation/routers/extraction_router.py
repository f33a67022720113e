"""Extraction router - Endpoint for turning email text into organization data."""
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException

from ...infrastructure.llm.openai_client import LlmClient
from ..controllers.extraction_controller import handle_extract_email
from ..dependencies import get_llm_client, get_reference_year
from ..dtos.extraction_models import ExtractEmailRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Extraction"])


@router.post("/extract", status_code=200)
def extract_email(
    payload: ExtractEmailRequest,
    llm_client: Optional[LlmClient] = Depends(get_llm_client),
    reference_year: Optional[int] = Depends(get_reference_year)
) -> Dict[str, Any]:
    """
    Extract organization information from email content.

    Falls back to pattern-based extraction when the LLM is unavailable.
    """
    try:
        data = handle_extract_email(payload, llm_client, reference_year)
        return {"success": True, "data": data}
    except Exception as e:
        logger.error(f"Extraction error: {e}")
        raise HTTPException(status_code=400, detail="Failed to extract organization information")
