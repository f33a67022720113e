"""Extraction controller - Request/response handling."""
import logging
from typing import Any, Dict, Optional

from ...application.services.email_extraction_service import extract_organization_from_email
from ...infrastructure.llm.openai_client import LlmClient
from ..dtos.extraction_models import ExtractEmailRequest

logger = logging.getLogger(__name__)


def handle_extract_email(
    payload: ExtractEmailRequest,
    llm_client: Optional[LlmClient],
    reference_year: Optional[int] = None
) -> Dict[str, Any]:
    """
    Handle extract request.

    Args:
        payload: Request with the email body
        llm_client: LLM client handle, or None
        reference_year: Reference year for founding-year ages, or None for the current year

    Returns:
        Extracted fields plus emailContent and source
    """
    extracted, source = extract_organization_from_email(
        payload.email_content, llm_client, reference_year
    )
    logger.info(f"Extracted organization '{extracted.name}' via {source.value}")

    return {
        **extracted.to_dict(),
        "emailContent": payload.email_content,
        "source": source.value,
    }
