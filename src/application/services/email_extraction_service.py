"""Email extraction service - LLM extraction with pattern-based fallback."""
import logging
from typing import Optional, Tuple

from ...domain.entities.extracted_organization import ExtractedOrganization, ExtractionSource
from ...domain.errors import LlmExtractionError
from ...infrastructure.llm.openai_client import LlmClient
from ...infrastructure.llm.organization_extractor import extract_fields_with_llm
from .pattern_extractor import extract_with_pattern

logger = logging.getLogger(__name__)


def extract_organization_from_email(
    email_content: str,
    llm_client: Optional[LlmClient],
    reference_year: Optional[int] = None
) -> Tuple[ExtractedOrganization, ExtractionSource]:
    """
    Extract organization data from an email body.

    Tries the LLM first; when no client is configured or the call fails,
    the pattern extractor produces the record instead.

    Args:
        email_content: Raw email body
        llm_client: Client handle from application startup, or None
        reference_year: Optional reference year for the pattern extractor

    Returns:
        Tuple of (extracted record, source that produced it)
    """
    if llm_client is not None:
        try:
            return extract_fields_with_llm(llm_client, email_content), ExtractionSource.LLM
        except LlmExtractionError as e:
            logger.error(f"OpenAI extraction error: {e}")
    else:
        logger.info("No LLM client configured")

    logger.info("Using fallback pattern-based extraction")
    return extract_with_pattern(email_content, reference_year), ExtractionSource.PATTERN
