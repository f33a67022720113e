"""Organization extraction using OpenAI chat completions."""
import json
import logging
import math
import re
from typing import Any, Dict

from ...domain.entities.extracted_organization import ExtractedOrganization
from ...domain.errors import LlmExtractionError
from .openai_client import LlmClient
from .prompts import build_extraction_messages

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def extract_fields_with_llm(llm_client: LlmClient, email_content: str) -> ExtractedOrganization:
    """
    Extract organization fields from email text using the OpenAI API.

    Args:
        llm_client: Client handle built at startup
        email_content: Raw email body

    Returns:
        ExtractedOrganization built from the model's JSON answer

    Raises:
        LlmExtractionError: If the API call fails or the answer is not a JSON object
    """
    try:
        logger.info(f"Calling OpenAI model {llm_client.model} to extract organization data")
        response = llm_client.client.chat.completions.create(
            model=llm_client.model,
            messages=build_extraction_messages(email_content),
            response_format={"type": "json_object"},
            temperature=0.1,
        )
    except Exception as e:
        raise LlmExtractionError(f"OpenAI API error: {e}") from e

    usage = getattr(response, "usage", None)
    if usage is not None:
        logger.info(
            f"LLM Response - Model: {llm_client.model}, "
            f"Tokens: prompt={usage.prompt_tokens}, completion={usage.completion_tokens}, "
            f"total={usage.total_tokens}"
        )

    content = response.choices[0].message.content if response.choices else None
    if not content:
        raise LlmExtractionError("Empty response from OpenAI")

    try:
        result = json.loads(content)
    except json.JSONDecodeError as e:
        raise LlmExtractionError(f"Failed to parse OpenAI response as JSON: {e}") from e

    if not isinstance(result, dict):
        raise LlmExtractionError("OpenAI response is not a JSON object")

    return normalize_llm_result(result)


def normalize_llm_result(result: Dict[str, Any]) -> ExtractedOrganization:
    """Map a raw JSON answer onto ExtractedOrganization, blanking missing fields."""
    return ExtractedOrganization(
        name=_as_text(result.get("name")),
        location=_as_text(result.get("location")),
        owners=_as_text(result.get("owners")),
        activities=_as_text(result.get("activities")),
        age=parse_age(result.get("age")),
        website=_as_text(result.get("website")),
        industry=_as_text(result.get("industry")),
    )


def parse_age(value: Any) -> int:
    """
    Read the leading integer of a number or string; anything else is 0.

    Negative values are clamped to 0.
    """
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    if isinstance(value, (int, float)):
        return max(int(value), 0)
    match = _LEADING_INT.match(str(value))
    if not match:
        return 0
    return max(int(match.group(1)), 0)


def _as_text(value: Any) -> str:
    """Return value as a string, or "" when it is missing or empty."""
    if not value:
        return ""
    if isinstance(value, list):
        return ", ".join(str(item) for item in value if item)
    return str(value)
