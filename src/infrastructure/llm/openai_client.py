"""OpenAI client infrastructure - explicitly constructed client handle."""
import logging
from dataclasses import dataclass
from typing import Optional

from openai import OpenAI

from ...config.config import (
    get_openai_api_key,
    get_openai_model_name,
    get_openai_timeout_seconds,
)

logger = logging.getLogger(__name__)


@dataclass
class LlmClient:
    """OpenAI client plus the model it should call."""
    client: OpenAI
    model: str

    def close(self) -> None:
        """Release the underlying HTTP connection pool."""
        self.client.close()
        logger.debug("Closed OpenAI client")


def create_llm_client(api_key: Optional[str] = None, model: Optional[str] = None) -> Optional[LlmClient]:
    """
    Build an LLM client handle from explicit values or configuration.

    Called once at application startup; the handle is passed to whoever needs it.

    Args:
        api_key: OpenAI API key (default: OPENAI_API_KEY)
        model: Model name (default: OPENAI_MODEL_NAME or gpt-4o)

    Returns:
        LlmClient, or None when no API key is configured
    """
    api_key = api_key or get_openai_api_key()
    if not api_key:
        logger.warning("OPENAI_API_KEY not set, extraction will use pattern fallback only")
        return None

    model = model or get_openai_model_name()
    client = OpenAI(api_key=api_key, timeout=get_openai_timeout_seconds())
    logger.info(f"Initialized OpenAI client for model {model}")
    return LlmClient(client=client, model=model)
