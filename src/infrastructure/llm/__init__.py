"""LLM infrastructure package."""
from .openai_client import LlmClient, create_llm_client
from .organization_extractor import extract_fields_with_llm

__all__ = [
    "LlmClient",
    "create_llm_client",
    "extract_fields_with_llm",
]
