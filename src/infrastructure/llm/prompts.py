"""Prompt builders for organization extraction."""
from typing import Dict, List


def get_extraction_system_message() -> str:
    """
    Get the system message for organization extraction.

    Returns:
        System message string
    """
    return (
        "You are an expert at extracting structured organization data from email content. "
        "Always respond with valid JSON."
    )


def build_extraction_user_message(email_content: str) -> str:
    """
    Build the user message asking for the organization fields.

    Args:
        email_content: Raw email body

    Returns:
        User message string
    """
    return (
        "Extract organization information from this email and respond with JSON containing: "
        "name, location, owners, activities, age (number), website, industry.\n\n"
        f"Email: {email_content}"
    )


def build_extraction_messages(email_content: str) -> List[Dict[str, str]]:
    """Build the chat messages list for one extraction request."""
    return [
        {"role": "system", "content": get_extraction_system_message()},
        {"role": "user", "content": build_extraction_user_message(email_content)},
    ]
