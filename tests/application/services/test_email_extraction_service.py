"""Unit tests for the email extraction service."""
import pytest
from unittest.mock import MagicMock, patch

from src.application.services.email_extraction_service import extract_organization_from_email
from src.domain.entities.extracted_organization import ExtractedOrganization, ExtractionSource
from src.domain.errors import LlmExtractionError

EMAIL = "Hello, I'm Sarah from Acme Solutions Inc. We build software."


@pytest.mark.unit
class TestExtractOrganizationFromEmail:
    """Tests for extract_organization_from_email function."""

    @patch('src.application.services.email_extraction_service.extract_fields_with_llm')
    def test_uses_llm_result_when_available(self, mock_llm):
        """Test LLM result is returned as-is."""
        llm_record = ExtractedOrganization(name="Acme Solutions Inc", industry="Technology", age=7)
        mock_llm.return_value = llm_record
        client = MagicMock()

        result, source = extract_organization_from_email(EMAIL, client)

        assert result == llm_record
        assert source == ExtractionSource.LLM
        mock_llm.assert_called_once_with(client, EMAIL)

    @patch('src.application.services.email_extraction_service.extract_fields_with_llm')
    def test_falls_back_to_pattern_on_llm_error(self, mock_llm):
        """Test fallback when the LLM call fails."""
        mock_llm.side_effect = LlmExtractionError("OpenAI API error: timeout")

        result, source = extract_organization_from_email(EMAIL, MagicMock(), reference_year=2026)

        assert source == ExtractionSource.PATTERN
        assert result.name == "Acme Solutions Inc"
        assert result.industry == "Technology"

    @patch('src.application.services.email_extraction_service.extract_fields_with_llm')
    def test_skips_llm_without_client(self, mock_llm):
        """Test no LLM call is attempted when no client is configured."""
        result, source = extract_organization_from_email(EMAIL, None)

        assert source == ExtractionSource.PATTERN
        assert result.name == "Acme Solutions Inc"
        mock_llm.assert_not_called()

    @patch('src.application.services.email_extraction_service.extract_with_pattern')
    def test_passes_reference_year_to_fallback(self, mock_pattern):
        """Test reference year reaches the pattern extractor."""
        mock_pattern.return_value = ExtractedOrganization()

        extract_organization_from_email(EMAIL, None, reference_year=2030)

        mock_pattern.assert_called_once_with(EMAIL, 2030)

    def test_fallback_does_not_read_configuration(self, monkeypatch):
        """Test the fallback never fails on a bad EXTRACTION_REFERENCE_YEAR value."""
        monkeypatch.setenv("EXTRACTION_REFERENCE_YEAR", "twenty")

        result, source = extract_organization_from_email("hello", None)

        assert source == ExtractionSource.PATTERN
        assert result == ExtractedOrganization(activities="Professional services")
