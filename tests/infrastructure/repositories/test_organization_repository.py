"""Unit tests for organization repository."""
import json
import pytest
from unittest.mock import patch

from src.infrastructure.repositories.organization_repository import (
    create_organization,
    get_organization,
    list_organizations,
    update_organization,
    delete_organization,
    search_organizations,
)

REPO = 'src.infrastructure.repositories.organization_repository'


@pytest.mark.unit
class TestCreateOrganization:
    """Tests for create_organization function."""

    @patch(f'{REPO}.execute_returning')
    def test_create_success(self, mock_returning, sample_organization_row):
        mock_returning.return_value = sample_organization_row

        result = create_organization({
            "name": "Brightwave Technologies",
            "age": 16,
            "attachments": ["deck.pdf"],
        })

        assert result.name == "Brightwave Technologies"
        assert result.attachments == ["deck.pdf"]
        params = mock_returning.call_args[0][1]
        assert params[1] == "Brightwave Technologies"
        assert params[2] == ""  # location default
        assert params[5] == 16
        assert json.loads(params[8]) == ["deck.pdf"]

    @patch(f'{REPO}.execute_returning')
    def test_create_no_row(self, mock_returning):
        mock_returning.return_value = None

        with pytest.raises(RuntimeError):
            create_organization({"name": "Acme"})


@pytest.mark.unit
class TestGetOrganization:
    """Tests for get_organization function."""

    @patch(f'{REPO}.execute_query')
    def test_get_success(self, mock_query, sample_organization_row, sample_organization_id):
        mock_query.return_value = [sample_organization_row]

        result = get_organization(sample_organization_id)

        assert result is not None
        assert result.id == sample_organization_id
        assert result.industry == "Technology"

    @patch(f'{REPO}.execute_query')
    def test_get_parses_json_attachments(self, mock_query, sample_organization_row):
        mock_query.return_value = [{**sample_organization_row, "attachments": '["a.pdf", "b.pdf"]'}]

        result = get_organization(sample_organization_row["id"])

        assert result.attachments == ["a.pdf", "b.pdf"]

    @patch(f'{REPO}.execute_query')
    def test_get_not_found(self, mock_query):
        mock_query.return_value = []

        assert get_organization("3f2b8c1e-6d4a-4b7e-9a61-0c5d2e8f7a11") is None


@pytest.mark.unit
class TestListOrganizations:
    """Tests for list_organizations function."""

    @patch(f'{REPO}.execute_query')
    def test_list_newest_first(self, mock_query, sample_organization_row):
        mock_query.return_value = [sample_organization_row]

        result = list_organizations(limit=10, skip=5)

        assert len(result) == 1
        sql, params = mock_query.call_args[0]
        assert "ORDER BY created_at DESC" in sql
        assert params == (10, 5)


@pytest.mark.unit
class TestUpdateOrganization:
    """Tests for update_organization function."""

    @patch(f'{REPO}.execute_returning')
    def test_update_only_given_columns(self, mock_returning, sample_organization_row, sample_organization_id):
        mock_returning.return_value = sample_organization_row

        result = update_organization(sample_organization_id, {"age": 17, "website": "https://b.io", "bogus": 1})

        assert result is not None
        sql, params = mock_returning.call_args[0]
        assert "age = %s" in sql
        assert "website = %s" in sql
        assert "bogus" not in sql
        assert "updated_at = NOW()" in sql
        assert params == (17, "https://b.io", sample_organization_id)

    @patch(f'{REPO}.execute_returning')
    def test_update_serializes_attachments(self, mock_returning, sample_organization_row, sample_organization_id):
        mock_returning.return_value = sample_organization_row

        update_organization(sample_organization_id, {"attachments": ["x.pdf"]})

        params = mock_returning.call_args[0][1]
        assert json.loads(params[0]) == ["x.pdf"]

    @patch(f'{REPO}.execute_returning')
    def test_update_not_found(self, mock_returning, sample_organization_id):
        mock_returning.return_value = None

        assert update_organization(sample_organization_id, {"age": 1}) is None


@pytest.mark.unit
class TestDeleteOrganization:
    """Tests for delete_organization function."""

    @patch(f'{REPO}.execute_update')
    def test_delete_success(self, mock_update, sample_organization_id):
        mock_update.return_value = 1

        assert delete_organization(sample_organization_id) is True

    @patch(f'{REPO}.execute_update')
    def test_delete_not_found(self, mock_update, sample_organization_id):
        mock_update.return_value = 0

        assert delete_organization(sample_organization_id) is False


@pytest.mark.unit
class TestSearchOrganizations:
    """Tests for search_organizations function."""

    @patch(f'{REPO}.execute_query')
    def test_query_and_industry(self, mock_query):
        mock_query.return_value = []

        search_organizations("bright", "Technology")

        sql, params = mock_query.call_args[0]
        assert "name ILIKE %s OR location ILIKE %s OR owners ILIKE %s" in sql
        assert "industry = %s" in sql
        assert params == ("%bright%", "%bright%", "%bright%", "Technology", 50)

    @patch(f'{REPO}.execute_query')
    def test_all_industries_is_not_a_filter(self, mock_query):
        mock_query.return_value = []

        search_organizations("", "All Industries")

        sql, params = mock_query.call_args[0]
        assert "WHERE" not in sql
        assert params == (50,)

    @patch(f'{REPO}.execute_query')
    def test_wildcards_are_escaped(self, mock_query):
        mock_query.return_value = []

        search_organizations("100%_sure")

        params = mock_query.call_args[0][1]
        assert params[0] == "%100\\%\\_sure%"
