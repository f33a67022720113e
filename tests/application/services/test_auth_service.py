"""Unit tests for the auth service."""
import pytest
from dataclasses import replace
from unittest.mock import patch

from src.application.services.auth_service import get_user, login_user, register_user
from src.domain.errors import InvalidCredentialsError, UserAlreadyExistsError
from src.infrastructure.security.passwords import hash_password
from src.infrastructure.security.tokens import verify_token

SERVICE = 'src.application.services.auth_service'


@pytest.mark.unit
class TestRegisterUser:
    """Tests for register_user function."""

    @patch(f'{SERVICE}.create_user')
    @patch(f'{SERVICE}.get_user_by_email')
    def test_register_success(self, mock_get, mock_create, sample_user):
        mock_get.return_value = None
        mock_create.return_value = sample_user

        result = register_user("maria@brightwave.io", "secret1", "Maria Lopez")

        assert result["userId"] == sample_user.id
        assert verify_token(result["token"]) == sample_user.id
        email, name, password_hash = mock_create.call_args[0]
        assert email == "maria@brightwave.io"
        assert name == "Maria Lopez"
        assert password_hash != "secret1"

    @patch(f'{SERVICE}.create_user')
    @patch(f'{SERVICE}.get_user_by_email')
    def test_register_duplicate(self, mock_get, mock_create, sample_user):
        mock_get.return_value = sample_user

        with pytest.raises(UserAlreadyExistsError, match="User already exists"):
            register_user("maria@brightwave.io", "secret1", "Maria Lopez")

        mock_create.assert_not_called()


@pytest.mark.unit
class TestLoginUser:
    """Tests for login_user function."""

    @patch(f'{SERVICE}.get_user_by_email')
    def test_login_success(self, mock_get, sample_user):
        user = replace(sample_user, password_hash=hash_password("secret1"))
        mock_get.return_value = user

        result = login_user("maria@brightwave.io", "secret1")

        assert result["userId"] == user.id
        assert verify_token(result["token"]) == user.id

    @patch(f'{SERVICE}.get_user_by_email')
    def test_login_wrong_password(self, mock_get, sample_user):
        user = replace(sample_user, password_hash=hash_password("secret1"))
        mock_get.return_value = user

        with pytest.raises(InvalidCredentialsError, match="Invalid email or password"):
            login_user("maria@brightwave.io", "wrong-password")

    @patch(f'{SERVICE}.get_user_by_email')
    def test_login_unknown_email(self, mock_get):
        mock_get.return_value = None

        with pytest.raises(InvalidCredentialsError):
            login_user("nobody@example.com", "secret1")


@pytest.mark.unit
class TestGetUser:
    """Tests for get_user function."""

    @patch(f'{SERVICE}.get_user_by_id')
    def test_get_user_success(self, mock_get, sample_user):
        mock_get.return_value = sample_user

        assert get_user(sample_user.id) == sample_user

    @patch(f'{SERVICE}.get_user_by_id')
    def test_get_user_malformed_id(self, mock_get):
        assert get_user("123") is None
        mock_get.assert_not_called()
