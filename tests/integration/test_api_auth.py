"""
Integration tests for auth API endpoints.
Uses TestClient with mocked use cases (no real DB).
"""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

pytestmark = pytest.mark.integration
from fastapi.testclient import TestClient

from fuel_quote.application.dto.auth_dto import LoginResponse, RegistrationResponse
from fuel_quote.application.use_cases.auth.login_user import LoginUserUseCase
from fuel_quote.application.use_cases.auth.register_user import RegisterUserUseCase
from fuel_quote.core.exceptions import (
    HashingError,
    InvalidCredentialsError,
    PersistenceError,
    UsernameTakenError,
)


@pytest.fixture
def mock_register_use_case():
    uc = AsyncMock(spec=RegisterUserUseCase)
    return uc


@pytest.fixture
def mock_login_use_case():
    uc = AsyncMock(spec=LoginUserUseCase)
    return uc


@pytest.fixture
def mock_container(mock_register_use_case, mock_login_use_case):
    container = MagicMock()
    container.get.side_effect = lambda cls: {
        RegisterUserUseCase: mock_register_use_case,
        LoginUserUseCase: mock_login_use_case,
    }.get(cls, None)
    return container


@pytest.fixture
def client(mock_container):
    """Create test client with mocked container."""
    from fuel_quote.main import app

    with patch("fuel_quote.api.v1.auth_controller.get_container", return_value=mock_container), patch(
        "fuel_quote.main.ensure_indexes", new=AsyncMock()
    ):
        with TestClient(app) as c:
            yield c


class TestAuthAPI:
    """Tests for /api/v1/auth endpoints"""

    def test_register_success(self, client, mock_register_use_case):
        mock_register_use_case.execute.return_value = RegistrationResponse(
            message="User registered successfully",
            token="jwt.token.here",
        )
        response = client.post(
            "/api/v1/auth/register",
            json={"username": "alice", "password": "password123"},
        )
        assert response.status_code == 201
        assert response.json() == {
            "message": "User registered successfully",
            "token": "jwt.token.here",
        }

    def test_register_duplicate_returns_409(self, client, mock_register_use_case):
        mock_register_use_case.execute.side_effect = UsernameTakenError("alice")
        response = client.post(
            "/api/v1/auth/register",
            json={"username": "alice", "password": "password123"},
        )
        assert response.status_code == 409
        assert response.json() == {"error": "Username is already taken"}

    def test_register_missing_password_returns_400(self, client, mock_register_use_case):
        response = client.post("/api/v1/auth/register", json={"username": "alice"})
        assert response.status_code == 400
        assert response.json() == {"error": "Username and password are required"}
        mock_register_use_case.execute.assert_not_called()

    @pytest.mark.parametrize("username", ["", "   ", "\t\n"])
    def test_register_blank_username_returns_400(self, client, mock_register_use_case, username):
        response = client.post(
            "/api/v1/auth/register",
            json={"username": username, "password": "password123"},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Username and password are required"}
        mock_register_use_case.execute.assert_not_called()

    def test_register_password_over_72_bytes_returns_400(self, client, mock_register_use_case):
        # 40 characters, 80 bytes in UTF-8
        response = client.post(
            "/api/v1/auth/register",
            json={"username": "bob", "password": "\u00e9" * 40},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "password: Password must be at most 72 bytes"}
        mock_register_use_case.execute.assert_not_called()

    def test_register_password_of_72_bytes_accepted(self, client, mock_register_use_case):
        mock_register_use_case.execute.return_value = RegistrationResponse(
            message="User registered successfully",
            token="jwt.token.here",
        )
        response = client.post(
            "/api/v1/auth/register",
            json={"username": "bob", "password": "\u00e9" * 36},
        )
        assert response.status_code == 201

    def test_register_hashing_fault_returns_500(self, client, mock_register_use_case):
        mock_register_use_case.execute.side_effect = HashingError("bcrypt exploded")
        response = client.post(
            "/api/v1/auth/register",
            json={"username": "alice", "password": "password123"},
        )
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    def test_login_success(self, client, mock_login_use_case):
        mock_login_use_case.execute.return_value = LoginResponse(
            token="jwt.token.here",
            redirect_to="/complete-profile",
        )
        response = client.post(
            "/api/v1/auth/login",
            json={"username": "alice", "password": "validpass123"},
        )
        assert response.status_code == 200
        assert response.json() == {"token": "jwt.token.here", "redirectTo": "/complete-profile"}

    def test_login_blank_username_returns_400(self, client, mock_login_use_case):
        response = client.post(
            "/api/v1/auth/login",
            json={"username": "   ", "password": "validpass123"},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Username and password are required"}
        mock_login_use_case.execute.assert_not_called()

    def test_login_invalid_returns_401(self, client, mock_login_use_case):
        mock_login_use_case.execute.side_effect = InvalidCredentialsError()
        response = client.post(
            "/api/v1/auth/login",
            json={"username": "alice", "password": "wrongpass123"},
        )
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid username or password"}

    def test_login_storage_fault_hides_cause(self, client, mock_login_use_case):
        mock_login_use_case.execute.side_effect = PersistenceError("mongo down at 10.0.0.5")
        response = client.post(
            "/api/v1/auth/login",
            json={"username": "alice", "password": "pw"},
        )
        assert response.status_code == 500
        assert "10.0.0.5" not in response.text


def test_health():
    from fuel_quote.main import app

    with patch("fuel_quote.main.ensure_indexes", new=AsyncMock()):
        with TestClient(app) as c:
            response = c.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
