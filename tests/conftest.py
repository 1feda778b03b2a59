"""
Shared pytest fixtures for fuel quote backend tests.
"""
import os
from unittest.mock import MagicMock, patch

import pytest

from fuel_quote.domain.pricing import PricingEngine, StandardRateTable
from fuel_quote.infrastructure.memory import InMemoryAccountRepository, InMemoryQuoteRepository
from fuel_quote.infrastructure.security import BcryptPasswordHasher, JwtTokenIssuer


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_fuel_quote",
        "STORAGE_BACKEND": "memory",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "BCRYPT_ROUNDS": "4",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.mongo_timeout_ms = 100
    mock.storage_backend = "memory"
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 60
    # bcrypt's minimum cost keeps the suite fast
    mock.bcrypt_rounds = 4
    mock.cors_origins = ["http://localhost:3000"]
    mock.log_level = "INFO"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("fuel_quote.core.config.get_settings", return_value=mock), patch(
        "fuel_quote.core.security.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def account_repository():
    return InMemoryAccountRepository()


@pytest.fixture
def quote_repository():
    return InMemoryQuoteRepository()


@pytest.fixture
def password_hasher():
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def token_issuer(mock_settings):
    return JwtTokenIssuer(default_ttl_minutes=60)


@pytest.fixture
def pricing_engine():
    return PricingEngine(StandardRateTable())
