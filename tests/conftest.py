"""Shared pytest fixtures for SolReclaim tests.

This module provides fixtures for:
- Test environment variables
- A fully populated Settings instance
- Mocked collaborators (quote source, RPC client)
- Sample Solana RPC payloads
"""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from solreclaim.config.settings import Settings, get_settings
from tests.factories import WALLET_ADDRESS, make_rpc_response, make_token_account

# =============================================================================
# Environment Configuration
# =============================================================================

TEST_ENV = {
    "BOT_TOKEN": "123456:TEST-TOKEN",
    "RPC_URL": "https://rpc.test",
    "PARTNER_REFERRAL_LINK": "https://partner.test/?ref=abc123",
    "PARTNER_TELEGRAM_ID": "1000",
    "CMC_API_KEY": "test-cmc-key",
    "CHANNEL_NAME": "Test Channel",
}


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> Generator[None, None, None]:
    """Set up test environment variables.

    Loads .env file first, then sets defaults for any missing variables.
    """
    from dotenv import load_dotenv

    original_env = os.environ.copy()

    # Load .env file if it exists (won't override existing env vars)
    load_dotenv()

    for key, value in TEST_ENV.items():
        os.environ.setdefault(key, value)

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Ensure every test reads settings fresh."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Settings
# =============================================================================


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at fake hosts, independent of the environment."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        bot_token="123456:TEST-TOKEN",  # type: ignore[arg-type]
        rpc_url="https://rpc.test",
        partner_referral_link="https://partner.test/?ref=abc123",
        partner_telegram_id="1000",
        cmc_api_key="test-cmc-key",  # type: ignore[arg-type]
        channel_name="Test Channel",
        partner_api_url="https://partner.test/api",
        cmc_base_url="https://cmc.test",
    )


# =============================================================================
# Mock External APIs
# =============================================================================


@pytest.fixture
def mock_quote_source() -> MagicMock:
    """Quote source returning $150 for SOL."""
    mock = MagicMock()
    mock.get_quote = AsyncMock(return_value=150.0)
    return mock


@pytest.fixture
def mock_rpc_client() -> MagicMock:
    """RPC client reporting 3 empty token accounts."""
    mock = MagicMock()
    mock.fetch_empty_token_accounts = AsyncMock(return_value=3)
    mock.close = AsyncMock()
    return mock


# =============================================================================
# Sample Data
# =============================================================================


@pytest.fixture
def valid_solana_address() -> str:
    """Valid Solana wallet address."""
    return WALLET_ADDRESS


@pytest.fixture
def sample_program_accounts_response() -> dict[str, Any]:
    """getProgramAccounts response: 3 empty accounts, 1 funded."""
    return make_rpc_response(
        [
            make_token_account("3Uo6T1aBnWx9vJkZzGQJ4k8xv6H2dFq8Yw6Yc1hV5mNa", 0.0),
            make_token_account("4Vp7U2bCoXy1wKmAzHRK5m9yw7J3eGr9Zx7Zd2iW6nPb", 0.0),
            make_token_account("5Wq8V3cDpYz2xLnBaJSL6n1zx8K4fHs1ay8ae3jX7oQc", 0.0),
            make_token_account(
                "6Xr9W4dEqZa3yMoCbKTM7o2ay9L5gJt2bz9bf4kY8pRd", 12.5, amount="12500000"
            ),
        ]
    )
