"""Tests for settings configuration."""

import os
from unittest.mock import patch

import pytest

from solreclaim.config.settings import Settings, get_settings, load_settings
from solreclaim.core.exceptions import ConfigurationError

REQUIRED_ENV = {
    "BOT_TOKEN": "123456:ABC",
    "RPC_URL": "https://api.mainnet-beta.solana.com",
    "PARTNER_REFERRAL_LINK": "https://solrebound.com/?ref=xyz",
    "PARTNER_TELEGRAM_ID": "777",
    "CMC_API_KEY": "cmc-key",
    "CHANNEL_NAME": "Rent Hunters",
}


class TestSettings:
    """Test settings loading and validation."""

    def test_settings_loads_from_env(self) -> None:
        """
        Given: All required environment variables are set
        When: Settings is loaded
        Then: Values are correctly parsed
        """
        with patch.dict(os.environ, {**REQUIRED_ENV, "DEBUG": "true"}, clear=True):
            get_settings.cache_clear()
            settings = load_settings()

        assert settings.bot_token.get_secret_value() == "123456:ABC"
        assert settings.rpc_url == "https://api.mainnet-beta.solana.com"
        assert settings.partner_referral_link == "https://solrebound.com/?ref=xyz"
        assert settings.partner_telegram_id == "777"
        assert settings.cmc_api_key.get_secret_value() == "cmc-key"
        assert settings.channel_name == "Rent Hunters"
        assert settings.debug is True

    def test_settings_defaults(self) -> None:
        """
        Given: Only required fields
        When: Settings is created
        Then: Defaults are applied
        """
        with patch.dict(os.environ, REQUIRED_ENV, clear=True):
            settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.app_name == "SolReclaim"
        assert settings.log_level == "INFO"
        assert settings.partner_api_url == "https://solrebound.com/api"
        assert settings.cmc_base_url == "https://pro-api.coinmarketcap.com"
        assert settings.http_timeout_seconds == 30.0

    def test_secrets_are_masked(self) -> None:
        with patch.dict(os.environ, REQUIRED_ENV, clear=True):
            settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert "cmc-key" not in repr(settings)
        assert "123456:ABC" not in repr(settings)

    def test_get_settings_is_cached(self) -> None:
        with patch.dict(os.environ, REQUIRED_ENV, clear=True):
            get_settings.cache_clear()
            assert get_settings() is get_settings()


class TestSettingsValidation:
    """Test required variables and format checks."""

    @pytest.mark.parametrize("missing", sorted(REQUIRED_ENV))
    def test_missing_required_variable_raises_configuration_error(self, missing: str) -> None:
        """
        Given: One required variable is absent
        When: load_settings() is called
        Then: ConfigurationError names the variable
        """
        env = {k: v for k, v in REQUIRED_ENV.items() if k != missing}

        with patch.dict(os.environ, env, clear=True):
            get_settings.cache_clear()
            with pytest.raises(ConfigurationError, match=missing):
                load_settings()

    @pytest.mark.parametrize("field", ["RPC_URL", "PARTNER_REFERRAL_LINK"])
    def test_url_must_be_http(self, field: str) -> None:
        env = {**REQUIRED_ENV, field: "ftp://example.com"}

        with patch.dict(os.environ, env, clear=True):
            get_settings.cache_clear()
            with pytest.raises(ConfigurationError, match=field):
                load_settings()

    @pytest.mark.parametrize("field", ["BOT_TOKEN", "CMC_API_KEY", "CHANNEL_NAME"])
    def test_blank_values_rejected(self, field: str) -> None:
        env = {**REQUIRED_ENV, field: "   "}

        with patch.dict(os.environ, env, clear=True):
            get_settings.cache_clear()
            with pytest.raises(ConfigurationError):
                load_settings()
