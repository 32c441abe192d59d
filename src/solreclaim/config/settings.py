"""Application settings using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from solreclaim.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """SolReclaim bot configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # Application
    app_name: str = Field(default="SolReclaim", description="Application name")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Minimum log level"
    )

    # Telegram
    bot_token: SecretStr = Field(description="Telegram bot token")
    partner_telegram_id: str = Field(
        description="Telegram user id allowed to run /partner_stats"
    )
    channel_name: str = Field(description="Channel display name used in messages")

    # Solana RPC
    rpc_url: str = Field(description="Solana RPC endpoint URL")

    # Claiming platform
    partner_referral_link: str = Field(description="Referral link to the claim platform")
    partner_api_url: str = Field(
        default="https://solrebound.com/api",
        description="Base URL of the partner statistics API",
    )

    # CoinMarketCap
    cmc_api_key: SecretStr = Field(description="CoinMarketCap API key")
    cmc_base_url: str = Field(
        default="https://pro-api.coinmarketcap.com",
        description="CoinMarketCap API base URL",
    )

    http_timeout_seconds: float = Field(
        default=30.0, gt=0, description="Timeout for outbound HTTP requests"
    )

    @field_validator("bot_token", "cmc_api_key")
    @classmethod
    def validate_not_blank_secret(cls, v: SecretStr) -> SecretStr:
        """Reject empty credentials."""
        if not v.get_secret_value().strip():
            raise ValueError("must not be empty")
        return v

    @field_validator("partner_telegram_id", "channel_name")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject empty identifiers."""
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v

    @field_validator("rpc_url", "partner_referral_link", "partner_api_url", "cmc_base_url")
    @classmethod
    def validate_http_url(cls, v: str) -> str:
        """Validate URL format."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()  # type: ignore[call-arg]  # Values from env


def load_settings() -> Settings:
    """Load settings, translating validation failures.

    Raises:
        ConfigurationError: If a required variable is missing or invalid.
    """
    try:
        return get_settings()
    except ValidationError as e:
        missing = [".".join(str(p) for p in err["loc"]).upper() for err in e.errors()]
        raise ConfigurationError(
            f"Missing or invalid environment variables: {', '.join(missing)}"
        ) from e
