"""SolReclaim exception hierarchy.

This module defines the base exception class and specialized exceptions
for the different failure categories of the reclaim bot.
"""


class SolReclaimError(Exception):
    """Base exception for all SolReclaim errors.

    All custom exceptions in SolReclaim should inherit from this class
    to enable consistent error handling and logging.
    """

    pass


class ConfigurationError(SolReclaimError):
    """Raised when configuration is invalid or missing.

    Fatal at startup: the process exits before serving any update.

    Example:
        raise ConfigurationError("Missing required env var: BOT_TOKEN")
    """

    pass


class ValidationError(SolReclaimError):
    """Raised when user input fails validation."""

    pass


class InvalidAddressError(ValidationError):
    """Raised when a string is not a valid Solana public key.

    Attributes:
        raw_address: The rejected input.
    """

    def __init__(self, message: str, raw_address: str | None = None) -> None:
        super().__init__(message)
        self.raw_address = raw_address


class ExternalServiceError(SolReclaimError):
    """Raised when an external HTTP service call fails.

    Attributes:
        service: Name or base URL of the external service that failed.
        status_code: HTTP status code if available, None otherwise.

    Example:
        raise ExternalServiceError(service="CoinMarketCap", message="Unauthorized", status_code=401)
    """

    def __init__(
        self,
        service: str,
        message: str,
        status_code: int | None = None,
    ) -> None:
        self.service = service
        self.status_code = status_code
        super().__init__(f"{service}: {message}")


class ChainQueryError(SolReclaimError):
    """Raised when the Solana RPC query fails or returns malformed data.

    Attributes:
        wallet_address: The wallet being scanned (if available).
    """

    def __init__(self, message: str, wallet_address: str | None = None) -> None:
        super().__init__(message)
        self.wallet_address = wallet_address


class PriceSourceError(SolReclaimError):
    """Raised when the SOL quote cannot be fetched or parsed.

    Never reaches the user: the price cache degrades to the last known price.
    """

    pass


class PartnerApiError(SolReclaimError):
    """Raised when partner statistics cannot be retrieved."""

    pass


class PartnerNotFoundError(PartnerApiError):
    """Raised when the partner API answers 404 for the referral code."""

    pass


class ReferralCodeMissingError(PartnerApiError):
    """Raised when no `ref` parameter can be read from the referral link."""

    pass
