"""CoinMarketCap quote client."""

import structlog

from solreclaim.config.settings import Settings, get_settings
from solreclaim.constants.pricing import CMC_QUOTES_PATH
from solreclaim.core.exceptions import ExternalServiceError, PriceSourceError
from solreclaim.services.base import BaseAPIClient

log = structlog.get_logger(__name__)


class QuoteClient(BaseAPIClient):
    """Fetches latest quotes from the CoinMarketCap pro API.

    Requires an API key, sent as the X-CMC_PRO_API_KEY header.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or get_settings()
        super().__init__(
            base_url=settings.cmc_base_url,
            timeout=settings.http_timeout_seconds,
            headers={
                "Accept": "application/json",
                "X-CMC_PRO_API_KEY": settings.cmc_api_key.get_secret_value(),
            },
            service_name="coinmarketcap",
        )

    async def get_quote(self, symbol: str, convert_to: str) -> float:
        """Get the latest price of `symbol` in `convert_to`.

        Args:
            symbol: Asset ticker, e.g. "SOL".
            convert_to: Fiat ticker, e.g. "USD".

        Returns:
            The quoted price.

        Raises:
            PriceSourceError: On transport failure, non-2xx status or a
                response without a positive numeric price.
        """
        try:
            response = await self.get(
                CMC_QUOTES_PATH,
                params={"symbol": symbol, "convert": convert_to},
            )
            data = response.json()
        except ExternalServiceError as e:
            raise PriceSourceError(f"Quote request failed: {e}") from e
        except ValueError as e:
            raise PriceSourceError("Quote response is not JSON") from e

        try:
            price = data["data"][symbol]["quote"][convert_to]["price"]
        except (KeyError, TypeError) as e:
            raise PriceSourceError(f"Quote response missing price for {symbol}") from e

        if isinstance(price, bool) or not isinstance(price, int | float) or price <= 0:
            raise PriceSourceError(f"Invalid {symbol} price in quote response: {price!r}")

        log.debug("quote_fetched", symbol=symbol, convert=convert_to, price=price)
        return float(price)
