"""SOL price lookup constants."""

from typing import Final

PRICE_CACHE_TTL_SECONDS: Final[int] = 15 * 60  # 15 minutes

QUOTE_SYMBOL: Final[str] = "SOL"
QUOTE_CONVERT: Final[str] = "USD"
CMC_QUOTES_PATH: Final[str] = "/v1/cryptocurrency/quotes/latest"
