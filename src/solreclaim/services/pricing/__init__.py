"""SOL price lookup: CoinMarketCap client and TTL cache."""

from solreclaim.services.pricing.price_cache import PriceCache, QuoteSource
from solreclaim.services.pricing.quote_client import QuoteClient

__all__ = ["PriceCache", "QuoteClient", "QuoteSource"]
