"""Process-wide SOL/USD price cache.

Holds a single PriceSnapshot refreshed from the quote source at most once
per TTL window. Refresh failures never reach the caller: the last known
price is returned, or 0.0 if no quote was ever obtained.
"""

import asyncio
import time
from collections.abc import Callable
from typing import Protocol

import structlog

from solreclaim.constants.pricing import (
    PRICE_CACHE_TTL_SECONDS,
    QUOTE_CONVERT,
    QUOTE_SYMBOL,
)
from solreclaim.core.exceptions import PriceSourceError
from solreclaim.models.reclaim import PriceSnapshot

logger = structlog.get_logger(__name__)


class QuoteSource(Protocol):
    """Anything that can quote a symbol in a fiat currency."""

    async def get_quote(self, symbol: str, convert_to: str) -> float:
        """Return the latest price or raise PriceSourceError."""
        ...


class PriceCache:
    """Single-value TTL cache for the SOL price.

    Concurrent callers that find the snapshot stale wait on one lock;
    whoever acquires it first refreshes, the rest re-check and reuse the
    new snapshot, so at most one quote request is made per window.
    """

    def __init__(
        self,
        quote_source: QuoteSource,
        ttl_seconds: int = PRICE_CACHE_TTL_SECONDS,
        symbol: str = QUOTE_SYMBOL,
        convert_to: str = QUOTE_CONVERT,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize price cache.

        Args:
            quote_source: Client used to refresh the price.
            ttl_seconds: How long a snapshot stays fresh.
            symbol: Asset to quote.
            convert_to: Fiat currency.
            clock: Returns current time in epoch seconds.
        """
        self._quote_source = quote_source
        self.ttl_seconds = ttl_seconds
        self.symbol = symbol
        self.convert_to = convert_to
        self._clock = clock
        self._snapshot: PriceSnapshot | None = None
        self._refresh_lock = asyncio.Lock()

    @property
    def snapshot(self) -> PriceSnapshot | None:
        """Current snapshot, possibly stale."""
        return self._snapshot

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)

    def _is_fresh(self, now_ms: int) -> bool:
        if self._snapshot is None:
            return False
        return now_ms - self._snapshot.fetched_at_ms < self.ttl_seconds * 1000

    def _fallback_price(self) -> float:
        return self._snapshot.price_usd if self._snapshot is not None else 0.0

    async def get_price(self) -> float:
        """Get the SOL price in USD.

        Returns:
            Fresh cached price, newly fetched price, last known price
            after a failed refresh, or 0.0 if none was ever fetched.
        """
        if self._is_fresh(self._now_ms()):
            return self._snapshot.price_usd  # type: ignore[union-attr]

        async with self._refresh_lock:
            # Another caller may have refreshed while we waited
            now_ms = self._now_ms()
            if self._is_fresh(now_ms):
                return self._snapshot.price_usd  # type: ignore[union-attr]

            logger.info("price_refresh_started", symbol=self.symbol)
            try:
                price = await self._quote_source.get_quote(self.symbol, self.convert_to)
            except PriceSourceError as e:
                fallback = self._fallback_price()
                logger.warning(
                    "price_refresh_failed",
                    symbol=self.symbol,
                    error=str(e),
                    fallback_price=fallback,
                    has_snapshot=self._snapshot is not None,
                )
                return fallback

            self._snapshot = PriceSnapshot(price_usd=price, fetched_at_ms=now_ms)
            logger.info("price_refreshed", symbol=self.symbol, price_usd=price)
            return price
