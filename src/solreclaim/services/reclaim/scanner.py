"""Wallet scan pipeline: query chain, then estimate."""

from typing import Protocol

import structlog
from solders.pubkey import Pubkey

from solreclaim.core.reclaim.estimator import estimate
from solreclaim.core.wallet.utils import mask_address
from solreclaim.models.reclaim import ScanOutcome, ScanResult

log = structlog.get_logger(__name__)


class EmptyAccountSource(Protocol):
    """Counts a wallet's empty token accounts."""

    async def fetch_empty_token_accounts(self, owner: Pubkey) -> int:
        """Return the count or raise ChainQueryError."""
        ...


class PriceSource(Protocol):
    """Provides the SOL price without raising."""

    async def get_price(self) -> float:
        """Return the SOL price in USD (0.0 if unknown)."""
        ...


class WalletScanner:
    """Turns a validated wallet key into a reclaim estimate.

    The chain query always completes before the price is read, and the
    price is not read at all when nothing is reclaimable.
    """

    def __init__(self, rpc_client: EmptyAccountSource, price_cache: PriceSource) -> None:
        self._rpc_client = rpc_client
        self._price_cache = price_cache

    async def scan(self, owner: Pubkey) -> ScanOutcome:
        """Scan a wallet.

        Args:
            owner: Public key from validate_address.

        Returns:
            ScanOutcome; `estimate` is None for a clean wallet.

        Raises:
            ChainQueryError: If the token account query fails.
        """
        address = str(owner)
        scan_log = log.bind(wallet_address=mask_address(owner))
        scan_log.info("wallet_scan_started")

        empty_count = await self._rpc_client.fetch_empty_token_accounts(owner)
        scan = ScanResult(address=address, empty_account_count=empty_count)

        if empty_count == 0:
            scan_log.info("wallet_scan_clean")
            return ScanOutcome(scan=scan)

        price = await self._price_cache.get_price()
        result = estimate(empty_count, price)

        scan_log.info(
            "wallet_scan_completed",
            empty_accounts=empty_count,
            net_sol=result.net_sol,
            net_usd=result.net_usd,
        )
        return ScanOutcome(scan=scan, estimate=result)
