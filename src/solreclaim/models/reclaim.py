"""Reclaim scan and estimate models.

All models use Pydantic BaseModel. Values are stored unrounded; the
`*_display` properties are the only place rounding happens.
"""

from pydantic import BaseModel, ConfigDict, Field

from solreclaim.constants.reclaim import SOL_DISPLAY_DECIMALS, USD_DISPLAY_DECIMALS


class PriceSnapshot(BaseModel):
    """Cached SOL/USD price.

    Attributes:
        price_usd: SOL price in USD.
        fetched_at_ms: Epoch milliseconds when the price was fetched.
    """

    model_config = ConfigDict(frozen=True)

    price_usd: float = Field(ge=0, description="SOL price in USD")
    fetched_at_ms: int = Field(ge=0, description="Fetch time, epoch milliseconds")


class ScanResult(BaseModel):
    """Outcome of a token account scan for one wallet."""

    model_config = ConfigDict(frozen=True)

    address: str = Field(description="Scanned wallet address (base58)")
    empty_account_count: int = Field(ge=0, description="Zero-balance token accounts")


class ReclaimEstimate(BaseModel):
    """Fee-adjusted reclaimable SOL and its USD value.

    Attributes:
        empty_account_count: Number of closable accounts.
        gross_sol: Rent locked in those accounts.
        net_sol: Amount the user receives after the platform fee.
        net_usd: `net_sol` valued at `sol_price_usd`.
        sol_price_usd: Price used for the USD conversion (0 if unknown).
    """

    model_config = ConfigDict(frozen=True)

    empty_account_count: int = Field(ge=0)
    gross_sol: float = Field(ge=0)
    net_sol: float = Field(ge=0)
    net_usd: float = Field(ge=0)
    sol_price_usd: float = Field(ge=0)

    @property
    def net_sol_display(self) -> str:
        """Net SOL rounded for display, e.g. '0.00459'."""
        return f"{self.net_sol:.{SOL_DISPLAY_DECIMALS}f}"

    @property
    def net_usd_display(self) -> str:
        """Net USD rounded for display, e.g. '0.69'."""
        return f"{self.net_usd:.{USD_DISPLAY_DECIMALS}f}"


class ScanOutcome(BaseModel):
    """Result handed to the conversation layer.

    `estimate` is None when the wallet has no empty accounts; the price
    cache is not consulted in that case.
    """

    model_config = ConfigDict(frozen=True)

    scan: ScanResult
    estimate: ReclaimEstimate | None = None

    @property
    def is_clean(self) -> bool:
        """True when nothing is reclaimable."""
        return self.scan.empty_account_count == 0
