"""Reclaimable rent estimation.

Pure arithmetic: no I/O, no rounding. Rounding for display lives on
ReclaimEstimate.
"""

from solreclaim.constants.reclaim import PLATFORM_FEE, RENT_PER_ACCOUNT_SOL
from solreclaim.models.reclaim import ReclaimEstimate


def estimate(empty_account_count: int, price_usd: float) -> ReclaimEstimate:
    """Estimate the SOL and USD a user receives for closing empty accounts.

    gross = count * rent per account, net = gross * (1 - platform fee),
    usd = net * price. A price of 0 (no quote ever obtained) yields 0 USD.

    Args:
        empty_account_count: Number of zero-balance token accounts.
        price_usd: SOL price in USD.

    Returns:
        ReclaimEstimate with unrounded values.

    Raises:
        ValueError: If the count or price is negative.
    """
    if empty_account_count < 0:
        raise ValueError(f"empty_account_count must be >= 0, got {empty_account_count}")
    if price_usd < 0:
        raise ValueError(f"price_usd must be >= 0, got {price_usd}")

    gross_sol = empty_account_count * RENT_PER_ACCOUNT_SOL
    net_sol = gross_sol * (1 - PLATFORM_FEE)
    net_usd = net_sol * price_usd

    return ReclaimEstimate(
        empty_account_count=empty_account_count,
        gross_sol=gross_sol,
        net_sol=net_sol,
        net_usd=net_usd,
        sol_price_usd=price_usd,
    )
