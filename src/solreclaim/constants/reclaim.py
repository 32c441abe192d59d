"""Reclaim estimation constants."""

from typing import Final

# SOL returned per closed SPL token account (rent-exempt minimum for 165 bytes)
RENT_PER_ACCOUNT_SOL: Final[float] = 0.00203928

# Share of reclaimed SOL kept by the claiming platform
PLATFORM_FEE: Final[float] = 0.25

# Display precision
SOL_DISPLAY_DECIMALS: Final[int] = 5
USD_DISPLAY_DECIMALS: Final[int] = 2
