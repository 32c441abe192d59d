"""Wallet address validation module."""

from solreclaim.core.wallet.utils import mask_address
from solreclaim.core.wallet.validator import validate_address

__all__ = ["mask_address", "validate_address"]
