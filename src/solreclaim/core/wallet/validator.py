"""Wallet address validation logic.

Addresses are validated locally, without network calls: the input must
decode from base58 to exactly 32 bytes (a Solana public key).
"""

import structlog
from solders.pubkey import Pubkey

from solreclaim.core.exceptions import InvalidAddressError
from solreclaim.core.wallet.utils import mask_address

log = structlog.get_logger(__name__)

# Solana base58 alphabet (excludes 0, O, I, l to avoid confusion)
BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

# Base58 encodings of 32-byte keys are 32-44 characters
SOLANA_ADDRESS_MIN_LENGTH = 32
SOLANA_ADDRESS_MAX_LENGTH = 44


def validate_address(raw: str) -> Pubkey:
    """Parse a user-supplied string into a Solana public key.

    Performs local validation only:
    - Rejects None/empty values
    - Checks length (32-44 characters) and base58 alphabet
    - Decodes and checks the key is exactly 32 bytes

    Args:
        raw: Text sent by the user. Surrounding whitespace is ignored.

    Returns:
        The decoded public key.

    Raises:
        InvalidAddressError: If the input is not a valid public key.
    """
    if raw is None or not isinstance(raw, str):
        raise InvalidAddressError("Address must be a string", raw_address=None)

    address = raw.strip()
    if not address:
        raise InvalidAddressError("Address is empty", raw_address=raw)

    if not (SOLANA_ADDRESS_MIN_LENGTH <= len(address) <= SOLANA_ADDRESS_MAX_LENGTH):
        log.debug("wallet_address_bad_length", length=len(address))
        raise InvalidAddressError(
            f"Invalid address length: {len(address)} (expected 32-44 characters)",
            raw_address=raw,
        )

    if not all(c in BASE58_ALPHABET for c in address):
        log.debug("wallet_address_bad_charset", wallet_address=mask_address(address))
        raise InvalidAddressError("Address contains non-base58 characters", raw_address=raw)

    try:
        return Pubkey.from_string(address)
    except ValueError as e:
        log.debug("wallet_address_decode_failed", wallet_address=mask_address(address))
        raise InvalidAddressError(f"Invalid Solana public key: {e}", raw_address=raw) from e
