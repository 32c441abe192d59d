"""Address masking for log output.

Wallet addresses arrive in chat messages, valid or not, and are logged
by the validator, the RPC client and the scanner. Only the edges of an
address are written to logs.
"""

from solders.pubkey import Pubkey

MASK_EDGE_CHARS = 4
MASK_FILLER = "..."


def mask_address(owner: Pubkey | str) -> str:
    """Keep the first and last MASK_EDGE_CHARS characters of an address.

    Accepts a decoded key or the raw text a user sent. Text too short to
    hide anything (e.g. an obviously bad input) is returned as is.

    Example:
        >>> mask_address("9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM")
        '9WzD...AWWM'
    """
    text = str(owner)
    if len(text) <= 2 * MASK_EDGE_CHARS + len(MASK_FILLER):
        return text
    return f"{text[:MASK_EDGE_CHARS]}{MASK_FILLER}{text[-MASK_EDGE_CHARS:]}"
