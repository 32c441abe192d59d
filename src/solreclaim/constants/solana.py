"""Solana program and account layout constants."""

from typing import Final

# SPL Token Program ID
TOKEN_PROGRAM_ID: Final[str] = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"

# SPL token account layout: mint (0..32), owner (32..64), amount, ...
TOKEN_ACCOUNT_SIZE: Final[int] = 165
TOKEN_ACCOUNT_OWNER_OFFSET: Final[int] = 32

RPC_COMMITMENT: Final[str] = "confirmed"
