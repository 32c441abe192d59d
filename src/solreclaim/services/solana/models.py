"""Pydantic models for Solana RPC responses.

This module provides type-safe models for the `jsonParsed` token account
records returned by getProgramAccounts.

Models:
    TokenAccountRecord: Individual parsed token account
    TokenAccountList: Wrapper for a scan's token accounts
"""

from typing import Any

from pydantic import BaseModel, Field


class TokenAccountRecord(BaseModel):
    """Parsed SPL token account.

    Attributes:
        pubkey: Token account's public key (base58 format).
        owner: Wallet address that owns this token account (base58 format).
        mint: Token mint address this account is for (base58 format).
        amount: Raw base-unit balance as string.
        ui_amount: Decimal display balance, None if the RPC omitted it.

    Example:
        {
            "pubkey": "TokenAcc123...",
            "owner": "Wallet456...",
            "mint": "TokenMint789...",
            "amount": "0",
            "ui_amount": 0.0
        }
    """

    pubkey: str = Field(..., description="Token account public key")
    owner: str = Field(..., description="Wallet address owning this token account")
    mint: str = Field(..., description="Token mint address")
    amount: str = Field(default="0", description="Token balance (raw amount)")
    ui_amount: float | None = Field(default=None, description="Display balance")

    @classmethod
    def from_rpc(cls, account: dict[str, Any]) -> "TokenAccountRecord":
        """Build a record from one getProgramAccounts result entry.

        Raises:
            KeyError: If the entry is not a jsonParsed token account.
            TypeError: If a nested field has an unexpected type.
        """
        info = account["account"]["data"]["parsed"]["info"]
        token_amount = info["tokenAmount"]
        return cls(
            pubkey=account["pubkey"],
            owner=info["owner"],
            mint=info["mint"],
            amount=token_amount.get("amount", "0"),
            ui_amount=token_amount.get("uiAmount"),
        )

    @property
    def is_empty(self) -> bool:
        """True when the displayed balance is exactly zero."""
        return self.ui_amount == 0


class TokenAccountList(BaseModel):
    """Wrapper for the token accounts returned by a single scan.

    Attributes:
        accounts: List of TokenAccountRecord objects.
    """

    accounts: list[TokenAccountRecord] = Field(
        default_factory=list, description="List of token accounts"
    )

    @property
    def count(self) -> int:
        """Get number of token accounts in list."""
        return len(self.accounts)

    @property
    def empty_accounts(self) -> list[TokenAccountRecord]:
        """Accounts eligible for closing."""
        return [acc for acc in self.accounts if acc.is_empty]
