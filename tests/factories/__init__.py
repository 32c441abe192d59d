"""Test data builders for Solana RPC payloads."""

from tests.factories.token_account import (
    SOL_MINT,
    WALLET_ADDRESS,
    make_rpc_response,
    make_token_account,
)

__all__ = ["SOL_MINT", "WALLET_ADDRESS", "make_rpc_response", "make_token_account"]
