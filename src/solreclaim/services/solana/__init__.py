"""Solana RPC client and token account models."""

from solreclaim.services.solana.models import TokenAccountList, TokenAccountRecord
from solreclaim.services.solana.rpc_client import SolanaRPCClient

__all__ = ["SolanaRPCClient", "TokenAccountList", "TokenAccountRecord"]
