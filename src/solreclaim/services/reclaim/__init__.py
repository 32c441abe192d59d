"""Wallet scan service."""

from solreclaim.services.reclaim.scanner import WalletScanner

__all__ = ["WalletScanner"]
