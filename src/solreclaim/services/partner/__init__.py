"""Claim platform partner statistics."""

from solreclaim.services.partner.client import PartnerStatsClient, extract_referral_code

__all__ = ["PartnerStatsClient", "extract_referral_code"]
