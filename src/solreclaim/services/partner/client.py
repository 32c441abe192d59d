"""Partner statistics client for the claim platform."""

from urllib.parse import parse_qs, quote, urlparse

import structlog
from pydantic import ValidationError

from solreclaim.config.settings import Settings, get_settings
from solreclaim.constants.partner import PARTNER_STATS_PATH, REFERRAL_QUERY_PARAM
from solreclaim.core.exceptions import (
    ExternalServiceError,
    PartnerApiError,
    PartnerNotFoundError,
    ReferralCodeMissingError,
)
from solreclaim.models.partner import PartnerStats
from solreclaim.services.base import BaseAPIClient

log = structlog.get_logger(__name__)


def extract_referral_code(referral_url: str) -> str | None:
    """Read the referral code from a referral link.

    Example:
        >>> extract_referral_code("https://solrebound.com/?ref=abc123")
        'abc123'
        >>> extract_referral_code("https://solrebound.com/") is None
        True
    """
    values = parse_qs(urlparse(referral_url).query).get(REFERRAL_QUERY_PARAM)
    if not values or not values[0].strip():
        return None
    return values[0].strip()


class PartnerStatsClient(BaseAPIClient):
    """Read-only client for the partner statistics endpoint."""

    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or get_settings()
        super().__init__(
            base_url=settings.partner_api_url,
            timeout=settings.http_timeout_seconds,
            headers={"Accept": "application/json"},
            service_name="partner_api",
        )
        self.referral_url = settings.partner_referral_link

    async def get_stats(self, referral_code: str) -> PartnerStats:
        """Fetch statistics for a referral code.

        Raises:
            PartnerNotFoundError: If the API answers 404.
            PartnerApiError: On any other failure.
        """
        path = PARTNER_STATS_PATH.format(code=quote(referral_code, safe=""))
        try:
            response = await self.get(path)
            stats = PartnerStats.model_validate(response.json())
        except ExternalServiceError as e:
            if e.status_code == 404:
                log.info("partner_stats_not_found", referral_code=referral_code)
                raise PartnerNotFoundError(
                    f"No partner found for referral code {referral_code!r}"
                ) from e
            raise PartnerApiError(f"Partner stats request failed: {e}") from e
        except (ValidationError, ValueError) as e:
            log.warning("partner_stats_malformed", error=str(e))
            raise PartnerApiError("Partner stats response is malformed") from e

        log.info(
            "partner_stats_fetched",
            referral_code=referral_code,
            user_count=stats.user_count,
            transaction_count=stats.transaction_count,
        )
        return stats

    async def get_configured_stats(self) -> PartnerStats:
        """Fetch statistics for the referral code in the configured link.

        Raises:
            ReferralCodeMissingError: If the link has no `ref` parameter.
                No request is made in that case.
            PartnerNotFoundError: If the API answers 404.
            PartnerApiError: On any other failure.
        """
        code = extract_referral_code(self.referral_url)
        if code is None:
            raise ReferralCodeMissingError("Could not extract referral code from link")
        return await self.get_stats(code)
