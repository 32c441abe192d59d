"""Unit tests for the partner statistics client."""

import httpx
import pytest
import respx

from solreclaim.config.settings import Settings
from solreclaim.core.exceptions import (
    PartnerApiError,
    PartnerNotFoundError,
    ReferralCodeMissingError,
)
from solreclaim.services.partner.client import PartnerStatsClient, extract_referral_code

STATS_URL = "https://partner.test/api/partners/abc123/stats"


class TestExtractReferralCode:
    """Tests for extract_referral_code."""

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("https://solrebound.com/?ref=abc123", "abc123"),
            ("https://solrebound.com/claim?utm=x&ref=Z9", "Z9"),
            ("https://solrebound.com/?ref=first&ref=second", "first"),
        ],
    )
    def test_reads_ref_param(self, url: str, expected: str) -> None:
        assert extract_referral_code(url) == expected

    @pytest.mark.parametrize(
        "url",
        [
            "https://solrebound.com/",
            "https://solrebound.com/?code=abc",
            "https://solrebound.com/?ref=",
            "https://solrebound.com/ref/abc123",
        ],
    )
    def test_missing_ref_returns_none(self, url: str) -> None:
        assert extract_referral_code(url) is None


@pytest.fixture
async def partner_client(settings: Settings):
    client = PartnerStatsClient(settings)
    yield client
    await client.close()


class TestGetStats:
    """Tests for PartnerStatsClient.get_stats / get_configured_stats."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_success(self, partner_client: PartnerStatsClient) -> None:
        route = respx.get(STATS_URL).mock(
            return_value=httpx.Response(
                200, json={"userCount": 50, "transactionCount": 120, "totalEarningsSOL": 0.15}
            )
        )

        stats = await partner_client.get_configured_stats()

        assert route.call_count == 1
        assert stats.user_count == 50
        assert stats.transaction_count == 120
        assert stats.total_earnings_sol == 0.15

    @pytest.mark.asyncio
    @respx.mock
    async def test_404_raises_not_found(self, partner_client: PartnerStatsClient) -> None:
        respx.get(STATS_URL).mock(return_value=httpx.Response(404, json={"error": "not found"}))

        with pytest.raises(PartnerNotFoundError):
            await partner_client.get_stats("abc123")

    @pytest.mark.asyncio
    @respx.mock
    async def test_server_error_raises_generic(self, partner_client: PartnerStatsClient) -> None:
        respx.get(STATS_URL).mock(return_value=httpx.Response(500))

        with pytest.raises(PartnerApiError) as exc_info:
            await partner_client.get_stats("abc123")

        assert not isinstance(exc_info.value, PartnerNotFoundError)

    @pytest.mark.asyncio
    @respx.mock
    async def test_malformed_body_raises_generic(self, partner_client: PartnerStatsClient) -> None:
        respx.get(STATS_URL).mock(return_value=httpx.Response(200, json={"users": 1}))

        with pytest.raises(PartnerApiError):
            await partner_client.get_stats("abc123")

    @pytest.mark.asyncio
    async def test_missing_referral_code_makes_no_request(self, settings: Settings) -> None:
        """No `ref` in the link: ReferralCodeMissingError and zero HTTP calls."""
        client = PartnerStatsClient(
            settings.model_copy(update={"partner_referral_link": "https://partner.test/"})
        )

        with respx.mock(assert_all_called=False) as mock:
            route = mock.get(url__regex=r".*")
            with pytest.raises(ReferralCodeMissingError):
                await client.get_configured_stats()

        assert route.call_count == 0
        await client.close()
