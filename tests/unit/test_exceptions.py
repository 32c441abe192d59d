"""Tests for SolReclaim exception hierarchy."""

import pytest

from solreclaim.core.exceptions import (
    ChainQueryError,
    ConfigurationError,
    ExternalServiceError,
    InvalidAddressError,
    PartnerApiError,
    PartnerNotFoundError,
    PriceSourceError,
    ReferralCodeMissingError,
    SolReclaimError,
    ValidationError,
)


class TestSolReclaimError:
    """Tests for base SolReclaimError exception."""

    def test_is_exception(self) -> None:
        assert issubclass(SolReclaimError, Exception)

    def test_str_representation(self) -> None:
        error = SolReclaimError("Something went wrong")
        assert str(error) == "Something went wrong"

    @pytest.mark.parametrize(
        "exc_class",
        [
            ConfigurationError,
            ValidationError,
            InvalidAddressError,
            ExternalServiceError,
            ChainQueryError,
            PriceSourceError,
            PartnerApiError,
            PartnerNotFoundError,
            ReferralCodeMissingError,
        ],
    )
    def test_all_errors_inherit_from_base(self, exc_class: type) -> None:
        assert issubclass(exc_class, SolReclaimError)


class TestInvalidAddressError:
    """Tests for InvalidAddressError."""

    def test_is_validation_error(self) -> None:
        assert issubclass(InvalidAddressError, ValidationError)

    def test_keeps_raw_address(self) -> None:
        error = InvalidAddressError("bad address", raw_address="not-a-key")

        assert error.raw_address == "not-a-key"
        assert str(error) == "bad address"


class TestExternalServiceError:
    """Tests for ExternalServiceError."""

    def test_message_includes_service(self) -> None:
        """
        Given: ExternalServiceError with service and message
        When: Converting to string
        Then: Service name prefixes the message
        """
        error = ExternalServiceError(service="coinmarketcap", message="Unauthorized", status_code=401)

        assert str(error) == "coinmarketcap: Unauthorized"
        assert error.service == "coinmarketcap"
        assert error.status_code == 401

    def test_status_code_defaults_to_none(self) -> None:
        error = ExternalServiceError(service="solana_rpc", message="timeout")
        assert error.status_code is None


class TestChainQueryError:
    """Tests for ChainQueryError."""

    def test_wallet_address_optional(self) -> None:
        assert ChainQueryError("boom").wallet_address is None
        assert ChainQueryError("boom", wallet_address="abc").wallet_address == "abc"


class TestPartnerErrors:
    """Tests for partner API error family."""

    def test_not_found_and_missing_code_are_partner_errors(self) -> None:
        assert issubclass(PartnerNotFoundError, PartnerApiError)
        assert issubclass(ReferralCodeMissingError, PartnerApiError)
