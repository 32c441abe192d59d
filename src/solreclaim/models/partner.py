"""Partner statistics model."""

from pydantic import BaseModel, ConfigDict, Field


class PartnerStats(BaseModel):
    """Referral statistics reported by the claim platform.

    Field aliases match the partner API JSON keys.

    Example:
        PartnerStats.model_validate(
            {"userCount": 50, "transactionCount": 120, "totalEarningsSOL": 0.15}
        )
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    user_count: int = Field(alias="userCount", ge=0)
    transaction_count: int = Field(alias="transactionCount", ge=0)
    total_earnings_sol: float = Field(alias="totalEarningsSOL", ge=0)
