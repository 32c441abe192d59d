"""Partner (claim platform) constants."""

from typing import Final

REFERRAL_QUERY_PARAM: Final[str] = "ref"
PARTNER_STATS_PATH: Final[str] = "/partners/{code}/stats"
