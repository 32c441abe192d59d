"""Services shared by all Telegram handlers.

One BotServices instance is created per process and stored in
`Application.bot_data` under SERVICES_KEY.
"""

from dataclasses import dataclass, field

import structlog
from telegram.ext import ContextTypes

from solreclaim.bot.session import SessionStore
from solreclaim.config.settings import Settings
from solreclaim.services.partner.client import PartnerStatsClient
from solreclaim.services.pricing.price_cache import PriceCache
from solreclaim.services.pricing.quote_client import QuoteClient
from solreclaim.services.reclaim.scanner import WalletScanner
from solreclaim.services.solana.rpc_client import SolanaRPCClient

log = structlog.get_logger(__name__)

SERVICES_KEY = "services"


@dataclass
class BotServices:
    """Owned collaborators of the conversation layer."""

    settings: Settings
    rpc_client: SolanaRPCClient
    quote_client: QuoteClient
    partner_client: PartnerStatsClient
    price_cache: PriceCache
    scanner: WalletScanner
    sessions: SessionStore = field(default_factory=SessionStore)

    @classmethod
    def from_settings(cls, settings: Settings) -> "BotServices":
        rpc_client = SolanaRPCClient(settings)
        quote_client = QuoteClient(settings)
        price_cache = PriceCache(quote_client)
        return cls(
            settings=settings,
            rpc_client=rpc_client,
            quote_client=quote_client,
            partner_client=PartnerStatsClient(settings),
            price_cache=price_cache,
            scanner=WalletScanner(rpc_client, price_cache),
        )

    async def aclose(self) -> None:
        """Close every HTTP client."""
        await self.rpc_client.close()
        await self.quote_client.close()
        await self.partner_client.close()
        log.debug("bot_services_closed")


def get_services(context: ContextTypes.DEFAULT_TYPE) -> BotServices:
    """Fetch the BotServices registered on the application."""
    return context.bot_data[SERVICES_KEY]
