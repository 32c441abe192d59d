"""Telegram application wiring."""

import structlog
from telegram.ext import (
    Application,
    ApplicationBuilder,
    CommandHandler,
    MessageHandler,
    filters,
)

from solreclaim.bot import handlers, messages
from solreclaim.bot.context import SERVICES_KEY, BotServices
from solreclaim.bot.processor import PerUserUpdateProcessor
from solreclaim.config.settings import Settings

log = structlog.get_logger(__name__)


async def _post_init(application: Application) -> None:
    services: BotServices = application.bot_data[SERVICES_KEY]
    price = await services.price_cache.get_price()
    log.info("bot_started", channel=services.settings.channel_name, sol_price_usd=price)


async def _post_shutdown(application: Application) -> None:
    services: BotServices = application.bot_data[SERVICES_KEY]
    await services.aclose()
    log.info("shutdown_complete")


def register_handlers(application: Application) -> None:
    """Attach handlers; menu buttons are matched before free text.

    Only new messages are handled. Edited messages and channel posts are
    ignored so an edit cannot stand in for the address a user is asked for.
    """
    new_message = filters.UpdateType.MESSAGE
    application.add_handler(
        CommandHandler("start", handlers.handle_start, filters=new_message)
    )
    application.add_handler(
        CommandHandler("partner_stats", handlers.handle_partner_stats, filters=new_message)
    )
    application.add_handler(
        MessageHandler(
            new_message & filters.Text([messages.CHECK_WALLET_BUTTON]),
            handlers.handle_check_wallet,
        )
    )
    application.add_handler(
        MessageHandler(new_message & filters.Text([messages.CLAIM_BUTTON]), handlers.handle_claim)
    )
    application.add_handler(
        MessageHandler(new_message & filters.TEXT & ~filters.COMMAND, handlers.handle_text)
    )
    application.add_error_handler(handlers.handle_error)


def build_application(settings: Settings, services: BotServices | None = None) -> Application:
    """Create the bot application with its services registered.

    Args:
        settings: Loaded settings.
        services: Pre-built services (tests); built from settings if omitted.
    """
    application = (
        ApplicationBuilder()
        .token(settings.bot_token.get_secret_value())
        .concurrent_updates(PerUserUpdateProcessor())
        .post_init(_post_init)
        .post_shutdown(_post_shutdown)
        .build()
    )
    application.bot_data[SERVICES_KEY] = services or BotServices.from_settings(settings)
    register_handlers(application)
    return application
