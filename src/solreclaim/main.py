"""SolReclaim - bot entry point."""

import sys

import structlog
from telegram import Update

from solreclaim.bot.app import build_application
from solreclaim.config.logging import configure_logging
from solreclaim.config.settings import load_settings
from solreclaim.core.exceptions import ConfigurationError

log = structlog.get_logger()


def main() -> None:
    """Load settings, then poll Telegram until SIGINT/SIGTERM.

    Exits with status 1 if configuration is missing or invalid.
    """
    try:
        settings = load_settings()
    except ConfigurationError as e:
        log.error("configuration_invalid", error=str(e))
        sys.exit(1)

    configure_logging(settings)
    application = build_application(settings)

    log.info("bot_polling_started", app_name=settings.app_name)
    application.run_polling(allowed_updates=Update.ALL_TYPES)


if __name__ == "__main__":
    main()
