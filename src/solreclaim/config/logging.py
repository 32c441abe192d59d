"""Logging configuration using structlog.

The bot's own events and the standard-library records emitted by
python-telegram-bot and httpx share one renderer. Telegram API URLs carry
the bot token, so configured secrets are masked in every rendered value.
"""

import logging
import sys
from collections.abc import Iterable

import structlog
from structlog.typing import EventDict, Processor

from solreclaim.config.settings import Settings

SECRET_MASK = "***"

# Loggers that report each HTTP round trip at INFO
CHATTY_LOGGERS = ("httpx", "httpcore", "telegram.ext.Updater")


def mask_secrets(secrets: Iterable[str]) -> Processor:
    """Build a processor replacing each secret in string values with SECRET_MASK."""
    needles = [s for s in secrets if s]

    def processor(_logger: object, _method: str, event_dict: EventDict) -> EventDict:
        for key, value in event_dict.items():
            if isinstance(value, str):
                for needle in needles:
                    value = value.replace(needle, SECRET_MASK)
                event_dict[key] = value
        return event_dict

    return processor


def configure_logging(settings: Settings) -> None:
    """Configure structlog and route library logging through it."""
    log_level = getattr(logging, settings.log_level)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        mask_secrets(
            [
                settings.bot_token.get_secret_value(),
                settings.cmc_api_key.get_secret_value(),
            ]
        ),
    ]
    renderer: Processor = (
        structlog.dev.ConsoleRenderer()
        if settings.debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=[structlog.stdlib.add_logger_name, *shared_processors],
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(log_level)

    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))
