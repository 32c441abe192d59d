"""Telegram conversation layer."""

from solreclaim.bot.app import build_application
from solreclaim.bot.context import BotServices
from solreclaim.bot.session import SessionState, SessionStore

__all__ = ["BotServices", "SessionState", "SessionStore", "build_application"]
