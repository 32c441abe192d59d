"""Per-user conversation state.

Each user is either IDLE or AWAITING_ADDRESS. Only awaiting users are
stored; absence means IDLE. State lives in memory and is lost on restart.
"""

from enum import Enum

import structlog

log = structlog.get_logger(__name__)


class SessionState(str, Enum):
    """Conversation states."""

    IDLE = "idle"
    AWAITING_ADDRESS = "awaiting_address"


class SessionStore:
    """In-memory session state keyed by Telegram user id.

    Transitions are synchronous, so no await can interleave between
    reading and clearing a user's state.
    """

    def __init__(self) -> None:
        self._awaiting: set[int] = set()

    def state(self, user_id: int) -> SessionState:
        """Current state of a user."""
        if user_id in self._awaiting:
            return SessionState.AWAITING_ADDRESS
        return SessionState.IDLE

    def begin_scan(self, user_id: int) -> None:
        """IDLE -> AWAITING_ADDRESS (idempotent)."""
        self._awaiting.add(user_id)
        log.debug("session_awaiting_address", user_id=user_id)

    def consume(self, user_id: int) -> bool:
        """Consume a text message: reset to IDLE.

        Returns:
            True if the user was AWAITING_ADDRESS, i.e. the message is
            an address to scan.
        """
        if user_id not in self._awaiting:
            return False
        self._awaiting.discard(user_id)
        log.debug("session_address_consumed", user_id=user_id)
        return True

