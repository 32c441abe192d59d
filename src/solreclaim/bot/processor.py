"""Update processor serialising updates per user.

Updates from different users run concurrently; updates from the same
user run one at a time, in arrival order.
"""

import asyncio
from collections.abc import Awaitable
from typing import Any

from telegram import Update
from telegram.ext import BaseUpdateProcessor


class PerUserUpdateProcessor(BaseUpdateProcessor):
    """Concurrent across users, sequential within a user.

    An update first waits for its user's turn and only then for one of the
    `max_concurrent_updates` slots, so a backlog from one user never holds
    slots other users need. A user's lock exists only while that user has
    updates pending.
    """

    def __init__(self, max_concurrent_updates: int = 256) -> None:
        super().__init__(max_concurrent_updates)
        self._locks: dict[int | None, asyncio.Lock] = {}
        self._pending: dict[int | None, int] = {}

    @staticmethod
    def _user_key(update: object) -> int | None:
        user = update.effective_user if isinstance(update, Update) else None
        return user.id if user is not None else None

    async def process_update(self, update: object, coroutine: Awaitable[Any]) -> None:
        key = self._user_key(update)
        lock = self._locks.get(key)
        if lock is None:
            lock = self._locks[key] = asyncio.Lock()
        self._pending[key] = self._pending.get(key, 0) + 1

        try:
            async with lock:
                await super().process_update(update, coroutine)
        finally:
            self._pending[key] -= 1
            if not self._pending[key]:
                del self._pending[key]
                del self._locks[key]

    async def do_process_update(self, update: object, coroutine: Awaitable[Any]) -> None:
        await coroutine

    async def initialize(self) -> None:
        pass

    async def shutdown(self) -> None:
        pass
