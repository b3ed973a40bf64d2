"""
Middleware for Telegram bot.

- ThrottlingMiddleware: rate limiting
- SessionMiddleware: injects the caller's SessionContext into handler data
"""

import time
import logging
from typing import Any, Awaitable, Callable, Dict
from collections import defaultdict

from aiogram import BaseMiddleware
from aiogram.types import Message, CallbackQuery, TelegramObject

from config.features import features
from core.domain.constants import RATE_LIMIT_INTERVAL_SECONDS
from core.services.session import SessionRegistry
from locales import t

logger = logging.getLogger(__name__)


def _event_user(event: TelegramObject):
    if isinstance(event, (Message, CallbackQuery)):
        return event.from_user
    return None


class ThrottlingMiddleware(BaseMiddleware):
    """
    Simple rate limiter: tracks request timestamps per user.
    Drops requests that exceed the limit within the interval.
    """

    def __init__(
        self,
        limit: int = features.RATE_LIMIT_PER_MINUTE,
        interval: int = RATE_LIMIT_INTERVAL_SECONDS,
    ):
        self.limit = limit
        self.interval = interval
        # {user_id: [timestamp, timestamp, ...]}
        self._requests: Dict[int, list] = defaultdict(list)

    def _cleanup(self, user_id: int, now: float):
        """Remove expired timestamps."""
        cutoff = now - self.interval
        self._requests[user_id] = [
            ts for ts in self._requests[user_id] if ts > cutoff
        ]

    async def __call__(
        self,
        handler: Callable[[TelegramObject, Dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: Dict[str, Any],
    ) -> Any:
        user = _event_user(event)
        if not user:
            return await handler(event, data)

        user_id = user.id
        now = time.monotonic()
        self._cleanup(user_id, now)

        if len(self._requests[user_id]) >= self.limit:
            logger.warning(f"Rate limit hit for user {user_id} (limit={self.limit})")
            if isinstance(event, Message):
                await event.answer(t("throttled"))
            elif isinstance(event, CallbackQuery):
                await event.answer(t("throttled"), show_alert=False)
            return  # Drop the request

        self._requests[user_id].append(now)
        return await handler(event, data)


class SessionMiddleware(BaseMiddleware):
    """
    Adds `session` (this user's SessionContext) and `sessions` (the registry)
    to handler kwargs.
    """

    def __init__(self, registry: SessionRegistry):
        self.registry = registry

    async def __call__(
        self,
        handler: Callable[[TelegramObject, Dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: Dict[str, Any],
    ) -> Any:
        user = _event_user(event)
        if user:
            data["session"] = self.registry.get(user.id)
        data["sessions"] = self.registry
        return await handler(event, data)
