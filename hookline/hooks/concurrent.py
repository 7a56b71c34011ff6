"""Concurrent hook: all handlers start at once, results keep registration order."""

import asyncio
from typing import Awaitable

from loguru import logger

from .base import BaseHook
from .types import ConcurrentHandler, T


class ConcurrentHook(BaseHook[ConcurrentHandler[T], list[T]]):
    """Starts every handler at once and waits for all of them.

    Results are aligned to registration order, not completion order.
    The first failure reported by asyncio.gather propagates; handlers
    already running are not cancelled and finish on their own.
    """

    def trigger(self) -> Awaitable[list[T]]:
        """Run all handlers concurrently.

        Returns
        -------
        Awaitable[list[T]]
            Resolves to one result per handler, in registration order.
        """
        return self._run(self._registry.snapshot())

    async def _run(self, handlers: list[ConcurrentHandler[T]]) -> list[T]:
        logger.debug(f"Triggering concurrent hook with {len(handlers)} handlers")
        results = await asyncio.gather(*(self._invoke(handler) for handler in handlers))
        return list(results)
