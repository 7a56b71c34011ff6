"""Sequence hook: handlers run one after another in registration order."""

from typing import Awaitable

from loguru import logger

from .base import BaseHook
from .types import SequenceHandler, T


class SequenceHook(BaseHook[SequenceHandler[T], list[T]]):
    """Runs handlers strictly one at a time.

    Each handler is fully awaited before the next one starts, so later
    handlers observe the side effects of earlier ones. The first failure
    aborts the trigger and no further handler is invoked.
    """

    def trigger(self) -> Awaitable[list[T]]:
        """Run all handlers in sequence.

        Returns
        -------
        Awaitable[list[T]]
            Resolves to one result per handler, in invocation order.
        """
        return self._run(self._registry.snapshot())

    async def _run(self, handlers: list[SequenceHandler[T]]) -> list[T]:
        logger.debug(f"Triggering sequence hook with {len(handlers)} handlers")
        results: list[T] = []
        for handler in handlers:
            results.append(await self._invoke(handler))
        return results
