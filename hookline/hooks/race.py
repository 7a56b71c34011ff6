"""Race hook: the first handler to settle decides the result."""

import asyncio
from typing import Any, Awaitable, Optional

from loguru import logger

from .base import BaseHook
from .registry import HookError
from .types import RaceHandler, T

# Keep references to losing handlers so they are not garbage collected mid-flight
_orphaned_tasks: set[asyncio.Future] = set()


class NoHandlersError(HookError):
    """Raised when a race is triggered with nothing registered."""

    pass


def _track_orphan(task: asyncio.Future) -> None:
    """Let a losing handler run to completion and discard its outcome."""
    _orphaned_tasks.add(task)

    def done_callback(t: asyncio.Future) -> None:
        _orphaned_tasks.discard(t)
        if not t.cancelled():
            exc = t.exception()
            if exc:
                logger.debug(f"Discarded failure from race loser: {exc!r}")

    task.add_done_callback(done_callback)


class RaceHook(BaseHook[RaceHandler[T], Optional[T]]):
    """Runs every handler at once and settles with the first outcome.

    Whichever handler settles first, with a value or an exception, decides
    the trigger. The others are not cancelled; they finish in the background
    and whatever they produce is thrown away. If several handlers are found
    settled at the same time, the earliest registered one wins.
    """

    def trigger(self, *args: Any, **kwargs: Any) -> Awaitable[Optional[T]]:
        """Race all handlers with the same arguments.

        Returns
        -------
        Awaitable[T]
            Resolves (or fails) with the outcome of the first settled handler.
            With no handlers, fails with NoHandlersError, or resolves to None
            when the race_empty_policy is "none".
        """
        return self._run(self._registry.snapshot(), args, kwargs)

    async def _run(
        self, handlers: list[RaceHandler[T]], args: tuple, kwargs: dict[str, Any]
    ) -> Optional[T]:
        if not handlers:
            policy = self.dispatch.race_empty_policy
            logger.debug(f"Race hook triggered with no handlers (policy: {policy})")
            if policy == "none":
                return None
            raise NoHandlersError("Race hook triggered with no registered handlers")

        logger.debug(f"Triggering race hook with {len(handlers)} handlers")
        tasks = [asyncio.ensure_future(self._invoke(handler, *args, **kwargs)) for handler in handlers]
        winner: Optional[asyncio.Future] = None
        try:
            await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
            winner = next(task for task in tasks if task.done())
        finally:
            for task in tasks:
                if task is not winner:
                    _track_orphan(task)
        return winner.result()
