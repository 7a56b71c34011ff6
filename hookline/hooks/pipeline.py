"""Pipeline hook: each handler transforms the previous handler's output."""

from typing import Awaitable

from loguru import logger

from .base import BaseHook
from .types import PipelineHandler, T


class PipelineHook(BaseHook[PipelineHandler[T], T]):
    """Threads a value through every handler in registration order.

    The first handler receives the trigger input, handler i+1 receives
    exactly what handler i produced. With no handlers the input is
    returned unchanged.
    """

    def trigger(self, value: T) -> Awaitable[T]:
        """Run the pipeline.

        Parameters
        ----------
        value : T
            Initial input for the first handler.

        Returns
        -------
        Awaitable[T]
            Resolves to the final transformed value.
        """
        return self._run(self._registry.snapshot(), value)

    async def _run(self, handlers: list[PipelineHandler[T]], value: T) -> T:
        logger.debug(f"Triggering pipeline hook with {len(handlers)} handlers")
        for handler in handlers:
            value = await self._invoke(handler, value)
        return value
