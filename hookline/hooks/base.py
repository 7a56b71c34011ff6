"""Base infrastructure shared by all hook strategies."""

import inspect
import time
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar

from loguru import logger

from hookline.config import DispatchConfig, config

from .registry import H, HandlerRegistry, handler_name
from .types import Unregister

R = TypeVar("R")


class BaseHook(ABC, Generic[H, R]):
    """Foundation for every dispatch strategy.

    Owns a HandlerRegistry and delegates tap/size/clear to it. Subclasses
    only implement trigger(), which must take its snapshot of the
    registry synchronously before returning the awaitable.
    """

    def __init__(
        self,
        dispatch: Optional[DispatchConfig] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ) -> None:
        """Initialize an empty hook.

        Parameters
        ----------
        dispatch : DispatchConfig, optional
            Per-hook dispatch settings. Defaults to the library config.
        id_factory : callable, optional
            Unique ID generator handed to the registry.
        """
        self._dispatch = dispatch
        self._registry: HandlerRegistry[H] = HandlerRegistry(id_factory=id_factory)

    @property
    def dispatch(self) -> DispatchConfig:
        """Dispatch settings in effect for this hook."""
        return self._dispatch or config.dispatch

    @property
    def size(self) -> int:
        """Number of currently registered handlers."""
        return self._registry.size

    def tap(self, handler: H) -> Unregister:
        """Register a handler; returns a function that unregisters it."""
        return self._registry.tap(handler)

    def clear(self) -> None:
        """Remove all handlers. Triggers already running are unaffected."""
        self._registry.clear()

    @abstractmethod
    def trigger(self, *args: Any, **kwargs: Any) -> Awaitable[R]:
        """Run the registered handlers and return the aggregated result."""

    async def _invoke(self, handler: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """Call one handler, awaiting its result if it returned an awaitable.

        Failures are logged and re-raised untouched.
        """
        start = time.perf_counter()
        try:
            result = handler(*args, **kwargs)
            if inspect.isawaitable(result):
                result = await result
        except Exception as e:
            logger.debug(f"{type(self).__name__} handler '{handler_name(handler)}' failed: {e!r}")
            raise
        finally:
            self._check_duration(handler, start)
        return result

    def _check_duration(self, handler: Callable[..., Any], start: float) -> None:
        threshold = self.dispatch.slow_handler_warning_ms
        if not threshold:
            return
        duration_ms = (time.perf_counter() - start) * 1000
        if duration_ms > threshold:
            logger.warning(
                f"{type(self).__name__} handler '{handler_name(handler)}' took "
                f"{duration_ms:.0f}ms (threshold: {threshold:.0f}ms)"
            )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size})"
