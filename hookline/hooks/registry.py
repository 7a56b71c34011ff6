"""Handler registry shared by every hook strategy.

Uses a simple insertion-ordered dict keyed by opaque string IDs.
"""

import uuid
from typing import Callable, Generic, Iterator, Optional, TypeVar

from loguru import logger

from .types import Unregister

H = TypeVar("H", bound=Callable)

# Regeneration attempts before giving up on a colliding ID
MAX_ID_ATTEMPTS = 8


class HookError(Exception):
    """Raised when the hook machinery itself fails (never for handler errors)."""

    pass


def generate_id() -> str:
    """Return a collision-resistant unique string."""
    return uuid.uuid4().hex


def handler_name(handler: Callable) -> str:
    """Best-effort readable name for a handler, for log messages."""
    return getattr(handler, "__qualname__", None) or getattr(handler, "__name__", repr(handler))


class HandlerRegistry(Generic[H]):
    """Stores registered handlers in insertion order.

    Every trigger reads a snapshot taken synchronously when it is called,
    so unregistering or clearing never affects a trigger already in flight.
    """

    def __init__(self, id_factory: Optional[Callable[[], str]] = None) -> None:
        """Initialize an empty registry.

        Parameters
        ----------
        id_factory : callable, optional
            Zero-argument function returning a unique string. Defaults to
            a uuid4 hex generator.
        """
        self._id_factory = id_factory or generate_id
        self._handlers: dict[str, H] = {}
        # Token per live ID; an unregister only removes the entry holding its token
        self._tokens: dict[str, object] = {}

    @property
    def size(self) -> int:
        """Number of currently registered handlers."""
        return len(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    def __iter__(self) -> Iterator[H]:
        return iter(list(self._handlers.values()))

    def __contains__(self, handler_id: object) -> bool:
        return handler_id in self._handlers

    def _new_id(self) -> str:
        for _ in range(MAX_ID_ATTEMPTS):
            handler_id = self._id_factory()
            if handler_id not in self._handlers:
                return handler_id
            logger.debug(f"Handler ID collision on {handler_id}, regenerating")
        raise HookError(f"Could not generate a unique handler ID after {MAX_ID_ATTEMPTS} attempts")

    def tap(self, handler: H) -> Unregister:
        """Register a handler.

        Parameters
        ----------
        handler : callable
            The handler to store.

        Returns
        -------
        callable
            Zero-argument function removing exactly this registration.
            Calling it again, or after clear(), does nothing.
        """
        handler_id = self._new_id()
        token = object()
        self._handlers[handler_id] = handler
        self._tokens[handler_id] = token
        logger.debug(f"Tapped handler '{handler_name(handler)}' as {handler_id} (total: {len(self._handlers)})")

        def unregister() -> None:
            if self._tokens.get(handler_id) is not token:
                return
            del self._tokens[handler_id]
            del self._handlers[handler_id]
            logger.debug(f"Untapped handler {handler_id} (total: {len(self._handlers)})")

        return unregister

    def snapshot(self) -> list[H]:
        """Handlers registered right now, in insertion order."""
        return list(self._handlers.values())

    def clear(self) -> None:
        """Remove every handler."""
        count = len(self._handlers)
        self._handlers.clear()
        self._tokens.clear()
        if count:
            logger.debug(f"Cleared {count} handlers")
