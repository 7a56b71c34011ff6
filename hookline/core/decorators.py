"""Decorator form of tap."""

from typing import Callable, TypeVar

from hookline.hooks import Hook

F = TypeVar("F", bound=Callable)


def on(target: Hook) -> Callable[[F], F]:
    """Decorator to tap a function onto a hook.

    The function is returned unchanged, with the unregister callable
    attached as ``fn.unregister``. Callables that do not accept attributes
    (bound methods, builtins) are rejected and left untapped; tap those
    with ``hook.tap`` directly.

    Example
    -------
    @on(hooks["on_start"])
    async def announce():
        return "started"
    """

    def decorator(fn: F) -> F:
        unregister = target.tap(fn)
        try:
            fn.unregister = unregister
        except (AttributeError, TypeError):
            unregister()
            raise
        return fn

    return decorator
