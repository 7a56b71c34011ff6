"""Handler signatures and the capability interface shared by all hooks."""

from typing import Any, Awaitable, Callable, Protocol, TypeVar, Union, runtime_checkable

T = TypeVar("T")

# Handlers may return an awaitable or a plain value
MaybeAwaitable = Union[Awaitable[T], T]

SequenceHandler = Callable[[], MaybeAwaitable[T]]
ConcurrentHandler = Callable[[], MaybeAwaitable[T]]
PipelineHandler = Callable[[T], MaybeAwaitable[T]]
RaceHandler = Callable[..., MaybeAwaitable[T]]

Unregister = Callable[[], None]


@runtime_checkable
class Hook(Protocol):
    """What every hook exposes, whatever its dispatch strategy."""

    @property
    def size(self) -> int: ...

    def tap(self, handler: Callable[..., Any]) -> Unregister: ...

    def trigger(self, *args: Any, **kwargs: Any) -> Awaitable[Any]: ...

    def clear(self) -> None: ...
