"""Factory functions for declaring a collection of hooks.

Example
-------
>>> hooks = create_hooks(
...     on_init=sequence(),
...     transform=pipeline(),
... )
>>> unregister = hooks["on_init"].tap(lambda: "ready")
"""

from types import MappingProxyType
from typing import Mapping, Optional

from hookline.hooks import ConcurrentHook, Hook, PipelineHook, RaceHook, SequenceHook

HookCollection = Mapping[str, Hook]


def sequence() -> SequenceHook:
    """New empty hook whose handlers run one after another."""
    return SequenceHook()


def concurrent() -> ConcurrentHook:
    """New empty hook whose handlers run all at once."""
    return ConcurrentHook()


def pipeline() -> PipelineHook:
    """New empty hook that threads a value through its handlers."""
    return PipelineHook()


def race() -> RaceHook:
    """New empty hook settled by whichever handler finishes first."""
    return RaceHook()


def create_hooks(hooks: Optional[Mapping[str, Hook]] = None, /, **named_hooks: Hook) -> HookCollection:
    """Collect named hooks into a read-only mapping.

    Parameters
    ----------
    hooks : Mapping[str, Hook], optional
        Hooks keyed by name.
    **named_hooks : Hook
        More hooks, passed as keyword arguments.

    Returns
    -------
    Mapping[str, Hook]
        Read-only view of the hooks. The collection cannot change, but each
        hook can still be tapped and cleared.

    Raises
    ------
    TypeError
        If a value does not provide tap/trigger/size/clear.
    """
    collected = dict(hooks or {})
    collected.update(named_hooks)
    for name, hook in collected.items():
        if not isinstance(hook, Hook):
            raise TypeError(f"Hook '{name}' must provide tap/trigger/size/clear, got {type(hook).__name__}")
    return MappingProxyType(collected)
