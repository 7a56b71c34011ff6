"""Builder-callback form of hook declaration."""

from typing import Callable, Mapping

from hookline.hooks import ConcurrentHook, Hook, PipelineHook, RaceHook, SequenceHook

from . import factory
from .factory import HookCollection, create_hooks


class HookBuilder:
    """Creates hooks of each strategy.

    Holds no state; it only exists so that define_hooks() can hand the
    four factory functions to a callback as one object.
    """

    def sequence(self) -> SequenceHook:
        """Hook whose handlers run one after another, each awaited in turn."""
        return factory.sequence()

    def concurrent(self) -> ConcurrentHook:
        """Hook whose handlers all start at once."""
        return factory.concurrent()

    def pipeline(self) -> PipelineHook:
        """Hook whose handlers each transform the previous one's output."""
        return factory.pipeline()

    def race(self) -> RaceHook:
        """Hook settled by the first handler to finish."""
        return factory.race()


def define_hooks(build: Callable[[HookBuilder], Mapping[str, Hook]]) -> HookCollection:
    """Declare hooks through a builder callback.

    Parameters
    ----------
    build : callable
        Receives a HookBuilder and returns hooks keyed by name.

    Returns
    -------
    Mapping[str, Hook]
        Read-only collection of the hooks the callback returned.

    Examples
    --------
    >>> hooks = define_hooks(lambda b: {"on_start": b.sequence(), "pick": b.race()})
    >>> sorted(hooks)
    ['on_start', 'pick']
    """
    return create_hooks(build(HookBuilder()))
