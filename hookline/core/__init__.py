"""Declarative construction of hook collections."""

from .builder import HookBuilder, define_hooks
from .decorators import on
from .factory import HookCollection, concurrent, create_hooks, pipeline, race, sequence

__all__ = [
    "HookBuilder",
    "HookCollection",
    "concurrent",
    "create_hooks",
    "define_hooks",
    "on",
    "pipeline",
    "race",
    "sequence",
]
