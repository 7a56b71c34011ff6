"""Hook strategies and the handler registry beneath them."""

from .base import BaseHook
from .concurrent import ConcurrentHook
from .pipeline import PipelineHook
from .race import NoHandlersError, RaceHook
from .registry import HandlerRegistry, HookError, generate_id
from .sequence import SequenceHook
from .types import (
    ConcurrentHandler,
    Hook,
    PipelineHandler,
    RaceHandler,
    SequenceHandler,
    Unregister,
)

__all__ = [
    "BaseHook",
    "ConcurrentHandler",
    "ConcurrentHook",
    "HandlerRegistry",
    "Hook",
    "HookError",
    "NoHandlersError",
    "PipelineHandler",
    "PipelineHook",
    "RaceHandler",
    "RaceHook",
    "SequenceHandler",
    "SequenceHook",
    "Unregister",
    "generate_id",
]
