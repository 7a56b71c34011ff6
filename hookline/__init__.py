"""Typed plugin hooks: register handlers with tap, run them with trigger."""

from loguru import logger

from .config import config
from .core import (
    HookBuilder,
    HookCollection,
    concurrent,
    create_hooks,
    define_hooks,
    on,
    pipeline,
    race,
    sequence,
)
from .hooks import (
    BaseHook,
    ConcurrentHook,
    HandlerRegistry,
    Hook,
    HookError,
    NoHandlersError,
    PipelineHook,
    RaceHook,
    SequenceHook,
)

# Host applications opt in with logger.enable("hookline")
if not config.LOG_ENABLED:
    logger.disable("hookline")

__all__ = [
    "BaseHook",
    "ConcurrentHook",
    "HandlerRegistry",
    "Hook",
    "HookBuilder",
    "HookCollection",
    "HookError",
    "NoHandlersError",
    "PipelineHook",
    "RaceHook",
    "SequenceHook",
    "concurrent",
    "config",
    "create_hooks",
    "define_hooks",
    "on",
    "pipeline",
    "race",
    "sequence",
]
