"""Pytest fixtures for hookline tests."""

import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    """Capture hookline log records as "LEVEL message" strings."""
    messages: list[str] = []
    logger.enable("hookline")
    sink_id = logger.add(lambda m: messages.append(f"{m.record['level'].name} {m.record['message']}"), level="DEBUG")
    yield messages
    logger.remove(sink_id)
    logger.disable("hookline")


@pytest.fixture
def counting_ids():
    """Deterministic ID factory yielding id-0, id-1, ..."""
    counter = iter(range(1_000_000))
    return lambda: f"id-{next(counter)}"
