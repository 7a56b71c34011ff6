"""Unit tests for PipelineHook."""

import asyncio

import pytest

from hookline import PipelineHook


class TestPipelineHook:
    """Tests for PipelineHook class."""

    @pytest.mark.asyncio
    async def test_threads_value_in_order(self):
        """x + 1 then x * 2 on 3 gives 8, not 7."""
        hook = PipelineHook()

        async def add_one(x):
            return x + 1

        async def double(x):
            return x * 2

        hook.tap(add_one)
        hook.tap(double)

        assert await hook.trigger(3) == 8

    @pytest.mark.asyncio
    async def test_no_handlers_returns_input(self):
        """An empty pipeline hands back its input."""
        value = {"key": "value"}

        assert await PipelineHook().trigger(value) is value

    @pytest.mark.asyncio
    async def test_each_handler_gets_previous_output(self):
        """Handler i+1 receives exactly what handler i returned."""
        seen = []
        hook = PipelineHook()

        def record(suffix: str):
            async def handler(value):
                seen.append(value)
                await asyncio.sleep(0)
                return value + suffix

            return handler

        hook.tap(record("a"))
        hook.tap(record("b"))
        hook.tap(record("c"))

        assert await hook.trigger("") == "abc"
        assert seen == ["", "a", "ab"]

    @pytest.mark.asyncio
    async def test_failure_stops_pipeline(self):
        """Second of three handlers fails: error propagates, third never runs."""
        calls = {"count": 0}
        hook = PipelineHook()

        async def passthrough(value):
            calls["count"] += 1
            return value

        async def failing(value):
            calls["count"] += 1
            raise RuntimeError("bad transform")

        hook.tap(passthrough)
        hook.tap(failing)
        hook.tap(passthrough)

        with pytest.raises(RuntimeError, match="bad transform"):
            await hook.trigger(1)

        assert calls["count"] == 2

    @pytest.mark.asyncio
    async def test_sync_transformers_are_accepted(self):
        """Plain functions can take part in a pipeline."""
        hook = PipelineHook()
        hook.tap(str.upper)
        hook.tap(lambda s: s + "!")

        assert await hook.trigger("hi") == "HI!"

    @pytest.mark.asyncio
    async def test_unregister_during_trigger_still_runs(self):
        """A transformer removed mid-trigger still applies to that trigger."""
        hook = PipelineHook()
        unregister_double = None

        async def add_one(x):
            unregister_double()
            return x + 1

        async def double(x):
            return x * 2

        hook.tap(add_one)
        unregister_double = hook.tap(double)

        assert await hook.trigger(3) == 8
        assert await hook.trigger(3) == 4
