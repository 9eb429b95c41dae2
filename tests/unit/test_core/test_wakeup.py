"""Unit tests for asyncqueue.core.wakeup module."""

import asyncio

import pytest

from asyncqueue.core.wakeup import Wakeup


class TestWakeup:
    """Tests for the single-slot wakeup."""

    @pytest.mark.asyncio
    async def test_immediate_runs_on_next_turn(self):
        """Test that schedule(0) runs the callback after yielding."""
        calls = []
        wakeup = Wakeup(lambda: calls.append("fired"))

        assert wakeup.schedule(0) is True
        assert wakeup.pending
        assert not wakeup.delayed
        assert calls == []

        await asyncio.sleep(0)
        assert calls == ["fired"]
        assert not wakeup.pending

    @pytest.mark.asyncio
    async def test_duplicate_requests_are_absorbed(self):
        """Test that only one call is armed at a time."""
        calls = []
        wakeup = Wakeup(lambda: calls.append("fired"))

        assert wakeup.schedule(0) is True
        assert wakeup.schedule(0) is False
        assert wakeup.schedule(0.01) is False

        await asyncio.sleep(0.02)
        assert calls == ["fired"]

    @pytest.mark.asyncio
    async def test_delayed_requests_are_absorbed(self):
        """Test that a second delayed request keeps the first."""
        calls = []
        wakeup = Wakeup(lambda: calls.append("fired"))

        assert wakeup.schedule(0.01) is True
        assert wakeup.delayed
        assert wakeup.schedule(5.0) is False

        await asyncio.sleep(0.03)
        assert calls == ["fired"]

    @pytest.mark.asyncio
    async def test_immediate_replaces_delayed(self):
        """Test that an immediate request preempts an armed backoff."""
        calls = []
        wakeup = Wakeup(lambda: calls.append("fired"))

        wakeup.schedule(5.0)
        assert wakeup.schedule(0) is True
        assert not wakeup.delayed

        await asyncio.sleep(0)
        assert calls == ["fired"]
        assert not wakeup.pending

    @pytest.mark.asyncio
    async def test_cancel(self):
        """Test that cancel prevents the callback and is idempotent."""
        calls = []
        wakeup = Wakeup(lambda: calls.append("fired"))

        wakeup.schedule(0)
        wakeup.cancel()
        wakeup.cancel()
        assert not wakeup.pending

        await asyncio.sleep(0.01)
        assert calls == []

    @pytest.mark.asyncio
    async def test_callback_can_rearm(self):
        """Test that the slot is free while the callback runs."""
        calls = []

        def callback():
            calls.append(wakeup.pending)
            if len(calls) < 3:
                wakeup.schedule(0)

        wakeup = Wakeup(callback)
        wakeup.schedule(0)
        await asyncio.sleep(0.01)

        assert calls == [False, False, False]
