"""Unit tests for asyncqueue.core.task module."""

import asyncio

import pytest

from asyncqueue.core.task import Task


class TestTask:
    """Tests for Task settlement."""

    @pytest.mark.asyncio
    async def test_binds_arguments(self):
        """Test that func, args and kwargs are stored as given."""

        def func(a, b=None):
            return a, b

        task = Task(func, (1,), {"b": 2})
        assert task.func is func
        assert task.args == (1,)
        assert task.kwargs == {"b": 2}
        assert task.next is None
        assert isinstance(task.future, asyncio.Future)

    @pytest.mark.asyncio
    async def test_resolve(self):
        """Test resolving the future with a value."""
        task = Task(lambda: None)
        task.resolve(5)
        assert await task.future == 5

    @pytest.mark.asyncio
    async def test_reject(self):
        """Test rejecting the future with an exception."""
        task = Task(lambda: None)
        task.reject(ValueError("bad"))
        with pytest.raises(ValueError, match="bad"):
            await task.future

    @pytest.mark.asyncio
    async def test_settles_only_once(self):
        """Test that a second settle is ignored."""
        task = Task(lambda: None)
        task.resolve("first")
        task.resolve("second")
        task.reject(ValueError("late"))
        assert await task.future == "first"

    @pytest.mark.asyncio
    async def test_settle_after_cancel_is_ignored(self):
        """Test that settling a cancelled future does not raise."""
        task = Task(lambda: None)
        task.future.cancel()
        assert task.cancelled
        task.resolve("value")
        task.reject(ValueError("err"))
        assert task.future.cancelled()

    @pytest.mark.asyncio
    async def test_reject_wraps_stop_iteration(self):
        """Test that StopIteration is delivered as RuntimeError."""
        task = Task(lambda: None)
        original = StopIteration()
        task.reject(original)
        error = task.future.exception()
        assert isinstance(error, RuntimeError)
        assert error.__cause__ is original
