"""Shared pytest configuration and fixtures."""

import asyncio

import pytest


class Recorder:
    """Tracks how task functions overlap while a queue runs them."""

    def __init__(self):
        self.started: list = []
        self.finished: list = []
        self.active = 0
        self.max_active = 0

    def enter(self, name) -> None:
        self.started.append(name)
        self.active += 1
        self.max_active = max(self.max_active, self.active)

    def exit(self, name) -> None:
        self.active -= 1
        self.finished.append(name)

    def sleeper(self):
        """Return an async task function that sleeps and returns its duration."""

        async def sleep_task(name, duration: float = 0.0):
            self.enter(name)
            try:
                await asyncio.sleep(duration)
            finally:
                self.exit(name)
            return duration

        return sleep_task

    def gated(self, gate: asyncio.Event):
        """Return an async task function that blocks until ``gate`` is set."""

        async def gated_task(name):
            self.enter(name)
            try:
                await gate.wait()
            finally:
                self.exit(name)
            return name

        return gated_task


@pytest.fixture
def recorder():
    """Fresh Recorder for each test."""
    return Recorder()


@pytest.fixture
def gate():
    """Event used to hold gated tasks open until the test releases them."""
    return asyncio.Event()
