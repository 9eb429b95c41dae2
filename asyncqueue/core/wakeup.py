"""Single-slot deferred callback on the running event loop."""

import asyncio
from collections.abc import Callable


class Wakeup:
    """Arms at most one pending call of ``callback`` at a time.

    A request made while a call is already armed is absorbed, with one
    exception: an immediate request replaces an armed delayed one, so a
    backoff never holds up work that can start now.
    """

    def __init__(self, callback: Callable[[], None]):
        self._callback = callback
        self._handle: asyncio.Handle | None = None
        self._delayed = False

    @property
    def pending(self) -> bool:
        return self._handle is not None

    @property
    def delayed(self) -> bool:
        return self._handle is not None and self._delayed

    def schedule(self, delay: float = 0.0) -> bool:
        """Arm the callback to run after ``delay`` seconds (0 = next loop turn).

        Returns:
            True if a new call was armed, False if the request was absorbed
        """
        if self._handle is not None:
            if delay > 0 or not self._delayed:
                return False
            self._handle.cancel()

        loop = asyncio.get_running_loop()
        if delay > 0:
            self._handle = loop.call_later(delay, self._fire)
            self._delayed = True
        else:
            self._handle = loop.call_soon(self._fire)
            self._delayed = False
        return True

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
        self._handle = None
        self._delayed = False

    def _fire(self) -> None:
        # Cleared first so the callback can re-arm
        self._handle = None
        self._delayed = False
        self._callback()
