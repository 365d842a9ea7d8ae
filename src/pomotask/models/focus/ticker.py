"""Tick sources that drive the Pomodoro timer.

A tick source calls a callback once per interval until the returned handle is
cancelled. The timer owns at most one handle at a time; cancelling is
synchronous, so no callback runs after ``cancel()`` returns.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Protocol

TickCallback = Callable[[], None]


class TickHandle(Protocol):
    """A running periodic callback."""

    def cancel(self) -> None:
        """Stop the callback. Idempotent."""
        ...


class TickSource(Protocol):
    """Factory of periodic callbacks."""

    def start(self, interval: float, callback: TickCallback) -> TickHandle:
        """Call *callback* every *interval* seconds until the handle is cancelled."""
        ...


class _AsyncioTickHandle:
    def __init__(
        self, loop: asyncio.AbstractEventLoop, interval: float, callback: TickCallback
    ):
        self._loop = loop
        self._interval = interval
        self._callback = callback
        self._cancelled = False
        # Deadlines advance from the previous deadline so ticks do not drift
        self._deadline = loop.time() + interval
        self._timer: asyncio.TimerHandle | None = loop.call_at(self._deadline, self._fire)

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def _fire(self) -> None:
        self._timer = None
        if self._cancelled:
            return
        self._callback()
        # The callback may have cancelled this handle
        if self._cancelled:
            return
        self._deadline += self._interval
        self._timer = self._loop.call_at(self._deadline, self._fire)

    def cancel(self) -> None:
        self._cancelled = True
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None


class AsyncioTickSource:
    """Ticks on an asyncio event loop, single-threaded."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        """Initialize the tick source.

        Args:
            loop: Event loop to schedule on. When omitted, the running loop at
                the time :meth:`start` is called is used.
        """
        self._loop = loop

    def start(self, interval: float, callback: TickCallback) -> _AsyncioTickHandle:
        loop = self._loop or asyncio.get_running_loop()
        return _AsyncioTickHandle(loop, interval, callback)


class _ManualTickHandle:
    def __init__(self, source: "ManualTickSource", callback: TickCallback):
        self._source = source
        self.callback = callback
        self.active = True

    def cancel(self) -> None:
        if self.active:
            self.active = False
            self._source._handles.remove(self)


class ManualTickSource:
    """Tick source fired explicitly by the caller.

    Useful for driving a timer from an existing loop (a UI frame callback) and
    for deterministic tests::

        ticks = ManualTickSource()
        timer = PomodoroTimer(ticks)
        timer.start_focus()
        ticks.advance(60)
    """

    def __init__(self) -> None:
        self._handles: list[_ManualTickHandle] = []
        self.started = 0

    @property
    def active_handles(self) -> int:
        """Number of handles that have not been cancelled."""
        return len(self._handles)

    def start(self, interval: float, callback: TickCallback) -> _ManualTickHandle:
        handle = _ManualTickHandle(self, callback)
        self._handles.append(handle)
        self.started += 1
        return handle

    def advance(self, ticks: int = 1) -> None:
        """Fire every active handle *ticks* times."""
        for _ in range(ticks):
            for handle in list(self._handles):
                if handle.active:
                    handle.callback()
