# MIT License (see LICENSE)
"""
Frame scheduling adapters.

The simulation core never decides when frames happen. A running demo asks
its FrameScheduler for the next frame after each step, and pause()
cancels the pending request. The embedding environment supplies a
scheduler that maps onto its own animation loop (a GUI timer, a browser
animation frame, a game loop).

Provided implementations:
    - FrameScheduler: abstract interface.
    - ManualScheduler: frames fire only when the caller says so; used by
      tests, scripts and benchmarks.

Typical usage:
    scheduler = ManualScheduler()
    demo = PendulumDemo(scheduler=scheduler)
    demo.start()
    scheduler.run(frames=120, frame_ms=1000 / 60)
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from itertools import count
from typing import Callable

FrameCallback = Callable[[float], object]


class FrameScheduler(ABC):
    """Source of animation frames for a demo."""

    @abstractmethod
    def request(self, callback: FrameCallback) -> int:
        """
        Schedule callback(timestamp_ms) on the next frame.

        Returns:
            Handle usable with cancel().
        """
        ...

    @abstractmethod
    def cancel(self, handle: int) -> None:
        """Drop a pending request. Unknown or already-fired handles are ignored."""
        ...


class ManualScheduler(FrameScheduler):
    """
    Scheduler driven explicitly by the caller.

    Requests accumulate until fire() delivers them with a timestamp.
    Callbacks scheduled while firing wait for the following frame, so one
    fire() runs each demo at most once.

    Attributes:
        now: Timestamp (ms) of the most recent frame.
    """

    def __init__(self, start_ms: float = 0.0) -> None:
        self.now = float(start_ms)
        self._pending: dict[int, FrameCallback] = {}
        self._ids = count(1)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def request(self, callback: FrameCallback) -> int:
        handle = next(self._ids)
        self._pending[handle] = callback
        return handle

    def cancel(self, handle: int) -> None:
        self._pending.pop(handle, None)

    def fire(self, timestamp_ms: float | None = None) -> int:
        """
        Deliver one frame to every pending callback.

        Args:
            timestamp_ms: Frame time; defaults to the current `now`.

        Returns:
            Number of callbacks invoked.
        """
        if timestamp_ms is not None:
            self.now = float(timestamp_ms)
        batch, self._pending = self._pending, {}
        for callback in batch.values():
            callback(self.now)
        return len(batch)

    def run(self, frames: int, frame_ms: float = 1000.0 / 60.0) -> int:
        """
        Fire up to `frames` frames spaced frame_ms apart.

        Stops early once nothing is pending (every demo paused or completed).

        Returns:
            Number of frames actually fired.
        """
        fired = 0
        for _ in range(frames):
            if not self._pending:
                break
            self.fire(self.now + frame_ms)
            fired += 1
        return fired
