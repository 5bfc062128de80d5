# MIT License (see LICENSE)
"""
Frame clock that turns animation timestamps into integration steps.

The embedding environment calls tick() once per animation frame with a
monotonic millisecond timestamp. The first tick after a (re)start only
records a baseline and returns 0, so a stale first frame can never
produce a huge step. Later ticks return the elapsed seconds, clamped to
[0, max_dt].
"""
from __future__ import annotations
import logging

from ..constants import MAX_FRAME_DT

logger = logging.getLogger(__name__)


class SimulationClock:
    """
    Per-demo frame clock.

    Attributes:
        max_dt: Largest delta (seconds) returned by tick().
        last_timestamp: Timestamp of the previous tick in ms, None before
            the first tick after a reset.
        elapsed: Sum of all deltas returned since the last reset.
    """

    def __init__(self, max_dt: float = MAX_FRAME_DT) -> None:
        if max_dt <= 0:
            raise ValueError(f"max_dt must be > 0, got {max_dt}")
        self.max_dt = float(max_dt)
        self.last_timestamp: float | None = None
        self.elapsed = 0.0

    def reset(self) -> None:
        """Forget the baseline so the next tick yields 0."""
        self.last_timestamp = None
        self.elapsed = 0.0

    def tick(self, timestamp_ms: float) -> float:
        """
        Record a frame timestamp and return the step size in seconds.

        Args:
            timestamp_ms: Frame timestamp in milliseconds.

        Returns:
            0.0 on the first call after reset(); otherwise the delta since
            the previous call, never negative and never above max_dt.
        """
        last = self.last_timestamp
        self.last_timestamp = float(timestamp_ms)
        if last is None:
            return 0.0

        dt = (timestamp_ms - last) / 1000.0
        if dt < 0.0:
            dt = 0.0
        elif dt > self.max_dt:
            logger.warning("frame delta %.3fs clamped to %.3fs", dt, self.max_dt)
            dt = self.max_dt
        self.elapsed += dt
        return dt
