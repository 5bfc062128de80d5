# MIT License (see LICENSE)
"""
Bounded history of demo read-outs for charting.

Charting collaborators plot a quantity against time while a demo runs.
HistoryBuffer keeps only the most recent `capacity` samples and is
cleared on reset; nothing is persisted.

Example:
    history = HistoryBuffer(capacity=600)
    demo = PendulumDemo(on_step=history.record_from(lambda s: {"angle": s.angle}))
    ...
    t, series = history.arrays()
"""
from __future__ import annotations
from collections import deque
from typing import Callable, Any

import numpy as np


class HistoryBuffer:
    """
    Ring buffer of (time, {name: value}) samples.

    Attributes:
        capacity: Maximum number of retained samples (oldest dropped first).
    """

    def __init__(self, capacity: int = 1000) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be > 0, got {capacity}")
        self.capacity = capacity
        self._samples: deque[tuple[float, dict[str, float]]] = deque(maxlen=capacity)

    def __len__(self) -> int:
        return len(self._samples)

    def append(self, time: float, values: dict[str, float]) -> None:
        """Record one sample; a repeated timestamp replaces the previous sample."""
        if self._samples and self._samples[-1][0] == time:
            self._samples.pop()
        self._samples.append((float(time), dict(values)))

    def clear(self) -> None:
        self._samples.clear()

    def record_from(self, extract: Callable[[Any], dict[str, float]]) -> Callable[[Any], None]:
        """
        Build a step observer that records extract(state) at state.time.

        The returned callable fits the `on_step` hook of a demo.
        """
        def _observe(state: Any) -> None:
            self.append(state.time, extract(state))
        return _observe

    def arrays(self) -> tuple[np.ndarray, dict[str, np.ndarray]]:
        """
        Time column and one array per recorded name.

        Names missing from a sample are filled with NaN.
        """
        t = np.array([s[0] for s in self._samples], dtype=np.float64)
        names: list[str] = []
        for _, values in self._samples:
            for name in values:
                if name not in names:
                    names.append(name)
        columns = {
            name: np.array([v.get(name, np.nan) for _, v in self._samples], dtype=np.float64)
            for name in names
        }
        return t, columns
