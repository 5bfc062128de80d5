# MIT License (see LICENSE)
"""
Lightweight timing of simulation phases.

The N-body engine accepts an optional Profiler and times its force /
integration pass and its boundary pass under named sections.

Example:
    profiler = Profiler()
    engine = NBodyEngine(profiler=profiler)
    engine.step(1.0)
    print(profiler.stats.summary())
"""
from __future__ import annotations
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class ProfileStats:
    """Timing samples (seconds) per section name."""
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        self.samples.setdefault(name, []).append(dt)

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Per-section count, mean and max.

        Returns:
            Dict mapping section name to {'n', 'mean_ms', 'max_ms'}.
        """
        return {
            name: {
                "n": len(times),
                "mean_ms": 1e3 * sum(times) / len(times),
                "max_ms": 1e3 * max(times),
            }
            for name, times in self.samples.items()
            if times
        }


class Profiler:
    """Context-manager based section timer."""

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)
