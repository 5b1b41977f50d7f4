"""Frame clock: tick counting and measured frame spacing."""
from __future__ import annotations

import random
from typing import Callable

from sky_flyer.types import FrameContext


class FrameClock:
    """Counts ticks and measures the time between them.

    Unlike a fixed-timestep clock, the host supplies the timestamp of
    every frame; ``dt_ms`` is whatever actually elapsed.
    """

    def __init__(self) -> None:
        self._tick_number = 0
        self._last_ms: float | None = None

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def last_ms(self) -> float | None:
        return self._last_ms

    def advance(self, now_ms: float) -> float:
        """Count a tick at ``now_ms`` and return the spacing since the last one."""
        dt = 0.0 if self._last_ms is None else max(0.0, now_ms - self._last_ms)
        self._tick_number += 1
        self._last_ms = now_ms
        return dt

    def context(
        self,
        now_ms: float,
        dt_ms: float,
        stop_fn: Callable[[], None],
        rng: random.Random,
    ) -> FrameContext:
        return FrameContext(
            tick_number=self._tick_number,
            now_ms=now_ms,
            dt_ms=dt_ms,
            request_stop=stop_fn,
            random=rng,
        )

    def reset(self, now_ms: float | None = None) -> None:
        self._tick_number = 0
        self._last_ms = now_ms
