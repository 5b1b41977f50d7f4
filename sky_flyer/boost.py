"""Boost countdown: a frame-counted power-up timer."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class BoostTimer:
    """Countdown in ticks. Boost is active while remaining > 0.

    The countdown is advanced once per PLAYING tick, not by wall time, so
    its real-time length follows the host's frame rate.
    """

    remaining: int = 0

    @property
    def active(self) -> bool:
        return self.remaining > 0

    def activate(self, duration: int) -> bool:
        """Start or refresh the countdown. Returns True if boost was already active.

        Re-collection refreshes to ``duration``; it never stacks.
        """
        was_active = self.active
        self.remaining = max(0, duration)
        return was_active

    def countdown(self) -> bool:
        """Advance one tick. Returns True on the tick the boost expires."""
        if self.remaining <= 0:
            return False
        self.remaining -= 1
        return self.remaining == 0

    def multiplier(self, boost_multiplier: float) -> float:
        return boost_multiplier if self.active else 1.0

    def reset(self) -> None:
        self.remaining = 0
