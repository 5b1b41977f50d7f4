"""Shared enums, per-tick context, and exceptions for the flyer engine."""
from __future__ import annotations

import enum
import random as _random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

EntityId = int


class GameStatus(str, enum.Enum):
    START = "START"
    PLAYING = "PLAYING"
    GAME_OVER = "GAME_OVER"


class EntityKind(str, enum.Enum):
    STATIC_CLOUD = "STATIC_CLOUD"
    OSCILLATING_BALLOON = "OSCILLATING_BALLOON"
    FALLING_SATELLITE = "FALLING_SATELLITE"
    BOMB = "BOMB"
    FAST_BIRD = "FAST_BIRD"
    BOOST_STAR = "BOOST_STAR"

    @property
    def harmful(self) -> bool:
        return self is not EntityKind.BOOST_STAR


@dataclass(frozen=True, slots=True)
class FrameContext:
    tick_number: int
    now_ms: float
    dt_ms: float
    request_stop: Callable[[], None]
    random: _random.Random


class SkyFlyerError(Exception):
    """Base class for errors raised by sky_flyer."""


class ConfigError(SkyFlyerError, ValueError):
    """Raised when a FlyerConfig has inconsistent values."""


class TransitionError(SkyFlyerError):
    """Raised when a session action is not allowed from the current status."""

    def __init__(self, status: GameStatus, action: str) -> None:
        self.status = status
        self.action = action
        super().__init__(f"Cannot {action!r} while {status.value}")


if TYPE_CHECKING:
    from sky_flyer.components import RunState

System = Callable[["RunState", FrameContext], None]
