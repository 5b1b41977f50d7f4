"""Per-kind motion rules and off-screen removal."""
from __future__ import annotations

import math
import random as _random

from sky_flyer.components import (
    BackgroundCloud,
    Bomb,
    FallingSatellite,
    MovingEntity,
    OscillatingBalloon,
)
from sky_flyer.config import FlyerConfig
from sky_flyer.types import EntityKind

SPEED_MULTIPLIERS: dict[EntityKind, float] = {
    EntityKind.FAST_BIRD: 2.0,
    EntityKind.STATIC_CLOUD: 0.7,
}

BALLOON_AMPLITUDE = 50.0
BALLOON_ANGULAR_RATE = 2.0  # radians per second
BOMB_JITTER = 1.0


def advance_obstacle(
    obstacle: MovingEntity,
    speed: float,
    now_ms: float,
    rng: _random.Random,
) -> None:
    """Move one obstacle by one tick at the given effective speed."""
    obstacle.x -= speed * SPEED_MULTIPLIERS.get(obstacle.kind, 1.0)

    if isinstance(obstacle, Bomb):
        obstacle.x += (rng.random() - 0.5) * 2.0 * BOMB_JITTER
    elif isinstance(obstacle, OscillatingBalloon):
        elapsed = (now_ms - obstacle.spawn_time_ms) / 1000.0
        obstacle.y = obstacle.initial_y + math.sin(
            elapsed * BALLOON_ANGULAR_RATE + obstacle.phase
        ) * BALLOON_AMPLITUDE
    elif isinstance(obstacle, FallingSatellite):
        obstacle.y += obstacle.vertical_speed


def advance_cloud(cloud: BackgroundCloud, boost_multiplier: float) -> None:
    cloud.x -= cloud.speed * boost_multiplier


def obstacle_gone(obstacle: MovingEntity, config: FlyerConfig) -> bool:
    return (
        obstacle.x <= -config.despawn_margin_x
        or obstacle.y >= config.height + config.despawn_margin_y
    )


def cloud_gone(cloud: BackgroundCloud, config: FlyerConfig) -> bool:
    return cloud.x <= -config.cloud_despawn_x
