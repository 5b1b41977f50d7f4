"""Weighted random spawning of obstacles and background clouds."""
from __future__ import annotations

import logging
import math
import random as _random
from dataclasses import dataclass

from sky_flyer.components import (
    BackgroundCloud,
    Bomb,
    BoostStar,
    FallingSatellite,
    FastBird,
    MovingEntity,
    OscillatingBalloon,
    RunState,
    StaticCloud,
)
from sky_flyer.config import FlyerConfig
from sky_flyer.types import EntityKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpawnRule:
    kind: EntityKind
    weight: float
    width: float
    height: float


# Order matters: a uniform draw is matched against the running total.
SPAWN_TABLE: tuple[SpawnRule, ...] = (
    SpawnRule(EntityKind.STATIC_CLOUD, 0.30, 120.0, 70.0),
    SpawnRule(EntityKind.OSCILLATING_BALLOON, 0.20, 40.0, 60.0),
    SpawnRule(EntityKind.FALLING_SATELLITE, 0.15, 75.0, 75.0),
    SpawnRule(EntityKind.BOMB, 0.15, 50.0, 50.0),
    SpawnRule(EntityKind.BOOST_STAR, 0.10, 40.0, 40.0),
    SpawnRule(EntityKind.FAST_BIRD, 0.10, 30.0, 30.0),
)

BALLOON_MARGIN = 30.0
BALLOON_BAND_INSET = 120.0
SATELLITE_FALL_SPEED = 1.5
CLOUD_MAX_Y_OFFSET = 60.0


def choose_rule(draw: float) -> SpawnRule:
    """Map a uniform sample in [0, 1) to a spawn rule by cumulative weight."""
    total = 0.0
    for rule in SPAWN_TABLE:
        total += rule.weight
        if draw < total:
            return rule
    # Float rounding can leave the last band a hair short of 1.0.
    return SPAWN_TABLE[-1]


def spawn_obstacle(
    state: RunState,
    config: FlyerConfig,
    now_ms: float,
    rng: _random.Random,
) -> MovingEntity:
    """Create one obstacle at the right edge and append it to ``state``.

    Draws from ``rng`` in a fixed order: kind, then y (all kinds except the
    satellite), then phase (balloon only).
    """
    rule = choose_rule(rng.random())
    eid = state.allocate_id()
    x = config.width
    w, h = rule.width, rule.height

    obstacle: MovingEntity
    if rule.kind is EntityKind.OSCILLATING_BALLOON:
        band = max(0.0, config.height - BALLOON_BAND_INSET)
        initial_y = rng.random() * band + BALLOON_MARGIN
        obstacle = OscillatingBalloon(
            id=eid, x=x, y=initial_y, width=w, height=h, spawn_time_ms=now_ms,
            initial_y=initial_y, phase=rng.random() * 2 * math.pi,
        )
    elif rule.kind is EntityKind.FALLING_SATELLITE:
        obstacle = FallingSatellite(
            id=eid, x=x, y=-h, width=w, height=h, spawn_time_ms=now_ms,
            vertical_speed=SATELLITE_FALL_SPEED,
        )
    else:
        y = rng.random() * max(0.0, config.height - h)
        cls = _PLAIN_KINDS[rule.kind]
        obstacle = cls(id=eid, x=x, y=y, width=w, height=h, spawn_time_ms=now_ms)

    state.obstacles.append(obstacle)
    logger.debug("spawned %s #%d at y=%.1f", rule.kind.value, eid, obstacle.y)
    return obstacle


def spawn_cloud(
    state: RunState,
    config: FlyerConfig,
    rng: _random.Random,
) -> BackgroundCloud:
    """Create one background cloud. Draw order: y, scale, speed."""
    cloud = BackgroundCloud(
        id=state.allocate_id(),
        x=config.width,
        y=rng.random() * max(0.0, config.height - CLOUD_MAX_Y_OFFSET),
        scale=0.5 + rng.random(),
        speed=1.0 + rng.random() * 2.0,
    )
    state.clouds.append(cloud)
    return cloud


_PLAIN_KINDS: dict[EntityKind, type[MovingEntity]] = {
    EntityKind.STATIC_CLOUD: StaticCloud,
    EntityKind.BOMB: Bomb,
    EntityKind.BOOST_STAR: BoostStar,
    EntityKind.FAST_BIRD: FastBird,
}
