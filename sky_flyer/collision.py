"""Hitbox overlap and collision outcomes between the craft and obstacles."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import NamedTuple

from sky_flyer.components import Craft, MovingEntity, RunState
from sky_flyer.config import FlyerConfig
from sky_flyer.types import EntityId, EntityKind

logger = logging.getLogger(__name__)


class Rect(NamedTuple):
    left: float
    top: float
    right: float
    bottom: float


def overlaps(a: Rect, b: Rect) -> bool:
    """Strict AABB overlap. Touching edges do not collide."""
    return (
        a.left < b.right
        and a.right > b.left
        and a.top < b.bottom
        and a.bottom > b.top
    )


def craft_rect(craft: Craft, config: FlyerConfig) -> Rect:
    pad = config.craft_padding
    return Rect(
        config.craft_x + pad,
        craft.y + pad,
        config.craft_x + config.craft_width - pad,
        craft.y + config.craft_height - pad,
    )


def obstacle_rect(obstacle: MovingEntity, config: FlyerConfig) -> Rect:
    pad = config.entity_padding
    return Rect(
        obstacle.x + pad,
        obstacle.y + pad,
        obstacle.x + obstacle.width - pad,
        obstacle.y + obstacle.height - pad,
    )


@dataclass
class CollisionReport:
    """What one collision pass did. Effects are already applied to the state."""

    terminated: bool = False
    passes: int = 0
    boosts: int = 0
    consumed: list[EntityId] = field(default_factory=list)
    absorbed: list[EntityId] = field(default_factory=list)


def resolve_collisions(state: RunState, config: FlyerConfig) -> CollisionReport:
    """Resolve every obstacle against the craft, then drop consumed ones.

    Boost invincibility is decided from the boost state at the start of the
    pass, so a star collected this tick does not shield a hit taken in the
    same pass. Pass scoring runs for every obstacle that was not consumed,
    whatever else happened this tick.
    """
    report = CollisionReport()
    hitbox = craft_rect(state.craft, config)
    shielded = state.boost.active

    for obstacle in state.obstacles:
        if overlaps(hitbox, obstacle_rect(obstacle, config)):
            if obstacle.kind is EntityKind.BOOST_STAR:
                state.score += config.boost_bonus
                state.boost.activate(config.boost_duration)
                report.boosts += 1
                report.consumed.append(obstacle.id)
                logger.debug("boost star #%d collected", obstacle.id)
                continue
            if shielded:
                report.absorbed.append(obstacle.id)
            elif not report.terminated:
                report.terminated = True
                logger.debug("craft hit %s #%d", obstacle.kind.value, obstacle.id)

        if not obstacle.passed and obstacle.x < config.craft_x:
            obstacle.passed = True
            state.score += 1
            report.passes += 1

    if report.consumed:
        gone = set(report.consumed)
        state.obstacles = [o for o in state.obstacles if o.id not in gone]
    return report
