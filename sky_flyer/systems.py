"""System factories for the per-tick pipeline.

Each factory returns a ``(state, ctx) -> None`` callable. The game loop
runs them in a fixed order: boost, craft, spawn, motion, collision,
publish.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sky_flyer import signals
from sky_flyer.collision import resolve_collisions
from sky_flyer.controls import Controls, target_y, tilt_for
from sky_flyer.difficulty import cloud_spawn_interval, effective_spawn_interval, effective_speed
from sky_flyer.motion import advance_cloud, advance_obstacle, cloud_gone, obstacle_gone
from sky_flyer.snapshot import take_snapshot
from sky_flyer.spawn import spawn_cloud, spawn_obstacle

if TYPE_CHECKING:
    from sky_flyer.components import RunState
    from sky_flyer.config import FlyerConfig
    from sky_flyer.signals import SignalBus
    from sky_flyer.types import FrameContext, System

logger = logging.getLogger(__name__)


def make_boost_system() -> System:
    """Count the boost timer down by one tick."""

    def boost_system(state: RunState, ctx: FrameContext) -> None:
        if state.boost.countdown():
            logger.debug("boost expired at tick %d", ctx.tick_number)

    return boost_system


def make_craft_system(config: FlyerConfig, controls: Controls) -> System:
    """Move the craft from the input read at tick start and derive its tilt."""

    def craft_system(state: RunState, ctx: FrameContext) -> None:
        craft = state.craft
        y = target_y(craft.y, controls, config)
        craft.tilt = tilt_for(y - craft.y, config)
        craft.y = y

    return craft_system


def make_spawn_system(config: FlyerConfig) -> System:
    """Spawn an obstacle and/or a cloud once their interval has elapsed."""

    def spawn_system(state: RunState, ctx: FrameContext) -> None:
        mult = state.boost.multiplier(config.boost_multiplier)
        interval = effective_spawn_interval(config, state.score, mult)
        if ctx.now_ms - state.last_obstacle_spawn_ms > interval:
            spawn_obstacle(state, config, ctx.now_ms, ctx.random)
            state.last_obstacle_spawn_ms = ctx.now_ms
        if ctx.now_ms - state.last_cloud_spawn_ms > cloud_spawn_interval(config, mult):
            spawn_cloud(state, config, ctx.random)
            state.last_cloud_spawn_ms = ctx.now_ms

    return spawn_system


def make_motion_system(config: FlyerConfig) -> System:
    """Advance obstacles and clouds, then drop whatever left the playfield."""

    def motion_system(state: RunState, ctx: FrameContext) -> None:
        mult = state.boost.multiplier(config.boost_multiplier)
        speed = effective_speed(config, state.score, mult)
        for obstacle in state.obstacles:
            advance_obstacle(obstacle, speed, ctx.now_ms, ctx.random)
        state.obstacles = [o for o in state.obstacles if not obstacle_gone(o, config)]

        for cloud in state.clouds:
            advance_cloud(cloud, mult)
        state.clouds = [c for c in state.clouds if not cloud_gone(c, config)]

    return motion_system


def make_collision_system(config: FlyerConfig, bus: SignalBus) -> System:
    """Resolve craft/obstacle contact. A fatal hit requests the loop to stop."""

    def collision_system(state: RunState, ctx: FrameContext) -> None:
        report = resolve_collisions(state, config)
        for _ in range(report.boosts):
            bus.publish(signals.BOOST, score=state.score)
        for _ in range(report.passes):
            bus.publish(signals.SCORE, score=state.score)
        if report.absorbed:
            logger.debug("boost absorbed hits from %s", report.absorbed)
        if report.terminated:
            ctx.request_stop()

    return collision_system


def make_publish_system(config: FlyerConfig, bus: SignalBus) -> System:
    """Queue the frame snapshot and deliver everything queued this tick."""

    def publish_system(state: RunState, ctx: FrameContext) -> None:
        bus.publish(signals.FRAME, snapshot=take_snapshot(state, config))
        bus.flush()

    return publish_system
