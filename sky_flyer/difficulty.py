"""Difficulty curve: scroll speed and spawn interval as a function of score."""
from __future__ import annotations

from sky_flyer.config import FlyerConfig


def effective_speed(config: FlyerConfig, score: int, boost_multiplier: float = 1.0) -> float:
    """Obstacle scroll speed in units per tick."""
    return (config.base_speed + score * config.speed_increment) * boost_multiplier


def effective_spawn_interval(
    config: FlyerConfig, score: int, boost_multiplier: float = 1.0
) -> float:
    """Milliseconds between obstacle spawns, never below the configured floor."""
    raw = (config.base_spawn_interval_ms - score * config.spawn_decrement_ms) / boost_multiplier
    return max(config.min_spawn_interval_ms, raw)


def cloud_spawn_interval(config: FlyerConfig, boost_multiplier: float = 1.0) -> float:
    return config.cloud_spawn_interval_ms / boost_multiplier
