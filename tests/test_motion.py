"""Tests for per-kind motion and removal thresholds."""
from __future__ import annotations

import math

import pytest

from sky_flyer import (
    BackgroundCloud,
    Bomb,
    BoostStar,
    FallingSatellite,
    FastBird,
    FlyerConfig,
    OscillatingBalloon,
    StaticCloud,
)
from sky_flyer.components import Craft, RunState
from sky_flyer.motion import advance_cloud, advance_obstacle, cloud_gone, obstacle_gone
from sky_flyer.systems import make_motion_system
from sky_flyer.types import FrameContext


def _ctx(rng, now_ms: float = 0.0) -> FrameContext:
    return FrameContext(tick_number=1, now_ms=now_ms, dt_ms=16.0, request_stop=lambda: None, random=rng)


# --- Horizontal scroll ---

@pytest.mark.parametrize(
    "cls, expected_x",
    [
        (FastBird, 490.0),
        (StaticCloud, 496.5),
        (BoostStar, 495.0),
    ],
)
def test_speed_multiplier_per_kind(cls, expected_x, scripted):
    obs = cls(id=1, x=500.0, y=100.0, width=40, height=40, spawn_time_ms=0.0)
    advance_obstacle(obs, 5.0, 16.0, scripted([]))
    assert math.isclose(obs.x, expected_x)
    assert obs.y == 100.0


def test_bomb_jitter_bounds(scripted):
    low = Bomb(id=1, x=500.0, y=0.0, width=50, height=50, spawn_time_ms=0.0)
    advance_obstacle(low, 5.0, 0.0, scripted([0.0]))
    assert math.isclose(low.x, 494.0)

    mid = Bomb(id=2, x=500.0, y=0.0, width=50, height=50, spawn_time_ms=0.0)
    advance_obstacle(mid, 5.0, 0.0, scripted([0.75]))
    assert math.isclose(mid.x, 495.5)


def test_bomb_jitter_stays_within_one_unit():
    import random

    rng = random.Random(7)
    for _ in range(200):
        bomb = Bomb(id=1, x=0.0, y=0.0, width=50, height=50, spawn_time_ms=0.0)
        advance_obstacle(bomb, 0.0, 0.0, rng)
        assert -1.0 <= bomb.x < 1.0


# --- Vertical motion ---

def test_balloon_follows_sine(scripted):
    balloon = OscillatingBalloon(
        id=1, x=500.0, y=200.0, width=40, height=60, spawn_time_ms=1000.0,
        initial_y=200.0, phase=0.5,
    )
    advance_obstacle(balloon, 5.0, 1750.0, scripted([]))
    expected = 200.0 + 50.0 * math.sin(0.75 * 2.0 + 0.5)
    assert math.isclose(balloon.y, expected)
    assert math.isclose(balloon.x, 495.0)


def test_balloon_uses_elapsed_time_not_tick_count(scripted):
    a = OscillatingBalloon(id=1, x=0, y=0, width=40, height=60, spawn_time_ms=0.0, initial_y=100.0)
    b = OscillatingBalloon(id=2, x=0, y=0, width=40, height=60, spawn_time_ms=0.0, initial_y=100.0)
    advance_obstacle(a, 0.0, 500.0, scripted([]))
    for now in (100.0, 200.0, 300.0, 500.0):
        advance_obstacle(b, 0.0, now, scripted([]))
    assert math.isclose(a.y, b.y)


def test_satellite_falls(scripted):
    sat = FallingSatellite(id=1, x=500.0, y=-75.0, width=75, height=75, spawn_time_ms=0.0)
    advance_obstacle(sat, 5.0, 0.0, scripted([]))
    advance_obstacle(sat, 5.0, 0.0, scripted([]))
    assert math.isclose(sat.y, -72.0)


# --- Removal ---

def test_obstacle_gone_thresholds(config):
    def cloud_at(x, y=0.0):
        return StaticCloud(id=1, x=x, y=y, width=120, height=70, spawn_time_ms=0.0)

    assert obstacle_gone(cloud_at(-150.0), config)
    assert obstacle_gone(cloud_at(-151.0), config)
    assert not obstacle_gone(cloud_at(-149.0), config)
    assert obstacle_gone(cloud_at(0.0, y=650.0), config)
    assert not obstacle_gone(cloud_at(0.0, y=649.0), config)


def test_motion_pass_drops_only_offscreen(scripted):
    cfg = FlyerConfig(base_speed=0.0, speed_increment=0.0)
    state = RunState(craft=Craft(y=250.0))
    state.obstacles = [
        StaticCloud(id=1, x=-151.0, y=0.0, width=120, height=70, spawn_time_ms=0.0),
        StaticCloud(id=2, x=-149.0, y=0.0, width=120, height=70, spawn_time_ms=0.0),
    ]
    state.clouds = [
        BackgroundCloud(id=3, x=-199.6, y=0.0, scale=1.0, speed=0.5),
        BackgroundCloud(id=4, x=-198.0, y=0.0, scale=1.0, speed=0.5),
    ]
    make_motion_system(cfg)(state, _ctx(scripted([])))
    assert [o.id for o in state.obstacles] == [2]
    assert [c.id for c in state.clouds] == [4]


def test_cloud_scrolls_with_boost(config):
    cloud = BackgroundCloud(id=1, x=300.0, y=10.0, scale=1.0, speed=2.0)
    advance_cloud(cloud, 2.5)
    assert math.isclose(cloud.x, 295.0)
    assert not cloud_gone(cloud, config)
    cloud.x = -200.0
    assert cloud_gone(cloud, config)
