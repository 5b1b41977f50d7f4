"""Tests for SessionController: status machine, scheduling, and full-run scenarios."""
from __future__ import annotations

import random

import pytest

from sky_flyer import (
    BackgroundCloud,
    Bomb,
    BoostStar,
    EntityKind,
    FlyerConfig,
    GameStatus,
    ManualScheduler,
    SessionController,
    StaticCloud,
    TransitionError,
)

FRAME_MS = 16.0


def _session(
    config: FlyerConfig | None = None,
) -> tuple[SessionController, ManualScheduler, dict]:
    sched = ManualScheduler()
    session = SessionController(
        config or FlyerConfig(), scheduler=sched, rng=random.Random(5)
    )
    events: dict[str, list] = {"score": [], "boost": [], "crash": [], "frame": []}
    for name in events:
        session.bus.subscribe(name, lambda n, data: events[n].append(data))
    return session, sched, events


def _run(sched: ManualScheduler, start_ms: float, ticks: int) -> float:
    now = start_ms
    for _ in range(ticks):
        now += FRAME_MS
        sched.advance(now)
    return now


def _bomb_on_craft(session: SessionController, eid: int = 900) -> Bomb:
    bomb = Bomb(id=eid, x=110.0, y=session.state.craft.y, width=50, height=50, spawn_time_ms=0.0)
    session.state.obstacles.append(bomb)
    return bomb


# --- Status machine ---

class TestTransitions:
    def test_initial_status(self):
        session, sched, _ = _session()
        assert session.status is GameStatus.START
        assert not session.running
        assert sched.pending == 0

    def test_start_arms_first_tick(self):
        session, sched, _ = _session()
        session.start(0.0)
        assert session.status is GameStatus.PLAYING
        assert session.running
        assert sched.pending == 1

    def test_start_while_playing_rejected(self):
        session, _, _ = _session()
        session.start(0.0)
        with pytest.raises(TransitionError):
            session.start(10.0)
        assert session.status is GameStatus.PLAYING

    def test_can(self):
        session, _, _ = _session()
        assert session.can("start")
        assert not session.can("end")

    def test_transition_hooks(self):
        session, sched, _ = _session()
        seen = []
        session.on_transition(lambda old, new: seen.append((old, new)))
        session.start(0.0)
        _bomb_on_craft(session)
        sched.advance(FRAME_MS)
        assert seen == [
            (GameStatus.START, GameStatus.PLAYING),
            (GameStatus.PLAYING, GameStatus.GAME_OVER),
        ]

    def test_game_over_hook_sees_updated_high_score(self):
        session, sched, _ = _session()
        seen = []
        session.on_transition(lambda old, new: seen.append((new, session.high_score)))
        session.start(0.0)
        session.state.score = 12
        _bomb_on_craft(session)
        sched.advance(FRAME_MS)
        assert seen[-1] == (GameStatus.GAME_OVER, 12)

    def test_restart_from_crash_handler_arms_one_tick(self):
        session, sched, events = _session()
        session.bus.subscribe("crash", lambda name, data: session.start(1000.0))
        session.start(0.0)
        _bomb_on_craft(session)
        sched.advance(FRAME_MS)
        assert session.status is GameStatus.PLAYING
        assert sched.pending == 1

        frames = len(events["frame"])
        sched.advance(1000.0 + FRAME_MS)
        assert len(events["frame"]) == frames + 1
        assert sched.pending == 1
        assert session.loop.clock.tick_number == 1

    def test_loop_keeps_rearming_while_playing(self):
        session, sched, events = _session()
        session.start(0.0)
        _run(sched, 0.0, 10)
        assert sched.pending == 1
        assert len(events["frame"]) == 10
        assert session.loop.clock.tick_number == 10


# --- Scenario A: pointer tracking ---

def test_craft_converges_toward_pointer_without_overshoot():
    session, sched, events = _session()
    session.start(0.0)
    session.controls.point_at(400.0)
    previous = session.state.craft.y
    for i in range(60):
        sched.advance((i + 1) * FRAME_MS)
        y = session.state.craft.y
        assert 0.0 <= y <= session.config.max_craft_y
        assert previous <= y <= 400.0
        assert abs(session.state.craft.tilt) <= 25.0
        previous = y
    assert abs(session.state.craft.y - 400.0) < 1.0


def test_pointer_fixed_at_initial_y_keeps_craft_still():
    session, sched, _ = _session()
    session.start(0.0)
    _run(sched, 0.0, 30)
    assert session.state.craft.y == 250.0
    assert session.state.craft.tilt == 0.0


def test_held_key_never_leaves_playfield():
    quiet = FlyerConfig(base_spawn_interval_ms=1e9, min_spawn_interval_ms=1e9)
    session, sched, _ = _session(quiet)
    session.start(0.0)
    session.controls.set_key("down", True)
    now = _run(sched, 0.0, 60)
    assert session.state.craft.y == session.config.max_craft_y
    session.controls.set_key("down", False)
    session.controls.set_key("up", True)
    _run(sched, now, 100)
    assert session.state.craft.y == 0.0


# --- Scenario B: fatal hit ---

def test_unboosted_hit_ends_run():
    session, sched, events = _session()
    session.start(0.0)
    session.state.high_score = 7
    _bomb_on_craft(session)
    sched.advance(FRAME_MS)

    assert session.status is GameStatus.GAME_OVER
    assert session.score == 0
    assert session.high_score == 7
    assert events["crash"] == [{"score": 0, "high_score": 7}]
    assert not session.running
    assert sched.pending == 0
    assert events["frame"][-1]["snapshot"].status is GameStatus.GAME_OVER


def test_game_over_happens_once_and_ticks_are_noops():
    session, sched, events = _session()
    transitions = []
    session.on_transition(lambda old, new: transitions.append(new))
    session.start(0.0)
    _bomb_on_craft(session)
    sched.advance(FRAME_MS)
    state = session.state
    frames = len(events["frame"])
    session.loop.tick(state, 100.0)
    sched.advance(200.0)
    assert transitions.count(GameStatus.GAME_OVER) == 1
    assert len(events["crash"]) == 1
    assert len(events["frame"]) == frames


def test_high_score_takes_max():
    session, sched, _ = _session()
    session.start(0.0)
    session.state.score = 12
    _bomb_on_craft(session)
    sched.advance(FRAME_MS)
    assert session.high_score == 12

    session.start(100.0)
    session.state.score = 3
    _bomb_on_craft(session)
    sched.advance(100.0 + FRAME_MS)
    assert session.high_score == 12


# --- Scenario C: boost and invincibility ---

def test_boost_star_then_invincible_hit():
    session, sched, events = _session()
    session.start(0.0)
    session.state.score = 50
    session.state.obstacles.append(
        BoostStar(id=901, x=110.0, y=250.0, width=40, height=40, spawn_time_ms=0.0)
    )
    now = _run(sched, 0.0, 1)
    assert session.score == 60
    assert session.state.boost.remaining == 120
    assert len(events["boost"]) == 1
    assert all(o.id != 901 for o in session.state.obstacles)

    bomb = _bomb_on_craft(session, eid=902)
    bomb.x = 150.0  # still overlapping after this tick's boosted scroll
    now = _run(sched, now, 1)
    assert session.status is GameStatus.PLAYING
    assert session.state.boost.remaining == 119

    _run(sched, now, 100)
    assert session.status is GameStatus.PLAYING
    assert events["crash"] == []


def test_boost_expires_after_duration():
    session, sched, events = _session()
    session.start(0.0)
    session.state.boost.activate(3)
    _run(sched, 0.0, 2)
    assert session.state.boosting
    _run(sched, 2 * FRAME_MS, 1)
    assert not session.state.boosting
    assert events["frame"][-1]["snapshot"].boosting is False


# --- Scenario D: restart ---

def test_restart_resets_run():
    session, sched, _ = _session()
    session.start(0.0)
    state = session.state
    state.obstacles.append(
        StaticCloud(id=960, x=600.0, y=0.0, width=120, height=70, spawn_time_ms=0.0)
    )
    state.clouds.append(BackgroundCloud(id=961, x=500.0, y=40.0, scale=1.0, speed=2.0))
    # A star and a bomb in the same pass: the star boosts, the bomb still ends the run.
    state.obstacles.append(
        BoostStar(id=962, x=110.0, y=250.0, width=40, height=40, spawn_time_ms=0.0)
    )
    _bomb_on_craft(session)
    now = _run(sched, 0.0, 1)
    assert session.status is GameStatus.GAME_OVER
    assert session.state.boost.remaining == 120
    assert session.high_score == 10
    best = session.high_score

    session.controls.point_at(10.0)
    session.start(now + 1000.0)
    state = session.state
    assert session.status is GameStatus.PLAYING
    assert state.score == 0
    assert state.obstacles == []
    assert state.clouds == []
    assert state.boost.remaining == 0
    assert state.craft.y == 250.0
    assert state.last_obstacle_spawn_ms == now + 1000.0
    assert session.controls.pointer_y == 250.0
    assert session.high_score == best
    assert sched.pending == 1


# --- Scoring through the loop ---

def test_pass_score_signal_emitted_once():
    session, sched, events = _session()
    session.start(0.0)
    session.state.obstacles.append(
        StaticCloud(id=950, x=103.0, y=0.0, width=120, height=70, spawn_time_ms=0.0)
    )
    _run(sched, 0.0, 5)
    assert session.score == 1
    assert events["score"] == [{"score": 1}]


def test_obstacles_spawn_at_boosted_interval(scripted):
    # Every draw is 0.1: static clouds high above the craft, nothing scores.
    sched = ManualScheduler()
    session = SessionController(FlyerConfig(), scheduler=sched, rng=scripted([], fallback=0.1))
    session.start(0.0)
    session.state.boost.activate(10_000)
    # Boosted obstacle interval is 600 ms: spawns at ticks 38 and 76.
    _run(sched, 0.0, 100)
    snap = session.snapshot()
    assert [e.kind for e in snap.entities] == [EntityKind.STATIC_CLOUD] * 2
    assert session.state.last_obstacle_spawn_ms == 76 * FRAME_MS
    # Boosted cloud interval is 800 ms: one spawn at tick 51.
    assert len(snap.clouds) == 1
    assert session.score == 0
