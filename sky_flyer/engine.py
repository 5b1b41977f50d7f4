"""GameLoop - ordered per-tick systems over an exclusively owned RunState."""
from __future__ import annotations

import random
from typing import Callable

from sky_flyer.clock import FrameClock
from sky_flyer.components import RunState
from sky_flyer.config import FlyerConfig
from sky_flyer.controls import Controls
from sky_flyer.signals import SignalBus
from sky_flyer.systems import (
    make_boost_system,
    make_collision_system,
    make_craft_system,
    make_motion_system,
    make_publish_system,
    make_spawn_system,
)
from sky_flyer.types import FrameContext, GameStatus, System

StopHook = Callable[[RunState, FrameContext], None]


class GameLoop:
    def __init__(self, rng: random.Random | None = None) -> None:
        self._clock = FrameClock()
        self._systems: list[System] = []
        self._stop_hooks: list[StopHook] = []
        self._stop_requested = False
        self._rng = rng if rng is not None else random.Random()

    @property
    def clock(self) -> FrameClock:
        return self._clock

    @property
    def rng(self) -> random.Random:
        return self._rng

    @property
    def stop_requested(self) -> bool:
        return self._stop_requested

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_stop(self, hook: StopHook) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def reset(self, now_ms: float) -> None:
        self._stop_requested = False
        self._clock.reset(now_ms)

    def tick(self, state: RunState, now_ms: float) -> RunState:
        """Advance ``state`` by one frame at ``now_ms`` and return it.

        A no-op unless the run is PLAYING. Once a system requests a stop,
        the remaining systems are skipped and the stop hooks run instead.
        """
        if state.status is not GameStatus.PLAYING:
            return state
        self._stop_requested = False
        dt = self._clock.advance(now_ms)
        ctx = self._clock.context(now_ms, dt, self._request_stop, self._rng)
        for system in self._systems:
            system(state, ctx)
            if self._stop_requested:
                break
        if self._stop_requested:
            for hook in self._stop_hooks:
                hook(state, ctx)
        return state


def build_game_loop(
    config: FlyerConfig,
    controls: Controls,
    bus: SignalBus,
    rng: random.Random | None = None,
) -> GameLoop:
    """Wire the standard pipeline: boost, craft, spawn, motion, collision, publish."""
    loop = GameLoop(rng)
    loop.add_system(make_boost_system())
    loop.add_system(make_craft_system(config, controls))
    loop.add_system(make_spawn_system(config))
    loop.add_system(make_motion_system(config))
    loop.add_system(make_collision_system(config, bus))
    loop.add_system(make_publish_system(config, bus))
    return loop
