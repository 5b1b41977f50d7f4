"""SessionController - run lifecycle, status machine, and high score."""
from __future__ import annotations

import logging
import random
from typing import Callable

from sky_flyer import signals
from sky_flyer.components import Craft, RunState
from sky_flyer.config import FlyerConfig
from sky_flyer.controls import Controls
from sky_flyer.engine import GameLoop, build_game_loop
from sky_flyer.scheduler import FrameScheduler, ManualScheduler
from sky_flyer.signals import SignalBus
from sky_flyer.snapshot import Snapshot, take_snapshot
from sky_flyer.types import FrameContext, GameStatus, TransitionError

logger = logging.getLogger(__name__)

# status -> {action: next status}
TRANSITIONS: dict[GameStatus, dict[str, GameStatus]] = {
    GameStatus.START: {"start": GameStatus.PLAYING},
    GameStatus.PLAYING: {"end": GameStatus.GAME_OVER},
    GameStatus.GAME_OVER: {"start": GameStatus.PLAYING},
}

TransitionHook = Callable[[GameStatus, GameStatus], None]


class SessionController:
    """Owns the run state and drives the game loop through a frame scheduler.

    The high score lives as long as the controller; nothing is persisted.
    """

    def __init__(
        self,
        config: FlyerConfig | None = None,
        scheduler: FrameScheduler | None = None,
        bus: SignalBus | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config if config is not None else FlyerConfig()
        self.scheduler = scheduler if scheduler is not None else ManualScheduler()
        self.bus = bus if bus is not None else SignalBus()
        self.controls = Controls(self.config)
        self.loop: GameLoop = build_game_loop(self.config, self.controls, self.bus, rng)
        self.loop.on_stop(self._on_fatal_hit)
        self._state = RunState(craft=Craft(y=self._initial_y()))
        self._handle: int | None = None
        self._transition_hooks: list[TransitionHook] = []

    @property
    def state(self) -> RunState:
        return self._state

    @property
    def status(self) -> GameStatus:
        return self._state.status

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def high_score(self) -> int:
        return self._state.high_score

    @property
    def running(self) -> bool:
        """True while a next tick is armed."""
        return self._handle is not None

    def on_transition(self, hook: TransitionHook) -> None:
        self._transition_hooks.append(hook)

    def can(self, action: str) -> bool:
        return action in TRANSITIONS[self._state.status]

    def _transition(self, action: str) -> None:
        old = self._state.status
        target = TRANSITIONS[old].get(action)
        if target is None:
            raise TransitionError(old, action)
        self._state.status = target
        for hook in self._transition_hooks:
            hook(old, target)

    def _initial_y(self) -> float:
        return self.config.clamp_craft_y(self.config.initial_craft_y)

    # --- Lifecycle ---

    def start(self, now_ms: float) -> None:
        """Begin a fresh run at ``now_ms``. Valid from START and GAME_OVER."""
        if not self.can("start"):
            raise TransitionError(self._state.status, "start")
        self._cancel_pending()
        state = self._state
        state.score = 0
        state.obstacles = []
        state.clouds = []
        state.craft = Craft(y=self._initial_y())
        state.boost.reset()
        state.last_obstacle_spawn_ms = now_ms
        state.last_cloud_spawn_ms = now_ms
        self.controls.reset()
        self.bus.clear()
        self.loop.reset(now_ms)
        self._transition("start")
        logger.info("run started (high score %d)", state.high_score)
        self._arm()

    def _end(self, state: RunState) -> None:
        state.high_score = max(state.high_score, state.score)
        self._transition("end")
        self._cancel_pending()
        logger.info("run ended: score %d, high score %d", state.score, state.high_score)
        self.bus.publish(signals.CRASH, score=state.score, high_score=state.high_score)
        self.bus.publish(signals.FRAME, snapshot=take_snapshot(state, self.config))
        self.bus.flush()

    def _on_fatal_hit(self, state: RunState, ctx: FrameContext) -> None:
        self._end(state)

    # --- Scheduling ---

    def _arm(self) -> None:
        self._handle = self.scheduler.request(self._frame)

    def _cancel_pending(self) -> None:
        if self._handle is not None:
            self.scheduler.cancel(self._handle)
            self._handle = None

    def _frame(self, now_ms: float) -> None:
        self._handle = None
        self._state = self.loop.tick(self._state, now_ms)
        # A crash handler may already have restarted and re-armed.
        if self._handle is not None:
            return
        if self._state.status is GameStatus.PLAYING and not self.loop.stop_requested:
            self._arm()

    def snapshot(self) -> Snapshot:
        return take_snapshot(self._state, self.config)
