"""sky_flyer - Real-time side-scrolling avoidance game engine."""

from sky_flyer.audio import AudioMixer, ToneCue, synthesize
from sky_flyer.components import (
    BackgroundCloud,
    Bomb,
    BoostStar,
    Craft,
    FallingSatellite,
    FastBird,
    MovingEntity,
    OscillatingBalloon,
    RunState,
    StaticCloud,
)
from sky_flyer.config import FlyerConfig
from sky_flyer.controls import Controls
from sky_flyer.engine import GameLoop, build_game_loop
from sky_flyer.scheduler import FrameScheduler, ManualScheduler
from sky_flyer.session import SessionController
from sky_flyer.signals import SignalBus
from sky_flyer.snapshot import Snapshot
from sky_flyer.types import (
    ConfigError,
    EntityKind,
    FrameContext,
    GameStatus,
    SkyFlyerError,
    TransitionError,
)

__all__ = [
    "AudioMixer",
    "BackgroundCloud",
    "Bomb",
    "BoostStar",
    "ConfigError",
    "Controls",
    "Craft",
    "EntityKind",
    "FallingSatellite",
    "FastBird",
    "FlyerConfig",
    "FrameContext",
    "FrameScheduler",
    "GameLoop",
    "GameStatus",
    "ManualScheduler",
    "MovingEntity",
    "OscillatingBalloon",
    "RunState",
    "SessionController",
    "SignalBus",
    "SkyFlyerError",
    "Snapshot",
    "StaticCloud",
    "ToneCue",
    "TransitionError",
    "build_game_loop",
    "synthesize",
]
