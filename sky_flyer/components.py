"""Entity and run-state components."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

from sky_flyer.boost import BoostTimer
from sky_flyer.types import EntityId, EntityKind, GameStatus


@dataclass
class Craft:
    """The player craft. x is fixed by config; only y and tilt change."""

    y: float
    tilt: float = 0.0


@dataclass
class Obstacle:
    """Common fields of every scrolling obstacle or pickup.

    ``passed`` flips to True once the obstacle scrolls behind the craft
    anchor and is never reset.
    """

    kind: ClassVar[EntityKind]

    id: EntityId
    x: float
    y: float
    width: float
    height: float
    spawn_time_ms: float
    passed: bool = False

    @property
    def harmful(self) -> bool:
        return self.kind.harmful


@dataclass
class StaticCloud(Obstacle):
    kind: ClassVar[EntityKind] = EntityKind.STATIC_CLOUD


@dataclass
class OscillatingBalloon(Obstacle):
    """Bobs around ``initial_y``; phase is fixed at spawn."""

    kind: ClassVar[EntityKind] = EntityKind.OSCILLATING_BALLOON

    initial_y: float = 0.0
    phase: float = 0.0


@dataclass
class FallingSatellite(Obstacle):
    """Falls at a constant ``vertical_speed`` per tick."""

    kind: ClassVar[EntityKind] = EntityKind.FALLING_SATELLITE

    vertical_speed: float = 1.5


@dataclass
class Bomb(Obstacle):
    kind: ClassVar[EntityKind] = EntityKind.BOMB


@dataclass
class FastBird(Obstacle):
    kind: ClassVar[EntityKind] = EntityKind.FAST_BIRD


@dataclass
class BoostStar(Obstacle):
    kind: ClassVar[EntityKind] = EntityKind.BOOST_STAR


MovingEntity = Union[
    StaticCloud, OscillatingBalloon, FallingSatellite, Bomb, FastBird, BoostStar
]


@dataclass
class BackgroundCloud:
    """Decorative parallax cloud. Never collides or scores."""

    id: EntityId
    x: float
    y: float
    scale: float
    speed: float


@dataclass
class RunState:
    """Everything one tick reads and writes.

    Owned by the session; handed to the game loop for each tick and
    returned from it. Nothing else mutates it while a tick runs.
    """

    craft: Craft
    status: GameStatus = GameStatus.START
    score: int = 0
    high_score: int = 0
    boost: BoostTimer = field(default_factory=BoostTimer)
    obstacles: list[MovingEntity] = field(default_factory=list)
    clouds: list[BackgroundCloud] = field(default_factory=list)
    last_obstacle_spawn_ms: float = 0.0
    last_cloud_spawn_ms: float = 0.0
    next_id: int = 0

    def allocate_id(self) -> EntityId:
        eid = self.next_id
        self.next_id += 1
        return eid

    @property
    def boosting(self) -> bool:
        return self.boost.active
