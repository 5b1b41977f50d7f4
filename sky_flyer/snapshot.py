"""Read-only views of a run handed to rendering and audio collaborators."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from sky_flyer.components import RunState
from sky_flyer.config import FlyerConfig
from sky_flyer.types import EntityId, EntityKind, GameStatus


@dataclass(frozen=True, slots=True)
class CraftView:
    x: float
    y: float
    tilt: float
    boosting: bool


@dataclass(frozen=True, slots=True)
class EntityView:
    id: EntityId
    kind: EntityKind
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class CloudView:
    id: EntityId
    x: float
    y: float
    scale: float


@dataclass(frozen=True, slots=True)
class Snapshot:
    status: GameStatus
    score: int
    high_score: int
    craft: CraftView
    entities: tuple[EntityView, ...]
    clouds: tuple[CloudView, ...]

    @property
    def boosting(self) -> bool:
        return self.craft.boosting

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible dict; enums become their string values."""
        data = dataclasses.asdict(self)
        data["status"] = self.status.value
        data["entities"] = [dict(e, kind=e["kind"].value) for e in data["entities"]]
        data["clouds"] = list(data["clouds"])
        return data


def take_snapshot(state: RunState, config: FlyerConfig) -> Snapshot:
    return Snapshot(
        status=state.status,
        score=state.score,
        high_score=state.high_score,
        craft=CraftView(
            x=config.craft_x,
            y=state.craft.y,
            tilt=state.craft.tilt,
            boosting=state.boost.active,
        ),
        entities=tuple(
            EntityView(o.id, o.kind, o.x, o.y, o.width, o.height)
            for o in state.obstacles
        ),
        clouds=tuple(CloudView(c.id, c.x, c.y, c.scale) for c in state.clouds),
    )
