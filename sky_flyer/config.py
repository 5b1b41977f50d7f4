"""Game configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

from sky_flyer.types import ConfigError


@dataclass(frozen=True)
class FlyerConfig:
    """Immutable tuning for one game session.

    Distances are in playfield units, speeds in units per tick and
    intervals in milliseconds. The boost duration is counted in ticks.

    Attributes:
        width: Playfield width.
        height: Playfield height.
        craft_x: Fixed horizontal anchor (left edge) of the craft.
        craft_width: Craft width.
        craft_height: Craft height.
        initial_craft_y: Craft and pointer y at the start of every run.
        base_speed: Obstacle scroll speed at score 0.
        speed_increment: Added scroll speed per score point.
        base_spawn_interval_ms: Obstacle spawn gate at score 0.
        min_spawn_interval_ms: Floor of the obstacle spawn gate.
        spawn_decrement_ms: Spawn gate reduction per score point.
        cloud_spawn_interval_ms: Background cloud spawn gate.
        craft_padding: Inset applied to the craft hitbox on every side.
        entity_padding: Inset applied to obstacle hitboxes on every side.
        boost_bonus: Points awarded for collecting a boost star.
        boost_duration: Boost length in ticks.
        boost_multiplier: Speed multiplier (and spawn divisor) while boosting.
        key_step: Craft movement per tick while a key is held.
        pointer_smoothing: Fraction of the pointer distance closed per tick.
        tilt_factor: Degrees of tilt per unit of vertical movement.
        max_tilt: Tilt clamp in degrees (both directions).
        despawn_margin_x: Obstacles at or beyond -despawn_margin_x are dropped.
        despawn_margin_y: Obstacles at or below height + despawn_margin_y are dropped.
        cloud_despawn_x: Background clouds at or beyond -cloud_despawn_x are dropped.
        default_volume: Initial audio master level.
    """

    width: float = 800.0
    height: float = 500.0
    craft_x: float = 100.0
    craft_width: float = 60.0
    craft_height: float = 40.0
    initial_craft_y: float = 250.0
    base_speed: float = 5.0
    speed_increment: float = 0.15
    base_spawn_interval_ms: float = 1500.0
    min_spawn_interval_ms: float = 600.0
    spawn_decrement_ms: float = 25.0
    cloud_spawn_interval_ms: float = 2000.0
    craft_padding: float = 12.0
    entity_padding: float = 5.0
    boost_bonus: int = 10
    boost_duration: int = 120
    boost_multiplier: float = 2.5
    key_step: float = 7.0
    pointer_smoothing: float = 0.15
    tilt_factor: float = 3.5
    max_tilt: float = 25.0
    despawn_margin_x: float = 150.0
    despawn_margin_y: float = 150.0
    cloud_despawn_x: float = 200.0
    default_volume: float = 0.3

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ConfigError("playfield width and height must be positive")
        if self.craft_width <= 0 or self.craft_height <= 0:
            raise ConfigError("craft width and height must be positive")
        if self.craft_height > self.height:
            raise ConfigError("craft does not fit the playfield")
        if self.min_spawn_interval_ms <= 0:
            raise ConfigError("min_spawn_interval_ms must be positive")
        if self.min_spawn_interval_ms > self.base_spawn_interval_ms:
            raise ConfigError("min_spawn_interval_ms exceeds base_spawn_interval_ms")
        if self.boost_multiplier < 1.0:
            raise ConfigError("boost_multiplier must be at least 1.0")
        if self.boost_duration < 0:
            raise ConfigError("boost_duration must not be negative")
        if not 0.0 < self.pointer_smoothing <= 1.0:
            raise ConfigError("pointer_smoothing must be in (0, 1]")
        if not 0.0 <= self.default_volume <= 1.0:
            raise ConfigError("default_volume must be in [0, 1]")

    @property
    def max_craft_y(self) -> float:
        return self.height - self.craft_height

    def clamp_craft_y(self, y: float) -> float:
        return max(0.0, min(self.max_craft_y, y))
