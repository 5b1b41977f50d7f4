"""Input state written by host event handlers and read at tick start."""
from __future__ import annotations

from sky_flyer.config import FlyerConfig


class Controls:
    """Held-key flags and the pointer's vertical target.

    Handlers may write at any time; the craft system only reads at the
    start of a tick.
    """

    def __init__(self, config: FlyerConfig) -> None:
        self._config = config
        self.up = False
        self.down = False
        self._pointer_y = config.clamp_craft_y(config.initial_craft_y)

    @property
    def pointer_y(self) -> float:
        return self._pointer_y

    def set_key(self, direction: str, held: bool) -> None:
        if direction == "up":
            self.up = held
        elif direction == "down":
            self.down = held
        else:
            raise ValueError(f"Unknown direction {direction!r}")

    def point_at(self, y: float) -> None:
        """Set the pointer target (craft top edge), clamped to the playfield."""
        self._pointer_y = self._config.clamp_craft_y(y)

    def reset(self) -> None:
        self.up = False
        self.down = False
        self._pointer_y = self._config.clamp_craft_y(self._config.initial_craft_y)


def target_y(current_y: float, controls: Controls, config: FlyerConfig) -> float:
    """Next craft y: key step if a key is held, else ease toward the pointer."""
    if controls.up:
        y = current_y - config.key_step
    elif controls.down:
        y = current_y + config.key_step
    else:
        y = current_y + (controls.pointer_y - current_y) * config.pointer_smoothing
    return config.clamp_craft_y(y)


def tilt_for(dy: float, config: FlyerConfig) -> float:
    return max(-config.max_tilt, min(config.max_tilt, dy * config.tilt_factor))
