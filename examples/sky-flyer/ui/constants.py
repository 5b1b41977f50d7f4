"""Colors and layout for the Sky Flyer demo."""
from __future__ import annotations

from sky_flyer.types import EntityKind

FPS = 60
HUD_H = 48
MARGIN = 16

SKY_TOP = (56, 132, 220)
SKY_BOTTOM = (150, 205, 250)
HUD_BG = (18, 30, 60)
TEXT = (255, 255, 255)
GOLD = (250, 204, 21)
DANGER = (239, 68, 68)
CLOUD = (255, 255, 255)

CRAFT_BODY = (230, 60, 60)
CRAFT_WING = (200, 40, 40)
CRAFT_GLOW = (250, 204, 21, 110)

ENTITY_COLORS: dict[EntityKind, tuple[int, int, int]] = {
    EntityKind.STATIC_CLOUD: (225, 232, 240),
    EntityKind.OSCILLATING_BALLOON: (236, 72, 153),
    EntityKind.FALLING_SATELLITE: (148, 163, 184),
    EntityKind.BOMB: (30, 30, 30),
    EntityKind.FAST_BIRD: (120, 72, 40),
    EntityKind.BOOST_STAR: GOLD,
}
