"""Draws a Snapshot onto a pygame surface. Never touches game state."""
from __future__ import annotations

import math

import pygame

from sky_flyer import FlyerConfig, Snapshot
from sky_flyer.snapshot import CloudView, CraftView, EntityView
from sky_flyer.types import EntityKind
from ui.constants import (
    CLOUD,
    CRAFT_BODY,
    CRAFT_GLOW,
    CRAFT_WING,
    ENTITY_COLORS,
    SKY_BOTTOM,
    SKY_TOP,
)


class Renderer:
    def __init__(self, config: FlyerConfig, top: int) -> None:
        self._config = config
        self._top = top
        self._sky = self._build_sky(int(config.width), int(config.height))

    @staticmethod
    def _build_sky(w: int, h: int) -> pygame.Surface:
        sky = pygame.Surface((w, h))
        for row in range(h):
            t = row / max(1, h - 1)
            color = tuple(int(a + (b - a) * t) for a, b in zip(SKY_TOP, SKY_BOTTOM))
            pygame.draw.line(sky, color, (0, row), (w, row))
        return sky

    def draw(self, surface: pygame.Surface, snap: Snapshot) -> None:
        surface.blit(self._sky, (0, self._top))
        for cloud in snap.clouds:
            self._draw_cloud(surface, cloud)
        self._draw_craft(surface, snap.craft)
        for entity in snap.entities:
            self._draw_entity(surface, entity)

    def _draw_cloud(self, surface: pygame.Surface, cloud: CloudView) -> None:
        layer = pygame.Surface((int(120 * cloud.scale), int(60 * cloud.scale)), pygame.SRCALPHA)
        w, h = layer.get_size()
        for cx, cy, r in ((0.3, 0.6, 0.3), (0.55, 0.45, 0.38), (0.78, 0.62, 0.26)):
            pygame.draw.circle(layer, (*CLOUD, 150), (int(cx * w), int(cy * h)), int(r * h))
        surface.blit(layer, (cloud.x, cloud.y + self._top))

    def _draw_craft(self, surface: pygame.Surface, craft: CraftView) -> None:
        w, h = int(self._config.craft_width), int(self._config.craft_height)
        body = pygame.Surface((w, h), pygame.SRCALPHA)
        if craft.boosting:
            pygame.draw.ellipse(body, CRAFT_GLOW, body.get_rect())
        pygame.draw.ellipse(body, CRAFT_BODY, (4, h // 3, w - 8, h // 3))
        pygame.draw.polygon(body, CRAFT_WING, [(w // 3, h // 2), (w // 2, 2), (w // 2 + 6, h // 2)])
        pygame.draw.polygon(body, CRAFT_WING, [(w // 3, h // 2), (w // 2, h - 2), (w // 2 + 6, h // 2)])
        # Screen y grows downward, so a positive tilt noses the craft down.
        rotated = pygame.transform.rotate(body, -craft.tilt)
        center = (craft.x + w / 2, craft.y + h / 2 + self._top)
        surface.blit(rotated, rotated.get_rect(center=center))

    def _draw_entity(self, surface: pygame.Surface, entity: EntityView) -> None:
        color = ENTITY_COLORS[entity.kind]
        rect = pygame.Rect(int(entity.x), int(entity.y) + self._top, int(entity.width), int(entity.height))
        if entity.kind is EntityKind.BOOST_STAR:
            cx, cy = rect.center
            r_out, r_in = rect.width / 2, rect.width / 5
            points = []
            for i in range(10):
                r = r_out if i % 2 == 0 else r_in
                a = -math.pi / 2 + i * math.pi / 5
                points.append((cx + r * math.cos(a), cy + r * math.sin(a)))
            pygame.draw.polygon(surface, color, points)
        elif entity.kind in (EntityKind.BOMB, EntityKind.OSCILLATING_BALLOON):
            pygame.draw.ellipse(surface, color, rect)
        elif entity.kind is EntityKind.STATIC_CLOUD:
            pygame.draw.ellipse(surface, color, rect)
            pygame.draw.ellipse(surface, (170, 180, 195), rect, 2)
        else:
            pygame.draw.rect(surface, color, rect, border_radius=6)
