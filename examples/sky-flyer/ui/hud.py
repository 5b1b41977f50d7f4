"""Score bar and start / game-over overlays."""
from __future__ import annotations

import pygame

from sky_flyer import GameStatus, Snapshot
from ui.constants import DANGER, GOLD, HUD_BG, HUD_H, MARGIN, TEXT


def draw_hud(
    surface: pygame.Surface,
    font: pygame.font.Font,
    snap: Snapshot,
    volume: float,
    muted: bool,
) -> None:
    width = surface.get_width()
    pygame.draw.rect(surface, HUD_BG, (0, 0, width, HUD_H))
    score_color = GOLD if snap.boosting else TEXT
    surface.blit(font.render(f"SCORE {snap.score}", True, score_color), (MARGIN, 14))
    surface.blit(font.render(f"BEST {snap.high_score}", True, TEXT), (MARGIN + 180, 14))
    sound = "MUTED" if muted else f"VOL {int(round(volume * 100))}%"
    label = font.render(sound, True, TEXT)
    surface.blit(label, (width - label.get_width() - MARGIN, 14))

    if snap.status is GameStatus.PLAYING:
        if snap.boosting:
            _banner(surface, font, "BOOST ACTIVE! Invincible Speed!", GOLD, surface.get_height() - 40)
        elif snap.score > 0 and snap.score % 10 == 0:
            _banner(surface, font, "DANGER INCREASING!", TEXT, HUD_H + 20)


def _banner(surface, font, text, color, y) -> None:
    rendered = font.render(text, True, color)
    surface.blit(rendered, rendered.get_rect(center=(surface.get_width() // 2, y)))


def draw_overlay(
    surface: pygame.Surface,
    font: pygame.font.Font,
    big_font: pygame.font.Font,
    snap: Snapshot,
) -> None:
    """Start and game-over screens; nothing while playing."""
    if snap.status is GameStatus.PLAYING:
        return
    w, h = surface.get_size()
    shade = pygame.Surface((w, h - HUD_H), pygame.SRCALPHA)
    if snap.status is GameStatus.START:
        shade.fill((0, 0, 0, 110))
        title, hint, color = "READY FOR TAKEOFF?", "Space to start - grab stars for a boost", TEXT
    else:
        shade.fill((200, 30, 30, 120))
        title, hint, color = "CRASHED!", f"Final score {snap.score} - Space to try again", GOLD
    surface.blit(shade, (0, HUD_H))
    t = big_font.render(title, True, TEXT)
    surface.blit(t, t.get_rect(center=(w // 2, h // 2 - 20)))
    s = font.render(hint, True, color)
    surface.blit(s, s.get_rect(center=(w // 2, h // 2 + 30)))
    keys = font.render("Up/Down or mouse to steer  M mute  +/- volume  Esc quit", True, DANGER if snap.status is GameStatus.GAME_OVER else TEXT)
    surface.blit(keys, keys.get_rect(center=(w // 2, h - 30)))
