"""Sky Flyer — side-scrolling avoidance demo.

Fly the craft, dodge clouds, balloons, satellites, bombs and birds, and
grab stars for a boost that makes you fast and invincible for a moment.

Controls:
  Up / Down   Steer (held)
  Mouse       Steer toward the pointer
  Space       Start / try again
  M           Mute / unmute
  + / -       Volume
  Escape      Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from sky_flyer import AudioMixer, FlyerConfig, GameStatus, ManualScheduler, SessionController
from ui.constants import FPS, HUD_H
from ui.hud import draw_hud, draw_overlay
from ui.renderer import Renderer
from ui.sound import SoundPlayer

logger = logging.getLogger("sky_flyer.demo")

VOLUME_STEP = 0.1


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Sky Flyer — pygame demo")
    p.add_argument("--width", type=int, default=800, help="Playfield width (default: 800)")
    p.add_argument("--height", type=int, default=500, help="Playfield height (default: 500)")
    p.add_argument("--fps", type=int, default=FPS, help=f"Display frame cap (default: {FPS})")
    p.add_argument("--volume", type=float, default=0.3, help="Initial volume 0-1 (default: 0.3)")
    p.add_argument("--mute", action="store_true", help="Start muted")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    args = p.parse_args()
    args.width = max(400, min(1600, args.width))
    args.height = max(300, min(1000, args.height))
    args.fps = max(20, min(240, args.fps))
    return args


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    config = FlyerConfig(
        width=float(args.width),
        height=float(args.height),
        initial_craft_y=args.height / 2,
        default_volume=max(0.0, min(1.0, args.volume)),
    )
    scheduler = ManualScheduler()
    session = SessionController(config, scheduler=scheduler)
    mixer = AudioMixer(volume=config.default_volume, muted=args.mute)
    mixer.attach(session.bus)

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height + HUD_H))
    pygame.display.set_caption("Sky Flyer")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 18, bold=True)
    big_font = pygame.font.SysFont("monospace", 44, bold=True)
    renderer = Renderer(config, top=HUD_H)
    sound = SoundPlayer(mixer)
    if not sound.enabled:
        logger.warning("no audio device; continuing without sound")

    running = True
    while running:
        dt = clock.tick(args.fps) / 1000.0
        now_ms = float(pygame.time.get_ticks())

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                held = event.type == pygame.KEYDOWN
                if event.key == pygame.K_UP:
                    session.controls.set_key("up", held)
                elif event.key == pygame.K_DOWN:
                    session.controls.set_key("down", held)
                elif not held:
                    continue
                elif event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key in (pygame.K_SPACE, pygame.K_RETURN):
                    if session.can("start"):
                        session.start(now_ms)
                elif event.key == pygame.K_m:
                    mixer.toggle_mute()
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    mixer.set_volume(mixer.volume + VOLUME_STEP)
                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    mixer.set_volume(mixer.volume - VOLUME_STEP)

            elif event.type == pygame.MOUSEMOTION:
                session.controls.point_at(event.pos[1] - HUD_H - config.craft_height / 2)

        # One display frame, one tick.
        scheduler.advance(now_ms)

        snap = session.snapshot()
        sound.update(dt, snap, session.status is GameStatus.PLAYING)

        renderer.draw(screen, snap)
        draw_hud(screen, font, snap, mixer.volume, mixer.muted)
        draw_overlay(screen, font, big_font, snap)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
