"""Summit - side-scrolling hill climb on the summit simulation core.

Drive as far as the fuel lasts. Cans along the road refill the tank.

Controls:
  Right / D   Gas
  Left / A    Brake / reverse
  Space       Start / retry
  P           Pause / Resume
  Escape      Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from summit import Canvas, render_frame

from game.setup import GAME_OVER, PAUSED, PLAYING, START, build_game
from ui.constants import DEFAULT_H, DEFAULT_W, FPS, TITLE
from ui.hud import draw_game_over, draw_hud, draw_pause_overlay, draw_start_screen
from ui.truck import draw_truck

GAS_KEYS = (pygame.K_RIGHT, pygame.K_d)
BRAKE_KEYS = (pygame.K_LEFT, pygame.K_a)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Summit - hill climb demo")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--width", type=int, default=DEFAULT_W, help=f"Window width (default: {DEFAULT_W})")
    p.add_argument("--height", type=int, default=DEFAULT_H, help=f"Window height (default: {DEFAULT_H})")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Logging level (default: INFO)")
    args = p.parse_args()
    args.width = max(320, args.width)
    args.height = max(240, args.height)
    return args


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Terrain stays generated two screens ahead of the truck
    state = build_game(seed=args.seed, lookahead=args.width * 2)

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 18, bold=True)
    big_font = pygame.font.SysFont("monospace", 48, bold=True)
    canvas = Canvas(screen)

    # Show the opening stretch behind the start screen
    state.game.engine.start(state.truck.reset(state.game.terrain))

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE and state.mode in (START, GAME_OVER):
                    state.start_run()
                elif event.key == pygame.K_p:
                    if state.mode == PLAYING:
                        state.mode = PAUSED
                    elif state.mode == PAUSED:
                        state.mode = PLAYING
                elif event.key in GAS_KEYS:
                    state.controls.gas = True
                elif event.key in BRAKE_KEYS:
                    state.controls.brake = True

            elif event.type == pygame.KEYUP:
                if event.key in GAS_KEYS:
                    state.controls.gas = False
                elif event.key in BRAKE_KEYS:
                    state.controls.brake = False

        # --- Update ---
        if state.mode == PLAYING:
            state.game.engine.step(dt)
            if state.game.over:
                state.finish_run()

        # --- Draw ---
        vehicle = state.game.engine.run.vehicle
        render_frame(canvas, state.game, lambda c: draw_truck(c, vehicle))

        if state.mode in (PLAYING, PAUSED):
            draw_hud(screen, font, state.game.distance, state.game.fuel.percent)
        if state.mode == START:
            draw_start_screen(screen, big_font, font)
        elif state.mode == PAUSED:
            draw_pause_overlay(screen, big_font, font)
        elif state.mode == GAME_OVER:
            draw_game_over(screen, big_font, font, state.game.distance, state.best, state.new_record)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
