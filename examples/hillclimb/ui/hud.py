"""HUD overlays: distance, fuel bar and the start, pause and game-over screens."""
from __future__ import annotations

import pygame

from ui.constants import (
    ACCENT,
    FUEL_BAR_H,
    FUEL_BAR_PAD,
    FUEL_BAR_W,
    FUEL_BG,
    FUEL_BORDER,
    FUEL_CRITICAL,
    FUEL_LOW,
    FUEL_OK,
    FUEL_WARN,
    FUEL_WARNING,
    OVERLAY,
    RECORD_COLOR,
    TEXT_COLOR,
    TEXT_DIM,
)


def fuel_color(percent: float) -> tuple[int, int, int]:
    if percent < FUEL_CRITICAL:
        return FUEL_LOW
    if percent < FUEL_WARNING:
        return FUEL_WARN
    return FUEL_OK


def draw_hud(surface: pygame.Surface, font: pygame.font.Font, distance: float, percent: float) -> None:
    """Distance top-centre, fuel bar top-left."""
    label = font.render(f"{int(distance)}m", True, TEXT_COLOR)
    surface.blit(label, label.get_rect(midtop=(surface.get_width() // 2, FUEL_BAR_PAD)))

    x, y = FUEL_BAR_PAD, FUEL_BAR_PAD
    pygame.draw.rect(surface, FUEL_BG, (x, y, FUEL_BAR_W, FUEL_BAR_H), border_radius=4)
    fill_w = int(FUEL_BAR_W * max(0.0, min(100.0, percent)) / 100)
    if fill_w > 0:
        pygame.draw.rect(surface, fuel_color(percent), (x, y, fill_w, FUEL_BAR_H), border_radius=4)
    pygame.draw.rect(surface, FUEL_BORDER, (x, y, FUEL_BAR_W, FUEL_BAR_H), 1, border_radius=4)


def _overlay(surface: pygame.Surface) -> None:
    shade = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    shade.fill(OVERLAY)
    surface.blit(shade, (0, 0))


def _centered(surface: pygame.Surface, font: pygame.font.Font, text: str, color, dy: int) -> None:
    image = font.render(text, True, color)
    cx, cy = surface.get_width() // 2, surface.get_height() // 2
    surface.blit(image, image.get_rect(center=(cx, cy + dy)))


def draw_start_screen(surface: pygame.Surface, big_font: pygame.font.Font, font: pygame.font.Font) -> None:
    _overlay(surface)
    _centered(surface, big_font, "SUMMIT", ACCENT, -40)
    _centered(surface, font, "Right/D gas  Left/A brake  P pause", TEXT_DIM, 10)
    _centered(surface, font, "Space to play", TEXT_COLOR, 40)


def draw_pause_overlay(surface: pygame.Surface, big_font: pygame.font.Font, font: pygame.font.Font) -> None:
    _overlay(surface)
    _centered(surface, big_font, "PAUSED", TEXT_COLOR, -20)
    _centered(surface, font, "P to resume", TEXT_DIM, 20)


def draw_game_over(
    surface: pygame.Surface,
    big_font: pygame.font.Font,
    font: pygame.font.Font,
    distance: float,
    best: int,
    new_record: bool,
) -> None:
    _overlay(surface)
    _centered(surface, font, "OUT OF FUEL", TEXT_DIM, -60)
    _centered(surface, big_font, f"{int(distance)}m", TEXT_COLOR, -20)
    _centered(surface, font, f"BEST: {best}m", TEXT_DIM, 20)
    if new_record:
        _centered(surface, font, "NEW RECORD!", RECORD_COLOR, 45)
    _centered(surface, font, "Space to retry", TEXT_COLOR, 75)
