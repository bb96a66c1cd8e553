"""Drawing surface with a translation stack on top of pygame.

Points passed to a Canvas are in the current coordinate space; ``translate``
shifts that space, ``save``/``restore`` push and pop it. Colors may carry
an alpha component, which is composited through a temporary SRCALPHA layer.
"""
from __future__ import annotations

import math
from typing import Callable, Sequence

import pygame

from summit.types import Color

Point = tuple[float, float]
ColorStops = Sequence[tuple[float, Color]]

FONT_NAME = "monospace"


def gradient_color(stops: ColorStops, t: float) -> tuple[int, int, int, int]:
    """Color at ``t`` along a linear gradient, clamped to the end stops."""
    t = min(1.0, max(0.0, t))
    prev_pos, prev_color = stops[0]
    for pos, color in stops:
        if t <= pos:
            span = pos - prev_pos
            f = (t - prev_pos) / span if span > 0 else 0.0
            return _mix(prev_color, color, f)
        prev_pos, prev_color = pos, color
    return _rgba(stops[-1][1])


def _rgba(color: Color) -> tuple[int, int, int, int]:
    if len(color) == 4:
        return tuple(color)  # type: ignore[return-value]
    r, g, b = color[:3]
    return r, g, b, 255


def _mix(a: Color, b: Color, f: float) -> tuple[int, int, int, int]:
    ca, cb = _rgba(a), _rgba(b)
    return tuple(round(x + (y - x) * f) for x, y in zip(ca, cb))  # type: ignore[return-value]


class Canvas:
    def __init__(self, surface: pygame.Surface) -> None:
        self._surface = surface
        self._origin: Point = (0.0, 0.0)
        self._stack: list[Point] = []
        self._fonts: dict[tuple[int, bool], pygame.font.Font] = {}

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    @property
    def width(self) -> int:
        return self._surface.get_width()

    @property
    def height(self) -> int:
        return self._surface.get_height()

    @property
    def origin(self) -> Point:
        return self._origin

    # --- Transform state ---

    def save(self) -> None:
        self._stack.append(self._origin)

    def restore(self) -> None:
        if not self._stack:
            raise RuntimeError("restore() called without a matching save()")
        self._origin = self._stack.pop()

    def translate(self, dx: float, dy: float) -> None:
        ox, oy = self._origin
        self._origin = (ox + dx, oy + dy)

    def _map(self, point: Point) -> Point:
        return point[0] + self._origin[0], point[1] + self._origin[1]

    # --- Primitives ---

    def fill_polygon(self, points: Sequence[Point], color: Color) -> None:
        if len(points) < 3:
            return
        pts = [self._map(p) for p in points]
        self._draw(color, _bounds(pts), lambda s, c, o: pygame.draw.polygon(s, c, _shift(pts, o)))

    def fill_polygon_gradient(
        self,
        points: Sequence[Point],
        top: float,
        bottom: float,
        stops: ColorStops,
    ) -> None:
        """Fill a polygon with a vertical gradient running from ``top`` to ``bottom``."""
        if len(points) < 3:
            return
        pts = [self._map(p) for p in points]
        rect = _bounds(pts).clip(self._surface.get_rect())
        if rect.width <= 0 or rect.height <= 0:
            return
        layer = self._gradient_layer(rect, top + self._origin[1], bottom + self._origin[1], stops)
        mask = pygame.Surface(rect.size, pygame.SRCALPHA)
        pygame.draw.polygon(mask, (255, 255, 255, 255), _shift(pts, (-rect.x, -rect.y)))
        layer.blit(mask, (0, 0), special_flags=pygame.BLEND_RGBA_MULT)
        self._surface.blit(layer, rect.topleft)

    def fill_rect_gradient(
        self,
        rect: tuple[float, float, float, float],
        top: float,
        bottom: float,
        stops: ColorStops,
    ) -> None:
        x, y = self._map((rect[0], rect[1]))
        target = pygame.Rect(math.floor(x), math.floor(y), math.ceil(rect[2]), math.ceil(rect[3]))
        target = target.clip(self._surface.get_rect())
        if target.width <= 0 or target.height <= 0:
            return
        layer = self._gradient_layer(target, top + self._origin[1], bottom + self._origin[1], stops)
        self._surface.blit(layer, target.topleft)

    def stroke_polyline(self, points: Sequence[Point], color: Color, width: int = 1) -> None:
        if len(points) < 2:
            return
        pts = [self._map(p) for p in points]
        self._draw(
            color,
            _bounds(pts, width),
            lambda s, c, o: pygame.draw.lines(s, c, False, _shift(pts, o), width),
        )

    def fill_circle(self, center: Point, radius: float, color: Color) -> None:
        self._circle(center, radius, color, 0)

    def stroke_circle(self, center: Point, radius: float, color: Color, width: int = 1) -> None:
        self._circle(center, radius, color, max(1, width))

    def fill_rounded_rect(
        self,
        rect: tuple[float, float, float, float],
        color: Color,
        radius: int = 0,
    ) -> None:
        x, y = self._map((rect[0], rect[1]))
        box = pygame.Rect(round(x), round(y), round(rect[2]), round(rect[3]))
        self._draw(
            color,
            box,
            lambda s, c, o: pygame.draw.rect(s, c, box.move(o), border_radius=radius),
        )

    def text(
        self,
        text: str,
        center: Point,
        color: Color,
        size: int,
        bold: bool = False,
    ) -> None:
        """Draw ``text`` centered on ``center``."""
        image = self._font(size, bold).render(text, True, color[:3])
        if len(color) == 4:
            image.set_alpha(color[3])
        x, y = self._map(center)
        self._surface.blit(image, image.get_rect(center=(round(x), round(y))))

    # --- Internals ---

    def _circle(self, center: Point, radius: float, color: Color, width: int) -> None:
        if radius <= 0:
            return
        cx, cy = self._map(center)
        box = pygame.Rect(
            math.floor(cx - radius) - 1,
            math.floor(cy - radius) - 1,
            math.ceil(radius * 2) + 3,
            math.ceil(radius * 2) + 3,
        )
        self._draw(
            color,
            box,
            lambda s, c, o: pygame.draw.circle(s, c, (cx + o[0], cy + o[1]), radius, width),
        )

    def _draw(
        self,
        color: Color,
        bounds: pygame.Rect,
        paint: Callable[[pygame.Surface, Color, Point], object],
    ) -> None:
        """Run ``paint`` directly, or through an alpha layer for translucent colors."""
        rgba = _rgba(color)
        if rgba[3] >= 255:
            paint(self._surface, rgba[:3], (0, 0))
            return
        if rgba[3] <= 0:
            return
        rect = bounds.clip(self._surface.get_rect())
        if rect.width <= 0 or rect.height <= 0:
            return
        layer = pygame.Surface(rect.size, pygame.SRCALPHA)
        paint(layer, rgba, (-rect.x, -rect.y))
        self._surface.blit(layer, rect.topleft)

    def _gradient_layer(
        self,
        rect: pygame.Rect,
        top: float,
        bottom: float,
        stops: ColorStops,
    ) -> pygame.Surface:
        layer = pygame.Surface(rect.size, pygame.SRCALPHA)
        span = bottom - top
        for row in range(rect.height):
            t = (rect.y + row - top) / span if span else 0.0
            pygame.draw.line(layer, gradient_color(stops, t), (0, row), (rect.width - 1, row))
        return layer

    def _font(self, size: int, bold: bool) -> pygame.font.Font:
        key = (size, bold)
        font = self._fonts.get(key)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.SysFont(FONT_NAME, size, bold=bold)
            self._fonts[key] = font
        return font


def _shift(points: Sequence[Point], offset: Point) -> list[Point]:
    dx, dy = offset
    return [(x + dx, y + dy) for x, y in points]


def _bounds(points: Sequence[Point], pad: int = 0) -> pygame.Rect:
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    left = math.floor(min(xs)) - pad - 1
    top = math.floor(min(ys)) - pad - 1
    right = math.ceil(max(xs)) + pad + 1
    bottom = math.ceil(max(ys)) + pad + 1
    return pygame.Rect(left, top, right - left + 1, bottom - top + 1)
