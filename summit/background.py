"""Screen-space backdrop: sky gradient, star field and parallax hills."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from summit.types import Color

if TYPE_CHECKING:
    from summit.camera import Camera
    from summit.canvas import Canvas

SKY_STOPS = (
    (0.0, (0, 5, 16)),
    (0.4, (6, 16, 32)),
    (1.0, (10, 22, 40)),
)
SKY_DEPTH = 0.8

STAR_SEED = 42
STAR_COUNT = 30
_LCG_MULTIPLIER = 16807
_LCG_MODULUS = 2147483647


@dataclass(frozen=True)
class ParallaxLayer:
    """One silhouette band of background hills.

    Attributes:
        speed: Fraction of the camera's x offset this layer scrolls by.
        step: Screen-space spacing between silhouette vertices.
        baseline: Resting height as a fraction of view height.
        color: Fill color.
        terms: (frequency, phase, amplitude) sine terms summed for the outline.
    """

    speed: float
    step: int
    baseline: float
    color: Color
    terms: tuple[tuple[float, float, float], ...]


PARALLAX_LAYERS = (
    ParallaxLayer(
        speed=0.05,
        step=50,
        baseline=0.35,
        color=(13, 21, 32),
        terms=((0.0008, 0.0, 80.0), (0.0015, 2.0, 50.0), (0.003, 5.0, 25.0)),
    ),
    ParallaxLayer(
        speed=0.12,
        step=40,
        baseline=0.45,
        color=(17, 29, 42),
        terms=((0.0012, 0.0, 60.0), (0.003, 1.5, 35.0), (0.005, 3.0, 15.0)),
    ),
    ParallaxLayer(
        speed=0.25,
        step=30,
        baseline=0.55,
        color=(26, 42, 24),
        terms=((0.002, 0.0, 40.0), (0.005, 2.2, 25.0), (0.01, 4.0, 10.0)),
    ),
)


def silhouette_height(layer: ParallaxLayer, x: float) -> float:
    return sum(math.sin(x * freq + phase) * amp for freq, phase, amp in layer.terms)


def silhouette_points(
    layer: ParallaxLayer, camera_x: float, view_w: float, view_h: float
) -> list[tuple[float, float]]:
    """Closed outline of one layer in screen coordinates."""
    offset = camera_x * layer.speed
    right = int(view_w) + layer.step
    points = [(0.0, view_h)]
    for sx in range(0, right + 1, layer.step):
        h = silhouette_height(layer, sx + offset)
        points.append((float(sx), view_h * layer.baseline - h))
    points.append((float(right), view_h))
    return points


def draw_parallax(canvas: Canvas, camera: Camera, view_w: float, view_h: float) -> None:
    for layer in PARALLAX_LAYERS:
        canvas.fill_polygon(silhouette_points(layer, camera.x, view_w, view_h), layer.color)


def draw_sky(canvas: Canvas, view_w: float, view_h: float) -> None:
    canvas.fill_rect_gradient((0, 0, view_w, view_h), 0, view_h * SKY_DEPTH, SKY_STOPS)


@dataclass(frozen=True)
class Star:
    x: float
    y: float
    radius: float
    alpha: float


class StarField:
    """Fixed star layout drawn from a seeded Park-Miller sequence.

    The layout depends only on the seed and the view size, so it stays put
    between frames and is rebuilt only when the view is resized.
    """

    def __init__(self, seed: int = STAR_SEED, count: int = STAR_COUNT) -> None:
        if count <= 0:
            raise ValueError(f"count must be > 0, got {count}")
        self._seed = seed
        self._count = count
        self._size: tuple[float, float] | None = None
        self._stars: tuple[Star, ...] = ()

    @property
    def seed(self) -> int:
        return self._seed

    def stars(self, view_w: float, view_h: float) -> tuple[Star, ...]:
        if self._size != (view_w, view_h):
            self._stars = self._generate(view_w, view_h)
            self._size = (view_w, view_h)
        return self._stars

    def _generate(self, view_w: float, view_h: float) -> tuple[Star, ...]:
        state = self._seed

        def rng() -> float:
            nonlocal state
            state = (state * _LCG_MULTIPLIER) % _LCG_MODULUS
            return state / _LCG_MODULUS

        stars = []
        for _ in range(self._count):
            stars.append(
                Star(
                    x=rng() * view_w,
                    y=rng() * view_h * 0.5,
                    radius=rng() * 1.5 + 0.5,
                    alpha=rng() * 0.5 + 0.3,
                )
            )
        return tuple(stars)

    def render(self, canvas: Canvas, view_w: float, view_h: float) -> None:
        for star in self.stars(view_w, view_h):
            canvas.fill_circle(
                (star.x, star.y), star.radius, (255, 255, 255, round(star.alpha * 255))
            )
