"""Procedural terrain: a closed-form height field with an incremental sample cache.

Heights come from layered sine waves whose sharper terms fade in as the
player gets farther from the start. The cache only exists to make
interpolation and rendering cheap; every cached sample equals
``height_function`` evaluated at the same x.
"""
from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from summit import background
from summit.types import SamplePoint

if TYPE_CHECKING:
    from summit.camera import Camera
    from summit.canvas import Canvas

logger = logging.getLogger(__name__)

SEGMENT_WIDTH = 5.0
GROUND_BASE = 400.0
GRASS_DEPTH = 8.0
UNITS_PER_METER = 10.0
RAMP_DISTANCE = 2000.0
INITIAL_EXTENT = 3000.0

DIRT_STOPS = (
    (0.0, (139, 105, 20)),
    (0.3, (107, 78, 18)),
    (0.7, (74, 53, 16)),
    (1.0, (45, 31, 8)),
)
DIRT_GRADIENT_TOP = -150.0
DIRT_GRADIENT_BOTTOM = 200.0
GRASS_COLOR = (74, 124, 46)
EDGE_COLOR = (45, 90, 26)
EDGE_WIDTH = 2
STRIPE_COLOR = (0, 0, 0, 20)
STRIPE_DEPTHS = tuple(range(30, 300, 40))


def progress_at(x: float) -> float:
    """Difficulty ramp in [0, 1], reaching 1 after RAMP_DISTANCE metres."""
    return min((x / UNITS_PER_METER) / RAMP_DISTANCE, 1.0)


def height_function(x: float, base_height: float = GROUND_BASE) -> float:
    """Surface y at world x. Screen coordinates: smaller y is higher up."""
    progress = progress_at(x)

    # Gentle rolling base
    h = math.sin(x * 0.003) * 60
    # Medium hills
    h += math.sin(x * 0.008 + 1.3) * (50 + progress * 90)
    # Sharper features
    h += math.sin(x * 0.02 + 2.7) * (20 + progress * 60)

    if progress > 0.15:
        h += math.sin(x * 0.04 + 4.1) * ((progress - 0.15) * 70)
    if progress > 0.5:
        h += math.sin(x * 0.06 + 5.5) * ((progress - 0.5) * 40)

    return base_height - h


class TerrainField:
    """Infinite 1D height field sampled every ``step`` world units.

    Samples are appended in order and never rewritten. ``generated_up_to``
    is the frontier: sample ``i`` sits at ``i * step`` for every
    ``i * step < generated_up_to``.
    """

    def __init__(
        self,
        step: float = SEGMENT_WIDTH,
        base_height: float = GROUND_BASE,
        initial_extent: float = INITIAL_EXTENT,
    ) -> None:
        if step <= 0:
            raise ValueError(f"step must be > 0, got {step}")
        self._step = step
        self._base_height = base_height
        self._initial_extent = initial_extent
        self._samples: list[SamplePoint] = []
        self._generated_up_to = 0.0
        self.reset()

    @property
    def step(self) -> float:
        return self._step

    @property
    def base_height(self) -> float:
        return self._base_height

    @property
    def generated_up_to(self) -> float:
        return self._generated_up_to

    @property
    def samples(self) -> tuple[SamplePoint, ...]:
        return tuple(self._samples)

    def __len__(self) -> int:
        return len(self._samples)

    def reset(self) -> None:
        """Drop the cache and regenerate the opening stretch."""
        self._samples = []
        self._generated_up_to = 0.0
        self.ensure_generated(self._initial_extent)

    def height_function(self, x: float) -> float:
        return height_function(x, self._base_height)

    def ensure_generated(self, target_x: float) -> None:
        """Extend the cache until the frontier reaches ``target_x``."""
        added = 0
        while self._generated_up_to < target_x:
            x = len(self._samples) * self._step
            self._samples.append(SamplePoint(x, self.height_function(x)))
            self._generated_up_to = len(self._samples) * self._step
            added += 1
        if added:
            logger.debug(
                "terrain extended by %d samples, frontier at %.1f",
                added,
                self._generated_up_to,
            )

    def height_at(self, x: float) -> float:
        """Surface height at any x, interpolated from the cache when possible."""
        if x <= 0:
            return self._base_height
        idx = x / self._step
        i = math.floor(idx)
        frac = idx - i

        # Past the cache: evaluate the formula directly.
        if i >= len(self._samples) - 1:
            return self.height_function(x)

        a = self._samples[i]
        b = self._samples[i + 1]
        return a.y + (b.y - a.y) * frac

    def slope_at(self, x: float) -> float:
        """Surface angle in radians at x (central difference over one step)."""
        dx = self._step * 0.5
        left = self.height_at(x - dx)
        right = self.height_at(x + dx)
        return math.atan2(right - left, dx * 2)

    def visible_indices(self, left: float, right: float) -> tuple[int, int] | None:
        """Index bounds of cached samples covering [left, right], padded by one.

        Returns None when fewer than two cached samples fall in the range.
        """
        start = max(0, math.floor(left / self._step) - 1)
        end = min(len(self._samples) - 1, math.ceil(right / self._step) + 1)
        if start >= end:
            return None
        return start, end

    def render(self, canvas: Canvas, camera: Camera, view_w: float, view_h: float) -> None:
        """Draw dirt, grass strip, edge line and dirt stripes in world space.

        Expects the camera translation to already be applied to ``canvas``.
        """
        left, right = camera.visible_range(view_w)
        bounds = self.visible_indices(left, right)
        if bounds is None:
            return
        start, end = bounds
        visible = self._samples[start:end + 1]
        surface = [(p.x, p.y) for p in visible]

        bottom_y = camera.y + view_h
        first_x = visible[0].x
        last_x = visible[-1].x

        dirt = surface + [(last_x, bottom_y), (first_x, bottom_y)]
        canvas.fill_polygon_gradient(
            dirt,
            self._base_height + DIRT_GRADIENT_TOP,
            self._base_height + DIRT_GRADIENT_BOTTOM,
            DIRT_STOPS,
        )

        grass = surface + [(p.x, p.y + GRASS_DEPTH) for p in reversed(visible)]
        canvas.fill_polygon(grass, GRASS_COLOR)

        canvas.stroke_polyline(surface, EDGE_COLOR, EDGE_WIDTH)

        for depth in STRIPE_DEPTHS:
            offset = GRASS_DEPTH + depth
            canvas.stroke_polyline([(x, y + offset) for x, y in surface], STRIPE_COLOR, 1)

    def render_background(
        self, canvas: Canvas, camera: Camera, view_w: float, view_h: float
    ) -> None:
        """Parallax hills in screen space. Independent of the sample cache."""
        background.draw_parallax(canvas, camera, view_w, view_h)
