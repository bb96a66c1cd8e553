"""Shared fixtures: headless pygame and a canvas that records draw calls."""
from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest


class RecordingCanvas:
    """Stands in for summit.canvas.Canvas and logs every call."""

    def __init__(self, width: int = 960, height: int = 540) -> None:
        self.width = width
        self.height = height
        self.calls: list[tuple] = []
        self.depth = 0

    def names(self) -> list[str]:
        return [call[0] for call in self.calls]

    def of(self, name: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == name]

    def save(self) -> None:
        self.depth += 1
        self.calls.append(("save",))

    def restore(self) -> None:
        self.depth -= 1
        self.calls.append(("restore",))

    def translate(self, dx, dy) -> None:
        self.calls.append(("translate", dx, dy))

    def fill_polygon(self, points, color) -> None:
        self.calls.append(("fill_polygon", list(points), color))

    def fill_polygon_gradient(self, points, top, bottom, stops) -> None:
        self.calls.append(("fill_polygon_gradient", list(points), top, bottom, stops))

    def fill_rect_gradient(self, rect, top, bottom, stops) -> None:
        self.calls.append(("fill_rect_gradient", rect, top, bottom, stops))

    def stroke_polyline(self, points, color, width=1) -> None:
        self.calls.append(("stroke_polyline", list(points), color, width))

    def fill_circle(self, center, radius, color) -> None:
        self.calls.append(("fill_circle", center, radius, color))

    def stroke_circle(self, center, radius, color, width=1) -> None:
        self.calls.append(("stroke_circle", center, radius, color, width))

    def fill_rounded_rect(self, rect, color, radius=0) -> None:
        self.calls.append(("fill_rounded_rect", rect, color, radius))

    def text(self, text, center, color, size, bold=False) -> None:
        self.calls.append(("text", text, center, color, size, bold))


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas()
