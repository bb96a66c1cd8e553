"""Truck drawing in world space, called between terrain and dust."""
from __future__ import annotations

import math

from summit import Canvas, VehicleState

from game.truck import RIDE_HEIGHT
from ui.constants import BODY_COLOR, CAB_COLOR, HUB_COLOR, TIRE_COLOR, WINDOW_COLOR

WHEEL_RADIUS = 12.0
WHEEL_BASE = 22.0

# Outlines relative to the body centre, x forward, y down.
BODY = [(-32, -6), (32, -6), (34, 6), (-34, 6)]
CAB = [(-6, -22), (14, -22), (22, -6), (-6, -6)]
WINDOW = [(-1, -19), (12, -19), (17, -9), (-1, -9)]


def _rotate(points, vehicle: VehicleState):
    c, s = math.cos(vehicle.angle), math.sin(vehicle.angle)
    return [(vehicle.x + x * c - y * s, vehicle.y + x * s + y * c) for x, y in points]


def draw_truck(canvas: Canvas, vehicle: VehicleState) -> None:
    for wx in (-WHEEL_BASE, WHEEL_BASE):
        (center,) = _rotate([(wx, RIDE_HEIGHT - WHEEL_RADIUS + 4)], vehicle)
        canvas.fill_circle(center, WHEEL_RADIUS, TIRE_COLOR)
        canvas.fill_circle(center, WHEEL_RADIUS * 0.4, HUB_COLOR)

    canvas.fill_polygon(_rotate(BODY, vehicle), BODY_COLOR)
    canvas.fill_polygon(_rotate(CAB, vehicle), CAB_COLOR)
    canvas.fill_polygon(_rotate(WINDOW, vehicle), WINDOW_COLOR)
