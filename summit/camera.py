"""Camera that trails the vehicle with a forward lookahead."""
from __future__ import annotations

from summit.types import VehicleState

LOOKAHEAD = 0.4
VERTICAL_BIAS = 50.0
SMOOTHING_X = 0.02
SMOOTHING_Y = 0.05
ANCHOR_X = 0.3
ANCHOR_Y = 0.5


class Camera:
    def __init__(self) -> None:
        self.x = 0.0
        self.y = 0.0

    def reset(self) -> None:
        self.x = 0.0
        self.y = 0.0

    def update(self, dt: float, vehicle: VehicleState) -> None:
        """Ease toward the vehicle. Smoothing is frame-rate independent."""
        target_x = vehicle.x + max(0.0, vehicle.vx * LOOKAHEAD)
        target_y = vehicle.y - VERTICAL_BIAS

        lerp_x = 1 - SMOOTHING_X ** dt
        lerp_y = 1 - SMOOTHING_Y ** dt

        self.x += (target_x - self.x) * lerp_x
        self.y += (target_y - self.y) * lerp_y

    def offset(self, view_w: float, view_h: float) -> tuple[float, float]:
        """Translation that maps world coordinates onto the screen."""
        return -self.x + view_w * ANCHOR_X, -self.y + view_h * ANCHOR_Y

    def visible_range(self, view_w: float) -> tuple[float, float]:
        """Generous world-x span that may appear on screen."""
        return self.x - view_w * 0.5, self.x + view_w * 1.5
