"""Ground-following truck stand-in and the vehicle system that drives it.

Not a physics body: the truck slides along the terrain surface with a
single speed value pushed by throttle, brake and the slope.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from summit import TerrainField, VehicleState

START_X = 100.0
RIDE_HEIGHT = 20.0      # body centre above the surface
ENGINE_ACCEL = 420.0
BRAKE_ACCEL = 520.0
GRAVITY = 600.0
ROLLING_DRAG = 0.35     # fraction of speed lost per second
MAX_SPEED = 700.0
MAX_REVERSE = 200.0


@dataclass
class Controls:
    gas: bool = False
    brake: bool = False


class Truck:
    def __init__(self) -> None:
        self.x = START_X
        self.speed = 0.0

    def reset(self, terrain: TerrainField) -> VehicleState:
        self.x = START_X
        self.speed = 0.0
        return self.snapshot(terrain)

    def update(self, dt: float, controls: Controls, terrain: TerrainField) -> VehicleState:
        angle = terrain.slope_at(self.x)
        accel = -GRAVITY * math.sin(angle)
        if controls.gas:
            accel += ENGINE_ACCEL
        if controls.brake:
            accel -= BRAKE_ACCEL
        self.speed += accel * dt
        self.speed -= self.speed * min(1.0, ROLLING_DRAG * dt)
        self.speed = min(MAX_SPEED, max(-MAX_REVERSE, self.speed))

        self.x += self.speed * math.cos(angle) * dt
        if self.x < 0:
            self.x = 0.0
            self.speed = max(0.0, self.speed)
        return self.snapshot(terrain)

    def snapshot(self, terrain: TerrainField) -> VehicleState:
        angle = terrain.slope_at(self.x)
        return VehicleState(
            x=self.x,
            y=terrain.height_at(self.x) - RIDE_HEIGHT,
            vx=self.speed * math.cos(angle),
            vy=self.speed * math.sin(angle),
            angle=angle,
            grounded=True,
        )


def make_truck_system(truck: Truck, controls: Controls, terrain_ref: list[TerrainField]):
    """Advance the truck from the current controls. terrain_ref holds the run's terrain."""

    def truck_system(run, ctx):
        run.vehicle = truck.update(ctx.dt, controls, terrain_ref[0])

    return truck_system
