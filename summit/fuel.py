"""Fuel tank, fuel-can spawning along the terrain, and pickup detection."""
from __future__ import annotations

import logging
import math
import random
from typing import TYPE_CHECKING

from summit.terrain import UNITS_PER_METER
from summit.types import CollectEffect, FuelCan, VehicleState

if TYPE_CHECKING:
    from summit.canvas import Canvas
    from summit.terrain import TerrainField

logger = logging.getLogger(__name__)

MAX_FUEL = 100.0
FUEL_DRAIN_RATE = 2.0    # per second while driving, about 50s on a full tank
FUEL_IDLE_DRAIN = 0.5    # per second while idle
DRIVING_SPEED = 10.0
FUEL_CAN_REFILL = 30.0
PICKUP_RADIUS = 50.0
CAN_SIZE = 22.0
CAN_CLEARANCE = 2.0
COLLECT_FX_DURATION = 0.6
FIRST_CAN_DISTANCE = 100.0
CLEANUP_DISTANCE = 500.0

# (upper distance bound in metres, base interval, random spread)
SPAWN_BANDS = (
    (500.0, 150.0, 50.0),
    (1500.0, 250.0, 100.0),
    (math.inf, 350.0, 150.0),
)

CAN_COLOR = (57, 255, 20)
CAN_GLOW = (57, 255, 20, 38)
CAN_LABEL = "F"
CAN_LABEL_COLOR = (0, 0, 0)
CAN_LABEL_SIZE = 12
CAN_CORNER_RADIUS = 3
RING_START_RADIUS = 15.0
RING_GROWTH = 30.0
RING_WIDTH = 2


class FuelSystem:
    """Owns the fuel level, the live fuel cans and their pickup effects.

    The internal level may dip below zero for one frame; ``percent``
    always reports the clamped value.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.fuel = MAX_FUEL
        self.cans: list[FuelCan] = []
        self.effects: list[CollectEffect] = []
        self.next_can_distance = FIRST_CAN_DISTANCE

    def reset(self) -> None:
        self.fuel = MAX_FUEL
        self.cans = []
        self.effects = []
        self.next_can_distance = FIRST_CAN_DISTANCE

    @property
    def percent(self) -> float:
        return max(0.0, self.fuel)

    def is_empty(self) -> bool:
        return self.fuel <= 0

    def update(
        self,
        dt: float,
        vehicle: VehicleState,
        terrain: TerrainField,
        distance: float,
    ) -> None:
        was_empty = self.is_empty()
        driving = abs(vehicle.vx) > DRIVING_SPEED
        self.fuel -= (FUEL_DRAIN_RATE if driving else FUEL_IDLE_DRAIN) * dt

        while distance >= self.next_can_distance:
            self.spawn_can(self.next_can_distance, terrain)
            self.next_can_distance += self.spawn_interval(self.next_can_distance)

        for can in self.cans:
            if can.collected:
                continue
            if math.hypot(vehicle.x - can.x, vehicle.y - can.y) < PICKUP_RADIUS:
                can.collected = True
                self.fuel = min(MAX_FUEL, self.fuel + FUEL_CAN_REFILL)
                self.effects.append(CollectEffect(can.x, can.y, COLLECT_FX_DURATION))
                logger.debug("fuel can collected at x=%.1f, fuel=%.1f", can.x, self.fuel)

        survivors = []
        for fx in self.effects:
            fx.remaining -= dt
            if fx.remaining > 0:
                survivors.append(fx)
        self.effects = survivors

        cutoff = vehicle.x - CLEANUP_DISTANCE
        self.cans = [can for can in self.cans if can.x > cutoff]

        if self.is_empty() and not was_empty:
            logger.info("fuel tank empty at %.0fm", distance)

    def spawn_interval(self, distance: float) -> float:
        """Gap in metres until the next can. Widens the farther out it is."""
        for limit, base, spread in SPAWN_BANDS:
            if distance < limit:
                break
        return base + self._rng.random() * spread

    def spawn_can(self, distance: float, terrain: TerrainField) -> FuelCan:
        """Place a can resting on the surface at ``distance`` metres."""
        world_x = distance * UNITS_PER_METER
        can = FuelCan(world_x, terrain.height_at(world_x) - CAN_SIZE - CAN_CLEARANCE)
        self.cans.append(can)
        logger.debug("fuel can spawned at %.0fm (x=%.1f)", distance, world_x)
        return can

    def render(self, canvas: Canvas) -> None:
        half = CAN_SIZE / 2
        for can in self.cans:
            if can.collected:
                continue
            canvas.save()
            canvas.translate(can.x, can.y)
            canvas.fill_circle((0, 0), CAN_SIZE, CAN_GLOW)
            canvas.fill_rounded_rect((-half, -half, CAN_SIZE, CAN_SIZE), CAN_COLOR, CAN_CORNER_RADIUS)
            canvas.text(CAN_LABEL, (0, 1), CAN_LABEL_COLOR, CAN_LABEL_SIZE, bold=True)
            canvas.restore()

        for fx in self.effects:
            progress = 1 - fx.remaining / COLLECT_FX_DURATION
            alpha = min(1.0, max(0.0, 1 - progress))
            radius = RING_START_RADIUS + progress * RING_GROWTH
            canvas.stroke_circle((fx.x, fx.y), radius, CAN_COLOR + (round(alpha * 255),), RING_WIDTH)
