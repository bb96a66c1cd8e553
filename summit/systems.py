"""System factories wiring the simulation components into the engine.

Registration order is the frame order. The session builder registers
them as: vehicle, distance, terrain, fuel, camera, particles.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from summit.terrain import UNITS_PER_METER

if TYPE_CHECKING:
    from summit.camera import Camera
    from summit.fuel import FuelSystem
    from summit.particles import ParticlePool
    from summit.terrain import TerrainField
    from summit.types import FrameContext, Run, System


def make_distance_system(units_per_meter: float = UNITS_PER_METER) -> System:
    """Track the farthest distance reached, in metres."""

    def distance_system(run: Run, ctx: FrameContext) -> None:
        run.distance = max(run.distance, run.vehicle.x / units_per_meter)

    return distance_system


def make_terrain_system(terrain: TerrainField, lookahead: float) -> System:
    """Keep terrain generated ``lookahead`` world units past the vehicle."""

    def terrain_system(run: Run, ctx: FrameContext) -> None:
        terrain.ensure_generated(run.vehicle.x + lookahead)

    return terrain_system


def make_fuel_system(fuel: FuelSystem, terrain: TerrainField) -> System:
    """Drain, spawn and collect fuel. An empty tank ends the run.

    Must run after the terrain system so cans are placed on generated ground.
    """

    def fuel_system(run: Run, ctx: FrameContext) -> None:
        fuel.update(ctx.dt, run.vehicle, terrain, run.distance)
        if fuel.is_empty():
            ctx.request_stop()

    return fuel_system


def make_camera_system(camera: Camera) -> System:
    def camera_system(run: Run, ctx: FrameContext) -> None:
        camera.update(ctx.dt, run.vehicle)

    return camera_system


def make_particle_system(particles: ParticlePool) -> System:
    def particle_system(run: Run, ctx: FrameContext) -> None:
        particles.update(ctx.dt, run.vehicle)

    return particle_system
