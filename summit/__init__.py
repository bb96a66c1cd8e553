"""summit - terrain, fuel and dust simulation core for a side-scrolling hill climber."""
from __future__ import annotations

from summit.background import ParallaxLayer, StarField, silhouette_height
from summit.camera import Camera
from summit.canvas import Canvas
from summit.clock import FrameClock
from summit.engine import Engine
from summit.fuel import FuelSystem
from summit.particles import ParticlePool
from summit.session import HillClimb, build_hill_climb, render_frame
from summit.systems import (
    make_camera_system,
    make_distance_system,
    make_fuel_system,
    make_particle_system,
    make_terrain_system,
)
from summit.terrain import TerrainField, height_function
from summit.types import (
    CollectEffect,
    FrameContext,
    FuelCan,
    Particle,
    Run,
    SamplePoint,
    VehicleState,
)

__all__ = [
    "Camera",
    "Canvas",
    "CollectEffect",
    "Engine",
    "FrameClock",
    "FrameContext",
    "FuelCan",
    "FuelSystem",
    "HillClimb",
    "ParallaxLayer",
    "Particle",
    "ParticlePool",
    "Run",
    "SamplePoint",
    "StarField",
    "TerrainField",
    "VehicleState",
    "build_hill_climb",
    "height_function",
    "make_camera_system",
    "make_distance_system",
    "make_fuel_system",
    "make_particle_system",
    "make_terrain_system",
    "render_frame",
    "silhouette_height",
]
