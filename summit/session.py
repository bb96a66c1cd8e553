"""Assembly of a complete hill-climb run: engine, components, and frame rendering."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from summit import background
from summit.camera import Camera
from summit.clock import MAX_DT
from summit.engine import Engine
from summit.fuel import FuelSystem
from summit.particles import ParticlePool
from summit.systems import (
    make_camera_system,
    make_distance_system,
    make_fuel_system,
    make_particle_system,
    make_terrain_system,
)
from summit.terrain import TerrainField

if TYPE_CHECKING:
    from summit.canvas import Canvas
    from summit.types import FrameContext, Run, System

DEFAULT_LOOKAHEAD = 1920.0


@dataclass
class HillClimb:
    engine: Engine
    terrain: TerrainField
    fuel: FuelSystem
    particles: ParticlePool
    camera: Camera
    stars: background.StarField

    @property
    def distance(self) -> float:
        return self.engine.run.distance

    @property
    def over(self) -> bool:
        return self.engine.stopped


def build_hill_climb(
    vehicle_system: System,
    seed: int | None = None,
    lookahead: float = DEFAULT_LOOKAHEAD,
    max_dt: float = MAX_DT,
) -> HillClimb:
    """Wire up a run. Call ``game.engine.start(vehicle)`` before stepping.

    ``vehicle_system`` advances the vehicle and stores its snapshot in
    ``run.vehicle``; it runs first each frame.
    """
    engine = Engine(max_dt=max_dt, seed=seed)
    terrain = TerrainField()
    fuel = FuelSystem(rng=engine.rng)
    particles = ParticlePool(rng=engine.rng)
    camera = Camera()

    engine.add_system(vehicle_system)
    engine.add_system(make_distance_system())
    engine.add_system(make_terrain_system(terrain, lookahead))
    engine.add_system(make_fuel_system(fuel, terrain))
    engine.add_system(make_camera_system(camera))
    engine.add_system(make_particle_system(particles))

    def reset_components(run: Run, ctx: FrameContext) -> None:
        terrain.reset()
        fuel.reset()
        particles.reset()
        camera.reset()

    engine.on_start(reset_components)

    return HillClimb(
        engine=engine,
        terrain=terrain,
        fuel=fuel,
        particles=particles,
        camera=camera,
        stars=background.StarField(),
    )


def render_frame(
    canvas: Canvas,
    game: HillClimb,
    draw_vehicle: Callable[[Canvas], None] | None = None,
) -> None:
    """Draw one frame: screen-space backdrop first, then the world under the camera."""
    w, h = canvas.width, canvas.height

    background.draw_sky(canvas, w, h)
    game.stars.render(canvas, w, h)
    game.terrain.render_background(canvas, game.camera, w, h)

    canvas.save()
    canvas.translate(*game.camera.offset(w, h))
    game.terrain.render(canvas, game.camera, w, h)
    game.fuel.render(canvas)
    if draw_vehicle is not None:
        draw_vehicle(canvas)
    game.particles.render(canvas)
    canvas.restore()
