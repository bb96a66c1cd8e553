"""Dust particle pool - kicks up dirt behind the rear wheel while grounded."""
from __future__ import annotations

import math
import random
from typing import TYPE_CHECKING

from summit.types import Particle, VehicleState

if TYPE_CHECKING:
    from summit.canvas import Canvas

MAX_PARTICLES = 20
PARTICLE_LIFETIME = 0.6
LIFETIME_SPREAD = (0.7, 1.0)
SPAWN_INTERVAL = 0.03
SPEED_THRESHOLD = 30.0
REAR_OFFSET = 30.0
JITTER_X = 10.0
JITTER_Y = 5.0
VELOCITY_CARRY = 0.1
VELOCITY_JITTER = 20.0
RISE_MIN = 10.0
RISE_SPREAD = 30.0
RADIUS_MIN = 3.0
RADIUS_SPREAD = 5.0
UPWARD_DRIFT = 20.0

DUST_COLORS = (
    (212, 184, 150),
    (201, 168, 124),
    (224, 200, 160),
    (219, 184, 122),
)


class ParticlePool:
    """Bounded collection of short-lived dust particles.

    When the pool is full new spawns are dropped; live particles are never
    evicted early.
    """

    def __init__(
        self,
        capacity: int = MAX_PARTICLES,
        rng: random.Random | None = None,
    ) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self._capacity = capacity
        self._rng = rng if rng is not None else random.Random()
        self.particles: list[Particle] = []
        self.spawn_timer = 0.0

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self.particles)

    def reset(self) -> None:
        self.particles = []
        self.spawn_timer = 0.0

    def update(self, dt: float, vehicle: VehicleState) -> None:
        if vehicle.grounded and abs(vehicle.vx) > SPEED_THRESHOLD:
            self.spawn_timer -= dt
            if self.spawn_timer <= 0:
                self.spawn_timer = SPAWN_INTERVAL
                self.spawn_dust(vehicle)

        alive = []
        for p in self.particles:
            p.life -= dt
            if p.life <= 0:
                continue
            p.x += p.vx * dt
            p.y += p.vy * dt
            p.vy -= UPWARD_DRIFT * dt
            alive.append(p)
        self.particles = alive

    def spawn_dust(self, vehicle: VehicleState) -> Particle | None:
        """Emit one particle behind the vehicle. Returns None when full."""
        if len(self.particles) >= self._capacity:
            return None

        rng = self._rng
        rear_x = vehicle.x - math.cos(vehicle.angle) * REAR_OFFSET
        rear_y = vehicle.y - math.sin(vehicle.angle) * REAR_OFFSET
        low, high = LIFETIME_SPREAD

        particle = Particle(
            x=rear_x + (rng.random() - 0.5) * JITTER_X,
            y=rear_y + (rng.random() - 0.5) * JITTER_Y,
            vx=-vehicle.vx * VELOCITY_CARRY + (rng.random() - 0.5) * VELOCITY_JITTER,
            vy=-(rng.random() * RISE_SPREAD + RISE_MIN),
            life=PARTICLE_LIFETIME * (low + rng.random() * (high - low)),
            radius=rng.random() * RADIUS_SPREAD + RADIUS_MIN,
            color=rng.choice(DUST_COLORS),
        )
        self.particles.append(particle)
        return particle

    def render(self, canvas: Canvas) -> None:
        for p in self.particles:
            alpha = min(1.0, max(0.0, p.life / PARTICLE_LIFETIME))
            canvas.fill_circle((p.x, p.y), p.radius, p.color + (round(alpha * 255),))
