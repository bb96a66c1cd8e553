"""Shared data types for the hill-climb simulation core."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass, field
from typing import Callable

Color = tuple[int, int, int] | tuple[int, int, int, int]


@dataclass(frozen=True)
class VehicleState:
    """By-value snapshot of the vehicle handed to every component each frame."""

    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    angle: float = 0.0
    grounded: bool = False


@dataclass(frozen=True, slots=True)
class SamplePoint:
    x: float
    y: float


@dataclass
class FuelCan:
    x: float
    y: float
    collected: bool = False


@dataclass
class CollectEffect:
    """Expanding ring left behind by a pickup. Presentation only."""

    x: float
    y: float
    remaining: float


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    life: float
    radius: float
    color: Color


@dataclass
class Run:
    """State of the current run, shared with systems each frame.

    Attributes:
        vehicle: Latest vehicle snapshot, replaced by the vehicle system.
        distance: Farthest distance reached, in metres. Never decreases.
    """

    vehicle: VehicleState = field(default_factory=VehicleState)
    distance: float = 0.0


@dataclass(frozen=True, slots=True)
class FrameContext:
    frame_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]
    random: _random.Random


System = Callable[[Run, FrameContext], None]
