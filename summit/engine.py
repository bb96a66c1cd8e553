"""Engine - per-frame loop, system ordering, and run lifecycle hooks."""

import logging
import os
import random
from typing import Callable

from summit.clock import MAX_DT, FrameClock
from summit.types import FrameContext, Run, System, VehicleState

logger = logging.getLogger(__name__)


class Engine:
    def __init__(self, max_dt: float = MAX_DT, seed: int | None = None) -> None:
        self._clock = FrameClock(max_dt)
        self._run = Run()
        self._systems: list[System] = []
        self._start_hooks: list[Callable[[Run, FrameContext], None]] = []
        self._stop_hooks: list[Callable[[Run, FrameContext], None]] = []
        self._stop_requested: bool = False
        self._stopped: bool = False

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def run(self) -> Run:
        return self._run

    @property
    def clock(self) -> FrameClock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def rng(self) -> random.Random:
        return self._rng

    @property
    def stopped(self) -> bool:
        return self._stopped

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Callable[[Run, FrameContext], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[Run, FrameContext], None]) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def start(self, vehicle: VehicleState | None = None) -> None:
        """Begin a fresh run. Start hooks reset the components."""
        self._clock.reset()
        self._run.vehicle = vehicle if vehicle is not None else VehicleState()
        self._run.distance = 0.0
        self._stop_requested = False
        self._stopped = False

        ctx = self._clock.context(self._request_stop, self._rng)
        for hook in self._start_hooks:
            hook(self._run, ctx)
        logger.info("run started (seed=%d)", self._seed)

    def step(self, raw_dt: float) -> None:
        """Simulate one frame. Does nothing once the run has stopped."""
        if self._stopped:
            return
        self._clock.advance(raw_dt)
        ctx = self._clock.context(self._request_stop, self._rng)
        for system in self._systems:
            system(self._run, ctx)
            if self._stop_requested:
                break

        if self._stop_requested:
            self._stopped = True
            logger.info(
                "run stopped at frame %d, distance %.0fm",
                ctx.frame_number,
                self._run.distance,
            )
            for hook in self._stop_hooks:
                hook(self._run, ctx)
