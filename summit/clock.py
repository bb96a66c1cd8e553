"""Frame clock and FrameContext for the variable-step game loop."""

import random
from typing import Callable

from summit.types import FrameContext

MAX_DT = 0.05


class FrameClock:
    def __init__(self, max_dt: float = MAX_DT) -> None:
        if max_dt <= 0:
            raise ValueError("max_dt must be positive")
        self._max_dt = max_dt
        self._dt = 0.0
        self._elapsed = 0.0
        self._frame_number = 0

    @property
    def max_dt(self) -> float:
        return self._max_dt

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def frame_number(self) -> int:
        return self._frame_number

    def advance(self, raw_dt: float) -> float:
        """Start a new frame. Returns the dt clamped to [0, max_dt]."""
        self._dt = min(max(raw_dt, 0.0), self._max_dt)
        self._elapsed += self._dt
        self._frame_number += 1
        return self._dt

    def context(self, stop_fn: Callable[[], None], rng: random.Random) -> FrameContext:
        return FrameContext(
            frame_number=self._frame_number,
            dt=self._dt,
            elapsed=self._elapsed,
            request_stop=stop_fn,
            random=rng,
        )

    def reset(self, frame_number: int = 0) -> None:
        self._frame_number = frame_number
        self._dt = 0.0
        self._elapsed = 0.0
