"""Tests for fuel drain, can spawning, pickup, effects and cleanup."""
from __future__ import annotations

import random

import pytest

from summit.fuel import (
    CAN_CLEARANCE,
    CAN_SIZE,
    CLEANUP_DISTANCE,
    COLLECT_FX_DURATION,
    FIRST_CAN_DISTANCE,
    FUEL_CAN_REFILL,
    MAX_FUEL,
    PICKUP_RADIUS,
    FuelSystem,
)
from summit.terrain import TerrainField
from summit.types import CollectEffect, FuelCan, VehicleState


@pytest.fixture
def terrain() -> TerrainField:
    return TerrainField()


def _fuel(seed: int = 7) -> FuelSystem:
    return FuelSystem(rng=random.Random(seed))


def _parked(x: float = 0.0, y: float = 0.0, vx: float = 0.0) -> VehicleState:
    return VehicleState(x=x, y=y, vx=vx, grounded=True)


# --- Reset and reporting ---


class TestReset:
    def test_initial_state(self) -> None:
        fuel = _fuel()
        assert fuel.fuel == MAX_FUEL
        assert fuel.percent == MAX_FUEL
        assert fuel.cans == []
        assert fuel.effects == []
        assert fuel.next_can_distance == FIRST_CAN_DISTANCE
        assert not fuel.is_empty()

    def test_reset_restores_everything(self, terrain) -> None:
        fuel = _fuel()
        fuel.update(10.0, _parked(x=1000.0, vx=50.0), terrain, 900.0)
        assert fuel.cans
        fuel.reset()
        assert fuel.fuel == MAX_FUEL
        assert fuel.cans == []
        assert fuel.effects == []
        assert fuel.next_can_distance == FIRST_CAN_DISTANCE


# --- Drain ---


class TestDrain:
    def test_driving_drain(self, terrain) -> None:
        fuel = _fuel()
        fuel.update(1.0, _parked(vx=20.0), terrain, 0.0)
        assert fuel.fuel == pytest.approx(98.0)

    def test_reverse_counts_as_driving(self, terrain) -> None:
        fuel = _fuel()
        fuel.update(1.0, _parked(vx=-20.0), terrain, 0.0)
        assert fuel.fuel == pytest.approx(98.0)

    def test_idle_drain(self, terrain) -> None:
        fuel = _fuel()
        fuel.update(1.0, _parked(vx=5.0), terrain, 0.0)
        assert fuel.fuel == pytest.approx(99.5)

    def test_threshold_speed_is_idle(self, terrain) -> None:
        fuel = _fuel()
        fuel.update(2.0, _parked(vx=10.0), terrain, 0.0)
        assert fuel.fuel == pytest.approx(99.0)

    def test_zero_dt_no_drain(self, terrain) -> None:
        fuel = _fuel()
        fuel.update(0.0, _parked(vx=100.0), terrain, 0.0)
        assert fuel.fuel == MAX_FUEL

    def test_runs_dry_and_reports_zero(self, terrain) -> None:
        fuel = _fuel()
        fuel.fuel = 1.0
        fuel.update(4.0, _parked(vx=0.0), terrain, 0.0)
        assert fuel.fuel < 0
        assert fuel.is_empty()
        assert fuel.percent == 0.0

    def test_exactly_zero_is_empty(self, terrain) -> None:
        fuel = _fuel()
        fuel.fuel = 1.0
        fuel.update(2.0, _parked(vx=0.0), terrain, 0.0)
        assert fuel.is_empty()
        assert fuel.percent == 0.0


# --- Spawning ---


class TestSpawning:
    def test_no_can_before_first_distance(self, terrain) -> None:
        fuel = _fuel()
        fuel.update(0.0, _parked(), terrain, FIRST_CAN_DISTANCE - 0.1)
        assert fuel.cans == []

    def test_first_can_sits_on_surface(self, terrain) -> None:
        fuel = _fuel()
        fuel.update(0.0, _parked(), terrain, FIRST_CAN_DISTANCE)
        assert len(fuel.cans) == 1
        can = fuel.cans[0]
        assert can.x == 1000.0
        assert can.y == terrain.height_at(1000.0) - CAN_SIZE - CAN_CLEARANCE
        assert not can.collected

    def test_next_distance_advances_within_near_band(self, terrain) -> None:
        fuel = _fuel()
        fuel.update(0.0, _parked(), terrain, FIRST_CAN_DISTANCE)
        assert 250.0 <= fuel.next_can_distance < 300.0

    def test_catches_up_on_large_jumps(self, terrain) -> None:
        fuel = _fuel()
        fuel.update(0.0, _parked(), terrain, 1000.0)
        assert len(fuel.cans) >= 4
        assert fuel.next_can_distance > 1000.0
        xs = [can.x for can in fuel.cans]
        assert xs == sorted(xs)

    def test_spawn_is_reproducible_with_seed(self, terrain) -> None:
        a, b = _fuel(3), _fuel(3)
        a.update(0.0, _parked(), terrain, 5000.0)
        b.update(0.0, _parked(), terrain, 5000.0)
        assert [c.x for c in a.cans] == [c.x for c in b.cans]
        assert a.next_can_distance == b.next_can_distance

    def test_can_on_ungenerated_terrain_uses_formula(self) -> None:
        terrain = TerrainField(initial_extent=0)
        fuel = _fuel()
        fuel.update(0.0, _parked(), terrain, FIRST_CAN_DISTANCE)
        can = fuel.cans[0]
        assert can.y == terrain.height_function(1000.0) - CAN_SIZE - CAN_CLEARANCE

    @pytest.mark.parametrize(
        ("distance", "low", "high"),
        [
            (0.0, 150.0, 200.0),
            (499.9, 150.0, 200.0),
            (500.0, 250.0, 350.0),
            (1499.9, 250.0, 350.0),
            (1500.0, 350.0, 500.0),
            (25000.0, 350.0, 500.0),
        ],
    )
    def test_spawn_interval_bands(self, distance, low, high) -> None:
        fuel = _fuel()
        for _ in range(50):
            assert low <= fuel.spawn_interval(distance) < high

    def test_spawns_get_sparser(self, terrain) -> None:
        fuel = _fuel()
        fuel.update(0.0, _parked(), terrain, 10000.0)
        distances = [can.x / 10 for can in fuel.cans]
        gaps = [b - a for a, b in zip(distances, distances[1:])]
        assert max(gaps[:2]) < 200.0
        assert min(gaps[-3:]) >= 350.0


# --- Pickup ---


class TestPickup:
    def test_pickup_within_radius(self, terrain) -> None:
        fuel = _fuel()
        fuel.fuel = 50.0
        can = FuelCan(400.0, 300.0)
        fuel.cans.append(can)
        fuel.update(0.0, _parked(x=400.0 + PICKUP_RADIUS - 1, y=300.0), terrain, 0.0)

        assert can.collected
        assert fuel.fuel == pytest.approx(50.0 + FUEL_CAN_REFILL)
        assert len(fuel.effects) == 1
        fx = fuel.effects[0]
        assert (fx.x, fx.y) == (400.0, 300.0)
        assert fx.remaining == COLLECT_FX_DURATION

    def test_refill_capped_at_max(self, terrain) -> None:
        fuel = _fuel()
        fuel.fuel = 90.0
        fuel.cans.append(FuelCan(400.0, 300.0))
        fuel.update(0.0, _parked(x=400.0, y=300.0), terrain, 0.0)
        assert fuel.fuel == MAX_FUEL

    def test_outside_radius_not_collected(self, terrain) -> None:
        fuel = _fuel()
        can = FuelCan(400.0, 300.0)
        fuel.cans.append(can)
        fuel.update(0.0, _parked(x=400.0, y=300.0 + PICKUP_RADIUS), terrain, 0.0)
        assert not can.collected
        assert fuel.effects == []

    def test_collected_once(self, terrain) -> None:
        fuel = _fuel()
        fuel.fuel = 20.0
        fuel.cans.append(FuelCan(400.0, 300.0))
        vehicle = _parked(x=400.0, y=300.0)
        fuel.update(0.0, vehicle, terrain, 0.0)
        fuel.update(0.0, vehicle, terrain, 0.0)
        assert fuel.fuel == pytest.approx(20.0 + FUEL_CAN_REFILL)
        assert len(fuel.effects) == 1

    def test_spawn_then_pickup_in_same_update(self, terrain) -> None:
        fuel = _fuel()
        fuel.fuel = 40.0
        can_y = terrain.height_at(1000.0) - CAN_SIZE - CAN_CLEARANCE
        fuel.update(0.0, _parked(x=1000.0, y=can_y), terrain, FIRST_CAN_DISTANCE)

        assert len(fuel.cans) == 1
        assert fuel.cans[0].collected
        assert fuel.fuel == pytest.approx(40.0 + FUEL_CAN_REFILL)
        assert [(fx.x, fx.y) for fx in fuel.effects] == [(1000.0, can_y)]

    def test_recovers_from_empty_tank_reading(self, terrain) -> None:
        fuel = _fuel()
        fuel.fuel = -0.5
        fuel.cans.append(FuelCan(400.0, 300.0))
        fuel.update(0.0, _parked(x=400.0, y=300.0), terrain, 0.0)
        assert fuel.fuel == pytest.approx(29.5)
        assert not fuel.is_empty()


# --- Effects ---


class TestEffects:
    def test_effect_ages_and_expires(self, terrain) -> None:
        fuel = _fuel()
        fuel.cans.append(FuelCan(400.0, 300.0))
        vehicle = _parked(x=400.0, y=300.0)
        fuel.update(0.0, vehicle, terrain, 0.0)

        fuel.update(0.25, vehicle, terrain, 0.0)
        assert fuel.effects[0].remaining == pytest.approx(COLLECT_FX_DURATION - 0.25)
        fuel.update(0.25, vehicle, terrain, 0.0)
        assert len(fuel.effects) == 1
        fuel.update(0.25, vehicle, terrain, 0.0)
        assert fuel.effects == []

    def test_effect_removed_at_exactly_zero(self, terrain) -> None:
        fuel = _fuel()
        fuel.effects.append(CollectEffect(0.0, 0.0, 0.5))
        fuel.update(0.5, _parked(), terrain, 0.0)
        assert fuel.effects == []


# --- Cleanup ---


class TestCleanup:
    def test_far_behind_removed(self, terrain) -> None:
        fuel = _fuel()
        fuel.cans.extend([FuelCan(100.0, 0.0), FuelCan(2000.0, 0.0)])
        fuel.update(0.0, _parked(x=700.0, y=10000.0), terrain, 0.0)
        assert [c.x for c in fuel.cans] == [2000.0]

    def test_boundary_is_removed(self, terrain) -> None:
        fuel = _fuel()
        fuel.cans.append(FuelCan(200.0, 0.0))
        fuel.update(0.0, _parked(x=200.0 + CLEANUP_DISTANCE, y=10000.0), terrain, 0.0)
        assert fuel.cans == []

    def test_collected_cans_kept_until_behind(self, terrain) -> None:
        fuel = _fuel()
        can = FuelCan(400.0, 300.0)
        fuel.cans.append(can)
        fuel.update(0.0, _parked(x=400.0, y=300.0), terrain, 0.0)
        assert fuel.cans == [can]
        fuel.update(0.0, _parked(x=1000.0, y=300.0), terrain, 0.0)
        assert fuel.cans == []

    def test_cans_ahead_survive(self, terrain) -> None:
        fuel = _fuel()
        fuel.cans.append(FuelCan(5000.0, 0.0))
        fuel.update(0.0, _parked(x=0.0, y=10000.0), terrain, 0.0)
        assert len(fuel.cans) == 1


# --- Invariants ---


def test_percent_stays_in_range_over_long_run(terrain):
    rng = random.Random(11)
    fuel = _fuel()
    x = 0.0
    distance = 0.0
    for _ in range(5000):
        dt = rng.uniform(0.0, 0.05)
        vx = rng.choice([0.0, 5.0, 250.0])
        x += vx * dt
        distance = max(distance, x / 10)
        terrain.ensure_generated(x + 2000)
        y = terrain.height_at(x) - CAN_SIZE - CAN_CLEARANCE
        fuel.update(dt, _parked(x=x, y=y, vx=vx), terrain, distance)
        assert 0.0 <= fuel.percent <= MAX_FUEL


# --- Rendering ---


class TestRender:
    def test_uncollected_can_drawn(self, canvas) -> None:
        fuel = _fuel()
        fuel.cans.append(FuelCan(100.0, 50.0))
        fuel.render(canvas)
        assert canvas.names() == [
            "save",
            "translate",
            "fill_circle",
            "fill_rounded_rect",
            "text",
            "restore",
        ]
        assert canvas.of("translate")[0][1:] == (100.0, 50.0)
        assert canvas.of("text")[0][1] == "F"

    def test_collected_can_not_drawn(self, canvas) -> None:
        fuel = _fuel()
        fuel.cans.append(FuelCan(100.0, 50.0, collected=True))
        fuel.render(canvas)
        assert canvas.calls == []

    def test_effect_ring_expands_and_fades(self, canvas) -> None:
        fuel = _fuel()
        fuel.effects.append(CollectEffect(10.0, 20.0, COLLECT_FX_DURATION))
        fuel.effects.append(CollectEffect(10.0, 20.0, COLLECT_FX_DURATION / 2))
        fuel.render(canvas)

        fresh, half = canvas.of("stroke_circle")
        assert fresh[1] == (10.0, 20.0)
        assert fresh[2] == pytest.approx(15.0)
        assert fresh[3][3] == 255
        assert half[2] == pytest.approx(30.0)
        assert half[3][3] == 128
