"""Tests for ratmaze.rat — drive levels and need classification."""

import numpy as np
import pytest
from numpy.random import Generator

from ratmaze.maze.node import Node
from ratmaze.rat.drives import (
    DriveLimits,
    DrivePercentages,
    DriveState,
    decay,
    init_drives,
    percentages,
    satisfied_drive,
    satisfy,
)
from ratmaze.rat.needs import Need, classify


def _percent(
    *,
    fun: int = 100,
    health: int = 100,
    hunger: int = 100,
    sleep: int = 100,
) -> DrivePercentages:
    return DrivePercentages(fun=fun, health=health, hunger=hunger, sleep=sleep)


class TestDriveLimits:
    """Tests for drive ceilings."""

    def test_defaults(self) -> None:
        limits = DriveLimits()
        assert (limits.fun, limits.health, limits.hunger, limits.sleep) == (
            35,
            60,
            30,
            40,
        )

    def test_rejects_non_positive(self) -> None:
        with pytest.raises(ValueError, match="hunger"):
            DriveLimits(hunger=0)


class TestDriveState:
    """Tests for construction and randomised starting drives."""

    def test_clamps_into_range(self) -> None:
        state = DriveState(fun=-5, health=99, hunger=10, sleep=40)
        assert state.fun == 0
        assert state.health == 60
        assert state.hunger == 10
        assert state.sleep == 40

    def test_init_within_bounds(self, rng: Generator) -> None:
        limits = DriveLimits()
        for _ in range(200):
            state = init_drives(rng, limits)
            assert 0 <= state.fun < limits.fun
            assert 0 <= state.health < limits.health
            assert 0 <= state.hunger < limits.hunger
            assert 0 <= state.sleep < limits.sleep

    def test_init_is_seedable(self) -> None:
        a = init_drives(np.random.default_rng(7))
        b = init_drives(np.random.default_rng(7))
        assert a == b

    def test_init_uses_custom_limits(self, rng: Generator) -> None:
        limits = DriveLimits(fun=1, health=1, hunger=1, sleep=1)
        state = init_drives(rng, limits)
        assert (state.fun, state.health, state.hunger, state.sleep) == (0, 0, 0, 0)
        assert state.limits == limits


class TestPercentages:
    """Tests for the percentage conversion."""

    def test_truncates(self) -> None:
        state = DriveState(fun=10, health=50, hunger=5, sleep=20)
        assert percentages(state) == DrivePercentages(
            fun=28,
            health=83,
            hunger=16,
            sleep=50,
        )

    def test_full_and_empty(self) -> None:
        full = DriveState(fun=35, health=60, hunger=30, sleep=40)
        empty = DriveState(fun=0, health=0, hunger=0, sleep=0)
        assert percentages(full) == _percent()
        assert percentages(empty) == _percent(fun=0, health=0, hunger=0, sleep=0)


class TestClassify:
    """Tests for choosing the dominant need."""

    def test_lowest_sleep_naps(self) -> None:
        percent = _percent(health=40, hunger=40, sleep=10, fun=90)
        assert classify(percent) is Need.NAP

    def test_all_above_threshold_exits(self) -> None:
        percent = _percent(health=60, hunger=60, sleep=60, fun=60)
        assert classify(percent) is Need.EXIT

    def test_exactly_threshold_is_not_exit(self) -> None:
        percent = _percent(health=50, hunger=80, sleep=80, fun=80)
        assert classify(percent) is Need.MEDICINE

    def test_health_wins_ties(self) -> None:
        percent = _percent(health=10, hunger=10, sleep=10, fun=10)
        assert classify(percent) is Need.MEDICINE

    def test_hunger_beats_sleep_and_fun_on_tie(self) -> None:
        percent = _percent(health=40, hunger=20, sleep=20, fun=20)
        assert classify(percent) is Need.FOOD

    def test_sleep_beats_fun_on_tie(self) -> None:
        percent = _percent(health=40, hunger=30, sleep=20, fun=20)
        assert classify(percent) is Need.NAP

    def test_fun_when_strictly_lowest(self) -> None:
        percent = _percent(health=40, hunger=30, sleep=20, fun=19)
        assert classify(percent) is Need.EXERCISE

    def test_custom_threshold(self) -> None:
        percent = _percent(health=70, hunger=75, sleep=80, fun=90)
        assert classify(percent, threshold=80) is Need.MEDICINE
        assert classify(percent, threshold=69) is Need.EXIT

    def test_idempotent(self) -> None:
        state = DriveState(fun=10, health=50, hunger=5, sleep=20)
        first = classify(percentages(state))
        assert classify(percentages(state)) is first
        assert state == DriveState(fun=10, health=50, hunger=5, sleep=20)

    def test_destinations(self) -> None:
        assert Need.EXERCISE.destination is Node.WHEEL
        assert Need.MEDICINE.destination is Node.MEDICINE
        assert Need.FOOD.destination is Node.FOOD
        assert Need.NAP.destination is Node.NEST
        assert Need.EXIT.destination is Node.EXIT


class TestDecay:
    """Tests for wearing drives down."""

    def test_subtracts_distance(self) -> None:
        state = decay(DriveState(fun=10, health=50, hunger=5, sleep=20), 2)
        assert (state.fun, state.health, state.hunger, state.sleep) == (8, 48, 3, 18)

    def test_floors_at_zero(self) -> None:
        state = decay(DriveState(fun=3, health=50, hunger=0, sleep=20), 10)
        assert state.fun == 0
        assert state.hunger == 0
        assert state.health == 40

    def test_does_not_mutate_input(self) -> None:
        original = DriveState(fun=10, health=50, hunger=5, sleep=20)
        decay(original, 4)
        assert original.fun == 10

    def test_negative_distance_rejected(self) -> None:
        with pytest.raises(ValueError):
            decay(DriveState(fun=1, health=1, hunger=1, sleep=1), -1)


class TestSatisfy:
    """Tests for refilling drives on arrival."""

    @pytest.mark.parametrize(
        ("node", "drive"),
        [
            (Node.FOOD, "hunger"),
            (Node.MEDICINE, "health"),
            (Node.NEST, "sleep"),
            (Node.WHEEL, "fun"),
        ],
    )
    def test_restores_exact_max(self, node: Node, drive: str) -> None:
        state = satisfy(DriveState(fun=0, health=0, hunger=0, sleep=0), node)
        assert getattr(state, drive) == getattr(state.limits, drive)
        others = [name for name in ("fun", "health", "hunger", "sleep") if name != drive]
        assert all(getattr(state, name) == 0 for name in others)
        assert satisfied_drive(node) == drive

    @pytest.mark.parametrize("node", [Node.EXIT, Node.JUNCTION_A, Node.JUNCTION_B])
    def test_no_op_elsewhere(self, node: Node) -> None:
        state = DriveState(fun=1, health=2, hunger=3, sleep=4)
        assert satisfy(state, node) == state
        assert satisfied_drive(node) is None
