"""Drives — the rat's four bounded biological drive levels.

Each drive sits between zero (desperate) and its own maximum (fully
satisfied).  Walking wears every drive down by the distance covered, and
reaching the right place in the maze tops one of them back up.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from numpy.random import Generator

from ratmaze.maze.node import Node

DRIVE_NAMES: tuple[str, ...] = ("fun", "health", "hunger", "sleep")

_NODE_DRIVES: dict[Node, str] = {
    Node.WHEEL: "fun",
    Node.MEDICINE: "health",
    Node.FOOD: "hunger",
    Node.NEST: "sleep",
}


@dataclass(frozen=True)
class DriveLimits:
    """Maximum value of each drive.

    Attributes:
        fun: Ceiling for entertainment.
        health: Ceiling for health.
        hunger: Ceiling for nourishment.
        sleep: Ceiling for rest.
    """

    fun: int = 35
    health: int = 60
    hunger: int = 30
    sleep: int = 40

    def __post_init__(self) -> None:
        for name in DRIVE_NAMES:
            if getattr(self, name) <= 0:
                msg = f"drive limit {name!r} must be positive"
                raise ValueError(msg)


@dataclass
class DriveState:
    """Current drive levels, each clamped into ``[0, limit]``.

    Attributes:
        fun: Entertainment level.
        health: Health level.
        hunger: Nourishment level (high means well fed).
        sleep: Rest level.
        limits: Per-drive maxima.
    """

    fun: int
    health: int
    hunger: int
    sleep: int
    limits: DriveLimits = field(default_factory=DriveLimits)

    def __post_init__(self) -> None:
        """Clamp every drive into its valid range."""
        for name in DRIVE_NAMES:
            value = int(getattr(self, name))
            setattr(self, name, min(max(value, 0), getattr(self.limits, name)))


@dataclass(frozen=True)
class DrivePercentages:
    """Drive levels as whole percentages of their maxima."""

    fun: int
    health: int
    hunger: int
    sleep: int


def init_drives(rng: Generator, limits: DriveLimits | None = None) -> DriveState:
    """Draw random starting drives, each uniform over ``[0, limit)``.

    Args:
        rng: Seeded random generator.
        limits: Per-drive maxima (defaults to ``DriveLimits()``).

    Returns:
        A fresh DriveState.
    """
    limits = limits or DriveLimits()
    return DriveState(
        fun=int(rng.integers(0, limits.fun)),
        health=int(rng.integers(0, limits.health)),
        hunger=int(rng.integers(0, limits.hunger)),
        sleep=int(rng.integers(0, limits.sleep)),
        limits=limits,
    )


def percentages(state: DriveState) -> DrivePercentages:
    """Express each drive as a truncated percentage of its maximum."""
    limits = state.limits
    return DrivePercentages(
        fun=100 * state.fun // limits.fun,
        health=100 * state.health // limits.health,
        hunger=100 * state.hunger // limits.hunger,
        sleep=100 * state.sleep // limits.sleep,
    )


def decay(state: DriveState, distance: int) -> DriveState:
    """Wear every drive down by the distance walked, stopping at zero.

    Raises:
        ValueError: If ``distance`` is negative.
    """
    if distance < 0:
        msg = f"distance must be non-negative, got {distance}"
        raise ValueError(msg)
    return replace(
        state,
        fun=max(state.fun - distance, 0),
        health=max(state.health - distance, 0),
        hunger=max(state.hunger - distance, 0),
        sleep=max(state.sleep - distance, 0),
    )


def satisfied_drive(node: Node) -> str | None:
    """Return the name of the drive ``node`` refills, or None."""
    return _NODE_DRIVES.get(node)


def satisfy(state: DriveState, node: Node) -> DriveState:
    """Refill the drive tied to ``node``; other nodes leave drives untouched."""
    name = satisfied_drive(node)
    if name is None:
        return state
    return replace(state, **{name: getattr(state.limits, name)})
