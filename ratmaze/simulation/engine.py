"""SimulationEngine — the rat's travel loop.

Owns the rat's location and drives and advances them one trip at a time:

1. Classify the most urgent need from the current drive percentages
2. Route from the current location to the node satisfying that need
3. Wear every drive down by the distance walked
4. Refill the drive tied to the node reached

The run ends after the first trip that finishes at the entrance.  A rat
that starts out satisfied still makes one full trip before that check.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto

import numpy as np
from numpy.random import Generator

from ratmaze.maze.graph import MazeGraph
from ratmaze.maze.node import Node
from ratmaze.maze.routing import shortest_path
from ratmaze.rat.drives import (
    DrivePercentages,
    DriveState,
    decay,
    init_drives,
    percentages,
    satisfied_drive,
    satisfy,
)
from ratmaze.rat.needs import Need, classify
from ratmaze.simulation.config import SimulationConfig

logger = logging.getLogger(__name__)

ENTRANCE = Node.EXIT


class SimulationError(RuntimeError):
    """The simulation cannot advance."""


class IterationLimitExceeded(SimulationError):
    """The rat did not make it back to the entrance in time."""

    def __init__(self, max_steps: int) -> None:
        super().__init__(f"rat still in the maze after {max_steps} trips")
        self.max_steps = max_steps


class Phase(Enum):
    """Where the engine is within a trip."""

    TRAVELING = auto()
    SATISFYING = auto()
    TERMINATED = auto()


@dataclass(frozen=True)
class StepReport:
    """Everything that happened during one trip.

    Attributes:
        step: 1-based trip number.
        origin: Where the trip started.
        percent: Drive percentages that chose the need.
        need: The need being served.
        destination: Where the trip ended.
        distance: Distance units walked.
        refilled: Name of the drive topped up on arrival, if any.
        drives: Drive levels after arrival.
    """

    step: int
    origin: Node
    percent: DrivePercentages
    need: Need
    destination: Node
    distance: int
    refilled: str | None
    drives: DriveState


@dataclass
class SimulationEngine:
    """Drives the rat through the maze trip by trip.

    Attributes:
        config: Loaded simulation configuration.
        graph: Canonical maze graph (copied for every search).
        drives: Current drive levels.  Drawn from ``rng`` when omitted.
        rng: Seeded random generator.
        location: The rat's current node.
        phase: Current state of the trip cycle.
        history: Reports of every completed trip.
        steps: Number of completed trips.
    """

    config: SimulationConfig
    graph: MazeGraph
    drives: DriveState | None = None
    rng: Generator = field(init=False)
    location: Node = field(init=False, default=ENTRANCE)
    phase: Phase = field(init=False, default=Phase.TRAVELING)
    history: list[StepReport] = field(init=False, default_factory=list)
    steps: int = 0

    def __post_init__(self) -> None:
        """Seed the RNG and draw starting drives if none were given."""
        self.rng = np.random.default_rng(self.config.seed)
        if self.drives is None:
            self.drives = init_drives(self.rng, self.config.drive_limits)

    @property
    def finished(self) -> bool:
        """Return True once the rat is back at the entrance."""
        return self.phase is Phase.TERMINATED

    def step(self) -> StepReport:
        """Make one trip: classify, travel, decay, satisfy.

        Returns:
            A report describing the trip.

        Raises:
            SimulationError: If the run has already terminated.
            IterationLimitExceeded: If ``config.max_steps`` trips have
                been made without returning to the entrance.
            Unreachable: If the destination cannot be reached.
        """
        if self.finished:
            msg = "simulation already terminated"
            raise SimulationError(msg)
        if self.steps >= self.config.max_steps:
            raise IterationLimitExceeded(self.config.max_steps)

        percent = percentages(self.drives)
        need = classify(percent, self.config.satisfied_threshold)
        origin = self.location

        route = shortest_path(self.graph.copy_edges(), origin, need.destination)
        self.drives = decay(self.drives, route.distance)
        self.location = route.destination

        self.phase = Phase.SATISFYING
        refilled = satisfied_drive(self.location)
        self.drives = satisfy(self.drives, self.location)

        self.steps += 1
        self.phase = Phase.TERMINATED if self.location is ENTRANCE else Phase.TRAVELING

        report = StepReport(
            step=self.steps,
            origin=origin,
            percent=percent,
            need=need,
            destination=route.destination,
            distance=route.distance,
            refilled=refilled,
            drives=self.drives,
        )
        self.history.append(report)
        logger.debug(
            f"Trip {self.steps}: {origin.name} -> {route.destination.name} "
            f"for {need.value}, {route.distance} units"
        )
        if self.finished:
            logger.info(f"Rat left the maze after {self.steps} trips")
        return report

    def run(self) -> list[StepReport]:
        """Make trips until the rat is back at the entrance.

        Returns:
            Reports of every trip, in order.
        """
        while not self.finished:
            self.step()
        return self.history
