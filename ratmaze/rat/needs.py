"""Needs — turn drive percentages into a single destination.

The most depleted drive wins.  Ties go to whichever drive comes first in
the order health, hunger, sleep, fun.  Once even the lowest drive is
above the satisfaction threshold the rat heads for the exit.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from ratmaze.maze.node import Node

if TYPE_CHECKING:
    from ratmaze.rat.drives import DrivePercentages

SATISFIED_THRESHOLD = 50


class Need(Enum):
    """What the rat is currently after."""

    EXERCISE = "exercise"
    MEDICINE = "medicine"
    FOOD = "food"
    NAP = "nap"
    EXIT = "exit"

    @property
    def destination(self) -> Node:
        """The maze node that satisfies this need."""
        return _DESTINATIONS[self]


_DESTINATIONS: dict[Need, Node] = {
    Need.EXERCISE: Node.WHEEL,
    Need.MEDICINE: Node.MEDICINE,
    Need.FOOD: Node.FOOD,
    Need.NAP: Node.NEST,
    Need.EXIT: Node.EXIT,
}


def classify(
    percent: DrivePercentages,
    threshold: int = SATISFIED_THRESHOLD,
) -> Need:
    """Pick the rat's most urgent need.

    Args:
        percent: Current drive percentages.
        threshold: Lowest percentage still considered needy.  A minimum
            strictly above it means the rat is satisfied.

    Returns:
        The dominant Need, or ``Need.EXIT`` when all drives are satisfied.
    """
    need, lowest = Need.MEDICINE, percent.health
    for challenger, value in (
        (Need.FOOD, percent.hunger),
        (Need.NAP, percent.sleep),
        (Need.EXERCISE, percent.fun),
    ):
        if value < lowest:
            need, lowest = challenger, value

    if lowest > threshold:
        return Need.EXIT
    return need
