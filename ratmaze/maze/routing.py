"""Routing — Dijkstra search from the rat's location to its destination.

The search works on a disposable copy of the edge list.  Once a node is
settled, every corridor leading into it is pruned from the copy, so the
list shrinks as the frontier advances.  Visited nodes are tracked in an
explicit set; a distance of zero only ever means "zero units away".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from ratmaze.maze.graph import Edge, infinity_for
from ratmaze.maze.node import NODE_COUNT, Node

logger = logging.getLogger(__name__)


class Unreachable(RuntimeError):
    """No path leads from ``source`` to ``target``."""

    def __init__(self, source: Node, target: Node) -> None:
        super().__init__(f"{target.name} cannot be reached from {source.name}")
        self.source = source
        self.target = target


@dataclass(frozen=True)
class Route:
    """Result of a shortest-path search.

    Attributes:
        distance: Total weight of the shortest path.
        destination: The node the path ends at.
    """

    distance: int
    destination: Node


def shortest_path(edges: list[Edge], source: Node, target: Node) -> Route:
    """Find the shortest distance from ``source`` to ``target``.

    ``edges`` is consumed: corridors into settled nodes are removed from
    it in place.  Pass a fresh copy (see ``MazeGraph.copy_edges``).

    Args:
        edges: Working copy of the maze edges.
        source: Where the rat currently is.
        target: Where the rat needs to go.

    Returns:
        The shortest distance and the node reached.

    Raises:
        Unreachable: If every remaining candidate is at infinite distance
            before ``target`` is settled.
    """
    if source is target:
        return Route(distance=0, destination=target)

    infinity = infinity_for(edges)
    distance = np.full(NODE_COUNT, infinity, dtype=np.int64)
    distance[source.index] = 0
    visited: set[Node] = set()
    current = source

    while current is not target:
        # Relax corridors leaving the current node
        here = distance[current.index]
        for edge in edges:
            if edge.source is not current:
                continue
            reached = here + edge.weight
            if reached < distance[edge.target.index]:
                distance[edge.target.index] = reached

        # Settle the current node
        edges[:] = [edge for edge in edges if edge.target is not current]
        visited.add(current)

        # Pick the closest unsettled node; argmin keeps the lowest index on ties
        candidates = distance.copy()
        for node in visited:
            candidates[node.index] = infinity
        best = int(np.argmin(candidates))
        if candidates[best] >= infinity:
            raise Unreachable(source, target)
        current = Node.from_index(best)
        logger.debug(f"Settled {current.name} at distance {candidates[best]}")

    return Route(distance=int(distance[target.index]), destination=target)
