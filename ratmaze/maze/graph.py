"""Graph store — the static weighted edge list of the maze.

The maze is read once from a plain-text file of ``<from> <to> <weight>``
triples and never changes afterwards.  Route searches prune the edges
they walk over, so each search gets its own copy from
:meth:`MazeGraph.copy_edges`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from ratmaze.maze.node import Node

logger = logging.getLogger(__name__)

EDGE_COUNT = 18


class LoadError(ValueError):
    """The graph source is missing or malformed."""


@dataclass(frozen=True)
class Edge:
    """A directed, weighted corridor between two maze locations.

    Attributes:
        source: Node the corridor leaves from.
        target: Node the corridor leads to.
        weight: Distance units walked along the corridor (>= 0).
    """

    source: Node
    target: Node
    weight: int


def infinity_for(edges: Iterable[Edge]) -> int:
    """Return a distance larger than any path through ``edges`` can cost."""
    return sum(edge.weight for edge in edges) + 1


@dataclass(frozen=True)
class MazeGraph:
    """The canonical, read-only edge list of a maze.

    Attributes:
        edges: All corridors in file order.
    """

    edges: tuple[Edge, ...]

    @property
    def infinity(self) -> int:
        """Sentinel distance exceeding every achievable path cost."""
        return infinity_for(self.edges)

    def copy_edges(self) -> list[Edge]:
        """Return an independent mutable list of the edges for one search."""
        return list(self.edges)

    def neighbours(self, node: Node) -> list[Edge]:
        """Return the corridors leaving ``node``."""
        return [edge for edge in self.edges if edge.source is node]

    def __len__(self) -> int:
        return len(self.edges)


def _parse_symbol(token: str, position: int) -> Node:
    if len(token) != 1:
        msg = f"triple {position}: node symbol must be one character, got {token!r}"
        raise LoadError(msg)
    try:
        return Node.from_symbol(token)
    except ValueError as exc:
        msg = f"triple {position}: {exc}"
        raise LoadError(msg) from exc


def _parse_weight(token: str, position: int) -> int:
    try:
        weight = int(token)
    except ValueError as exc:
        msg = f"triple {position}: weight {token!r} is not an integer"
        raise LoadError(msg) from exc
    if weight < 0:
        msg = f"triple {position}: weight {weight} is negative"
        raise LoadError(msg)
    return weight


def parse_graph(text: str, expected_edges: int = EDGE_COUNT) -> MazeGraph:
    """Parse whitespace-separated edge triples into a graph.

    Only the first ``expected_edges`` triples are read; anything after
    them is ignored.

    Args:
        text: Raw graph source.
        expected_edges: Number of triples the source must provide.

    Returns:
        A fully populated MazeGraph.

    Raises:
        LoadError: If fewer than ``expected_edges`` triples are present or
            any of them is malformed.
    """
    tokens = text.split()
    needed = 3 * expected_edges
    if len(tokens) < needed:
        msg = (
            f"expected {expected_edges} edge triples, "
            f"found {len(tokens) // 3} ({len(tokens)} tokens)"
        )
        raise LoadError(msg)
    if len(tokens) > needed:
        logger.warning(
            f"Ignoring {len(tokens) - needed} trailing tokens after "
            f"{expected_edges} edges"
        )

    edges: list[Edge] = []
    for i in range(expected_edges):
        source, target, weight = tokens[3 * i : 3 * i + 3]
        edges.append(
            Edge(
                source=_parse_symbol(source, i + 1),
                target=_parse_symbol(target, i + 1),
                weight=_parse_weight(weight, i + 1),
            ),
        )
    return MazeGraph(edges=tuple(edges))


def load_graph(path: str | Path, expected_edges: int = EDGE_COUNT) -> MazeGraph:
    """Load a maze graph from a text file.

    Args:
        path: Location of the graph file.
        expected_edges: Number of triples the file must provide.

    Returns:
        The parsed MazeGraph.

    Raises:
        LoadError: If the file cannot be read or its contents are malformed.
    """
    path = Path(path)
    try:
        text = path.read_text()
    except OSError as exc:
        msg = f"cannot read graph file {path}: {exc.strerror or exc}"
        raise LoadError(msg) from exc

    graph = parse_graph(text, expected_edges=expected_edges)
    logger.info(f"Loaded {len(graph)} edges from {path}")
    return graph
