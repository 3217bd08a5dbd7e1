"""Node — the fixed set of locations in the maze.

Every location has a one-character symbol (used by the graph file format)
and a small integer index (used for array-backed distance tracking).  The
two junctions carry no drive of their own but are ordinary routable
vertices.
"""

from __future__ import annotations

from enum import Enum


class Node(Enum):
    """A location in the maze, valued by its graph-file symbol."""

    EXIT = "E"
    NEST = "N"
    FOOD = "F"
    JUNCTION_A = "A"
    WHEEL = "W"
    JUNCTION_B = "B"
    MEDICINE = "M"

    @property
    def symbol(self) -> str:
        """Return the single-character symbol used in graph files."""
        return self.value

    @property
    def index(self) -> int:
        """Return the array index of this node."""
        return _NODE_TO_INDEX[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> Node:
        """Look up a node by its graph-file symbol.

        Raises:
            ValueError: If ``symbol`` names no node.
        """
        try:
            return _SYMBOL_TO_NODE[symbol]
        except KeyError:
            msg = f"unknown node symbol {symbol!r}"
            raise ValueError(msg) from None

    @classmethod
    def from_index(cls, index: int) -> Node:
        """Look up a node by its array index.

        Raises:
            ValueError: If ``index`` is outside ``0..NODE_COUNT - 1``.
        """
        if not 0 <= index < NODE_COUNT:
            msg = f"node index {index} out of range 0..{NODE_COUNT - 1}"
            raise ValueError(msg)
        return _INDEX_TO_NODE[index]


_INDEX_TO_NODE: tuple[Node, ...] = tuple(Node)
_NODE_TO_INDEX: dict[Node, int] = {node: i for i, node in enumerate(_INDEX_TO_NODE)}
_SYMBOL_TO_NODE: dict[str, Node] = {node.value: node for node in Node}

NODE_COUNT = len(_INDEX_TO_NODE)
