"""Shared fixtures for the ratmaze test suite."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
from numpy.random import Generator

from ratmaze.maze.graph import MazeGraph, parse_graph
from ratmaze.simulation.config import SimulationConfig

MAZE_TEXT = """\
E A 1  A E 1
E N 3  N E 3
A N 2  N A 2
A F 1  F A 1
N F 2  F N 2
F W 2  W F 2
W B 1  B W 1
A B 3  B A 3
B M 2  M B 2
"""


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def maze() -> MazeGraph:
    """The standard 7-node, 18-edge maze."""
    return parse_graph(MAZE_TEXT)


@pytest.fixture
def graph_file(tmp_path: Path) -> Path:
    """The standard maze written to a temporary file."""
    path = tmp_path / "graph_weights.txt"
    path.write_text(MAZE_TEXT)
    return path


@pytest.fixture
def default_config(graph_file: Path) -> SimulationConfig:
    """Default simulation config (no YAML file needed), seeded."""
    return SimulationConfig(seed=42, graph_path=graph_file, pause=False)
