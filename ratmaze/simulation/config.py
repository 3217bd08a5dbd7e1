"""Config — load simulation parameters from YAML files.

Drive ceilings, the satisfaction threshold, the iteration guard and the
location of the maze graph live in YAML and are parsed into a typed
dataclass here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from ratmaze.maze.graph import EDGE_COUNT
from ratmaze.rat.drives import DriveLimits
from ratmaze.rat.needs import SATISFIED_THRESHOLD

DEFAULT_GRAPH_PATH = (
    Path(__file__).resolve().parent.parent.parent / "data" / "graph_weights.txt"
)


@dataclass
class SimulationConfig:
    """Top-level simulation configuration.

    Attributes:
        seed: RNG seed for the starting drives.  ``None`` draws fresh
            entropy on every run.
        graph_path: Path to the maze graph file.
        expected_edges: Number of edge triples the graph file must hold.
        max_steps: Iterations allowed before the run is declared stuck.
        satisfied_threshold: Percentage the weakest drive must exceed
            before the rat heads for the exit.
        pause: Whether the console waits for Enter between reports.
        drive_limits: Maximum value of each drive.
    """

    seed: int | None = None
    graph_path: Path = DEFAULT_GRAPH_PATH
    expected_edges: int = EDGE_COUNT
    max_steps: int = 100
    satisfied_threshold: int = SATISFIED_THRESHOLD
    pause: bool = True
    drive_limits: DriveLimits = field(default_factory=DriveLimits)

    @classmethod
    def from_yaml(cls, path: str | Path) -> SimulationConfig:
        """Load configuration from a YAML file.

        A relative ``graph_path`` is resolved against the directory the
        YAML file lives in.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated SimulationConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        graph_path = data.get("graph_path")
        if graph_path is None:
            graph_path = cls.graph_path
        else:
            graph_path = Path(graph_path)
            if not graph_path.is_absolute():
                graph_path = path.resolve().parent / graph_path

        limits = data.get("drive_limits") or {}
        defaults = DriveLimits()

        return cls(
            seed=data.get("seed", cls.seed),
            graph_path=graph_path,
            expected_edges=data.get("expected_edges", cls.expected_edges),
            max_steps=data.get("max_steps", cls.max_steps),
            satisfied_threshold=data.get(
                "satisfied_threshold",
                cls.satisfied_threshold,
            ),
            pause=data.get("pause", cls.pause),
            drive_limits=DriveLimits(
                fun=limits.get("fun", defaults.fun),
                health=limits.get("health", defaults.health),
                hunger=limits.get("hunger", defaults.hunger),
                sleep=limits.get("sleep", defaults.sleep),
            ),
        )
