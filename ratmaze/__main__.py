"""Entry point for ``python -m ratmaze``.

Loads the YAML config and the maze graph, asks for the rat's name, and
narrates the rat's trips on the console until it is released.
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys

from ratmaze.maze.graph import LoadError, load_graph
from ratmaze.maze.routing import Unreachable
from ratmaze.simulation.config import SimulationConfig
from ratmaze.simulation.engine import SimulationEngine, SimulationError
from ratmaze.ui.console_client import ConsoleNarrator

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ratmaze",
        description="Flowers for Algorithm - a rat finds its way through a maze",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "-g",
        "--graph",
        type=pathlib.Path,
        default=None,
        help="Path to the maze graph file (overrides the config)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="RNG seed for the rat's starting drives (overrides the config)",
    )
    parser.add_argument(
        "--name",
        default=None,
        help="Rat's name (skips the prompt)",
    )
    parser.add_argument(
        "--no-pause",
        action="store_true",
        help="Do not wait for Enter between reports",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Parse CLI args, load the maze, run the rat to completion.

    Returns:
        Process exit status: 0 on release, 1 if the graph cannot be
        loaded, 2 if the rat gets stuck.
    """
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = SimulationConfig.from_yaml(args.config)
    if args.graph is not None:
        config.graph_path = args.graph
    if args.seed is not None:
        config.seed = args.seed
    if args.no_pause:
        config.pause = False

    narrator = ConsoleNarrator(pause_enabled=config.pause)
    try:
        graph = load_graph(config.graph_path, expected_edges=config.expected_edges)
    except LoadError as exc:
        logger.error(f"Graph load failed: {exc}")
        narrator.load_failure(config.graph_path)
        narrator.pause()
        return 1

    narrator.intro()
    if args.name:
        narrator.name = args.name
    else:
        narrator.ask_name()

    engine = SimulationEngine(config=config, graph=graph)
    try:
        while not engine.finished:
            narrator.report(engine.step())
    except (Unreachable, SimulationError) as exc:
        logger.error(f"Simulation aborted: {exc}")
        return 2

    narrator.outro()
    return 0


if __name__ == "__main__":
    sys.exit(main())
