"""Console narration for the rat simulation.

Prints a running story of the rat's trips: how it feels, where it is
heading, how far it walked and what it found there.  The narrator only
reads engine reports and never changes simulation state.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TextIO

from ratmaze.rat.needs import Need

if TYPE_CHECKING:
    from ratmaze.rat.drives import DrivePercentages
    from ratmaze.simulation.engine import StepReport

DEFAULT_NAME = "The rat"

_NEED_LINES: dict[Need, str] = {
    Need.EXIT: "{name} is feeling satisfied and is going to the exit for release.",
    Need.FOOD: "{name} is hungry and is going to the food bowl.",
    Need.MEDICINE: "{name} is feeling sick and is going to the medicine dispenser.",
    Need.NAP: "{name} is sleepy and is going to the nest for a nap.",
    Need.EXERCISE: "{name} is bored and is going to the exercise wheel.",
}

_ARRIVAL_LINES: dict[str, tuple[str, ...]] = {
    "hunger": (
        "{name} has reached the food bowl.",
        "{name} finds a tasty kibble to chew on. Mmmm, lab diets.",
    ),
    "health": (
        "{name} has reached the medical pod.",
        "YUCK! That medicine is disgusting, but {name} feels much better now.",
    ),
    "sleep": (
        "{name} has reached the rat's nest.",
        "Off to dreamland!",
        "{name} is bright-eyed and ready to go after that refreshing nap!",
    ),
    "fun": (
        "{name} has reached the exercise wheel.",
        "The wheel goes squeak, squeak, squeak, squeak, squeak, squeak.",
    ),
}


@dataclass
class ConsoleNarrator:
    """Tells the story of a run on a pair of text streams.

    Attributes:
        name: The rat's display name.
        pause_enabled: Wait for Enter after each drive report.
        stdin: Stream read for the name and pauses.
        stdout: Stream the story is written to.
    """

    name: str = DEFAULT_NAME
    pause_enabled: bool = True
    stdin: TextIO = field(default_factory=lambda: sys.stdin)
    stdout: TextIO = field(default_factory=lambda: sys.stdout)

    def say(self, line: str = "") -> None:
        print(line.format(name=self.name), file=self.stdout)

    def pause(self) -> None:
        """Wait for the reader to press Enter."""
        if not self.pause_enabled:
            return
        self.say("Press enter to continue.")
        self.stdout.flush()
        self.stdin.readline()

    def ask_name(self, prompt: str = "What is the rat's name?") -> str:
        """Prompt for the rat's name and remember it.

        Only the first word of the reply is kept.  An empty reply keeps
        the current name.
        """
        print(prompt, end=" ", file=self.stdout)
        self.stdout.flush()
        words = self.stdin.readline().split()
        if words:
            self.name = words[0]
        return self.name

    def intro(self) -> None:
        self.say("~~ Flowers for Algorithm ~~")
        self.say()
        self.say("The scientist places the rat in the vestibule of a maze.")
        self.say(
            "The rat is a thinly veiled metaphor for the tenuous nature "
            "of human existence.",
        )

    def show_drives(self, percent: DrivePercentages) -> None:
        """Print how the rat is feeling, then pause."""
        self.say("{name} is currently feeling: ")
        self.say(f"\t{percent.fun}% entertained")
        self.say(f"\t{percent.health}% healthy")
        self.say(f"\t{percent.hunger}% nourished")
        self.say(f"\t{percent.sleep}% rested")
        self.pause()

    def report(self, report: StepReport) -> None:
        """Narrate one trip from start to arrival."""
        self.show_drives(report.percent)
        self.say(_NEED_LINES[report.need])
        self.say(f"\tTraveling to node {report.destination.symbol}.")
        self.say(f"\tTraveled a total of {report.distance} distance units.")
        if report.refilled is not None:
            for line in _ARRIVAL_LINES[report.refilled]:
                self.say(line)

    def outro(self) -> None:
        self.say("The scientist removes {name} from the maze and jots in her notebook:")
        self.say("\t'Science accomplished.'")
        self.say("THE END")
        self.pause()

    def load_failure(self, path: object) -> None:
        self.say("Failed to load graph. Program unable to continue.")
        print(f"Check the location of {path} and try again.", file=self.stdout)
