"""Data models for the toybox programs.

MenuChoice, Hint, CalcState, GameResult, ProgramInfo — the typed values
that flow between the game loops and the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class MenuChoice(int, Enum):
    """Calculator menu options, numbered as shown to the user."""

    ADD = 1
    SUBTRACT = 2
    MULTIPLY = 3
    DIVIDE = 4
    MODULUS = 5
    POWER = 6
    EXIT = 7

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def parse(cls, value: int) -> Optional[MenuChoice]:
        """Return the choice numbered ``value``, or None if out of range."""
        try:
            return cls(value)
        except ValueError:
            return None


OPERATIONS = [c for c in MenuChoice if c is not MenuChoice.EXIT]


class Hint(str, Enum):
    """Feedback after a guess."""

    HIGHER = "higher"
    LOWER = "lower"
    CORRECT = "correct"


class CalcState(str, Enum):
    """Where a calculator session is in its read/compute cycle."""

    AWAITING_CHOICE = "awaiting-choice"
    AWAITING_OPERANDS = "awaiting-operands"
    COMPUTING = "computing"
    REPORTING = "reporting"
    FINISHED = "finished"


@dataclass
class GameResult:
    """Outcome of one finished guessing game."""

    target: int
    guesses: list[int] = field(default_factory=list)

    @property
    def attempts(self) -> int:
        return len(self.guesses)


@dataclass
class ProgramInfo:
    """A program shipped in the package, as listed by ``toybox list``."""

    name: str
    description: str
    command: str


PROGRAMS = [
    ProgramInfo(
        name="Guessing Game",
        description="Guess a number between 1 and 100",
        command="guess",
    ),
    ProgramInfo(
        name="Calculator",
        description="Menu-driven arithmetic on two numbers",
        command="calc",
    ),
]
