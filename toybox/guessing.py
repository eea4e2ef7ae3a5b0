"""Number guessing game.

One target is drawn per game. The player guesses until they hit it; each
miss gets a hint, the hit reports how many guesses it took.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Optional

from rich.console import Console

from toybox.models import GameResult, Hint
from toybox.prompter import Prompter

logger = logging.getLogger(__name__)

LOW = 1
HIGH = 100

_HINT_TEXT = {
    Hint.HIGHER: "Guess a larger number.",
    Hint.LOWER: "Guess a smaller number.",
}


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Random generator seeded from ``seed``, or from the wall clock."""
    return random.Random(time.time_ns() if seed is None else seed)


def draw_target(rng: random.Random, low: int = LOW, high: int = HIGH) -> int:
    return rng.randint(low, high)


def judge(guess: int, target: int) -> Hint:
    if guess < target:
        return Hint.HIGHER
    if guess > target:
        return Hint.LOWER
    return Hint.CORRECT


def play(
    prompter: Prompter,
    console: Console,
    err_console: Console,
    rng: random.Random,
) -> GameResult:
    """Run one game to completion.

    Non-numeric input is rejected with an error and does not count as an
    attempt. Any integer counts, in range or not.

    Raises:
        InputClosed: input ended before the target was guessed.
    """
    result = GameResult(target=draw_target(rng))
    logger.debug("target drawn: %d", result.target)

    console.print("Welcome to the World of Guessing Numbers")

    while True:
        guess = prompter.ask(f"\nPlease enter your guess between ({LOW} to {HIGH}): ", int)
        if guess is None:
            err_console.print("Invalid input. Please enter a whole number.", style="red")
            prompter.discard_line()
            continue

        result.guesses.append(guess)
        hint = judge(guess, result.target)
        logger.debug("attempt %d: %d is %s", result.attempts, guess, hint.value)

        if hint is Hint.CORRECT:
            break
        console.print(_HINT_TEXT[hint])

    console.print(
        f"Congratulations!!! You have successfully guessed the number in {result.attempts} attempts"
    )
    console.print("\nBye Bye, Thanks for playing.")
    return result
