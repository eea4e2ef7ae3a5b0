"""Tests for the number guessing game."""

import random

import pytest

from toybox.errors import InputClosed
from toybox.guessing import HIGH, LOW, draw_target, judge, make_rng, play
from toybox.models import Hint


def _target_for(seed: int) -> int:
    return draw_target(make_rng(seed))


def test_draw_stays_in_range():
    rng = random.Random(0)
    draws = {draw_target(rng) for _ in range(2000)}
    assert min(draws) >= LOW
    assert max(draws) <= HIGH


def test_same_seed_same_target():
    assert _target_for(42) == _target_for(42)


def test_judge():
    assert judge(10, 50) is Hint.HIGHER
    assert judge(90, 50) is Hint.LOWER
    assert judge(50, 50) is Hint.CORRECT


def test_play_counts_attempts(scripted, console, err_console):
    target = _target_for(7)
    low = target - 1 if target > LOW else target + 2
    high = target + 1 if target < HIGH else target - 2
    result = play(scripted(f"{low}\n{high}\n{target}\n"), console, err_console, make_rng(7))

    assert result.target == target
    assert result.attempts == 3
    assert result.guesses == [low, high, target]
    out = console.file.getvalue()
    assert out.startswith("Welcome to the World of Guessing Numbers")
    assert "guessed the number in 3 attempts" in out
    assert "Bye Bye, Thanks for playing." in out


def test_play_hints(scripted, console, err_console):
    target = _target_for(3)
    guesses = []
    if target > LOW:
        guesses.append(LOW)
    if target < HIGH:
        guesses.append(HIGH)
    script = "".join(f"{g}\n" for g in guesses + [target])
    play(scripted(script), console, err_console, make_rng(3))

    out = console.file.getvalue()
    assert ("Guess a larger number." in out) == (target > LOW)
    assert ("Guess a smaller number." in out) == (target < HIGH)


def test_first_guess_correct(scripted, console, err_console):
    target = _target_for(11)
    result = play(scripted(f"{target}\n"), console, err_console, make_rng(11))
    assert result.attempts == 1
    assert "Guess a" not in console.file.getvalue()


def test_out_of_range_guess_counts(scripted, console, err_console):
    target = _target_for(5)
    result = play(scripted(f"500\n{target}\n"), console, err_console, make_rng(5))
    assert result.attempts == 2
    assert "Guess a smaller number." in console.file.getvalue()


def test_non_numeric_guess_is_rejected(scripted, console, err_console):
    target = _target_for(9)
    result = play(scripted(f"hello there\n{target}\n"), console, err_console, make_rng(9))

    assert result.attempts == 1
    assert "Invalid input. Please enter a whole number." in err_console.file.getvalue()
    # One prompt for the rejected line, one for the correct guess.
    assert console.file.getvalue().count("Please enter your guess") == 2


def test_input_closed_before_hit(scripted, console, err_console):
    target = _target_for(1)
    wrong = LOW if target != LOW else HIGH
    with pytest.raises(InputClosed):
        play(scripted(f"{wrong}\n"), console, err_console, make_rng(1))
