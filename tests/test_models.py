"""Tests for the shared data models."""

from toybox.models import OPERATIONS, PROGRAMS, GameResult, MenuChoice


def test_menu_numbering():
    assert [c.value for c in MenuChoice] == list(range(1, 8))
    assert MenuChoice.MODULUS.label == "Modulus"


def test_parse_menu_choice():
    assert MenuChoice.parse(4) is MenuChoice.DIVIDE
    assert MenuChoice.parse(0) is None
    assert MenuChoice.parse(8) is None
    assert MenuChoice.parse(-1) is None


def test_operations_exclude_exit():
    assert len(OPERATIONS) == 6
    assert MenuChoice.EXIT not in OPERATIONS


def test_game_result_attempts():
    result = GameResult(target=10, guesses=[5, 20, 10])
    assert result.attempts == 3
    assert GameResult(target=1).attempts == 0


def test_programs_have_commands():
    assert {p.command for p in PROGRAMS} == {"guess", "calc"}
