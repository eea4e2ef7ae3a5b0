"""Shared fixtures: consoles that write into strings, scripted input."""

import io

import pytest
from rich.console import Console

from toybox.prompter import Prompter


def make_console() -> Console:
    return Console(file=io.StringIO(), highlight=False, soft_wrap=True, color_system=None)


@pytest.fixture
def console():
    return make_console()


@pytest.fixture
def err_console():
    return make_console()


@pytest.fixture
def scripted(console):
    """Build a Prompter that reads the given text as stdin."""

    def _make(text: str) -> Prompter:
        return Prompter(console, io.StringIO(text))

    return _make
