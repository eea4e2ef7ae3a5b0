"""Menu-driven calculator.

A session cycles AWAITING_CHOICE -> AWAITING_OPERANDS -> COMPUTING ->
REPORTING -> AWAITING_CHOICE. A failed read at any step goes straight
back to AWAITING_CHOICE. Choosing Exit, or running out of input, moves
to FINISHED.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console

from toybox.arithmetic import compute, is_invalid
from toybox.errors import InputClosed
from toybox.models import CalcState, MenuChoice
from toybox.prompter import Prompter

logger = logging.getLogger(__name__)

_RULE = "-" * 30

CHOICE_PROMPT = "\nNow Enter your Choice: "
FIRST_OPERAND_PROMPT = "\nPlease enter the first number: "
SECOND_OPERAND_PROMPT = "Now enter the second number: "


def render_menu(console: Console) -> None:
    """Print the banner and the numbered list of options."""
    console.print(f"\n\n{_RULE}")
    console.print("Welcome to Simple Calculator")
    console.print(_RULE)
    console.print("Choose one of the following Options:")
    for choice in MenuChoice:
        console.print(f"{choice.value}. {choice.label}")
    console.print(_RULE)


class CalculatorSession:
    """One interactive calculator run over a Prompter."""

    def __init__(self, prompter: Prompter, console: Console, err_console: Console) -> None:
        self.prompter = prompter
        self.console = console
        self.err_console = err_console
        self.state = CalcState.AWAITING_CHOICE
        self.operations = 0

    def _error(self, message: str) -> None:
        self.err_console.print(message, style="red")

    def _read_choice(self) -> Optional[MenuChoice]:
        number = self.prompter.ask(CHOICE_PROMPT, int)
        if number is None:
            self._error("Invalid input. Please enter a valid menu option.")
            self.prompter.discard_line()
            render_menu(self.console)
            return None

        choice = MenuChoice.parse(number)
        if choice is None:
            self._error(
                f"Invalid Menu Choice. Please enter a number between "
                f"{MenuChoice.ADD.value} and {MenuChoice.EXIT.value}."
            )
            self.prompter.discard_line()
        return choice

    def _read_operands(self) -> Optional[tuple[float, float]]:
        first = self.prompter.ask(FIRST_OPERAND_PROMPT, float)
        if first is None:
            self._error("Invalid input. Please enter a number for the first operand.")
            self.prompter.discard_line()
            return None

        second = self.prompter.ask(SECOND_OPERAND_PROMPT, float)
        if second is None:
            self._error("Invalid input. Please enter a number for the second operand.")
            self.prompter.discard_line()
            return None
        return first, second

    def step(self) -> None:
        """Advance through one choice, from the prompt to the reported result."""
        self.state = CalcState.AWAITING_CHOICE
        choice = self._read_choice()
        if choice is None:
            return
        if choice is MenuChoice.EXIT:
            self.state = CalcState.FINISHED
            return

        self.state = CalcState.AWAITING_OPERANDS
        operands = self._read_operands()
        if operands is None:
            self.state = CalcState.AWAITING_CHOICE
            return

        self.state = CalcState.COMPUTING
        logger.debug("dispatching %s", choice.label)
        result = compute(choice, *operands, err_console=self.err_console)
        self.operations += 1

        self.state = CalcState.REPORTING
        if is_invalid(result):
            logger.debug("%s produced no result", choice.label)
        else:
            self.console.print(f"\nResult of operation is: {result:.2f}")
        self.state = CalcState.AWAITING_CHOICE

    def run(self) -> int:
        """Loop until Exit is chosen or input ends. Returns operations performed."""
        render_menu(self.console)
        try:
            while self.state is not CalcState.FINISHED:
                self.step()
        except InputClosed:
            logger.debug("input closed in state %s", self.state.value)
            self.state = CalcState.FINISHED

        self.console.print("Exiting calculator. Goodbye!")
        return self.operations
