"""Calculator arithmetic.

Add, subtract and multiply are plain float operators. Divide, modulus and
power are guarded: when the operation has no meaningful value they print
an error to the error console and return the INVALID sentinel instead of
raising.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Optional

from rich.console import Console

from toybox.models import MenuChoice

logger = logging.getLogger(__name__)

# Sentinel for "no result". Never printed as a result line.
INVALID = math.nan

_default_err_console = Console(stderr=True, highlight=False, soft_wrap=True)


def is_invalid(value: float) -> bool:
    return math.isnan(value)


def _report(err_console: Optional[Console], message: str) -> float:
    (err_console or _default_err_console).print(message, style="red", markup=False)
    return INVALID


def add(a: float, b: float) -> float:
    return a + b


def subtract(a: float, b: float) -> float:
    return a - b


def multiply(a: float, b: float) -> float:
    return a * b


def division(a: float, b: float, err_console: Optional[Console] = None) -> float:
    """Return a / b, or INVALID with an error message when b is zero."""
    if b == 0.0:
        return _report(err_console, "Error: Cannot divide by zero.")
    return a / b


def modulus(a: float, b: float, err_console: Optional[Console] = None) -> float:
    """Floating-point remainder of a / b, with the sign of a (C fmod).

    Returns INVALID with an error message when b is zero or a is infinite.
    """
    if b == 0.0:
        return _report(err_console, "Error: Division by zero in modulus operation.")
    try:
        return math.fmod(a, b)
    except ValueError:
        return _report(err_console, "Error: Modulus is undefined for these operands.")


def _is_odd_integer(x: float) -> bool:
    x = float(x)
    return x.is_integer() and x % 2 == 1


def _signed_inf(a: float, b: float) -> float:
    # Odd integer exponents keep the sign of the base, as C pow does.
    return math.copysign(math.inf, a) if _is_odd_integer(b) else math.inf


def power(a: float, b: float, err_console: Optional[Console] = None) -> float:
    """a raised to b, following C pow at the edges.

    power(0, 0) is 1. Overflow and zero to a negative power give a signed
    infinity. A negative base to a fractional power has no real value: an
    error is printed and INVALID returned.
    """
    try:
        return math.pow(a, b)
    except OverflowError:
        return _signed_inf(a, b)
    except ValueError:
        if a == 0.0:
            return _signed_inf(a, b)
        return _report(err_console, "Error: Power operation is undefined for these operands.")


_PLAIN: dict[MenuChoice, Callable[[float, float], float]] = {
    MenuChoice.ADD: add,
    MenuChoice.SUBTRACT: subtract,
    MenuChoice.MULTIPLY: multiply,
}

_GUARDED: dict[MenuChoice, Callable[[float, float, Optional[Console]], float]] = {
    MenuChoice.DIVIDE: division,
    MenuChoice.MODULUS: modulus,
    MenuChoice.POWER: power,
}


def compute(
    choice: MenuChoice,
    a: float,
    b: float,
    err_console: Optional[Console] = None,
) -> float:
    """Apply the operation selected by ``choice`` to a and b.

    Raises:
        ValueError: if ``choice`` is EXIT, which has no operation.
    """
    if choice in _PLAIN:
        result = _PLAIN[choice](a, b)
    elif choice in _GUARDED:
        result = _GUARDED[choice](a, b, err_console)
    else:
        raise ValueError(f"{choice.label} is not an arithmetic operation")

    logger.debug("%s(%r, %r) -> %r", choice.label.lower(), a, b, result)
    return result
