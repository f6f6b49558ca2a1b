"""
Example arithmetic functions.

The two smallest functions of the lesson:
    - power:   raise a base to an exponent, optionally echoing the base
    - average: arithmetic mean of a sequence of numbers

plus power_report, which shows how a function hands back several named
values at once through an immutable record.

ERROR POLICY:
    - Omitting a required argument of power raises MissingArgumentError
    - Averaging an empty sequence raises EmptySequenceError
    - Domain problems of exponentiation (negative base with a fractional
      exponent, zero to a negative power, overflow) are NOT errors: they
      produce nan / inf exactly like IEEE floating point does
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

import numpy as np


class MissingArgumentError(TypeError):
    """Raised when a required argument was not supplied."""

    def __init__(self, function: str, argument: str):
        self.function = function
        self.argument = argument
        super().__init__(f'argument "{argument}" is missing, with no default ({function})')


class EmptySequenceError(ZeroDivisionError):
    """Raised when averaging a sequence with no elements."""
    pass


# Marks a parameter the caller did not pass. None cannot be used because it
# would be indistinguishable from an explicit (if nonsensical) None.
_MISSING: Any = object()


@dataclass(frozen=True)
class PowerResult:
    """
    The inputs and output of one exponentiation, returned together.

    Properties:
        base: Number that was raised
        exponent: Power it was raised to
        result: base ** exponent
    """

    base: float
    exponent: float
    result: float


def _require(function: str, **arguments: Any) -> None:
    for name, value in arguments.items():
        if value is _MISSING:
            raise MissingArgumentError(function, name)


def _ieee_power(base: float, exponent: float) -> float:
    with np.errstate(invalid="ignore", divide="ignore", over="ignore"):
        return float(np.power(np.float64(base), np.float64(exponent)))


def power(base: float = _MISSING, exponent: float = _MISSING, report_base: bool = True) -> float:
    """
    Raise base to the power exponent.

    Args:
        base: Number to raise (required)
        exponent: Power to raise it to (required)
        report_base: Print the value of base before computing

    Returns:
        base ** exponent as a float. Negative bases with fractional
        exponents give nan rather than raising.

    Raises:
        MissingArgumentError: If base or exponent is omitted

    Examples:
        power(3, 2)                  -> 9.0
        power(exponent=2, base=3)    -> 9.0
        power(2, 3)                  -> 8.0
    """
    _require("power", base=base, exponent=exponent)

    if report_base:
        print(base)

    return _ieee_power(base, exponent)


def power_report(base: float = _MISSING, exponent: float = _MISSING, report_base: bool = True) -> PowerResult:
    """Like power, but return base, exponent and result together."""
    _require("power_report", base=base, exponent=exponent)
    result = power(base, exponent, report_base=report_base)
    return PowerResult(base=base, exponent=exponent, result=result)


def average(numbers: Iterable[float]) -> float:
    """
    Arithmetic mean of a sequence of numbers.

    Any iterable is accepted (lists, tuples, ranges, generators). It is
    consumed once.

    Raises:
        EmptySequenceError: If there are no numbers to average
    """
    values = list(numbers)
    if not values:
        raise EmptySequenceError("cannot average an empty sequence")
    return sum(values) / len(values)


__all__ = [
    "power",
    "power_report",
    "average",
    "PowerResult",
    "MissingArgumentError",
    "EmptySequenceError",
]
