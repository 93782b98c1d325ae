"""Small conversions: temperature, binary digits, run-length hex encoding, chars and arithmetic."""

import operator
from collections.abc import Callable
from itertools import groupby


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert a temperature in degrees Celsius to Fahrenheit."""
    return celsius * 9 / 5 + 32


def binary_digits(n: int) -> int:
    """Return the binary form of ``n`` read as a decimal integer (5 gives 101)."""
    if n < 0:
        raise ValueError("n must not be negative")
    return int(format(n, "b"))


def reversed_hex(num: int) -> str:
    """Return the lowercase hex digits of ``num``, least significant first.

    Zero has no digits and gives the empty string.
    """
    if num < 0:
        raise ValueError("num must not be negative")
    return format(num, "x")[::-1] if num else ""


def encrypt_string(text: str) -> str:
    """Encode runs of equal characters as char plus reversed hex count, then reverse all."""
    encoded = "".join(ch + reversed_hex(sum(1 for _ in run)) for ch, run in groupby(text))
    return encoded[::-1]


def classify_char(ch: str) -> str:
    """Classify one character as "LowerCase", "Uppercase" or otherwise "Number"."""
    if len(ch) != 1:
        raise ValueError("expected a single character")
    if ch.islower():
        return "LowerCase"
    if ch.isupper():
        return "Uppercase"
    return "Number"


def _truncating_division(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "-": operator.sub,
    "+": operator.add,
    "*": operator.mul,
    "/": _truncating_division,
}


def calculate(a: int, b: int, op: str) -> int:
    """Apply ``op`` (one of - + * /) to two integers; division truncates toward zero."""
    try:
        operation = _OPERATIONS[op]
    except KeyError:
        raise ValueError(f"Invalid operation: {op!r}") from None
    return operation(a, b)