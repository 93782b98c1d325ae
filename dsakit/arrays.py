"""Array and matrix helpers: insertion, reversal, swaps, sums and display."""

import sys
from collections.abc import Iterable, Sequence
from typing import Any

from dsakit.errors import InvalidPositionError


def insert_at(items: Iterable[Any], element: Any, position: int) -> list[Any]:
    """Return a new list with ``element`` inserted at 1-based ``position``."""
    result = list(items)
    if not 1 <= position <= len(result) + 1:
        raise InvalidPositionError(f"invalid position: {position}")
    result.insert(position - 1, element)
    return result


def reversed_copy(items: Iterable[Any]) -> list[Any]:
    """Return a new list with the elements of ``items`` in reverse order."""
    return list(items)[::-1]


def swap_alternate(items: Iterable[Any]) -> list[Any]:
    """Return a new list with each adjacent pair swapped; an odd tail stays."""
    result = list(items)
    result[0:len(result) - 1:2], result[1::2] = result[1::2], result[0:len(result) - 1:2]
    return result


def reverse_string(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def row_sums(matrix: Iterable[Iterable[int]]) -> list[int]:
    """Return the sum of each row of ``matrix``."""
    return [sum(row) for row in matrix]


def column_sums(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the sum of each column of a rectangular ``matrix``."""
    if len({len(row) for row in matrix}) > 1:
        raise ValueError("matrix rows differ in length")
    return [sum(column) for column in zip(*matrix)]


def build_matrix(rows: int, cols: int, values: Iterable[Any]) -> list[list[Any]]:
    """Arrange ``rows * cols`` values into a list of rows, row by row."""
    if rows < 0 or cols < 0:
        raise ValueError("matrix dimensions must not be negative")
    flat = list(values)
    if len(flat) != rows * cols:
        raise ValueError(f"expected {rows * cols} elements, got {len(flat)}")
    return [flat[r * cols:(r + 1) * cols] for r in range(rows)]


def format_matrix(matrix: Iterable[Iterable[Any]]) -> str:
    """Render ``matrix`` one row per line, elements separated by spaces."""
    return "\n".join(" ".join(str(value) for value in row) for row in matrix)


def _prompt_matrix() -> list[list[int]]:
    rows = int(input("Enter the number of rows: "))
    cols = int(input("Enter the number of columns: "))
    print(f"Enter {rows * cols} elements for a {rows}x{cols} matrix:")
    values = [
        int(input(f"Element at position ({r + 1}, {c + 1}): "))
        for r in range(rows)
        for c in range(cols)
    ]
    return build_matrix(rows, cols, values)


def main(argv: list[str] | None = None) -> int:
    """Read a matrix (from ``argv`` as ROWS COLS VALUES... or interactively) and print it."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        if args:
            rows, cols, *values = (int(arg) for arg in args)
            matrix = build_matrix(rows, cols, values)
        else:
            matrix = _prompt_matrix()
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print("\nMatrix elements are:")
    print(format_matrix(matrix))
    return 0