"""Text patterns of stars, numbers and letters laid out in squares and triangles."""

import argparse
import sys
from collections.abc import Callable


def _letter(offset: int) -> str:
    return chr(ord("A") + offset)


def square_stars(n: int) -> list[str]:
    """An n-by-n square of stars."""
    return ["*" * n for _ in range(n)]


def square_row_numbers(n: int) -> list[str]:
    """An n-by-n square where each row repeats its row number."""
    return [str(i) * n for i in range(1, n + 1)]


def square_column_numbers(n: int) -> list[str]:
    """An n-by-n square where each row counts 1 to n."""
    line = "".join(str(j) for j in range(1, n + 1))
    return [line for _ in range(n)]


def square_reverse_columns(n: int) -> list[str]:
    """An n-by-n square where each row counts n down to 1."""
    line = "".join(str(j) for j in range(n, 0, -1))
    return [line for _ in range(n)]


def square_counting(n: int) -> list[str]:
    """An n-by-n square filled with 1, 2, 3, ... row by row."""
    return ["".join(str(i * n + j + 1) for j in range(n)) for i in range(n)]


def triangle_stars(n: int) -> list[str]:
    """A right triangle of stars with rows of length 1 to n."""
    return ["*" * i for i in range(1, n + 1)]


def triangle_counting(n: int) -> list[str]:
    """A right triangle filled with 1, 2, 3, ... row by row."""
    lines = []
    counter = 1
    for i in range(1, n + 1):
        lines.append("".join(str(value) for value in range(counter, counter + i)))
        counter += i
    return lines


def triangle_row_start(n: int) -> list[str]:
    """A right triangle whose row i counts up from i, i values long."""
    return ["".join(str(value) for value in range(i, 2 * i)) for i in range(1, n + 1)]


def triangle_descending(n: int) -> list[str]:
    """A right triangle whose row i counts down from i to 1."""
    return ["".join(str(value) for value in range(i, 0, -1)) for i in range(1, n + 1)]


def square_row_letters(n: int) -> list[str]:
    """An n-by-n square where row i repeats the i-th letter."""
    return [_letter(i) * n for i in range(n)]


def square_column_letters(n: int) -> list[str]:
    """An n-by-n square where each row holds the first n letters."""
    line = "".join(_letter(j) for j in range(n))
    return [line for _ in range(n)]


def square_diagonal_letters(n: int) -> list[str]:
    """An n-by-n square where each row starts one letter later than the last."""
    return ["".join(_letter(i + j) for j in range(n)) for i in range(n)]


PATTERNS: dict[str, Callable[[int], list[str]]] = {
    func.__name__: func
    for func in (
        square_stars,
        square_row_numbers,
        square_column_numbers,
        square_reverse_columns,
        square_counting,
        triangle_stars,
        triangle_counting,
        triangle_row_start,
        triangle_descending,
        square_row_letters,
        square_column_letters,
        square_diagonal_letters,
    )
}


def main(argv: list[str] | None = None) -> int:
    """Print the named pattern of size n."""
    parser = argparse.ArgumentParser(prog="dsakit-patterns", description="Print a text pattern.")
    parser.add_argument("pattern", choices=sorted(PATTERNS))
    parser.add_argument("n", type=int)
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    for line in PATTERNS[args.pattern](args.n):
        print(line)
    return 0