import string

import pytest

from dsakit.patterns import (
    main,
    square_column_letters,
    square_column_numbers,
    square_counting,
    square_diagonal_letters,
    square_reverse_columns,
    square_row_letters,
    square_row_numbers,
    square_stars,
    triangle_counting,
    triangle_descending,
    triangle_row_start,
    triangle_stars,
)


def test_zero_size_is_empty():
    assert square_stars(0) == []
    assert square_row_numbers(0) == []
    assert square_column_numbers(0) == []
    assert square_reverse_columns(0) == []
    assert square_counting(0) == []
    assert triangle_stars(0) == []
    assert triangle_counting(0) == []
    assert triangle_row_start(0) == []
    assert triangle_descending(0) == []
    assert square_row_letters(0) == []
    assert square_column_letters(0) == []
    assert square_diagonal_letters(0) == []


def test_line_count():
    assert len(square_stars(4)) == 4
    assert len(square_row_numbers(4)) == 4
    assert len(square_column_numbers(4)) == 4
    assert len(square_reverse_columns(4)) == 4
    assert len(square_counting(4)) == 4
    assert len(triangle_stars(4)) == 4
    assert len(triangle_counting(4)) == 4
    assert len(triangle_row_start(4)) == 4
    assert len(triangle_descending(4)) == 4
    assert len(square_row_letters(4)) == 4
    assert len(square_column_letters(4)) == 4
    assert len(square_diagonal_letters(4)) == 4


def test_square_stars():
    lines = square_stars(4)
    assert all(line == "*" * 4 for line in lines)


def test_square_row_numbers():
    for number, line in enumerate(square_row_numbers(3), start=1):
        assert set(line) == {str(number)}
        assert len(line) == 3


def test_column_numbers_mirror_reverse_columns():
    forward = square_column_numbers(5)
    backward = square_reverse_columns(5)
    assert len(set(forward)) == 1
    assert len(set(backward)) == 1
    assert forward[0] == backward[0][::-1]
    assert forward[0][0] == "1"


def test_square_counting():
    assert "".join(square_counting(3)) == "123456789"


def test_triangle_stars_lengths():
    lines = triangle_stars(5)
    assert [len(line) for line in lines] == list(range(1, 6))
    assert set("".join(lines)) == {"*"}


def test_triangle_counting_lengths():
    lines = triangle_counting(3)
    assert [len(line) for line in lines] == [1, 2, 3]
    assert lines[0] == "1"


def test_triangle_row_start_begins_with_row_number():
    lines = triangle_row_start(4)
    for number, line in enumerate(lines, start=1):
        assert line[0] == str(number)
        assert len(line) == number


def test_triangle_descending_reverses_column_numbers():
    lines = triangle_descending(6)
    for number, line in enumerate(lines, start=1):
        assert line[::-1] == square_column_numbers(number)[0]


def test_square_row_letters():
    lines = square_row_letters(4)
    assert "".join(line[0] for line in lines) == string.ascii_uppercase[:4]
    assert all(len(set(line)) == 1 for line in lines)


def test_square_column_letters():
    lines = square_column_letters(4)
    assert all(line == string.ascii_uppercase[:4] for line in lines)


def test_square_diagonal_letters_source_comment():
    assert square_diagonal_letters(3) == ["ABC", "BCD", "CDE"]


def test_main_prints_pattern(capsys):
    assert main(["square_stars", "2"]) == 0
    assert capsys.readouterr().out == "**\n**\n"


def test_main_rejects_unknown_pattern():
    with pytest.raises(SystemExit):
        main(["no_such_pattern", "3"])