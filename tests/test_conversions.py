import pytest

from dsakit.conversions import (
    binary_digits,
    calculate,
    celsius_to_fahrenheit,
    classify_char,
    encrypt_string,
    reversed_hex,
)


def test_celsius_freezing_point():
    assert celsius_to_fahrenheit(0) == 32


def test_celsius_boiling_point():
    assert celsius_to_fahrenheit(100) == 212


def test_celsius_fixed_point():
    assert celsius_to_fahrenheit(-40) == -40


def test_celsius_is_monotonic():
    values = [celsius_to_fahrenheit(c) for c in range(-50, 50, 5)]
    assert values == sorted(values)


@pytest.mark.parametrize("n", list(range(0, 70)) + [1023, 1024, 4096])
def test_binary_digits_round_trip(n):
    assert int(str(binary_digits(n)), 2) == n


def test_binary_digits_only_ones_and_zeros():
    assert set(str(binary_digits(12345))) <= {"0", "1"}


def test_binary_digits_negative():
    with pytest.raises(ValueError):
        binary_digits(-1)


@pytest.mark.parametrize("n", [1, 9, 10, 15, 16, 255, 256, 4095, 65535])
def test_reversed_hex_round_trip(n):
    digits = reversed_hex(n)
    assert int(digits[::-1], 16) == n
    assert set(digits) <= set("0123456789abcdef")


def test_reversed_hex_zero_is_empty():
    assert reversed_hex(0) == ""


def test_reversed_hex_negative():
    with pytest.raises(ValueError):
        reversed_hex(-5)


def test_encrypt_string_source_example():
    assert encrypt_string("abc") == "1c1b1a"


def test_encrypt_string_empty():
    assert encrypt_string("") == ""


def test_encrypt_string_single_run_ends_with_char():
    text = "z" * 26
    encoded = encrypt_string(text)
    assert encoded.endswith("z")
    assert int(encoded[:-1], 16) == len(text)


@pytest.mark.parametrize(
    "ch, expected",
    [("a", "LowerCase"), ("q", "LowerCase"), ("Z", "Uppercase"), ("M", "Uppercase"), ("5", "Number")],
)
def test_classify_char(ch, expected):
    assert classify_char(ch) == expected


def test_classify_char_requires_one_character():
    with pytest.raises(ValueError):
        classify_char("ab")


@pytest.mark.parametrize("a, b", [(7, 3), (-4, 9), (0, 5), (12, -12)])
def test_calculate_add_and_subtract_are_inverse(a, b):
    assert calculate(calculate(a, b, "+"), b, "-") == a


@pytest.mark.parametrize("a, b", [(7, 3), (-7, 3), (7, -3), (-7, -3), (6, 3)])
def test_calculate_division_truncates_toward_zero(a, b):
    quotient = calculate(a, b, "/")
    remainder = a - calculate(quotient, b, "*")
    assert abs(remainder) < abs(b)
    assert remainder == 0 or (remainder > 0) == (a > 0)


def test_calculate_negative_division():
    assert calculate(-7, 2, "/") == -3


def test_calculate_invalid_operator():
    with pytest.raises(ValueError):
        calculate(1, 2, "%")


def test_calculate_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        calculate(1, 0, "/")