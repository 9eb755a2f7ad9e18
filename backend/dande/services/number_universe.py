"""
Number universe
Static definitions over the closed set of two-digit numbers 00-99
"""
from typing import List, Tuple

UNIVERSE_SIZE = 100


def format_number(value: int) -> str:
    """Normalize an integer 0-99 to its zero-padded two-digit form"""
    if value < 0 or value >= UNIVERSE_SIZE:
        raise ValueError(f"Number must be between 0 and 99, got {value}")
    return f"{value:02d}"


def is_double(number: str) -> bool:
    return number[0] == number[1]


ALL_NUMBERS: Tuple[str, ...] = tuple(format_number(i) for i in range(UNIVERSE_SIZE))
DOUBLE_NUMBERS: Tuple[str, ...] = tuple(n for n in ALL_NUMBERS if is_double(n))


def number_key(number: str) -> int:
    """Sort key: numeric value of a two-digit number"""
    return int(number)


def sort_numbers(numbers) -> List[str]:
    return sorted(numbers, key=number_key)


def tens_digit(number: str) -> int:
    return int(number[0])


def units_digit(number: str) -> int:
    return int(number[1])


def digit_sum(number: str) -> int:
    """Digit sum modulo 10 (the 'tong' of a number)"""
    return (tens_digit(number) + units_digit(number)) % 10


def raw_digit_sum(number: str) -> int:
    return tens_digit(number) + units_digit(number)


def digit_parity(digit: int) -> str:
    return "even" if digit % 2 == 0 else "odd"


def digit_magnitude(digit: int) -> str:
    """Digits 0-4 are small, 5-9 are big"""
    return "small" if digit < 5 else "big"


def numbers_touching(digit: int) -> List[str]:
    """
    Numbers containing the digit in either position (the 'cham' filter)
    Always 19 numbers: 10 with the tens digit, 10 with the units digit, the double counted once
    """
    token = str(digit)
    return [n for n in ALL_NUMBERS if token in n]


def numbers_with_sum(digit: int) -> List[str]:
    """Numbers whose digit sum mod 10 equals the digit (always 10 numbers)"""
    return [n for n in ALL_NUMBERS if digit_sum(n) == digit]
