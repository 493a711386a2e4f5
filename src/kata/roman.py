"""Roman numeral conversion."""

from typing import List, Tuple

NUMERALS: List[Tuple[int, str]] = [
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
]


def to_roman(number: int) -> str:
    if number < 0:
        raise ValueError("Roman numerals cannot express negative numbers")
    parts = []
    for value, letters in NUMERALS:
        count, number = divmod(number, value)
        parts.append(letters * count)
    return "".join(parts)


def from_roman(numeral: str) -> int:
    """Greedy parse, largest symbols first; unknown trailing characters are ignored."""
    total = 0
    rest = numeral
    for value, letters in NUMERALS:
        while rest.startswith(letters):
            rest = rest[len(letters):]
            total += value
    return total
