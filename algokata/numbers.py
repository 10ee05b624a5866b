"""Integer puzzles: digit reversal, palindromes and Roman numerals."""

from __future__ import annotations

from itertools import pairwise

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

# Greedy table, largest first, subtractive pairs included.
_ROMAN_SYMBOLS = tuple(
    zip(
        (1000, 900, 500, 400, 100, 90, 50, 40, 10, 9, 5, 4, 1),
        "M CM D CD C XC L XL X IX V IV I".split(),
    )
)

_ROMAN_VALUES = dict(zip("IVXLCDM", (1, 5, 10, 50, 100, 500, 1000)))


def reverse(x: int) -> int:
    """Reverse the decimal digits of ``x`` keeping its sign; 0 if the result leaves 32 bits."""
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    if not _INT_MIN <= result <= _INT_MAX:
        return 0
    return result


def is_palindrome(x: int) -> bool:
    """Tell whether ``x`` reads the same forwards and backwards; negatives never do."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def int_to_roman(num: int) -> str:
    """Write ``num`` as a Roman numeral; non-positive numbers give an empty string."""
    if num <= 0:
        return ""
    parts: list[str] = []
    for value, symbol in _ROMAN_SYMBOLS:
        count, num = divmod(num, value)
        parts.append(symbol * count)
    return "".join(parts)


def roman_to_int(s: str) -> int:
    """Return the value of the Roman numeral ``s``.

    Raises ValueError for a character that is not a Roman digit.
    """
    try:
        values = [_ROMAN_VALUES[c] for c in s]
    except KeyError as exc:
        raise ValueError(f"not a Roman digit: {exc.args[0]!r}") from None
    if not values:
        return 0
    total = sum(
        current if current >= following else -current
        for current, following in pairwise(values)
    )
    return total + values[-1]