"""String puzzles: substrings, palindromes, parsing, prefixes and keypad letters."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import product

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_KEYPAD = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest run of ``s`` without repeated characters.

    Keeps a window of distinct characters and shrinks it from the left
    whenever the incoming character is already inside.
    """
    chars = list(s)
    window: set[str] = set()
    start = 0
    best = 0
    for c in chars:
        if c in window:
            while True:
                dropped = chars[start]
                start += 1
                window.discard(dropped)
                if dropped == c:
                    break
        window.add(c)
        best = max(best, len(window))
    return best


def length_of_longest_substring_2(s: str) -> int:
    """Return the same length as :func:`length_of_longest_substring`.

    Remembers the last position of every character so the window start
    can jump directly past a repeat.
    """
    last_seen: dict[str, int] = {}
    start = -1
    best = 0
    for idx, c in enumerate(s):
        previous = last_seen.get(c)
        last_seen[c] = idx
        if previous is not None:
            start = max(start, previous)
        best = max(best, idx - start)
    return best


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring of ``s``; the earliest one wins ties."""
    if len(s) <= 1:
        return s
    last = len(s) - 1
    start, end = 0, 0

    def expand(low: int, high: int) -> None:
        nonlocal start, end
        while low >= 0 and high <= last and s[low] == s[high]:
            if high - low > end - start:
                start, end = low, high
            low -= 1
            high += 1

    for centre in range(last):
        expand(centre, centre + 1)
        expand(centre, centre)
    return s[start : end + 1]


def my_atoi(s: str) -> int:
    """Parse a leading, optionally signed integer from ``s``, clamped to 32 bits.

    Surrounding whitespace is ignored; parsing stops at the first character
    that cannot continue the number, and no digits at all give 0.
    """
    value = 0
    started = False
    negative = False
    for c in s.strip():
        if "0" <= c <= "9":
            started = True
            value = value * 10 + (ord(c) - ord("0"))
            if negative and -value < _INT_MIN:
                return _INT_MIN
            if not negative and value > _INT_MAX:
                return _INT_MAX
        elif c in "+-":
            if started:
                break
            started = True
            negative = c == "-"
        else:
            break
    return -value if negative else value


def longest_common_prefix(strs: Iterable[str]) -> str:
    """Return the longest prefix shared by every string in ``strs``."""
    prefix: list[str] = []
    for column in zip(*strs):
        first = column[0]
        if any(c != first for c in column):
            break
        prefix.append(first)
    return "".join(prefix)


def letter_combinations(digits: str) -> list[str]:
    """Return, sorted, every word the phone keypad digits ``digits`` can spell.

    Raises ValueError for a character that is not one of the digits 2 to 9.
    """
    if not digits:
        return []
    try:
        letter_groups = [_KEYPAD[d] for d in digits]
    except KeyError as exc:
        raise ValueError(f"not a keypad letter digit: {exc.args[0]!r}") from None
    return sorted("".join(combo) for combo in product(*letter_groups))