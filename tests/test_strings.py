import pytest

from algokata.strings import (
    length_of_longest_substring,
    length_of_longest_substring_2,
    letter_combinations,
    longest_common_prefix,
    longest_palindrome,
    my_atoi,
)

SUBSTRING_CASES = [
    ("abcabcbb", 3),
    ("bbbbb", 1),
    ("pwwkew", 3),
    ("", 0),
    ("abba", 2),
    ("dvdf", 3),
]


@pytest.mark.parametrize("text, expected", SUBSTRING_CASES)
def test_longest_substring(text, expected):
    assert length_of_longest_substring(text) == expected


@pytest.mark.parametrize("text, expected", SUBSTRING_CASES)
def test_longest_substring_2(text, expected):
    assert length_of_longest_substring_2(text) == expected


@pytest.mark.parametrize(
    "text", ["abcabcbb", "tmmzuxt", "aab", "abcdefg", "zzzyzyx", "あいあう"]
)
def test_longest_substring_variants_agree(text):
    assert length_of_longest_substring(text) == length_of_longest_substring_2(text)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("cbbd", "bb"),
        ("babad", "bab"),
        ("", ""),
        ("a", "a"),
        ("aa", "aa"),
        ("ab", "a"),
        ("forgeeksskeegfor", "geeksskeeg"),
    ],
)
def test_longest_palindrome(text, expected):
    assert longest_palindrome(text) == expected


def test_longest_palindrome_result_is_palindrome_substring():
    text = "abacdfgdcabaracecar"
    result = longest_palindrome(text)
    assert result == result[::-1]
    assert result in text
    assert result == "racecar"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1337c0d3", 1337),
        (" -042", -42),
        ("0-1", 0),
        ("words and 987", 0),
        ("+-12", 0),
        ("   +7 ", 7),
        ("", 0),
    ],
)
def test_my_atoi(text, expected):
    assert my_atoi(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2147483647", 2147483647),
        ("2147483648", 2147483647),
        ("-2147483648", -2147483648),
        ("-91283472332", -2147483648),
        ("99999999999999999999", 2147483647),
    ],
)
def test_my_atoi_clamps(text, expected):
    assert my_atoi(text) == expected


@pytest.mark.parametrize(
    "strs, expected",
    [
        (["flower", "flow", "flight"], "fl"),
        (["dog", "racecar", "car"], ""),
        ([], ""),
        (["single"], "single"),
        (["ab", "abc", "abd"], "ab"),
        (["", "abc"], ""),
    ],
)
def test_longest_common_prefix(strs, expected):
    assert longest_common_prefix(strs) == expected


def test_letter_combinations():
    assert letter_combinations("23") == [
        "ad", "ae", "af", "bd", "be", "bf", "cd", "ce", "cf",
    ]


def test_letter_combinations_empty():
    assert letter_combinations("") == []


def test_letter_combinations_single_digit():
    assert letter_combinations("7") == ["p", "q", "r", "s"]


def test_letter_combinations_count_and_sorted():
    result = letter_combinations("79")
    assert len(result) == 16
    assert result == sorted(result)


def test_letter_combinations_rejects_invalid_digit():
    with pytest.raises(ValueError):
        letter_combinations("21")