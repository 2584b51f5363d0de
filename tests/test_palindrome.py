import pytest

from algokit.strings.palindrome import manacher


def test_longest_palindrome_examples():
    assert manacher("babad") == "aba"
    assert manacher("cbbd") == "bb"
    assert manacher("a") == "a"


def test_two_distinct_characters():
    assert manacher("ac") in ("a", "c")


def test_empty_string():
    assert manacher("") == ""


def test_whole_string_palindrome():
    assert manacher("racecar") == "racecar"


@pytest.mark.parametrize("text", ["forgeeksskeegfor", "abacdfgdcaba", "xyzzyx123", "aaaa"])
def test_result_is_palindromic_substring(text):
    result = manacher(text)
    assert result == result[::-1]
    assert result in text


def test_picks_longest():
    assert manacher("forgeeksskeegfor") == "geeksskeeg"