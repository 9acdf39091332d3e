import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.strings import (
    add_binary,
    column_number,
    column_title,
    is_palindrome,
    length_of_last_word,
)

words = st.text(alphabet="abcdefghijXYZ", min_size=1, max_size=10)
alnum = st.text(alphabet="abcXYZ019", min_size=1)


def test_length_of_last_word_example():
    assert length_of_last_word("Hello World") == len("World")


@pytest.mark.parametrize("text", ["", "   ", " "])
def test_length_of_last_word_blank(text):
    assert length_of_last_word(text) == len("")


@given(st.lists(words, min_size=1), st.integers(min_value=0, max_value=5))
def test_length_of_last_word_trailing_spaces(parts, trailing):
    text = "  ".join(parts) + " " * trailing
    assert length_of_last_word(text) == len(parts[-1])


def test_add_binary_example():
    assert add_binary("11", "1") == "100"


def test_add_binary_empty():
    assert add_binary("", "") == ""


@given(st.integers(min_value=0, max_value=2**80), st.integers(min_value=0, max_value=2**80))
def test_add_binary_matches_int(a, b):
    result = add_binary(format(a, "b"), format(b, "b"))
    assert int(result, 2) == a + b
    assert result == format(a + b, "b")


def test_add_binary_rejects_other_digits():
    with pytest.raises(ValueError):
        add_binary("12", "1")


def test_is_palindrome_example():
    assert is_palindrome("A man, a plan, a canal: Panama") is True


@given(alnum)
def test_is_palindrome_mirrored(text):
    assert is_palindrome(text + ", " + text[::-1].upper()) is True


@given(alnum, alnum)
def test_is_palindrome_mismatched_ends(head, middle):
    text = "a" + head + middle + "b"
    assert is_palindrome(text) is False


def test_column_title_double_letter():
    assert column_title(27) == "AA"


def test_column_title_non_positive():
    assert column_title(0) == ""


@given(st.integers(min_value=1, max_value=10**9))
def test_column_round_trip(n):
    title = column_title(n)
    assert column_number(title) == n
    assert title.isupper()


@given(st.text(alphabet="ABCDEFGHIJKLMNOPQRSTUVWXYZ", min_size=1, max_size=6))
def test_column_number_round_trip(title):
    assert column_title(column_number(title)) == title


def test_column_number_rejects_lowercase():
    with pytest.raises(ValueError):
        column_number("ab")