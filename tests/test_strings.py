import random
import string
from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algoset.strings import (
    add_strings,
    defang_ip_address,
    is_pangram,
    longest_palindrome_length,
    longest_unique_substring_length,
    roman_to_int,
    sort_sentence,
    sort_vowels,
    to_lower_case,
)

VOWELS = set("aeiouAEIOU")


@given(st.lists(st.integers(min_value=0, max_value=255), min_size=4, max_size=4))
def test_defang_round_trip(octets):
    address = ".".join(map(str, octets))
    defanged = defang_ip_address(address)
    assert defanged.replace("[.]", ".") == address
    assert defanged.count("[.]") == address.count(".")
    assert "." not in defanged.replace("[.]", "")


@pytest.mark.parametrize(
    "numeral, value",
    [("I", 1), ("V", 5), ("X", 10), ("L", 50), ("C", 100), ("D", 500), ("M", 1000)],
)
def test_roman_single_symbols(numeral, value):
    assert roman_to_int(numeral) == value


def test_roman_subtractive_example():
    assert roman_to_int("MCMXCIV") == 1994


@given(st.integers(min_value=1, max_value=20))
def test_roman_repeated_symbol_adds(k):
    assert roman_to_int("X" * k) == 10 * k
    assert roman_to_int("M" * k) == 1000 * k


def test_roman_subtraction_versus_addition():
    assert roman_to_int("IX") == roman_to_int("X") - roman_to_int("I")
    assert roman_to_int("XI") == roman_to_int("X") + roman_to_int("I")


@pytest.mark.parametrize("numeral", ["", "Z", "XIZ", "x"])
def test_roman_rejects_invalid(numeral):
    with pytest.raises(ValueError):
        roman_to_int(numeral)


def test_pangram_full_alphabet():
    assert is_pangram("the quick brown fox jumps over the lazy dog") is True
    assert is_pangram(string.ascii_lowercase) is True


@pytest.mark.parametrize("missing", list(string.ascii_lowercase))
def test_pangram_missing_letter(missing):
    sentence = string.ascii_lowercase.replace(missing, "") * 3
    assert is_pangram(sentence) is False


@given(
    st.lists(
        st.text(alphabet=string.ascii_letters, min_size=1, max_size=8),
        min_size=1,
        max_size=9,
    ),
    st.randoms(),
)
def test_sort_sentence_restores_order(words, rnd):
    tokens = [f"{word}{position}" for position, word in enumerate(words, start=1)]
    rnd.shuffle(tokens)
    assert sort_sentence(" ".join(tokens)) == " ".join(words)


def test_sort_sentence_stops_at_gap():
    assert sort_sentence("c4 a1 b2") == "a b"


@pytest.mark.parametrize("sentence", ["hello", "a1  b2", "a0", "2", "b2 c3"])
def test_sort_sentence_rejects_malformed(sentence):
    with pytest.raises(ValueError):
        sort_sentence(sentence)


def test_sort_vowels_example():
    assert sort_vowels("lEetcOde") == "lEOtcede"


@given(st.text(alphabet=string.ascii_letters, max_size=40))
def test_sort_vowels_invariants(s):
    result = sort_vowels(s)
    assert len(result) == len(s)
    for before, after in zip(s, result):
        assert (before in VOWELS) == (after in VOWELS)
        if before not in VOWELS:
            assert before == after
    vowels_out = [c for c in result if c in VOWELS]
    assert vowels_out == sorted(vowels_out)
    assert Counter(vowels_out) == Counter(c for c in s if c in VOWELS)


def test_longest_unique_example():
    assert longest_unique_substring_length("abcabcbb") == 3


def test_longest_unique_empty():
    assert longest_unique_substring_length("") == 0


@given(st.text(alphabet="abcdef", max_size=30))
def test_longest_unique_bounded_by_distinct(s):
    result = longest_unique_substring_length(s)
    assert result <= len(set(s))
    assert result >= min(len(s), 1)


@given(st.lists(st.characters(), unique=True, max_size=30))
def test_longest_unique_all_distinct(chars):
    s = "".join(chars)
    assert longest_unique_substring_length(s) == len(s)


@given(st.text(alphabet=string.ascii_letters, max_size=30))
def test_longest_palindrome_of_doubled_string(s):
    doubled = s + s
    assert longest_palindrome_length(doubled) == len(doubled)


@given(st.text(alphabet=string.ascii_letters, min_size=1, max_size=30))
def test_longest_palindrome_invariants(s):
    result = longest_palindrome_length(s)
    assert result <= len(s)
    has_odd = any(count % 2 for count in Counter(s).values())
    assert (result % 2 == 1) == has_odd


def test_longest_palindrome_case_sensitive():
    assert longest_palindrome_length("Aa") == longest_palindrome_length("A")


@given(
    st.text(alphabet=string.digits, min_size=1, max_size=40),
    st.text(alphabet=string.digits, min_size=1, max_size=40),
)
def test_add_strings_matches_integer_sum(a, b):
    result = add_strings(a, b)
    assert int(result) == int(a) + int(b)
    assert add_strings(b, a) == result
    assert len(result) in (max(len(a), len(b)), max(len(a), len(b)) + 1)


def test_add_strings_keeps_leading_zeros():
    result = add_strings("0001", "1")
    assert len(result) == len("0001")
    assert int(result) == 2


@pytest.mark.parametrize("a, b", [("12a", "3"), ("1", "-2"), ("1.5", "2")])
def test_add_strings_rejects_non_digits(a, b):
    with pytest.raises(ValueError):
        add_strings(a, b)


@given(st.text(alphabet=string.printable, max_size=40))
def test_to_lower_case_matches_ascii_lower(s):
    assert to_lower_case(s) == s.lower()


def test_to_lower_case_leaves_non_ascii():
    assert to_lower_case("ÄÖÜ") == "ÄÖÜ"


def test_to_lower_case_is_idempotent():
    rnd = random.Random(7)
    s = "".join(rnd.choice(string.ascii_letters) for _ in range(50))
    once = to_lower_case(s)
    assert to_lower_case(once) == once