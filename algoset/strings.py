"""String puzzles: Roman numerals, pangrams, vowel sorting, digit addition and more."""

import string
from collections import Counter
from itertools import takewhile, zip_longest

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_VOWELS = frozenset("aeiouAEIOU")
_ALPHABET = frozenset(string.ascii_lowercase)
_DIGITS = frozenset(string.digits)
_POSITIONS = "123456789"
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def defang_ip_address(address: str) -> str:
    """Replace every period in an address with "[.]"."""
    return address.replace(".", "[.]")


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer, honouring subtractive pairs."""
    if not s:
        raise ValueError("empty Roman numeral")
    try:
        values = [_ROMAN_VALUES[c] for c in s]
    except KeyError as exc:
        raise ValueError(f"invalid Roman numeral character {exc.args[0]!r}") from None
    total = sum(-value if value < following else value for value, following in zip(values, values[1:]))
    return total + values[-1]


def is_pangram(sentence: str) -> bool:
    """Return True if every lowercase English letter appears in the sentence."""
    return _ALPHABET <= set(sentence)


def sort_sentence(s: str) -> str:
    """Restore a shuffled sentence whose words end in their 1-based position digit."""
    slots: dict[int, str] = {}
    for token in s.split(" "):
        if len(token) < 2 or token[-1] not in _POSITIONS:
            raise ValueError(f"malformed word {token!r}")
        slots[int(token[-1])] = token[:-1]
    ordered = takewhile(lambda word: word is not None, (slots.get(i) for i in range(1, 10)))
    words = list(ordered)
    if not words:
        raise ValueError("sentence has no word in first position")
    return " ".join(words)


def sort_vowels(s: str) -> str:
    """Sort the vowels of s by character code, leaving other characters in place."""
    ordered = iter(sorted(c for c in s if c in _VOWELS))
    return "".join(next(ordered) if c in _VOWELS else c for c in s)


def longest_unique_substring_length(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    start = best = 0
    for index, char in enumerate(s):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def longest_palindrome_length(s: str) -> int:
    """Return the length of the longest palindrome buildable from the characters of s."""
    counts = Counter(s).values()
    paired = sum(count - count % 2 for count in counts)
    return paired + (1 if any(count % 2 for count in counts) else 0)


def add_strings(num1: str, num2: str) -> str:
    """Add two non-negative decimal numbers given as digit strings."""
    for number in (num1, num2):
        if not set(number) <= _DIGITS:
            raise ValueError(f"not a decimal digit string: {number!r}")
    digits = []
    carry = 0
    for a, b in zip_longest(reversed(num1), reversed(num2), fillvalue="0"):
        carry, digit = divmod(int(a) + int(b) + carry, 10)
        digits.append(str(digit))
    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def to_lower_case(s: str) -> str:
    """Lower-case ASCII capital letters, leaving every other character unchanged."""
    return s.translate(_ASCII_LOWER)