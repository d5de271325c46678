"""Secure container: counting passwords that meet digit rules."""

from collections import Counter
from itertools import pairwise


def _digits(number):
    return str(number)


def never_decreasing(number):
    """Return True if the digits never decrease from left to right."""
    return all(a <= b for a, b in pairwise(_digits(number)))


def has_double(number):
    """Return True if some two adjacent digits are equal."""
    return any(a == b for a, b in pairwise(_digits(number)))


def has_exact_pair(number):
    """Return True if some digit forms exactly one adjacent equal pair."""
    pairs = Counter(a for a, b in pairwise(_digits(number)) if a == b)
    return 1 in pairs.values()


def _bounds(text):
    parts = text.strip().split("-")
    if len(parts) < 2:
        raise ValueError(f"expected a range like 'low-high': {text!r}")
    return int(parts[0]), int(parts[1])


def star_one(text):
    """Return how many numbers in the range never decrease and hold a double."""
    low, high = _bounds(text)
    return sum(
        1 for number in range(low, high + 1) if never_decreasing(number) and has_double(number)
    )


def star_two(text):
    """Return how many numbers in the range never decrease and hold an exact pair."""
    low, high = _bounds(text)
    return sum(
        1
        for number in range(low, high + 1)
        if never_decreasing(number) and has_exact_pair(number)
    )