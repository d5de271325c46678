"""Inventory management: box ID checksums and near-matching IDs."""

from collections import Counter
from itertools import combinations


def star_one(text):
    """Return the checksum: IDs with a letter twice times IDs with a letter thrice."""
    twice = thrice = 0
    for line in text.splitlines():
        counts = set(Counter(line).values())
        twice += 2 in counts
        thrice += 3 in counts
    return twice * thrice


def star_two(text):
    """Return the letters shared by the first two IDs that differ in exactly one place."""
    for first, second in combinations(text.splitlines(), 2):
        pairs = list(zip(first, second))
        if sum(a != b for a, b in pairs) == 1:
            return "".join(a for a, b in pairs if a == b)
    return ""