"""Alchemical reduction: reacting polymer units."""

import string


def _flip_case(unit):
    if "a" <= unit <= "z":
        return unit.upper()
    if "A" <= unit <= "Z":
        return unit.lower()
    return unit


def reduced_length(units):
    """Return how many units remain once every reacting pair has been removed."""
    stack = []
    for unit in units:
        if stack and stack[-1] == _flip_case(unit):
            stack.pop()
        else:
            stack.append(unit)
    return len(stack)


def star_one(text):
    """Return the length of the fully reacted polymer."""
    return reduced_length(text)


def star_two(text):
    """Return the shortest reacted length after removing one unit type entirely."""
    candidates = [letter for letter in string.ascii_lowercase if letter in text]
    if not candidates:
        raise ValueError("polymer holds no lowercase unit")
    return min(
        reduced_length(unit for unit in text if unit not in (letter, letter.upper()))
        for letter in candidates
    )