"""Chronal calibration: summing frequency changes."""

from itertools import cycle


def _changes(text):
    return [int(line) for line in text.splitlines()]


def star_one(text):
    """Return the frequency reached after applying every change once."""
    return sum(_changes(text))


def star_two(text):
    """Return the first frequency reached twice while repeating the changes."""
    changes = _changes(text)
    if not changes:
        return 0
    frequency = 0
    seen = {frequency}
    for change in cycle(changes):
        frequency += change
        if frequency in seen:
            return frequency
        seen.add(frequency)
    return frequency