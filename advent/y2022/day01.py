"""Calorie counting: the elves carrying the most food."""

import heapq


def calories_per_elf(text):
    """Return the total calories each elf carries, in input order."""
    totals = []
    for block in text.split("\n\n"):
        try:
            totals.append(sum(int(line) for line in block.splitlines()))
        except ValueError as error:
            raise ValueError(f"error while parsing {block!r}: {error}") from None
    return totals


def star_one(text):
    """Return the most calories carried by a single elf."""
    return max(calories_per_elf(text), default=None)


def star_two(text):
    """Return the calories carried by the three best-stocked elves together."""
    return sum(heapq.nlargest(3, calories_per_elf(text)))