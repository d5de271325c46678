"""Chronal coordinates: Manhattan-distance areas around points."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A coordinate on the grid."""

    x: int
    y: int

    @classmethod
    def parse(cls, line):
        """Parse a point written as 'x, y'."""
        fields = line.replace(",", "").split()
        if len(fields) < 2:
            raise ValueError(f"malformed point: {line!r}")
        return cls(int(fields[0]), int(fields[1]))

    def distance(self, other):
        """Return the Manhattan distance to another point."""
        return abs(self.x - other.x) + abs(self.y - other.y)


def _parse_points(text):
    points = {Point.parse(line) for line in text.splitlines()}
    if not points:
        raise ValueError("no points given")
    return points


def _bounds(points):
    xs = [point.x for point in points]
    ys = [point.y for point in points]
    return min(xs), max(xs), min(ys), max(ys)


def _survey(points, bounds):
    """Map each cell in bounds to (nearest points, total distance to all points)."""
    min_x, max_x, min_y, max_y = bounds
    survey = {}
    for x in range(min_x, max_x + 1):
        for y in range(min_y, max_y + 1):
            cell = Point(x, y)
            distances = {point: point.distance(cell) for point in points}
            closest = min(distances.values())
            nearest = frozenset(p for p, d in distances.items() if d == closest)
            survey[cell] = (nearest, sum(distances.values()))
    return survey


def star_one(text):
    """Return the size of the largest area that is not infinite."""
    points = _parse_points(text)
    bounds = _bounds(points)
    min_x, max_x, min_y, max_y = bounds
    survey = _survey(points, bounds)

    infinite = set()
    for cell, (nearest, _) in survey.items():
        on_edge = cell.x in (min_x, max_x) or cell.y in (min_y, max_y)
        if on_edge and len(nearest) == 1:
            infinite |= nearest

    finite = points - infinite
    if not finite:
        raise ValueError("every area is infinite")

    areas = Counter(
        next(iter(nearest)) for nearest, _ in survey.values() if len(nearest) == 1
    )
    return max(areas[point] for point in finite)


def star_two(text, limit):
    """Return how many cells lie at a total distance below the limit."""
    points = _parse_points(text)
    survey = _survey(points, _bounds(points))
    return sum(total < limit for _, total in survey.values())