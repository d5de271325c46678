"""Fabric claims: overlapping rectangles on a shared grid."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass


@dataclass(frozen=True)
class Claim:
    """A rectangular claim on the fabric."""

    id: int
    left: int
    top: int
    width: int
    height: int

    @classmethod
    def parse(cls, line):
        """Parse a claim of the form '#id @ left,top: widthxheight'."""
        cleaned = (
            line.replace("#", "")
            .replace(" @ ", " ")
            .replace(",", " ")
            .replace(":", "")
            .replace("x", " ")
        )
        fields = [int(field) for field in cleaned.split()]
        if len(fields) < 5:
            raise ValueError(f"malformed claim: {line!r}")
        return cls(*fields[:5])

    def cells(self):
        """Yield every (x, y) square the claim covers."""
        for y in range(self.top, self.top + self.height):
            for x in range(self.left, self.left + self.width):
                yield (x, y)


def _parse_claims(text):
    return {Claim.parse(line) for line in text.splitlines() if line}


def _claim_grid(claims):
    grid = defaultdict(set)
    for claim in claims:
        for cell in claim.cells():
            grid[cell].add(claim.id)
    return grid


def star_one(text):
    """Return how many squares are covered by two or more claims."""
    grid = _claim_grid(_parse_claims(text))
    return sum(len(ids) > 1 for ids in grid.values())


def star_two(text):
    """Return the id of the only claim that overlaps no other, or 0."""
    claims = _parse_claims(text)
    grid = _claim_grid(claims)
    overlapped = set()
    for ids in grid.values():
        if len(ids) > 1:
            overlapped |= ids
    remaining = {claim.id for claim in claims} - overlapped
    if len(remaining) == 1:
        return next(iter(remaining))
    return 0