"""Memory maneuver: summing a serialised licence tree."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class _Node:
    children: list[_Node] = field(default_factory=list)
    metadata: list[int] = field(default_factory=list)

    def metadata_total(self):
        return sum(self.metadata) + sum(child.metadata_total() for child in self.children)

    def value(self):
        if not self.children:
            return sum(self.metadata)
        return sum(
            self.children[reference - 1].value()
            for reference in self.metadata
            if 1 <= reference <= len(self.children)
        )


def _take(numbers):
    try:
        return next(numbers)
    except StopIteration:
        raise ValueError("tree data ends too early") from None


def _read_node(numbers):
    child_count = _take(numbers)
    metadata_count = _take(numbers)
    children = [_read_node(numbers) for _ in range(child_count)]
    metadata = [_take(numbers) for _ in range(metadata_count)]
    return _Node(children, metadata)


def _parse_tree(text):
    return _read_node(iter(int(word) for word in text.split()))


def star_one(text):
    """Return the sum of every metadata entry in the tree."""
    return _parse_tree(text).metadata_total()


def star_two(text):
    """Return the value of the root node."""
    return _parse_tree(text).value()