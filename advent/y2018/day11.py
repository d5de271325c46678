"""Chronal charge: the most powerful square of fuel cells."""

import numpy as np

_SIZE = 300


def power_level(x, y, serial):
    """Return the power level of the fuel cell at (x, y)."""
    rack_id = x + 10
    value = (rack_id * y + serial) * rack_id
    if value < 100:
        return 0
    return (value // 100) % 10 - 5


def _summed_area(serial):
    """Return a summed-area table with a zero row and column in front."""
    ys, xs = np.mgrid[0:_SIZE, 0:_SIZE].astype(np.int64)
    rack_id = xs + 10
    value = (rack_id * ys + serial) * rack_id
    levels = np.where(value < 100, 0, (value // 100) % 10 - 5)
    table = np.zeros((_SIZE + 1, _SIZE + 1), dtype=np.int64)
    table[1:, 1:] = levels.cumsum(axis=0).cumsum(axis=1)
    return table


def _square_sums(table, size):
    """Return the totals of every size x size square, indexed [y, x]."""
    end = _SIZE + 1 - size
    return (
        table[size:, size:]
        - table[:end, size:]
        - table[size:, :end]
        + table[:end, :end]
    )


def _best_square(table, size):
    sums = _square_sums(table, size)
    y, x = np.unravel_index(np.argmax(sums), sums.shape)
    return int(x), int(y), int(sums[y, x])


def star_one(serial):
    """Return the top-left corner of the best 3x3 square and its total power."""
    x, y, total = _best_square(_summed_area(serial), 3)
    return (x, y), total


def star_two(serial):
    """Return the corner and size of the best square of any size, and its power."""
    table = _summed_area(serial)
    best = None
    best_total = None
    for size in range(1, _SIZE + 1):
        x, y, total = _best_square(table, size)
        if best_total is None or total > best_total:
            best, best_total = (x, y, size), total
    return best, best_total