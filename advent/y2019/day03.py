"""Crossed wires: where two wire paths meet on a grid."""

_DIRECTIONS = {"U": (0, 1), "D": (0, -1), "L": (-1, 0), "R": (1, 0)}


def _moves(path):
    for move in path.split(","):
        move = move.strip()
        letter, distance = move[:1], move[1:]
        if letter not in _DIRECTIONS or not distance.isdigit():
            raise ValueError(f"malformed move: {move!r}")
        yield _DIRECTIONS[letter], int(distance)


def _walk(path):
    """Yield every grid point the wire enters, in order, starting after the origin."""
    x = y = 0
    for (dx, dy), distance in _moves(path):
        for _ in range(distance):
            x += dx
            y += dy
            yield (x, y)


def _first_steps(path):
    """Map each visited point to the step count at which it is first reached."""
    steps = {(0, 0): 0}
    for count, point in enumerate(_walk(path), start=1):
        steps.setdefault(point, count)
    return steps


def _wires(text):
    lines = text.splitlines()
    if len(lines) < 2:
        raise ValueError("two wires are needed")
    return lines[0], lines[1]


def _crossings(first, second):
    visited = set(_first_steps(first))
    crossings = [point for point in _walk(second) if point in visited]
    if not crossings:
        raise ValueError("the wires never cross")
    return crossings


def star_one(text):
    """Return the Manhattan distance from the origin to the closest crossing."""
    first, second = _wires(text)
    return min(abs(x) + abs(y) for x, y in _crossings(first, second))


def star_two(text):
    """Return the fewest combined steps the wires take to reach a crossing."""
    first, second = _wires(text)
    crossings = _crossings(first, second)
    first_steps = _first_steps(first)
    second_steps = _first_steps(second)
    return min(first_steps[point] + second_steps[point] for point in crossings)