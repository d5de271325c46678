"""Subterranean sustainability: a one-dimensional plant automaton."""

_PAD = 4
_GENERATIONS = 20
_FAR_GENERATION = 50_000_000_000
_SEARCH_LIMIT = 500_000_000


def _initial_state(text):
    lines = text.splitlines()
    if not lines:
        raise ValueError("no initial state given")
    return lines[0].replace("initial state: ", "")


def _parse_rules(text):
    rules = {}
    for line in text.splitlines()[2:]:
        fields = line.replace(" => ", " ").split()
        if len(fields) < 2:
            raise ValueError(f"malformed rule: {line!r}")
        rules[fields[0]] = fields[1][0]
    return rules


def _padding(pots):
    """Return how many empty pots must be added so four lie before the first plant."""
    empty = 0
    for pot in pots[:_PAD]:
        if pot == "#":
            break
        empty += 1
    return _PAD - empty


def _next_generation(pots, rules, origin):
    """Return the next row of pots and the new index of pot zero."""
    before = _padding(pots)
    after = _padding(pots[::-1])
    padded = "." * before + pots + "." * after
    window = ".." + padded + ".."
    row = "".join(rules.get(window[i : i + 5], ".") for i in range(len(padded)))
    return row, origin + before


def _plant_sum(pots, origin):
    return sum(index - origin for index, pot in enumerate(pots) if pot == "#")


def star_one(text):
    """Return the sum of the numbers of pots holding plants after 20 generations."""
    pots = _initial_state(text)
    rules = _parse_rules(text)
    origin = 0
    total = 0
    for _ in range(_GENERATIONS):
        pots, origin = _next_generation(pots, rules, origin)
        total = _plant_sum(pots, origin)
    return total


def star_two(text):
    """Return the plant sum after fifty billion generations.

    Generations are simulated until the sum grows by the same amount twice
    in a row; that growth is then extrapolated to the final generation.
    """
    pots = _initial_state(text)
    rules = _parse_rules(text)
    origin = 0
    total = 0
    previous_total = 0
    diff = 0
    previous_diff = -1
    for generation in range(_SEARCH_LIMIT):
        if diff != previous_diff or diff == 1:
            previous_diff = diff
            pots, origin = _next_generation(pots, rules, origin)
            total = _plant_sum(pots, origin)
            diff = total - previous_total
            previous_total = total
        else:
            return total + diff * (_FAR_GENERATION - generation)
    return total