"""The tyranny of the rocket equation: fuel for module masses."""


def _masses(text):
    return [int(line) for line in text.splitlines()]


def _fuel(mass):
    return mass // 3 - 2


def fuel_with_fuel(mass):
    """Return the fuel for a mass, counting the fuel that fuel itself needs."""
    total = 0
    fuel = _fuel(mass)
    while fuel >= 0:
        total += fuel
        fuel = _fuel(fuel)
    return total


def star_one(text):
    """Return the fuel needed for every module, ignoring the fuel's own mass."""
    return sum(_fuel(mass) for mass in _masses(text))


def star_two(text):
    """Return the fuel needed for every module, including fuel for the fuel."""
    return sum(fuel_with_fuel(mass) for mass in _masses(text))