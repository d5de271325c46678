import pytest

from advent.y2018.day12 import star_one, star_two

EXAMPLE = """initial state: #..#.#..##......###...###

...## => #
..#.. => #
.#... => #
.#.#. => #
.#.## => #
.##.. => #
.#### => #
#.#.# => #
#.### => #
##.#. => #
##.## => #
###.. => #
###.# => #
####. => #"""


def test_star_one():
    assert star_one(EXAMPLE) == 325


def test_star_two():
    assert star_two(EXAMPLE) == 999999999374


def test_plants_die_without_rules():
    assert star_one("initial state: #\n\n") == 0
    assert star_two("initial state: #\n\n") == 0


def test_single_plant_survives_in_place():
    text = "initial state: #\n\n..#.. => #"
    assert star_one(text) == 0


def test_single_plant_moves_right():
    text = "initial state: #\n\n.#... => #"
    assert star_one(text) == 20


def test_empty_input():
    with pytest.raises(ValueError):
        star_one("")


def test_malformed_rule():
    with pytest.raises(ValueError):
        star_one("initial state: #\n\n..#..")