import pytest

from advent.y2022.day01 import calories_per_elf, star_one, star_two

INPUT = """1000
2000
3000

4000

5000
6000

7000
8000
9000

10000
"""


def test_star_one():
    assert star_one(INPUT) == 24000


def test_star_two():
    assert star_two(INPUT) == 45000


def test_calories_per_elf():
    assert calories_per_elf(INPUT) == [6000, 4000, 11000, 24000, 10000]


def test_star_two_with_fewer_than_three_elves():
    assert star_two("1\n\n2") == 3


def test_bad_value_raises():
    with pytest.raises(ValueError):
        star_one("1000\nlots")