import pytest

from advent.y2019.day03 import star_one, star_two

SMALL = "R8,U5,L5,D3\nU7,R6,D4,L4"
LARGER = "R75,D30,R83,U83,L12,D49,R71,U7,L72\nU62,R66,U55,R34,D71,R55,D58,R83"


def test_star_one():
    assert star_one(SMALL) == 6


def test_star_one_larger():
    assert star_one(LARGER) == 159


def test_star_two():
    assert star_two(SMALL) == 30


def test_star_two_larger():
    assert star_two(LARGER) == 610


def test_wires_that_never_cross_raise():
    with pytest.raises(ValueError):
        star_one("R1\nU1")


def test_single_wire_raises():
    with pytest.raises(ValueError):
        star_two("R8,U5")


def test_bad_direction_raises():
    with pytest.raises(ValueError):
        star_one("X8\nU7")