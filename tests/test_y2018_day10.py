import pytest

from advent.y2018.day10 import Light, find_message, star_one, star_two

# (position x, position y, velocity x, velocity y)
LIGHTS = [
    (9, 1, 0, 2), (7, 0, -1, 0), (3, -2, -1, 1), (6, 10, -2, -1),
    (2, -4, 2, 2), (-6, 10, 2, -2), (1, 8, 1, -1), (1, 7, 1, 0),
    (-3, 11, 1, -2), (7, 6, -1, -1), (-2, 3, 1, 0), (-4, 3, 2, 0),
    (10, -3, -1, 1), (5, 11, 1, -2), (4, 7, 0, -1), (8, -2, 0, 1),
    (15, 0, -2, 0), (1, 6, 1, 0), (8, 9, 0, -1), (3, 3, -1, 1),
    (0, 5, 0, -1), (-2, 2, 2, 0), (5, -2, 1, 2), (1, 4, 2, 1),
    (-2, 7, 2, -2), (3, 6, -1, -1), (5, 0, 1, 0), (-6, 0, 2, 0),
    (5, 9, 1, -2), (14, 7, -2, 0), (-3, 6, 2, -1),
]


def _light_line(px, py, vx, vy):
    return f"position=<{px:>2}, {py:>2}> velocity=<{vx:>2}, {vy:>2}>"


EXAMPLE = "\n".join(_light_line(*light) for light in LIGHTS)

_H_ROWS = ["#...#"] * 3 + ["#####"] + ["#...#"] * 4
_I_ROWS = ["..###"] + ["...#."] * 6 + ["..###"]
MESSAGE = "".join(h + i + "\n" for h, i in zip(_H_ROWS, _I_ROWS))


def test_star_one():
    assert star_one(EXAMPLE) == MESSAGE


def test_star_two():
    assert star_two(EXAMPLE) == 3


def test_find_message_returns_both():
    assert find_message(EXAMPLE) == (MESSAGE, 3)


def test_light_parse():
    light = Light.parse(_light_line(-6, 10, 2, -2))
    assert light.position == (-6, 10)
    assert light.velocity == (2, -2)


def test_light_step_and_back():
    light = Light((1, 2), (3, -4))
    light.step()
    assert light.position == (4, -2)
    light.step_back()
    assert light.position == (1, 2)


def test_malformed_light():
    with pytest.raises(ValueError):
        Light.parse("position=< 1> velocity=< 2>")


def test_no_lights():
    with pytest.raises(ValueError):
        star_one("")