import pytest

from advent.y2023.day01 import star_one


def test_star_one():
    assert star_one("1abc2\npqr3stu8vwx\na1b2c3d4e5f\ntreb7uchet") == 142


def test_single_digit_counts_twice():
    assert star_one("treb7uchet") == 77


def test_line_without_digit_raises():
    with pytest.raises(ValueError):
        star_one("abc")