import pytest

from advent.y2018.day08 import star_one, star_two

EXAMPLE = "2 3 0 3 10 11 12 1 1 0 1 99 2 1 1 2"


def test_star_one_example():
    assert star_one(EXAMPLE) == 138


def test_star_two_example():
    assert star_two(EXAMPLE) == 66


def test_leaf_node():
    assert star_one("0 3 1 2 3") == 6
    assert star_two("0 3 1 2 3") == 6


def test_references_out_of_range_count_nothing():
    # root has one leaf child worth 7; it references child 2 and 0, which do not exist
    assert star_two("1 3 0 1 7 2 0 1") == 7
    assert star_one("1 3 0 1 7 2 0 1") == 10


def test_truncated_tree():
    with pytest.raises(ValueError):
        star_one("1 1 0")