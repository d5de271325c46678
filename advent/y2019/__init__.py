"""Advent of Code 2019 solutions for days 1 to 4."""