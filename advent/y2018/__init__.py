"""Advent of Code 2018 solutions for days 1 to 8 and 10 to 12."""