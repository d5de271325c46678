"""Advent of Code 2023 solution for the first star of day 1."""