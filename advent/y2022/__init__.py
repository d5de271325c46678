"""Advent of Code 2022 solution for day 1."""