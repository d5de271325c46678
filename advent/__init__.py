"""Advent of Code puzzle solutions, grouped by year."""

__version__ = "0.1.0"