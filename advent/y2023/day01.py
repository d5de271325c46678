"""Trebuchet calibration: first and last digits of each line."""

_DIGITS = "0123456789"


def _calibration(line):
    digits = [int(char) for char in line if char in _DIGITS]
    if not digits:
        raise ValueError(f"line holds no digit: {line!r}")
    return digits[0] * 10 + digits[-1]


def star_one(text):
    """Return the sum of every line's two-digit calibration value."""
    return sum(_calibration(line) for line in text.splitlines())