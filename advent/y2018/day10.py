"""The stars align: moving lights that briefly spell a message."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Light:
    """A point of light with a position and a constant velocity."""

    position: tuple[int, int]
    velocity: tuple[int, int]

    @classmethod
    def parse(cls, line):
        """Parse a line like 'position=< 9,  1> velocity=< 0,  2>'."""
        cleaned = (
            line.replace("position=<", " ")
            .replace(",", " ")
            .replace("> velocity=<", " ")
            .replace(">", "")
        )
        fields = [int(field) for field in cleaned.split()]
        if len(fields) < 4:
            raise ValueError(f"malformed light: {line!r}")
        return cls((fields[0], fields[1]), (fields[2], fields[3]))

    def step(self):
        """Move one second forward."""
        x, y = self.position
        dx, dy = self.velocity
        self.position = (x + dx, y + dy)

    def step_back(self):
        """Move one second backward."""
        x, y = self.position
        dx, dy = self.velocity
        self.position = (x - dx, y - dy)


def _parse_lights(text):
    lights = [Light.parse(line) for line in text.splitlines() if line.strip()]
    if not lights:
        raise ValueError("no lights given")
    return lights


def _width(lights):
    xs = [light.position[0] for light in lights]
    return max(xs) - min(xs)


def _render(lights):
    positions = {light.position for light in lights}
    xs = [x for x, _ in positions]
    ys = [y for _, y in positions]
    rows = (
        "".join("#" if (x, y) in positions else "." for x in range(min(xs), max(xs) + 1))
        for y in range(min(ys), max(ys) + 1)
    )
    return "".join(row + "\n" for row in rows)


def find_message(text):
    """Return the drawn message and the second at which it appears.

    The message is taken to be the arrangement just before the lights
    start spreading apart horizontally again.
    """
    lights = _parse_lights(text)
    if len({light.velocity[0] for light in lights}) == 1:
        raise ValueError("the lights never converge horizontally")
    tick = 0
    while True:
        width = _width(lights)
        for light in lights:
            light.step()
        if _width(lights) > width:
            for light in lights:
                light.step_back()
            return _render(lights), tick
        tick += 1


def star_one(text):
    """Return the message the lights spell out."""
    return find_message(text)[0]


def star_two(text):
    """Return how many seconds pass before the message appears."""
    return find_message(text)[1]