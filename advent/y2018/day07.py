"""The sum of its parts: ordering and timing dependent steps."""

from __future__ import annotations

import string
from collections import defaultdict
from dataclasses import dataclass


@dataclass
class Worker:
    """A worker busy on a step for a number of remaining seconds."""

    step: str | None = None
    time: int = 0

    @property
    def idle(self):
        return self.step is None

    def assign(self, step, time):
        self.step = step
        self.time = time

    def release(self):
        self.step = None
        self.time = 0


def step_time(step, base):
    """Return how long a step takes: its letter's position plus the base, or 0."""
    letter = step[:1]
    if letter and letter in string.ascii_uppercase:
        return string.ascii_uppercase.index(letter) + 1 + base
    return 0


def _dependencies(text):
    """Map each step to the set of steps it waits for."""
    waits_for = defaultdict(set)
    for line in text.splitlines():
        if not line:
            continue
        words = line.split()
        if len(words) < 8:
            raise ValueError(f"malformed instruction: {line!r}")
        waits_for[words[7]].add(words[1])
    return dict(waits_for)


def _initially_available(waits_for):
    return {
        step
        for prerequisites in waits_for.values()
        for step in prerequisites
        if step not in waits_for
    }


def _complete(step, waits_for, available):
    """Mark a step done and move newly unblocked steps to the available pool."""
    for prerequisites in waits_for.values():
        prerequisites.discard(step)
    _release_ready(waits_for, available)


def _release_ready(waits_for, available):
    ready = [step for step, prerequisites in waits_for.items() if not prerequisites]
    for step in ready:
        del waits_for[step]
        available.add(step)


def star_one(text):
    """Return the order in which the steps are completed by a single worker."""
    waits_for = _dependencies(text)
    available = _initially_available(waits_for)
    order = []
    while available:
        lowest = min(available)
        available.remove(lowest)
        order.append(lowest)
        _complete(lowest, waits_for, available)
    return "".join(order)


def star_two(text, workers, time):
    """Return the seconds needed to finish every step with several workers."""
    waits_for = _dependencies(text)
    available = _initially_available(waits_for)
    crew = [Worker() for _ in range(workers)]
    ticks = 0

    while True:
        for worker in crew:
            if worker.idle:
                continue
            worker.time -= 1
            if worker.time == 0:
                finished = worker.step
                worker.release()
                for prerequisites in waits_for.values():
                    prerequisites.discard(finished)
        _release_ready(waits_for, available)

        for worker in crew:
            if not available:
                break
            if not worker.idle:
                continue
            lowest = min(available)
            available.remove(lowest)
            duration = step_time(lowest, time)
            if duration <= 0:
                raise ValueError(f"step {lowest!r} has no duration")
            worker.assign(lowest, duration)

        if not available and all(worker.idle for worker in crew):
            return ticks
        ticks += 1