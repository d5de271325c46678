"""Repose record: finding the sleepiest guard and minute."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum

_MINUTES = 60


class LogEvent(Enum):
    """What a log line records."""

    BEGIN_SHIFT = "Guard"
    FALLS_ASLEEP = "falls"
    WAKES_UP = "wakes"
    UNKNOWN = "unknown"


@dataclass(frozen=True, order=True)
class LogEntry:
    """One timestamped line of the guard log, ordered by timestamp only."""

    timestamp: tuple[int, int, int, int, int]
    event: LogEvent = field(compare=False)
    guard: int | None = field(default=None, compare=False)

    @property
    def minute(self):
        return self.timestamp[4]

    @classmethod
    def parse(cls, line):
        """Parse a line like '[1518-11-01 00:00] Guard #10 begins shift'."""
        fields = (
            line.replace("[", "")
            .replace("-", " ")
            .replace(":", " ")
            .replace("]", "")
            .replace("#", "")
            .split()
        )
        if len(fields) < 6:
            raise ValueError(f"malformed log line: {line!r}")
        timestamp = tuple(int(part) for part in fields[:5])
        word = fields[5]
        if word == LogEvent.BEGIN_SHIFT.value:
            if len(fields) < 7:
                raise ValueError(f"shift start without guard: {line!r}")
            return cls(timestamp, LogEvent.BEGIN_SHIFT, int(fields[6]))
        if word == LogEvent.FALLS_ASLEEP.value:
            return cls(timestamp, LogEvent.FALLS_ASLEEP)
        if word == LogEvent.WAKES_UP.value:
            return cls(timestamp, LogEvent.WAKES_UP)
        return cls(timestamp, LogEvent.UNKNOWN)


def _parse_log(text):
    return sorted(LogEntry.parse(line) for line in text.splitlines())


def _sleep_table(entries):
    """Return, for each minute of the hour, how often each guard slept then."""
    table = [Counter() for _ in range(_MINUTES)]
    guard = None
    asleep_at = None
    for entry in entries:
        if entry.event is LogEvent.BEGIN_SHIFT:
            guard = entry.guard
        elif entry.event is LogEvent.FALLS_ASLEEP:
            asleep_at = entry.minute
        elif entry.event is LogEvent.WAKES_UP:
            if guard is None or asleep_at is None:
                raise ValueError("wake-up logged before a shift start or a fall")
            for minute in range(asleep_at, min(entry.minute, _MINUTES)):
                table[minute][guard] += 1
    return table


def star_one(text):
    """Return the sleepiest guard's id times the minute they slept most."""
    table = _sleep_table(_parse_log(text))
    totals = Counter()
    for counts in table:
        totals.update(counts)
    if not totals:
        raise ValueError("no guard was ever asleep")
    guard, _ = totals.most_common(1)[0]
    best_minute = max(range(_MINUTES), key=lambda minute: table[minute][guard])
    return guard * best_minute


def star_two(text):
    """Return guard id times minute for the guard most often asleep on one minute."""
    table = _sleep_table(_parse_log(text))
    best_count, best_guard, best_minute = 0, 0, 0
    for minute, counts in enumerate(table):
        for guard, count in counts.items():
            if count > best_count:
                best_count, best_guard, best_minute = count, guard, minute
    return best_guard * best_minute