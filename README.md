# advent

Solutions to a selection of Advent of Code puzzles, organised by year and day.
Each day is a module exposing `star_one` and, where solved, `star_two`. Most
take the puzzle input as a string and return the answer.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Contents

| Module | Public names |
| --- | --- |
| `advent.y2018.day01` | `star_one(text)`, `star_two(text)` |
| `advent.y2018.day02` | `star_one(text)`, `star_two(text)` |
| `advent.y2018.day03` | `Claim` (`Claim.parse`, `Claim.cells`), `star_one(text)`, `star_two(text)` |
| `advent.y2018.day04` | `LogEvent`, `LogEntry` (`LogEntry.parse`), `star_one(text)`, `star_two(text)` |
| `advent.y2018.day05` | `reduced_length(units)`, `star_one(text)`, `star_two(text)` |
| `advent.y2018.day06` | `Point` (`Point.parse`, `Point.distance`), `star_one(text)`, `star_two(text, limit)` |
| `advent.y2018.day07` | `Worker`, `step_time(step, base)`, `star_one(text)`, `star_two(text, workers, time)` |
| `advent.y2018.day08` | `star_one(text)`, `star_two(text)` |
| `advent.y2018.day10` | `Light` (`Light.parse`, `Light.step`, `Light.step_back`), `find_message(text)`, `star_one(text)`, `star_two(text)` |
| `advent.y2018.day11` | `power_level(x, y, serial)`, `star_one(serial)`, `star_two(serial)` |
| `advent.y2018.day12` | `star_one(text)`, `star_two(text)` |
| `advent.y2019.day01` | `fuel_with_fuel(mass)`, `star_one(text)`, `star_two(text)` |
| `advent.y2019.day02` | `Operation`, `run_program(program)`, `star_one(text)`, `star_two(text)` |
| `advent.y2019.day03` | `star_one(text)`, `star_two(text)` |
| `advent.y2019.day04` | `never_decreasing(number)`, `has_double(number)`, `has_exact_pair(number)`, `star_one(text)`, `star_two(text)` |
| `advent.y2022.day01` | `calories_per_elf(text)`, `star_one(text)`, `star_two(text)` |
| `advent.y2023.day01` | `star_one(text)` |

## Usage

```python
from pathlib import Path

from advent.y2018 import day01, day11

text = Path("day01.txt").read_text()
print(day01.star_one(text))
print(day01.star_two(text))

# Day 11 of 2018 takes a grid serial number rather than a text input.
print(day11.star_one(18))   # ((33, 45), 29)
```

A few functions take extra arguments, since the examples and the real puzzles
use different values:

- `advent.y2018.day06.star_two(text, limit)` counts the cells whose total
  distance to all points is below `limit`.
- `advent.y2018.day07.star_two(text, workers, time)` takes the number of
  workers and the base step time added to each step's letter value.

`advent.y2018.day10.find_message(text)` returns both the drawn message (rows
of `#` and `.`, each ending in a newline) and the second at which it appears;
`star_one` and `star_two` return each part.

Malformed input and inputs with no answer (for example two wires that never
cross) raise `ValueError`.

## What this package does not do

There is no command-line tool and no input handling: the package does not
fetch or read puzzle inputs itself. Read the input yourself and pass the text
to the day's functions. Only the days listed above are solved; for 2023 day 1
only the first star is available.