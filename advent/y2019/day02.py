"""1202 program alarm: a tiny add/multiply machine."""

from enum import IntEnum
from itertools import product

_TARGET = 19690720
_STEP = 4


class Operation(IntEnum):
    """An opcode the machine understands."""

    ADD = 1
    MULTIPLY = 2
    HALT = 99

    def apply(self, left, right):
        """Return the result of the operation on two values."""
        if self is Operation.ADD:
            return left + right
        if self is Operation.MULTIPLY:
            return left * right
        raise ValueError("halt takes no operands")


def _read(memory, address):
    if not 0 <= address < len(memory):
        raise ValueError(f"address {address} is outside memory")
    return memory[address]


def run_program(program):
    """Run a program on a copy of its memory and return the value left at address 0."""
    memory = list(program)
    pointer = 0
    while True:
        opcode = _read(memory, pointer)
        try:
            operation = Operation(opcode)
        except ValueError:
            raise ValueError(f"unknown opcode {opcode} at {pointer}") from None
        if operation is Operation.HALT:
            return _read(memory, 0)
        first = _read(memory, pointer + 1)
        second = _read(memory, pointer + 2)
        output = _read(memory, pointer + 3)
        _read(memory, output)
        memory[output] = operation.apply(_read(memory, first), _read(memory, second))
        pointer += _STEP


def _parse(text):
    program = [int(word) for word in text.strip().split(",")]
    if any(value < 0 for value in program):
        raise ValueError("programs hold only non-negative values")
    return program


def star_one(text):
    """Return the value at address 0 after running the program as given."""
    return run_program(_parse(text))


def star_two(text):
    """Return 100 * noun + verb for the inputs that produce 19690720, or 0."""
    program = _parse(text)
    if len(program) < 3:
        raise ValueError("program too short to take a noun and a verb")
    for noun, verb in product(range(100), repeat=2):
        memory = list(program)
        memory[1] = noun
        memory[2] = verb
        if run_program(memory) == _TARGET:
            return 100 * noun + verb
    return 0