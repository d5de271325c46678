import pytest

from advent.y2019.day02 import Operation, run_program, star_one, star_two


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1,9,10,3,2,3,11,0,99,30,40,50", 3500),
        ("1,0,0,0,99", 2),
        ("2,3,0,3,99", 2),
        ("2,4,4,5,99,0", 2),
        ("1,1,1,4,99,5,6,0,99", 30),
    ],
)
def test_star_one(text, expected):
    assert star_one(text) == expected


def test_star_one_ignores_surrounding_whitespace():
    assert star_one("1,0,0,0,99\n") == 2


def test_run_program_leaves_input_untouched():
    program = [1, 0, 0, 0, 99]
    assert run_program(program) == 2
    assert program == [1, 0, 0, 0, 99]


def test_operation_apply():
    assert Operation.ADD.apply(3, 4) == 7
    assert Operation.MULTIPLY.apply(3, 4) == 12


def test_unknown_opcode_raises():
    with pytest.raises(ValueError):
        star_one("7,0,0,0,99")


def test_address_outside_memory_raises():
    with pytest.raises(ValueError):
        star_one("1,50,0,0,99")


def _padded(values):
    memory = [0] * 100
    for address, value in values.items():
        memory[address] = value
    return ",".join(str(value) for value in memory)


def test_star_two_finds_noun_and_verb():
    text = _padded({0: 1, 3: 0, 4: 99, 50: 19690720})
    assert star_two(text) == 350


def test_star_two_without_solution_returns_zero():
    text = _padded({0: 1, 3: 0, 4: 99})
    assert star_two(text) == 0