import random
from itertools import permutations

import pytest

from pushswap.analysis import DuplicateError, analyse
from pushswap.commands import Command
from pushswap.sorter import (
    distance_from_bottom,
    distance_from_top,
    main,
    solve,
    sort_few,
    sort_many,
)
from pushswap.stacks import Node, Stacks


def _run(values, commands):
    stacks = Stacks.from_values(values)
    for command in commands:
        getattr(stacks, command.value)()
    return [node.value for node in stacks.a], [node.value for node in stacks.b]


def _nodes(ccs):
    return [Node(value=cc, cc=cc) for cc in ccs]


def test_distance_from_top_and_bottom():
    nodes = _nodes([3, 1, 2])
    assert distance_from_top(3, nodes) == 0
    assert distance_from_top(1, nodes) == 1
    assert distance_from_bottom(1, nodes) == 1
    assert distance_from_bottom(3, nodes) == 2
    assert distance_from_bottom(2, nodes) == 0


def test_distance_of_missing_coordinate_is_length():
    nodes = _nodes([0, 1, 2, 4])
    assert distance_from_top(3, nodes) == len(nodes)
    assert distance_from_bottom(3, nodes) == len(nodes)


def test_sorted_input_needs_no_commands():
    assert solve([1, 2, 3, 4, 5, 6, 7]) == []


def test_two_values_swap():
    assert solve([2, 1]) == [Command.SA]


def test_duplicates_raise():
    with pytest.raises(DuplicateError):
        solve([3, 1, 3])


@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_every_small_permutation_is_sorted(size):
    for perm in permutations(range(size)):
        commands = solve(perm)
        a, b = _run(perm, commands)
        assert a == sorted(perm)
        assert b == []


def test_three_values_take_at_most_two_commands():
    assert max(len(solve(perm)) for perm in permutations([7, -3, 12])) <= 2


def test_five_values_take_at_most_twelve_commands():
    assert max(len(solve(perm)) for perm in permutations(range(5))) <= 12


@pytest.mark.parametrize("size", [6, 7, 20, 60, 100])
def test_random_inputs_are_sorted(size):
    rng = random.Random(size)
    values = rng.sample(range(-1000, 1000), size)
    a, b = _run(values, solve(values))
    assert a == sorted(values)
    assert b == []


def test_sort_few_sorts_stack_in_place():
    stacks = Stacks.from_values([5, 9, 1, 4])
    analyse(stacks.a)
    sort_few(stacks)
    assert [node.value for node in stacks.a] == [1, 4, 5, 9]
    assert not stacks.b


def test_sort_many_sorts_stack_in_place():
    values = [8, 3, 10, 1, 7, 2, 9, 5, 4, 6]
    stacks = Stacks.from_values(values)
    analysis = analyse(stacks.a)
    sort_many(stacks, analysis)
    assert [node.value for node in stacks.a] == sorted(values)
    assert not stacks.b
    assert _run(values, stacks.commands) == (sorted(values), [])


def test_main_without_arguments_prints_nothing(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_main_invalid_argument(capsys):
    assert main(["1", "x2"]) == 1
    assert capsys.readouterr().out == "Error\n"


def test_main_overflow(capsys):
    assert main(["2147483648"]) == 1
    assert capsys.readouterr().out == "Error\n"


def test_main_duplicates(capsys):
    assert main(["1", "2", "1"]) == 0
    assert capsys.readouterr().out == "Error\n"


def test_main_prints_swap(capsys):
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_main_sorted_prints_nothing(capsys):
    assert main(["-1", "+2", "3"]) == 0
    assert capsys.readouterr().out == ""


def test_main_output_sorts_input(capsys):
    args = ["4", "67", "3", "87", "23", "-5", "12", "0"]
    assert main(args) == 0
    lines = capsys.readouterr().out.splitlines()
    commands = [Command(line) for line in lines]
    values = [int(arg) for arg in args]
    assert _run(values, commands) == (sorted(values), [])