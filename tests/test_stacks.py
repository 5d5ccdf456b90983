import pytest

from pushswap.commands import Command
from pushswap.stacks import Node, Stacks, stack_max, stack_min


def values(stack):
    return [node.value for node in stack]


def test_from_values_keeps_order_and_b_empty():
    stacks = Stacks.from_values([3, 1, 2])
    assert values(stacks.a) == [3, 1, 2]
    assert list(stacks.b) == []
    assert stacks.commands == []


def test_sa_swaps_top_two_and_records():
    stacks = Stacks.from_values([1, 2, 3])
    stacks.sa()
    assert values(stacks.a) == [2, 1, 3]
    assert stacks.commands == [Command.SA]


def test_sa_twice_is_identity():
    stacks = Stacks.from_values([5, 6, 7, 8])
    stacks.sa()
    stacks.sa()
    assert values(stacks.a) == [5, 6, 7, 8]
    assert stacks.commands == [Command.SA, Command.SA]


@pytest.mark.parametrize("method", ["sa", "ra", "rra"])
def test_single_element_operations_record_nothing(method):
    stacks = Stacks.from_values([42])
    getattr(stacks, method)()
    assert values(stacks.a) == [42]
    assert stacks.commands == []


@pytest.mark.parametrize("method", ["pa", "sb", "rb", "rrb"])
def test_operations_on_empty_b_record_nothing(method):
    stacks = Stacks.from_values([1, 2])
    getattr(stacks, method)()
    assert values(stacks.a) == [1, 2]
    assert stacks.commands == []


def test_pb_on_empty_a_records_nothing():
    stacks = Stacks()
    stacks.pb()
    assert stacks.commands == []
    assert len(stacks.b) == 0


def test_pb_then_pa_restores():
    stacks = Stacks.from_values([4, 9, 1])
    stacks.pb()
    assert values(stacks.a) == [9, 1]
    assert values(stacks.b) == [4]
    stacks.pa()
    assert values(stacks.a) == [4, 9, 1]
    assert list(stacks.b) == []
    assert stacks.commands == [Command.PB, Command.PA]


def test_ra_moves_top_to_bottom():
    original = [10, 20, 30, 40]
    stacks = Stacks.from_values(original)
    stacks.ra()
    assert values(stacks.a) == original[1:] + original[:1]
    assert stacks.commands == [Command.RA]


def test_rra_moves_bottom_to_top():
    original = [10, 20, 30, 40]
    stacks = Stacks.from_values(original)
    stacks.rra()
    assert values(stacks.a) == original[-1:] + original[:-1]
    assert stacks.commands == [Command.RRA]


def test_rotation_round_trip():
    original = [7, 3, 5, 1, 9]
    stacks = Stacks.from_values(original)
    for _ in original:
        stacks.ra()
    assert values(stacks.a) == original
    stacks.ra()
    stacks.rra()
    assert values(stacks.a) == original


def test_combined_operations_always_record():
    stacks = Stacks.from_values([1])
    stacks.ss()
    stacks.rr()
    stacks.rrr()
    assert values(stacks.a) == [1]
    assert stacks.commands == [Command.SS, Command.RR, Command.RRR]


def test_combined_operations_act_on_both_stacks():
    stacks = Stacks.from_values([1, 2, 3, 4])
    stacks.pb()
    stacks.pb()
    b_before = values(stacks.b)
    a_before = values(stacks.a)
    stacks.rr()
    assert values(stacks.a) == a_before[1:] + a_before[:1]
    assert values(stacks.b) == b_before[1:] + b_before[:1]
    stacks.rrr()
    assert values(stacks.a) == a_before
    assert values(stacks.b) == b_before
    stacks.ss()
    assert values(stacks.a) == a_before[::-1]
    assert values(stacks.b) == b_before[::-1]


def test_b_operations_mirror_a():
    stacks = Stacks.from_values([1, 2, 3])
    stacks.pb()
    stacks.pb()
    stacks.pb()
    before = values(stacks.b)
    stacks.sb()
    stacks.sb()
    stacks.rb()
    stacks.rrb()
    assert values(stacks.b) == before
    assert stacks.commands[3:] == [Command.SB, Command.SB, Command.RB, Command.RRB]


def test_operations_preserve_elements():
    original = [8, 2, 6, 4, 0]
    stacks = Stacks.from_values(original)
    for method in ["pb", "pb", "ra", "sb", "rrr", "pa", "ss", "rra", "pb", "rr"]:
        getattr(stacks, method)()
    assert sorted(values(stacks.a) + values(stacks.b)) == sorted(original)


def test_stack_min_and_max_pick_first_extreme():
    nodes = [Node(0, cc=2), Node(1, cc=0), Node(2, cc=5), Node(3, cc=0), Node(4, cc=5)]
    assert stack_min(nodes) is nodes[1]
    assert stack_max(nodes) is nodes[2]


def test_stack_min_and_max_of_empty():
    assert stack_min([]) is None
    assert stack_max([]) is None