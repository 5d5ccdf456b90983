"""The sorting strategy: small stacks by hand, large ones by divide and combine."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from itertools import chain, islice

from pushswap.analysis import Analysis, DuplicateError, analyse, get_first_quartile, get_median
from pushswap.commands import Command, format_commands, optimise
from pushswap.parsing import InputError, parse_sorter_arguments
from pushswap.stacks import Node, Stacks, stack_max, stack_min

_FEW = 6


def distance_from_top(cc: int, nodes: Sequence[Node]) -> int:
    """Number of nodes above the one with coordinate ``cc``, or the length if absent."""
    return next(
        (position for position, node in enumerate(nodes) if node.cc == cc),
        len(nodes),
    )


def distance_from_bottom(cc: int, nodes: Sequence[Node]) -> int:
    """Number of nodes below the one with coordinate ``cc``, or the length if absent."""
    return next(
        (position for position, node in enumerate(reversed(nodes)) if node.cc == cc),
        len(nodes),
    )


def _sort_three(stacks: Stacks) -> None:
    first, second, third = stacks.a[0].cc, stacks.a[1].cc, stacks.a[-1].cc
    if first < second < third:
        return
    if first > second and second < third and first < third:
        stacks.sa()
    elif first > second and second < third and first > third:
        stacks.ra()
    elif first < second and second > third and first > third:
        stacks.rra()
    else:
        stacks.sa()
        if first > second and first > third:
            stacks.rra()
        else:
            stacks.ra()


def _sort_five_or_four(stacks: Stacks) -> None:
    while True:
        distance = distance_from_top(stack_min(stacks.a).cc, stacks.a)
        if distance < 2:
            for _ in range(distance):
                stacks.ra()
        else:
            for _ in range(len(stacks.a) - distance):
                stacks.rra()
        stacks.pb()
        if len(stacks.a) <= 3:
            break
    _sort_three(stacks)


def sort_few(stacks: Stacks) -> None:
    """Sort stack a when it holds at most five analysed nodes."""
    size = len(stacks.a)
    if size >= 4:
        _sort_five_or_four(stacks)
    elif size == 3:
        _sort_three(stacks)
    elif size == 2 and stacks.a[0].cc > stacks.a[1].cc:
        stacks.sa()
    if size >= 4:
        stacks.pa()
        if size == 5:
            stacks.pa()


def _mark_to_push(pivot: int, nodes: Iterable[Node]) -> int:
    count = 0
    for node in nodes:
        node.to_push = node.cc >= pivot and not node.part_of_lis
        count += node.to_push
    return count


def _rotate_to_closest_push(stacks: Stacks) -> None:
    a = stacks.a
    from_head = next((pos for pos, node in enumerate(a) if node.to_push), len(a))
    from_tail = next(
        (pos for pos, node in enumerate(reversed(a)) if node.to_push), len(a)
    )
    if from_tail + 1 < from_head:
        for _ in range(from_tail + 1):
            stacks.rra()
    else:
        for _ in range(from_head):
            stacks.ra()


def _divide(stacks: Stacks, to_move: int) -> int:
    """Push every node outside the subsequence to b, in cycles; return the last cycle."""
    b_pivot = get_first_quartile(stacks.a)
    pivot = get_median(stacks.a)
    first_divide = True
    total = 0
    cycle = 1
    while True:
        times = _mark_to_push(pivot, stacks.a)
        pushed = 0
        while pushed < times:
            if stacks.a[0].to_push:
                stacks.pb()
                top = stacks.b[0]
                top.cycle = cycle
                pushed += 1
                if first_divide and top.cc > b_pivot:
                    top.cycle -= 1
                    stacks.rb()
            else:
                _rotate_to_closest_push(stacks)
        first_divide = False
        total += pushed
        if total >= to_move:
            return cycle
        pivot = get_median(stacks.a)
        cycle += 1


def _find_a_head(target: Node, a: Sequence[Node]) -> Node:
    a_min = stack_min(a)
    if target.cc > stack_max(a).cc:
        return a_min
    start = next(pos for pos, node in enumerate(a) if node is a_min)
    return next(node for node in chain(islice(a, start, None), a) if target.cc < node.cc)


def _price(node: Node, stacks: Stacks) -> tuple[int, int, int, int]:
    rb = distance_from_top(node.cc, stacks.b)
    rrb = distance_from_bottom(node.cc, stacks.b) + 1
    head = _find_a_head(node, stacks.a)
    ra = distance_from_top(head.cc, stacks.a)
    rra = distance_from_bottom(head.cc, stacks.a) + 1
    options = (
        (ra + rrb, (ra, 0, 0, rrb)),
        (rra + rb, (0, rra, rb, 0)),
        (max(ra, rb), (ra, 0, rb, 0)),
        (max(rra, rrb), (0, rra, 0, rrb)),
    )
    _, moves = min(options, key=lambda option: option[0])
    node.ra_cost, node.rra_cost, node.rb_cost, node.rrb_cost = moves
    return moves


def _cheapest_move(stacks: Stacks, cycle: int) -> tuple[int, int, int, int] | None:
    best = None
    for node in stacks.b:
        if node.cycle != cycle:
            continue
        moves = _price(node, stacks)
        if best is None or sum(moves) <= sum(best):
            best = moves
    return best


def _combine(stacks: Stacks, biggest_cycle: int) -> None:
    cycle = biggest_cycle
    while stacks.b:
        while stacks.b:
            move = _cheapest_move(stacks, cycle)
            if move is None:
                break
            ra, rra, rb, rrb = move
            for _ in range(ra):
                stacks.ra()
            for _ in range(rb):
                stacks.rb()
            for _ in range(rra):
                stacks.rra()
            for _ in range(rrb):
                stacks.rrb()
            stacks.pa()
        cycle -= 1
    while stacks.a[0].cc != 0:
        stacks.ra()


def sort_many(stacks: Stacks, analysis: Analysis) -> None:
    """Sort an analysed stack a of any size, leaving b empty."""
    total = len(stacks.a) + len(stacks.b)
    biggest_cycle = _divide(stacks, total - analysis.lis_length)
    _combine(stacks, biggest_cycle)


def solve(values: Iterable[int]) -> list[Command]:
    """Return the optimised command list that sorts ``values``, given top first.

    Raises DuplicateError if a value appears twice.
    """
    stacks = Stacks.from_values(values)
    analysis = analyse(stacks.a)
    if not analysis.sorted:
        if len(stacks.a) < _FEW:
            sort_few(stacks)
        else:
            sort_many(stacks, analysis)
    return optimise(stacks.commands)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the commands that sort the integers given as arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        values = parse_sorter_arguments(args)
    except InputError:
        sys.stdout.write("Error\n")
        return 1
    try:
        commands = solve(values)
    except DuplicateError:
        sys.stdout.write("Error\n")
        return 0
    sys.stdout.write(format_commands(commands))
    return 0


if __name__ == "__main__":
    sys.exit(main())