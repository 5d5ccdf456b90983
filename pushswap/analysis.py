"""Coordinate compression, the increasing subsequence and pivot choice."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from pushswap.parsing import InputError
from pushswap.stacks import Node


class DuplicateError(InputError):
    """Raised when the same value appears more than once."""


@dataclass
class Analysis:
    """What analysing stack a found: the subsequence's last node and order."""

    lis: Node | None
    sorted: bool

    @property
    def lis_length(self) -> int:
        """Length of the increasing subsequence kept in stack a."""
        return self.lis.i_s_len if self.lis is not None else 0


def _compress(nodes: Sequence[Node]) -> None:
    for node in nodes:
        smaller = 0
        for other in nodes:
            if other.value < node.value:
                smaller += 1
            elif other.value == node.value and other is not node:
                raise DuplicateError()
        node.cc = smaller


def analyse(nodes: Iterable[Node]) -> Analysis:
    """Compress coordinates and mark an increasing subsequence, top first.

    Each node's length is one more than that of the nearest earlier node
    with a smaller value.  The first node of greatest length ends the
    subsequence, whose members get ``part_of_lis`` set.
    """
    nodes = list(nodes)
    if not nodes:
        return Analysis(lis=None, sorted=True)
    _compress(nodes)
    lis = nodes[0]
    for position, node in enumerate(nodes):
        node.part_of_lis = False
        node.i_s_len = next(
            (
                earlier.i_s_len + 1
                for earlier in reversed(nodes[:position])
                if earlier.cc < node.cc
            ),
            1,
        )
        if node.i_s_len > lis.i_s_len:
            lis = node
    _mark_subsequence(nodes, lis)
    is_sorted = all(node.cc == position for position, node in enumerate(nodes))
    return Analysis(lis=lis, sorted=is_sorted)


def _mark_subsequence(nodes: Sequence[Node], lis: Node) -> None:
    end = next(position for position, node in enumerate(nodes) if node is lis)
    lis.part_of_lis = True
    current = lis
    marked = 0
    for earlier in reversed(nodes[:end]):
        if earlier.cc < current.cc:
            earlier.part_of_lis = True
            current = earlier
            marked += 1
            if marked >= lis.i_s_len:
                break


def _compress_outside_lis(nodes: Sequence[Node]) -> int:
    size = 0
    for node in nodes:
        if node.part_of_lis:
            node.no_lis_cc = -1
            continue
        node.no_lis_cc = sum(
            1 for other in nodes if other.value < node.value and not other.part_of_lis
        )
        size += 1
    return size


def _cc_at_rank(nodes: Sequence[Node], rank: int) -> int:
    for node in nodes:
        if node.no_lis_cc == rank:
            return node.cc
    raise ValueError("no element outside the increasing subsequence")


def get_median(nodes: Iterable[Node]) -> int:
    """Coordinate of the median of the nodes outside the subsequence."""
    nodes = list(nodes)
    size = _compress_outside_lis(nodes)
    return _cc_at_rank(nodes, size // 2)


def get_first_quartile(nodes: Iterable[Node]) -> int:
    """Coordinate at three quarters of the rank of nodes outside the subsequence."""
    nodes = list(nodes)
    size = _compress_outside_lis(nodes)
    return _cc_at_rank(nodes, int(size * 0.75))