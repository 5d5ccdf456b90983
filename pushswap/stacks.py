"""The two stacks, their nodes and the eleven stack operations."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from operator import attrgetter

from pushswap.commands import Command


@dataclass(eq=False)
class Node:
    """One element of a stack together with the sorter's bookkeeping."""

    value: int
    cc: int = 0
    cycle: int = 0
    i_s_len: int = 0
    no_lis_cc: int = 0
    part_of_lis: bool = False
    to_push: bool = False
    ra_cost: int = 0
    rra_cost: int = 0
    rb_cost: int = 0
    rrb_cost: int = 0


def _push(source: deque[Node], target: deque[Node]) -> bool:
    if not source:
        return False
    target.appendleft(source.popleft())
    return True


def _swap(stack: deque[Node]) -> bool:
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def _rotate(stack: deque[Node]) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(-1)
    return True


def _reverse_rotate(stack: deque[Node]) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(1)
    return True


@dataclass
class Stacks:
    """Stacks a and b, top first, and the commands applied so far.

    A single-stack operation that has no effect records nothing; the
    combined operations ``ss``, ``rr`` and ``rrr`` are always recorded.
    """

    a: deque[Node] = field(default_factory=deque)
    b: deque[Node] = field(default_factory=deque)
    commands: list[Command] = field(default_factory=list)

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Stacks:
        """Build stack a from values given top first; stack b is empty."""
        return cls(a=deque(Node(value) for value in values))

    def _record(self, done: bool, command: Command) -> None:
        if done:
            self.commands.append(command)

    def pa(self) -> None:
        """Move the top of b onto a."""
        self._record(_push(self.b, self.a), Command.PA)

    def pb(self) -> None:
        """Move the top of a onto b."""
        self._record(_push(self.a, self.b), Command.PB)

    def sa(self) -> None:
        """Swap the two top elements of a."""
        self._record(_swap(self.a), Command.SA)

    def sb(self) -> None:
        """Swap the two top elements of b."""
        self._record(_swap(self.b), Command.SB)

    def ss(self) -> None:
        """Swap the tops of both stacks."""
        _swap(self.a)
        _swap(self.b)
        self.commands.append(Command.SS)

    def ra(self) -> None:
        """Move the top of a to its bottom."""
        self._record(_rotate(self.a), Command.RA)

    def rb(self) -> None:
        """Move the top of b to its bottom."""
        self._record(_rotate(self.b), Command.RB)

    def rr(self) -> None:
        """Rotate both stacks upwards."""
        _rotate(self.a)
        _rotate(self.b)
        self.commands.append(Command.RR)

    def rra(self) -> None:
        """Move the bottom of a to its top."""
        self._record(_reverse_rotate(self.a), Command.RRA)

    def rrb(self) -> None:
        """Move the bottom of b to its top."""
        self._record(_reverse_rotate(self.b), Command.RRB)

    def rrr(self) -> None:
        """Rotate both stacks downwards."""
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self.commands.append(Command.RRR)


def stack_min(nodes: Iterable[Node]) -> Node | None:
    """Return the first node with the smallest compressed coordinate."""
    return min(nodes, key=attrgetter("cc"), default=None)


def stack_max(nodes: Iterable[Node]) -> Node | None:
    """Return the first node with the largest compressed coordinate."""
    return max(nodes, key=attrgetter("cc"), default=None)