"""Checks that a list of instructions sorts the given integers."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from itertools import pairwise
from typing import TextIO

from pushswap.commands import Command
from pushswap.parsing import InputError, parse_checker_arguments


class InvalidInstruction(InputError):
    """Raised when an instruction is not one of the eleven known commands."""


def _swap(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _push(source: deque[int], target: deque[int]) -> None:
    if source:
        target.appendleft(source.popleft())


def _rotate(stack: deque[int]) -> None:
    stack.rotate(-1)


def _reverse_rotate(stack: deque[int]) -> None:
    stack.rotate(1)


@dataclass
class CheckerState:
    """Stacks a and b, each held top first."""

    a: deque[int] = field(default_factory=deque)
    b: deque[int] = field(default_factory=deque)

    @classmethod
    def from_values(cls, values: Iterable[int]) -> CheckerState:
        """Build stack a from values given top first; stack b is empty."""
        return cls(a=deque(values))

    def apply(self, instruction: str) -> None:
        """Carry out one instruction given by its name, such as ``"rra"``."""
        try:
            command = Command(instruction)
        except ValueError:
            raise InvalidInstruction() from None
        if command is Command.SA:
            _swap(self.a)
        elif command is Command.SB:
            _swap(self.b)
        elif command is Command.SS:
            _swap(self.a)
            _swap(self.b)
        elif command is Command.PA:
            _push(self.b, self.a)
        elif command is Command.PB:
            _push(self.a, self.b)
        elif command is Command.RA:
            _rotate(self.a)
        elif command is Command.RB:
            _rotate(self.b)
        elif command is Command.RR:
            _rotate(self.a)
            _rotate(self.b)
        elif command is Command.RRA:
            _reverse_rotate(self.a)
        elif command is Command.RRB:
            _reverse_rotate(self.b)
        else:
            _reverse_rotate(self.a)
            _reverse_rotate(self.b)

    def is_sorted(self) -> bool:
        """True when b is empty and a rises from top to bottom."""
        return not self.b and all(upper <= lower for upper, lower in pairwise(self.a))


def read_instructions(stream: TextIO) -> list[str]:
    """Read every instruction from ``stream``, one per line, skipping blank lines."""
    return [line for line in stream.read().split("\n") if line]


def check(values: Iterable[int], instructions: Iterable[str]) -> bool:
    """Apply the instructions to ``values`` (top first) and report whether they sort it.

    Raises InvalidInstruction on the first unknown instruction.
    """
    state = CheckerState.from_values(values)
    for instruction in instructions:
        state.apply(instruction)
    return state.is_sorted()


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print OK, KO or Error."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        values = parse_checker_arguments(args)
        instructions = read_instructions(sys.stdin)
        result = check(values, instructions)
    except InputError:
        sys.stdout.write("Error\n")
        return 0
    sys.stdout.write("OK\n" if result else "KO\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())