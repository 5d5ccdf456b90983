"""Stack commands and the peephole optimisation of a command list."""

from collections.abc import Iterable, Sequence
from enum import Enum


class Command(Enum):
    """One push_swap instruction; the value is its printed name."""

    PA = "pa"
    PB = "pb"
    SA = "sa"
    SB = "sb"
    SS = "ss"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


_CANCELLING = frozenset(
    {
        (Command.PA, Command.PB),
        (Command.PB, Command.PA),
        (Command.SA, Command.SA),
        (Command.SB, Command.SB),
        (Command.RA, Command.RRA),
        (Command.RRA, Command.RA),
        (Command.RB, Command.RRB),
        (Command.RRB, Command.RB),
        (Command.RR, Command.RR),
        (Command.RRR, Command.RRR),
    }
)

_MERGES = {
    (Command.SA, Command.SB): Command.SS,
    (Command.SB, Command.SA): Command.SS,
    (Command.RA, Command.RB): Command.RR,
    (Command.RB, Command.RA): Command.RR,
    (Command.RRA, Command.RRB): Command.RRR,
    (Command.RRB, Command.RRA): Command.RRR,
}


def delete_commands(commands: Iterable[Command]) -> list[Command]:
    """Remove adjacent pairs of commands that undo each other, in one pass.

    The first command is never removed.  After a pair is removed the scan
    moves on past the command that followed it, so a single pass may leave
    pairs that a further pass would remove.
    """
    result = list(commands)
    prev = 0
    while prev + 2 < len(result):
        if (result[prev + 1], result[prev + 2]) in _CANCELLING:
            del result[prev + 1 : prev + 3]
        prev += 1
    return result


def _next_different(result: Sequence[Command], start: int) -> int | None:
    current = result[start]
    return next(
        (pos for pos in range(start + 1, len(result)) if result[pos] != current),
        None,
    )


def merge_commands(commands: Iterable[Command]) -> list[Command]:
    """Fold runs of single-stack commands into combined ones, in one pass.

    A run of ``ra`` followed by a run of ``rb`` (or either order of the
    ``sa``/``sb`` and ``rra``/``rrb`` pairs) becomes as many ``rr`` as the
    shorter of the two runs allows.
    """
    result = list(commands)
    first = 0
    while first < len(result):
        second = _next_different(result, first)
        if second is None:
            break
        first_type, second_type = result[first], result[second]
        merged = _MERGES.get((first_type, second_type))
        if merged is None:
            first = second
            continue
        count = 0
        while (
            second + count < len(result)
            and result[first + count] == first_type
            and result[second + count] == second_type
        ):
            result[first + count] = merged
            count += 1
        del result[second : second + count]
        first = second
    return result


def optimise(commands: Iterable[Command]) -> list[Command]:
    """Cancel and then merge commands until neither pass shortens the list."""
    result = list(commands)
    while True:
        reduced = delete_commands(result)
        if len(reduced) == len(result):
            break
        result = reduced
    while True:
        merged = merge_commands(result)
        if len(merged) == len(result):
            break
        result = merged
    return result


def format_commands(commands: Iterable[Command]) -> str:
    """Render commands one per line, each line ending in a newline."""
    return "".join(f"{command}\n" for command in commands)