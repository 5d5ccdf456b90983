# pushswap

This package sorts a list of distinct integers using two stacks, `a` and `b`,
and a small fixed set of instructions. It provides two tools:

* a **sorter** that prints a short instruction sequence that sorts its
  arguments;
* a **checker** that reads instructions from standard input, applies them to
  its arguments, and reports whether the result is sorted.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Instructions

| Instruction | Effect |
|-------------|--------|
| `sa` / `sb` / `ss` | swap the top two elements of `a`, of `b`, or of both |
| `pa` / `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra` / `rb` / `rr` | rotate `a`, `b`, or both up by one (the top goes to the bottom) |
| `rra` / `rrb` / `rrr` | rotate `a`, `b`, or both down by one (the bottom goes to the top) |

The first argument is the top of stack `a`. The goal is for `a` to hold every
number in ascending order from top to bottom, with `b` empty.

## Command line

To print a sorting sequence:

```
$ push-swap 2 1 3
sa
```

To check a sequence:

```
$ push-swap 3 2 1 5 4 | pushswap-checker 3 2 1 5 4
OK
```

Each tool can also be run as `python -m pushswap.sorter` or
`python -m pushswap.checker`.

### Sorter (`push-swap`)

Each argument must be a decimal integer that fits in 32 bits. One leading
`+` or `-` is allowed. An empty argument counts as `0`. If the arguments are
already in order, the sorter prints nothing.

* If an argument is malformed or out of range, the sorter prints `Error` and
  exits with status 1.
* If a value appears twice, it prints `Error` and exits with status 0.

### Checker (`pushswap-checker`)

Each argument must be a non-empty decimal integer that fits in 32 bits. Only
a leading `-` is allowed. The checker reads one instruction per line from
standard input and skips blank lines. It then prints `OK` if stack `a` is
sorted and `b` is empty, or `KO` otherwise.

It prints `Error` in three cases:

* an argument is invalid;
* a value appears twice;
* an instruction is unknown.

The checker always exits with status 0.

With no arguments, neither tool prints anything.

## Library use

```python
from pushswap.sorter import solve
from pushswap.checker import check
from pushswap.commands import format_commands

commands = solve([5, 4, 3, 2, 1])
print(format_commands(commands), end="")
print(check([5, 4, 3, 2, 1], [c.value for c in commands]))  # True
```

### Main entry points

* `pushswap.sorter.solve(values)` returns the optimised list of `Command`
  values that sorts `values`, given top first. It raises
  `pushswap.analysis.DuplicateError` if a value repeats.
* `pushswap.checker.check(values, instructions)` applies instruction names
  such as `"rra"` and returns whether the result is sorted. It raises
  `pushswap.checker.InvalidInstruction` on an unknown name.
  `CheckerState` holds the two stacks and provides `apply` and `is_sorted`.
  `read_instructions(stream)` reads the non-blank lines of a text stream.

### Supporting modules

* `pushswap.parsing`: `parse_int`, `parse_sorter_arguments`,
  `parse_checker_arguments` and `InputError`, a `ValueError` subclass. The
  other error types derive from `InputError`.
* `pushswap.commands`:
  * the `Command` enum, whose values are the instruction names;
  * `delete_commands`, which removes adjacent pairs that undo each other;
  * `merge_commands`, which folds runs such as `ra`/`rb` into `rr`;
  * `optimise`, which repeats both passes until the list stops shrinking;
  * `format_commands`, which renders the list one instruction per line.
* `pushswap.stacks`: `Node` and `Stacks`, the two-stack model. `Stacks` has
  one method per instruction and records each command it applies. The module
  also provides `stack_min` and `stack_max`.
* `pushswap.analysis`: `analyse`, which computes compressed coordinates,
  marks an increasing subsequence and returns an `Analysis`. It also provides
  `get_median` and `get_first_quartile`, the pivots used when splitting stack
  `a`.
* `pushswap.sorter`: besides `solve` and `main`, it provides `sort_few` for
  up to five elements, `sort_many` for larger inputs, and
  `distance_from_top` and `distance_from_bottom`.