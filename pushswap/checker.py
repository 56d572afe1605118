"""Command that checks whether a list of operations sorts the given numbers.

The numbers come from the arguments and the operations from standard
input, one per line. ``OK`` is printed when they leave ``a`` sorted and
``b`` empty, ``KO`` otherwise, and ``Error`` on standard error when the
arguments or an instruction are invalid.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

from pushswap.parsing import InputError, parse_numbers
from pushswap.stacks import Operation, Stacks


def _to_operation(instruction: Operation | str) -> Operation:
    try:
        return Operation(instruction)
    except ValueError:
        raise InputError() from None


def read_instructions(stream: Iterable[str]) -> Iterator[Operation]:
    """Yield the operations read line by line from ``stream``.

    Only the line break ending a line is removed; any other difference from
    an operation name, an empty line included, raises :class:`InputError`.
    """
    for line in stream:
        yield _to_operation(line.split("\n", 1)[0])


def check(numbers: Iterable[int], instructions: Iterable[Operation | str]) -> bool:
    """Apply ``instructions`` to ``numbers`` on stack ``a``; True if that sorts them.

    An unknown instruction raises :class:`InputError`. Operations whose
    stacks are too short do nothing.
    """
    stacks = Stacks(a=list(numbers))
    for instruction in instructions:
        stacks.apply(_to_operation(instruction))
    return stacks.is_solved()


def main(argv: Sequence[str] | None = None) -> int:
    """Read operations from standard input and print ``OK`` or ``KO``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        numbers = parse_numbers(args)
        solved = check(numbers, read_instructions(_stdin()))
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    sys.stdout.write("OK\n" if solved else "KO\n")
    return 0


def _stdin() -> TextIO:
    return sys.stdin


if __name__ == "__main__":
    raise SystemExit(main())