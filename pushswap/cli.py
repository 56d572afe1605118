"""Command that prints the operations sorting the numbers given as arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.algorithm import solve
from pushswap.parsing import InputError, parse_numbers


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; print ``Error`` to stderr on bad input."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        numbers = parse_numbers(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    for operation in solve(numbers):
        sys.stdout.write(f"{operation}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())