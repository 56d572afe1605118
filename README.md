# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a fixed
set of operations. The operations are printed one per line. A checker reads
such a list of operations and reports whether it really sorts the input.

## Operations

| Name  | Effect                                                 |
|-------|--------------------------------------------------------|
| `sa`  | swap the first two elements of `a`                     |
| `sb`  | swap the first two elements of `b`                     |
| `ss`  | `sa` and `sb` together                                 |
| `pa`  | move the top of `b` onto `a`                           |
| `pb`  | move the top of `a` onto `b`                           |
| `ra`  | rotate `a` up, so the first element becomes the last   |
| `rb`  | rotate `b` up                                          |
| `rr`  | `ra` and `rb` together                                 |
| `rra` | rotate `a` down, so the last element becomes the first |
| `rrb` | rotate `b` down                                        |
| `rrr` | `rra` and `rrb` together                               |

An operation on a stack that is too short does nothing: swaps and rotations
need two elements, pushes need one. The double operations `ss`, `rr` and `rrr`
only act when both stacks hold at least two elements.

## Installation

```
pip install .
```

## Sorting

Numbers can be given as separate arguments, or several can share one argument
with spaces between them:

```
push_swap 3 2 1
push_swap "4 67 3" 87 23
```

Each operation is printed on its own line. If the input is already sorted,
nothing is printed. With no arguments, nothing happens.

Input is rejected with `Error` on standard error when an argument is empty or
made only of spaces, holds anything other than spaces and integers with an
optional `+` or `-` sign, has a number with more than eleven significant
digits, has a number outside the 32-bit signed range, or repeats a number.

## Checking

`checker` takes the same arguments and reads operations from standard input,
one per line:

```
push_swap 3 2 1 | checker 3 2 1
```

It prints `OK` if the operations leave `a` sorted and `b` empty, and `KO`
otherwise. Invalid arguments, an unknown operation or an empty line give
`Error` on standard error.

## Library use

```python
from pushswap.algorithm import solve
from pushswap.checker import check

ops = solve([5, 1, 4, 2, 3])
assert check([5, 1, 4, 2, 3], ops)
```

- `pushswap.stacks.Stacks` holds the two stacks; `apply` performs an
  `Operation` (or its name), records it in `history` and returns whether
  anything changed. `is_solved` tells whether `a` is sorted and `b` empty.
- `pushswap.algorithm.solve` returns the list of operations that sorts the
  numbers; `sort_stacks` sorts a `Stacks` in place.
- `pushswap.parsing.parse_numbers` validates command-line style arguments and
  raises `pushswap.parsing.InputError` on bad input.
- `pushswap.checker.check` applies instructions to numbers and reports whether
  they end sorted; `read_instructions` turns lines of text into operations.

## Tests

```
pip install ".[test]"
pytest
```