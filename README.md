# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a small
set of instructions, and check whether a sequence of instructions really
sorts a given list.

## The instructions

Index 0 of each stack is its top.

| Instruction | Effect |
|-------------|--------|
| `sa` / `sb` / `ss` | swap the top two elements of `a`, `b`, or both |
| `pa` / `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra` / `rb` / `rr` | rotate `a`, `b`, or both: the top goes to the bottom |
| `rra` / `rrb` / `rrr` | reverse-rotate `a`, `b`, or both: the bottom goes to the top |

An instruction on a stack too short for it does nothing.

## Installing

```
pip install .
```

## Command line

Print the instructions that sort the numbers, one per line:

```
push-swap 3 2 5 1 4
push-swap "3 2 5 1 4"
```

The numbers may be given as separate arguments or as one argument holding
numbers separated by spaces. Each must be a decimal integer with an optional
`+` or `-` sign, within the 32-bit signed range; zero must be written `0`; and
no number may appear twice. Otherwise `Error` is written to standard error and
nothing else is printed. A list that is already sorted, or no arguments at
all, produces no output.

Check a sequence of instructions read from standard input:

```
push-swap 3 2 5 1 4 | push-swap-checker 3 2 5 1 4
```

The checker takes its numbers the same way and prints `OK` if the
instructions leave `a` sorted in ascending order and `b` empty, and `KO`
otherwise. Each instruction must be on its own line ending in a newline;
lines that are not an instruction are ignored. Invalid numbers give `Error`
on standard error, and no arguments give no output.

Both commands can also be started as `python -m pushswap.cli` and
`python -m pushswap.checker`.

## Library

```python
from pushswap.algorithm import sort_operations
from pushswap.checker import check
from pushswap.stacks import Stacks, Operation

ops = sort_operations([3, 2, 5, 1, 4])
print(check([3, 2, 5, 1, 4], [f"{op.value}\n" for op in ops]))  # True

stacks = Stacks([2, 1, 3])
stacks.apply(Operation.SA)
print(stacks.is_sorted())  # True
```

- `pushswap.stacks`: `Operation` (the eleven instructions), `Stacks` with
  `apply()` and `is_sorted()`, and the helper `is_sorted(values)`.
- `pushswap.parsing`: `parse_arguments(args)` turns command-line style
  arguments into a list of integers and raises `ArgumentError` when they are
  invalid; `atoi`, `split_words` and `validate` are the steps it uses.
- `pushswap.algorithm`: `Sorter`, whose `sort()` returns the operations
  performed and whose `calculate_costs()` gives the `Cost` of moving each
  element of `a` onto `b`; `sort_operations(values)` is the shortcut.
- `pushswap.checker`: `parse_instruction`, `run_instructions` and `check`.

## Running the tests

```
pip install ".[test]"
pytest
```