# pushswap

`pushswap` sorts a list of distinct integers using two stacks, `a` and `b`, and a small
fixed set of operations. It prints the operations that sort the numbers, one per line.

## Operations

The sorter emits these operations:

| Operation | Effect |
|-----------|--------|
| `sa` | swap the top two elements of stack `a` |
| `pa`, `pb` | push the top of one stack onto the other (`pa` moves from `b` to `a`, `pb` from `a` to `b`) |
| `ra`, `rb` | rotate a stack up: the top element becomes the bottom one |
| `rra`, `rrb` | rotate a stack down: the bottom element becomes the top one |

All numbers start on stack `a`, with the first argument on top. When the operations have
been applied, stack `a` holds every number in ascending order and `b` is empty.

## Installation

```
pip install .
```

## Command line

```
push_swap 3 2 1 5 4
```

The same entry point can be run as `python -m pushswap.cli 3 2 1 5 4`.

Each argument must be an optional `+` or `-` sign followed by at least one digit and
nothing else. Its magnitude may not exceed 2147483647, so the accepted range is
-2147483647 to 2147483647. Arguments may not repeat a value (`5`, `+5` and `005` count
as the same value).

- On invalid input, `Error` is written to standard error and the exit status is 255.
- With fewer than two numbers, or numbers already in ascending order, nothing is
  printed and the exit status is 255.
- With two to five numbers, the operations are printed and the exit status is 255.
- With more than five numbers, the operations are printed and the exit status is 0.

## Library use

```python
from pushswap.algorithm import Sorter, sort_operations
from pushswap.stacks import Stack

ops = sort_operations([3, 2, 1, 5, 4])
print("\n".join(ops))

sorter = Sorter([4, 1, 3, 2, 6, 5])
sorter.run()
print(list(sorter.stack_a))  # [1, 2, 3, 4, 5, 6]
```

- `pushswap.algorithm`: `sort_operations(values)` and the `Sorter` class, which keeps
  `stack_a`, `stack_b` and the list of `operations`. Inputs of up to five values use
  fixed sequences; larger inputs push each element of `a` onto `b` at the cheapest
  point and then move everything back. The helpers `find_target`, `distance_to_top`
  and `cheapest_move` (which returns a `Move` of value, target and cost) are public.
  `Sorter` raises `ValueError` for repeated values.
- `pushswap.stacks`: `Stack`, iterated from top to bottom, with `top`, `rotate`,
  `reverse_rotate`, `swap`, `push_to` and `position`. Operations on an empty stack
  raise `EmptyStackError`.
- `pushswap.validation`: `fits_int`, `validate_arguments`, `parse_arguments` and
  `is_sorted`; invalid arguments raise `InputError` (a `ValueError`).
- `pushswap.cli`: `main(argv=None)`, the command above, returning the exit status.

### Helpers

The package also carries small general-purpose helpers:

- `pushswap.chars`: ASCII classification (`is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii`, `is_print`), `to_upper`, `to_lower`, and `atoi`/`itoa`. `atoi` reads a
  leading integer like C's `atoi`, truncating to 32 bits.
- `pushswap.strings`: C-style string functions (`strlen`, `strchr`, `strrchr`,
  `strncmp`, `strnstr`, `strlcpy`, `strlcat`, `substr`, `strjoin`, `strtrim`, `split`,
  `strmapi`, `striteri`) that return indices or `None` and new strings.
- `pushswap.memory`: byte-buffer functions (`memset`, `bzero`, `calloc`, `memcpy`,
  `memmove`, `memchr`, `memcmp`) over `bytes` and `bytearray`.
- `pushswap.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`, and a small
  `printf`/`format_printf` supporting `%c %s %d %i %p %u %x %X %%`.
- `pushswap.linked_list`: `LinkedList` of `Node`s with `add_front`, `add_back`, `last`,
  `clear`, `for_each` and `map`.
- `pushswap.lines`: `LineReader` and `read_lines`, which read text or binary streams
  line by line through a fixed-size buffer, keeping newlines.

## What it does not do

There is no checker command: the package does not read a list of operations and verify
that they sort a given input. The sorter never emits `sb`, `ss`, `rr` or `rrr`.

## Tests

```
pip install .[test]
pytest
```