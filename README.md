# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
small set of moves, and reports the moves it used.

| move  | effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the two top elements of `a`                |
| `sb`  | swap the two top elements of `b`                |
| `ss`  | `sa` and `sb` together                          |
| `pa`  | move the top of `b` onto `a`                    |
| `pb`  | move the top of `a` onto `b`                    |
| `ra`  | rotate `a` up (the top becomes the bottom)      |
| `rb`  | rotate `b` up                                   |
| `rr`  | `ra` and `rb` together                          |
| `rra` | rotate `a` down (the bottom becomes the top)    |
| `rrb` | rotate `b` down                                 |
| `rrr` | `rra` and `rrb` together                        |

A move that changes nothing is not recorded. The double moves `ss`, `rr`
and `rrr` act on both stacks but are recorded only when both stacks changed.

## Installation

```
pip install .
```

## Command line

```
push-swap 3 2 1
push-swap "5 4 3 2 1"
```

Numbers can be given as separate arguments or together in one
space-separated argument; the first number is the top of stack `a`.
The command prints one move per line. Applied in order, the moves leave
`a` holding the numbers in ascending order from the top and `b` empty.
A single number, or numbers already in order, give no output.

The command writes `Error` to standard error and exits with status 1 when:

- no arguments are given, or no argument contains a digit;
- a word is not digits with at most one leading `+` or `-`;
- a value's magnitude exceeds 2147483647, or a word is longer than
  11 characters;
- a value appears more than once.

The same entry point can be run as `python -m pushswap.cli`.

## Library use

```python
from pushswap.cli import solve
from pushswap.sort import sort_stacks
from pushswap.stack import Stacks

solve(["3", "1", "2"])          # list of move names

stacks = Stacks([3, 1, 2])      # ranks are assigned on creation
sort_stacks(stacks)
stacks.operations               # moves made, in order
[e.number for e in stacks.a]    # [1, 2, 3]
```

- `pushswap.stack.Stacks` holds the two stacks as deques of `Element`
  (`number`, `index` rank, `median` flag). Each move is a method (`sa`,
  `pb`, `rra`, ...) returning whether it changed anything. It also has
  `is_sorted`, `find_min`, `find_max`, `assign_indices` and `set_median`.
- `pushswap.sort` provides `sort_three`, `sort_four_or_five`,
  `butterfly`, `gen_chunk` and `sort_stacks`, which picks a strategy by
  the size of `a`: three or fewer, four or five, or more. The larger case
  spreads `a` onto `b` in rank windows of width `gen_chunk(size)`, then
  repeatedly brings the largest rank of `b` to its top by the shorter
  rotation and pushes it to `a`.
- `pushswap.parser.parse_numbers` turns arguments into integers and
  raises `pushswap.parser.ParseError` on bad input; `check_arguments`,
  `is_number_format` and `split_words` expose the individual checks.

## Helpers

`pushswap.kml` holds small general helpers:

- `chars`: ASCII classification (`is_alpha`, `is_digit`, ...), case
  conversion, `atoi` with 32-bit wrap-around and `itoa`.
- `memory`: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`,
  `memmove` on bytes and bytearrays.
- `text`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strdup`,
  `substr`, `strjoin`, `strtrim`, `strlcpy`, `strlcat`, `strmapi`,
  `striteri`.
- `split`: `split`, `fsplit`, `fjoin`, `strjoin_nl`, `argstr`.
- `linked_list`: `Node` and `LinkedList`.
- `output`: `format_printf`/`printf` (`%c %s %p %d %i %u %x %X %%`),
  `put_char`, `put_str`, `put_endl`, `put_nbr`.
- `lines`: `LineReader`, which yields a stream's lines through a
  fixed-size read buffer.

## Limits

There is no checker command: the package does not read a list of moves
and verify that they sort a given input. `Stacks` can be driven by hand
to do that in code.

## Tests

```
pip install .[test]
pytest
```