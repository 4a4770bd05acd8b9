# weiss

Worked exercises on data structures and the analysis of algorithms.
The package holds small, self-contained implementations: simple
collections, linked lists, stacks and deques, expression checking,
evaluation and conversion, classic algorithms such as halving GCD and
bisection, an `#include` expander, and helpers for timing functions
across growing inputs. It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library overview

| Module | Contents |
| --- | --- |
| `weiss.collection` | `Collection`, `OrderedCollection` |
| `weiss.algorithms` | `count_binary_one`, `selection`, `find_match`, `gcd`, `solve`, `EPSILON` |
| `weiss.include` | `IncludeType`, `IncludeInfo`, `IncludeError`, `get_include_info`, `find_standard_library_path`, `find_path`, `read_file` |
| `weiss.measure` | `measure_one_case`, `measure_all_case`, `time_to_string`, `performance_measure`, `uniform_random_sequence` |
| `weiss.permutation` | `UniformDist`, `permutation_by_value`, `permutation_with_flags`, `shuffle_permutation` |
| `weiss.linked_list` | `List`, `Position`, `UniqueList` |
| `weiss.sorted_lists` | `print_lots`, `find`, `get_intersection`, `get_union`, `josephus`, `reverse_print` |
| `weiss.stacks` | `MinStack`, `MultiStack`, `Deque`, `SelfAdjustingList` |
| `weiss.expressions` | `Language`, `is_balanced`, `calc_postfix`, `Symbol` and its kinds, `symbol_factory`, `infix_to_postfix` |
| `weiss.benchmarks` | `loop0` to `loop5`, `sum1`, `sum2`, `run_min_stack` and the timing commands below |

Some behaviour worth knowing:

- `selection(values, k)` returns the `k`-th largest element, or `None`
  when there are fewer than `k` values.
- `find_match(values)` looks in a sorted sequence for an element equal to
  its 1-based position.
- `solve(func, low, high)` bisects until `abs(func(x)) < EPSILON`,
  assuming `func(low) < 0 < func(high)`, and raises `ArithmeticError` if
  the interval cannot shrink further.
- `List` is a doubly linked list with sentinels; `begin()` and `end()`
  return `Position` objects that move with `next()`, `prev()`, `+ n` and
  `- n`, and expose the element as `value`. `splice` moves a whole list in
  before a position and leaves the other list empty.
- `UniqueList.insert` refuses elements already present and returns
  whether it added one.
- `MinStack`, `Deque` and the `MultiStack` stacks raise `IndexError` when
  read while empty. `MultiStack` shares a fixed array of 10000 slots and
  `SelfAdjustingList` holds at most 1000 elements; both raise
  `OverflowError` when full. `SelfAdjustingList.find` moves a found
  element to the front.
- `calc_postfix` raises `ValueError` for malformed expressions, and
  divides with truncation toward zero.

## Examples

```python
from weiss.algorithms import gcd, selection, count_binary_one
from weiss.expressions import calc_postfix, infix_to_postfix, is_balanced, Language
from weiss.sorted_lists import get_union, josephus
from weiss.stacks import MinStack

gcd(63, 49)                          # 7
selection([3, 1, 2, 4], 2)           # 3, the second largest
count_binary_one(1023)               # 10

calc_postfix("1 2 + 4 * 2 / 1 -")    # 5
infix_to_postfix("( 1 + 2 ) * 3")    # "1 2 + 3 * "
is_balanced("begin ( [ { } ] ) end", Language.PASCAL)  # True
is_balanced("/* [ ( [ ] ) */", Language.CPP)           # False

get_union([0, 2, 5, 9], [1, 2, 3, 9])  # [0, 1, 2, 3, 5, 9]
josephus(1, 5)                         # 3

stack = MinStack()
stack.push(1)
stack.push(2)
stack.top()       # 2
stack.find_min()  # 1
```

Timing a set of functions over several argument tuples prints one block per
function, each line showing the elapsed time in s, ms, us or ns and its
ratio to the fastest case; the raw nanosecond timings are returned:

```python
from weiss.measure import performance_measure
from weiss.benchmarks import loop0, loop1

timings = performance_measure([loop0, loop1], [(10,), (100,), (1000,)])
```

## Commands

```
weiss-count-ones 1023        # counts the ones in the binary form of a number
weiss-include path/to/file   # prints a source file with its #include lines expanded
weiss-permutation            # times three ways of building a random permutation
weiss-loop                   # times nested loops of differing complexity
weiss-selection-time         # times selection on growing random inputs
weiss-josephus               # times the Josephus elimination
weiss-min-stack              # times pushes, queries and pops on a MinStack
weiss-two-lists              # times print_lots on sorted random lists
```

`weiss-loop`, `weiss-selection-time`, `weiss-josephus`, `weiss-min-stack`
and `weiss-two-lists` accept input sizes as arguments in place of their
built-in defaults.

## Limitations

`weiss-include` resolves `"..."` includes next to the including file, but
looks for `<...>` headers only under the fixed directory
`/opt/gcc-15/include/c++/15.1.0`; it does not search other include paths,
and fails with `IncludeError` when a header is not there. From Python,
`read_file` and `find_path` take another directory through `stl_dir`.
The timing commands measure wall-clock time of single runs and do no
repetition or statistics.