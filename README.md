# dsakit

A small collection of classic data structures and algorithms in plain Python,
with no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

### `dsakit.containers`

Stacks and queues of integers, each with `push`, `pop` (which returns the
removed value), `empty` and `len()`; stacks have `top`, queues have `peek`.

- `ArrayStack(capacity=100)`: a stack with a fixed capacity. Pushing onto a
  full stack raises `OverflowError`.
- `ArrayQueue(capacity=100)`: a queue whose slots are never reused, so the
  capacity limits the total number of pushes over its lifetime. Going over it
  raises `OverflowError`.
- `LinkedQueue`: a queue of singly linked nodes.
- `TwoStackQueue`: a queue on stacks that reorders on every push.
- `RecursiveStackQueue`: a queue on one stack that reaches the front by
  recursion when popping (no `peek`).
- `PushCostlyStack` and `PopCostlyStack`: stacks on two queues, reordering on
  push or on pop respectively.

Popping, peeking at or reading the top of an empty container raises
`IndexError`.

### `dsakit.linked_list`

A singly linked `Node(val, next)`, with helpers:

- `from_values(values)` builds a list and returns its head (`None` if empty);
  `to_list(head)` returns the values.
- `move_to_front(head, start, end)` and `move_to_back(head, start, end)` move
  the 1-based positions `start..end` to the front or back and return the new
  head. An `end` beyond the list runs to the last node; a `start` outside the
  list (or, for `move_to_front`, a segment that already begins the list)
  leaves it unchanged.
- `end_difference(head)` gives the absolute difference between the first and
  last values, and raises `ValueError` on an empty list.

### `dsakit.oops`

- `Complex(real, imaginary)`: integer complex number with in-place `add` and
  `multiply`; `str()` gives `"3 + 4i"`.
- `Student(age=None, roll_no=None)`: a simple record.

### `dsakit.arrays`

`single_unpaired`, `has_triplet_sum`, `max_consecutive_ones`,
`previous_smaller`, `next_smaller`, `max_histogram_area`,
`max_histogram_area_by_bounds`, `sliding_window_max`, `stock_span` and
`trapped_water`.

A few behave in particular ways:

- `single_unpaired` XORs all values and returns `None` when the result is 0.
- `next_smaller` uses `len(values)` where no smaller value follows;
  `previous_smaller` uses `-1`.
- `sliding_window_max(values, k)` requires `1 <= k <= len(values)`; after the
  first window, each result covers `values[i - k : i + 1]`.
- `trapped_water` never counts the first bar as a wall.

### `dsakit.sorting`

- `merge_sort(values)`: returns a new, stably sorted list.
- `quick_sort(values)`: returns a new list, partitioned around the first
  value. Distinct values come back sorted; lists with repeated values may not.

### `dsakit.expressions`

- `is_balanced(expression)`: brackets `()`, `{}`, `[]` matched in order; any
  other character counts as an unmatched closing bracket.
- `has_redundant_parentheses(expression)`: true when a pair of parentheses
  encloses no `+ - * /`.
- `precedence(operator)`, `infix_to_postfix(expression)`,
  `infix_to_prefix(expression)`: conversion treating `+ - * /` as operators.
- `evaluate_prefix(expression)`: evaluates prefix expressions of single-digit
  operands with `+ - * / ^`; division truncates toward zero. Raises
  `ValueError` on bad characters or missing operands.
- `reverse_words(sentence)`: space-separated words in reverse order.
- `insert_at_bottom(items, value)` and `reverse_stack(items)`: operate in
  place on a list used as a stack, whose top is the end.

### `dsakit.recursion`

- `subsets(values)` and `subsets_with_first(values)`: all subsets, in two
  different orders.
- `subsets_with_sum(values, target)`: subsets adding up to `target`.
- `hanoi_moves(disks, source="s", auxiliary="a", destination="d")`: the moves
  as `(from, to)` pairs.
- `keypad_words(number)` and `keypad_words_grouped(number)`: letter strings a
  number spells on a phone keypad; digits 0 and 1 raise `ValueError`.
- `subsequences(text)` and `subsequences_with_first(text)`: all
  subsequences, in two different orders.

## Examples

```python
from dsakit.containers import TwoStackQueue
from dsakit.arrays import stock_span, trapped_water
from dsakit.expressions import infix_to_postfix, is_balanced
from dsakit.sorting import merge_sort

queue = TwoStackQueue()
for value in (1, 2, 3):
    queue.push(value)
queue.pop()
print(queue.peek())                    # 2

print(stock_span([100, 80, 60, 70, 60, 75, 85]))   # [1, 1, 1, 2, 1, 4, 6]
print(trapped_water([4, 2, 0, 3, 2, 5]))           # 3
print(infix_to_postfix("a+b*c"))       # abc*+
print(is_balanced("{[()]}"))           # True
print(merge_sort([1, 2, 3, 4, 2, 2, 2, 1, 2, 4]))
```

## What it does not do

dsakit is a library only: it has no command-line program and reads nothing
from standard input. Call its functions and classes from your own code.