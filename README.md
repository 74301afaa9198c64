# algodojo

A collection of classic algorithm exercises written as plain Python functions
and small classes, with no dependencies beyond the standard library.

## Install

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## What is inside

### `algodojo.linked_list`

A singly linked list is its head `Node` (with `value` and `next`), or `None`
when empty. Iterating over a `Node` yields the values from it onwards.
Functions that restructure a list return the new head.

- `from_iterable(values)`, `to_list(head)` – build a list and read it back.
- `reverse(head)` – reverse in place.
- `is_palindrome(head)` – whether the values read the same both ways.
- `remove_nth_from_end(head, n)` – remove the n-th node from the end
  (1 is the last); an `n` longer than the list leaves it unchanged, and
  `n < 1` raises `ValueError`.
- `add_lists(head1, head2)` – add two numbers stored as digit lists with the
  least significant digit first; the sum comes back most significant first.
- `link_tail(head, position)` – point the last node at the node at a
  one-based position (0 does nothing, a position outside the list raises
  `IndexError`); `has_cycle(head)` detects such a cycle.
- `delete_head(head)`, `delete_at_end(head)`.
- `insert_at(head, index, value)`, `delete_at(head, index)` – zero-based;
  an index past the end leaves the list unchanged, a negative one raises
  `IndexError`.
- `find_middle(head)` – the middle node, the second of the two for an even
  length.
- `move_even_positions_reversed(head)` – keep the nodes at odd positions in
  order, then append those at even positions in reverse.
- `contains(head, item)`.

### `algodojo.arrays`

- `surviving_asteroids(asteroids)` – the asteroids left after collisions.
- `min_eating_speed(piles, h)` – the slowest speed that eats all piles in
  `h` hours (`ValueError` for no piles).
- `largest_rectangle_area(heights)` – largest rectangle in a histogram.
- `max_value(n, index, max_sum)` – the largest value at `index` of `n`
  positive integers whose neighbours differ by at most one and whose total
  stays within `max_sum`.
- `remove_k_digits(num, k)` – the smallest number left after removing `k`
  digits.
- `sum_of_subarray_minimums(arr)`, `trapped_water(height)`.
- `max_overlap(starts, ends)` – the most closed intervals sharing a point;
  the two sequences must be the same length.
- `kth_smallest(values, k)` – counted from 1 (`ValueError` out of range).
- `merge_sort(values)`, `quick_sort(values)` – return new sorted lists.

### `algodojo.containers`

- `BoundedQueue(capacity=100)` – FIFO with `enqueue` and `dequeue`. Each
  enqueue uses a slot, and slots are only handed back once the queue is
  drained, so it is full after `capacity` enqueues since it was last empty.
  A full queue raises `OverflowError`, an empty one `IndexError`.
- `BoundedStack(capacity=100000)` – `push`, `pop` and `top`, raising
  `OverflowError` when full and `IndexError` when empty.
- `MinStack` – `push`, `pop` and `minimum` in constant time.

### `algodojo.tictactoe`

A two-player game on a `Board` whose cells are named by two digits, row then
column, each 1 to 3 (`11` is top-left, `33` bottom-right). `Board` offers
`is_valid`, `place`, `has_won` and `render`; `rules_text()` returns the
opening text, and `play(moves, out)` runs a game from a sequence of moves,
writing the dialogue to `out` and returning the winner, or `None` for a draw
or when the moves run out.

## Examples

```python
import io

from algodojo.linked_list import from_iterable, reverse, to_list
from algodojo.arrays import trapped_water
from algodojo.containers import MinStack
from algodojo.tictactoe import play

to_list(reverse(from_iterable([1, 2, 3])))           # [3, 2, 1]
trapped_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])  # 6

stack = MinStack()
for item in (5, 3, 7):
    stack.push(item)
stack.minimum()                                      # 3

play([11, 21, 12, 22, 13], io.StringIO())            # "X"
```

## Playing tic-tac-toe

    algodojo-tictactoe

The command prints the rules and an empty board, then reads moves from
standard input. X moves first; an invalid or taken cell asks again, and the
game ends when a player has three in a row or the board is full.

## What it does not do

The package covers linked lists, array problems, the three containers and
the game above. It has no tree structures, no conversion between expression
notations and no backtracking searches, and apart from the game it offers no
command-line interface.