# puzzlesolvers

A small collection of solvers for algorithmic puzzles, usable both as a
Python library and from the command line. It has no dependencies beyond
the standard library.

## What is inside

Dynamic programming and greedy puzzles:

- `puzzlesolvers.crypto` – `max_power(computers, budget)`: the highest
  power every one of a set of `Computer`s (power, upgrade cost) can be
  raised to while spending at most `budget`.
- `puzzlesolvers.stocks` – `max_profit(stocks, budget, max_loss)`: the best
  profit from a selection of `Stock`s (current, lowest and highest price)
  whose total price fits the budget and whose total possible loss fits the
  loss limit.
- `puzzlesolvers.valley` – `min_excavation(heights)`: the least digging
  needed to turn a row of heights into a valley.
- `puzzlesolvers.ridge` – `min_ridge_cost(mountains)`: the cheapest way to
  lower `Mountain`s (height, cost per unit) so that no two neighbours have
  the same height.
- `puzzlesolvers.trigigel` – `count_subsequences(n)`: a linear recurrence
  evaluated by matrix exponentiation, modulo `MOD` (1 000 000 007).

Sequence structures with the same interface (`insert`, `delete`, `lookup`,
`set`, `size`, `split`, `concat`):

- `puzzlesolvers.avl_sequence.AVLSequence` – backed by an AVL tree keyed on
  position. `size()` is one more than the highest occupied position,
  `to_list()` fills unoccupied positions with 0, and `preorder()` lists the
  tree's positions in preorder. Inserting at an occupied position leaves it
  unchanged; `delete` shifts later items back by one.
- `puzzlesolvers.array_sequence.ArraySequence` – backed by a plain list.
  Inserting past the end appends; `render()` joins the items with spaces.

Both raise `IndexError` for positions that hold no item, and `split(index)`
returns two new sequences: the items up to and including `index`, and the
rest.

Graph puzzles:

- `puzzlesolvers.bridges` – `min_bridges(grid, start)`: breadth-first search
  over a grid of bridges (`D` in all directions, `O` left/right, `V`
  up/down) from a 1-based `(row, column)` start, returning the fewest
  crossings to land beyond the board's edge, or `None` when land cannot be
  reached.
- `puzzlesolvers.addresses` – `merge_identities(people)`: merges
  `(name, emails)` records that share an address into `Identity` records,
  ordered by number of addresses and then by name; `format_identities`
  renders them as text.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

```python
from puzzlesolvers.trigigel import count_subsequences
from puzzlesolvers.valley import min_excavation

count_subsequences(3)          # 6
count_subsequences(5)          # 16
min_excavation([3, 5, 1, 4])   # 2
```

```python
from puzzlesolvers.avl_sequence import AVLSequence

seq = AVLSequence([10, 212, 99, 54])

seq.lookup(2)      # 99
seq.set(100, 2)
seq.lookup(2)      # 100
seq.size()         # 4
seq.to_list()      # [10, 212, 100, 54]
```

Each puzzle module also has a `parse_input(text)` function that reads the
puzzle's plain-text input format and raises `ValueError` on malformed input.

## Command line

Each puzzle has a command taking two optional arguments, an input file and
an output file. By default it reads a file named after the puzzle in the
current directory and writes the answer next to it:

```
puzzlesolvers-crypto       # crypto.in   -> crypto.out
puzzlesolvers-stocks       # stocks.in   -> stocks.out
puzzlesolvers-valley       # valley.in   -> valley.out
puzzlesolvers-ridge        # ridge.in    -> ridge.out
puzzlesolvers-trigigel     # trigigel.in -> trigigel.out
puzzlesolvers-bridges      # poduri.in   -> poduri.out
puzzlesolvers-addresses    # adrese.in   -> adrese.out
```

For example, `puzzlesolvers-valley my.in my.out`. The bridges command writes
`-1` when land cannot be reached.

Two demonstration commands exercise the sequence structures and print the
results of a fixed series of operations:

```
puzzlesolvers-avl-demo
puzzlesolvers-array-demo
```