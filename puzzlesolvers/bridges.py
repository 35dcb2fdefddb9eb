"""Find the fewest bridges to cross to get from a starting cell onto land."""

from __future__ import annotations

import argparse
from collections import deque
from pathlib import Path

# Directions each kind of bridge leads in, as (row, column) steps.
_MOVES = {
    "D": ((-1, 0), (1, 0), (0, -1), (0, 1)),
    "O": ((0, 1), (0, -1)),
    "V": ((1, 0), (-1, 0)),
}


def _validate(grid):
    rows = [str(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("the grid must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all grid rows must have the same length")
    return rows, len(rows), width


def min_bridges(grid, start):
    """Return the number of bridges crossed on the shortest way to land.

    ``grid`` holds rows of cells: ``D`` leads in all four directions, ``O``
    left and right, ``V`` up and down; anything else leads nowhere.
    ``start`` is a 1-based ``(row, column)``. Land lies beyond the board's
    edge and is reached from an edge cell whose bridge points off the board;
    the starting cell itself never counts as such an exit. Returns ``None``
    when land cannot be reached.
    """
    rows, height, width = _validate(grid)
    x, y = start

    def inside(row, col):
        return 1 <= row <= height and 1 <= col <= width

    def cell(row, col):
        return rows[row - 1][col - 1]

    def leads_off_board(row, col):
        kind = cell(row, col)
        vertical = kind in ("V", "D")
        horizontal = kind in ("O", "D")
        return (
            (row in (1, height) and vertical)
            or (col in (1, width) and horizontal)
        )

    if not inside(x, y):
        raise ValueError(f"start {start} lies outside the grid")

    distance = {(x, y): 0}
    queue = deque([(x, y)])
    while queue:
        row, col = queue.popleft()
        for dx, dy in _MOVES.get(cell(row, col), ()):
            nxt = (row + dx, col + dy)
            if not inside(*nxt) or nxt in distance:
                continue
            steps = distance[(row, col)] + 1
            if leads_off_board(*nxt):
                return steps + 1
            distance[nxt] = steps
            queue.append(nxt)
    return None


def parse_input(text):
    """Parse ``n m``, the start ``x y`` and ``n`` rows of ``m`` cells."""
    tokens = text.split()
    if len(tokens) < 4:
        raise ValueError("expected the grid size and the start position")
    try:
        height, width, x, y = (int(token) for token in tokens[:4])
    except ValueError as exc:
        raise ValueError(f"malformed input: {exc}") from exc
    if height <= 0 or width <= 0:
        raise ValueError("grid dimensions must be positive")
    cells = "".join(tokens[4:])
    if len(cells) < height * width:
        raise ValueError(f"expected {height * width} grid cells")
    grid = [cells[row * width : (row + 1) * width] for row in range(height)]
    return grid, (x, y)


def main(argv=None):
    """Read the puzzle from a file and write the answer to another."""
    parser = argparse.ArgumentParser(prog="bridges", description=min_bridges.__doc__)
    parser.add_argument("input", nargs="?", default="poduri.in", type=Path)
    parser.add_argument("output", nargs="?", default="poduri.out", type=Path)
    args = parser.parse_args(argv)
    grid, start = parse_input(args.input.read_text())
    result = min_bridges(grid, start)
    args.output.write_text(str(-1 if result is None else result))
    return 0