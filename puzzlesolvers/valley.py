"""Dig the fewest units of earth to turn a row of heights into a valley."""

from __future__ import annotations

import argparse
from pathlib import Path


def _excavate(heights):
    """Cost of making ``heights`` non-increasing by only lowering them."""
    if not heights:
        return 0
    lowest = heights[0]
    dug = 0
    for height in heights[1:]:
        if height > lowest:
            dug += height - lowest
        else:
            lowest = height
    return dug


def min_excavation(heights):
    """Return the amount to dig so the heights fall to a minimum and rise after it."""
    heights = list(heights)
    count = len(heights)
    if count < 2:
        raise ValueError("a valley needs at least two heights")
    pos = heights.index(min(heights))

    if count == 3:
        first, middle, last = heights
        if middle > last and last < first:
            return middle - last
        if middle > first and middle < last:
            return middle - first

    dug = _excavate(heights[:pos]) + _excavate(heights[pos + 1 :][::-1])

    if dug == 0 and pos == 0:
        return heights[1] - heights[0]
    if dug == 0 and pos == count - 1:
        return heights[-2] - heights[-1]
    return dug


def parse_input(text):
    """Parse ``n`` followed by ``n`` heights."""
    try:
        numbers = [int(token) for token in text.split()]
    except ValueError as exc:
        raise ValueError(f"malformed input: {exc}") from exc
    if not numbers:
        raise ValueError("expected the number of heights")
    count = numbers[0]
    heights = numbers[1 : 1 + count]
    if count < 0 or len(heights) < count:
        raise ValueError(f"expected {count} heights")
    return heights


def main(argv=None):
    """Read the puzzle from a file and write the answer to another."""
    parser = argparse.ArgumentParser(prog="valley", description=min_excavation.__doc__)
    parser.add_argument("input", nargs="?", default="valley.in", type=Path)
    parser.add_argument("output", nargs="?", default="valley.out", type=Path)
    args = parser.parse_args(argv)
    heights = parse_input(args.input.read_text())
    args.output.write_text(str(min_excavation(heights)))
    return 0