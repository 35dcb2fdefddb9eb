"""Lower mountains as cheaply as possible so that neighbours differ in height."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass
from pathlib import Path

# Two digs per mountain always suffice to differ from both neighbours.
_MAX_DIGS = 3


@dataclass(frozen=True)
class Mountain:
    """A mountain with its height and the cost of lowering it by one."""

    height: int
    cost: int


def min_ridge_cost(mountains):
    """Return the least cost that leaves every two adjacent mountains distinct."""
    if not mountains:
        raise ValueError("at least one mountain is required")
    first, *rest = mountains
    costs = [digs * first.cost for digs in range(_MAX_DIGS)]
    previous = first.height

    for mountain in rest:
        row = []
        for digs in range(_MAX_DIGS):
            height = mountain.height - digs
            if height < 0:
                row.append(math.inf)
                continue
            best = min(
                (cost for prev_digs, cost in enumerate(costs) if height != previous - prev_digs),
                default=math.inf,
            )
            row.append(digs * mountain.cost + best)
        costs = row
        previous = mountain.height

    result = min(costs)
    if result == math.inf:
        raise ValueError("no arrangement makes the ridge distinct")
    return int(result)


def parse_input(text):
    """Parse ``n`` followed by ``n`` pairs of height and cost."""
    try:
        numbers = [int(token) for token in text.split()]
    except ValueError as exc:
        raise ValueError(f"malformed input: {exc}") from exc
    if not numbers:
        raise ValueError("expected the number of mountains")
    count = numbers[0]
    values = numbers[1 : 1 + 2 * count]
    if count < 0 or len(values) < 2 * count:
        raise ValueError(f"expected {count} mountains")
    return [Mountain(h, c) for h, c in zip(values[::2], values[1::2])]


def main(argv=None):
    """Read the puzzle from a file and write the answer to another."""
    parser = argparse.ArgumentParser(prog="ridge", description=min_ridge_cost.__doc__)
    parser.add_argument("input", nargs="?", default="ridge.in", type=Path)
    parser.add_argument("output", nargs="?", default="ridge.out", type=Path)
    args = parser.parse_args(argv)
    mountains = parse_input(args.input.read_text())
    args.output.write_text(str(min_ridge_cost(mountains)))
    return 0