"""Maximise the mining power of a pool of computers within an upgrade budget."""

from __future__ import annotations

import argparse
import heapq
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Computer:
    """A computer with its power and the cost of raising that power by one."""

    power: int
    upgrade_cost: int


def max_power(computers, budget):
    """Return the highest power every computer can reach spending at most ``budget``.

    Computers are merged from the weakest upwards: the weakest one is raised to
    the level of the next one, after which both advance together at the sum of
    their upgrade costs.
    """
    heap = [(c.power, c.upgrade_cost) for c in computers]
    if not heap:
        raise ValueError("at least one computer is required")
    heapq.heapify(heap)

    while budget > 0 and len(heap) >= 2:
        low_power, low_cost = heapq.heappop(heap)
        next_power, next_cost = heapq.heappop(heap)
        combined_cost = low_cost + next_cost
        if next_power > low_power:
            cost = (next_power - low_power) * low_cost
            if budget < cost:
                return low_power + budget // low_cost
            budget -= cost
            heapq.heappush(heap, (next_power, combined_cost))
        else:
            heapq.heappush(heap, (low_power, combined_cost))

    power, cost = heap[0]
    return power + budget // cost


def _integers(text):
    try:
        return [int(token) for token in text.split()]
    except ValueError as exc:
        raise ValueError(f"malformed input: {exc}") from exc


def parse_input(text):
    """Parse ``n budget`` followed by ``n`` pairs of power and upgrade cost."""
    numbers = _integers(text)
    if len(numbers) < 2:
        raise ValueError("expected the number of computers and the budget")
    count, budget = numbers[0], numbers[1]
    values = numbers[2 : 2 + 2 * count]
    if count < 0 or len(values) < 2 * count:
        raise ValueError(f"expected {count} computers")
    computers = [Computer(p, c) for p, c in zip(values[::2], values[1::2])]
    return computers, budget


def main(argv=None):
    """Read the puzzle from a file and write the answer to another."""
    parser = argparse.ArgumentParser(prog="crypto", description=max_power.__doc__)
    parser.add_argument("input", nargs="?", default="crypto.in", type=Path)
    parser.add_argument("output", nargs="?", default="crypto.out", type=Path)
    args = parser.parse_args(argv)
    computers, budget = parse_input(args.input.read_text())
    args.output.write_text(str(max_power(computers, budget)))
    return 0