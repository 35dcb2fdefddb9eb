"""Choose stocks for the highest expected profit under a budget and a loss limit."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Stock:
    """A stock with its current price and its lowest and highest future prices."""

    current: int
    min_value: int
    max_value: int

    @property
    def loss(self):
        """The worst loss buying this stock can bring."""
        return self.current - self.min_value

    @property
    def profit(self):
        """The best profit buying this stock can bring."""
        return self.max_value - self.current


def max_profit(stocks, budget, max_loss):
    """Return the best total profit of a subset costing at most ``budget``
    whose total possible loss is at most ``max_loss``."""
    if budget < 0 or max_loss < 0:
        raise ValueError("budget and loss limit must not be negative")
    for stock in stocks:
        if stock.current < 0 or stock.loss < 0:
            raise ValueError(f"invalid stock {stock}")

    table = [[0] * (max_loss + 1) for _ in range(budget + 1)]
    for stock in stocks:
        previous = table
        table = [row[:] for row in previous]
        for spent in range(stock.current, budget + 1):
            source = previous[spent - stock.current]
            target = table[spent]
            for lost in range(stock.loss, max_loss + 1):
                candidate = source[lost - stock.loss] + stock.profit
                if candidate > target[lost]:
                    target[lost] = candidate
    return table[budget][max_loss]


def _integers(text):
    try:
        return [int(token) for token in text.split()]
    except ValueError as exc:
        raise ValueError(f"malformed input: {exc}") from exc


def parse_input(text):
    """Parse ``n budget max_loss`` followed by ``n`` price triples."""
    numbers = _integers(text)
    if len(numbers) < 3:
        raise ValueError("expected the number of stocks, the budget and the loss limit")
    count, budget, max_loss = numbers[:3]
    values = numbers[3 : 3 + 3 * count]
    if count < 0 or len(values) < 3 * count:
        raise ValueError(f"expected {count} stocks")
    stocks = [Stock(*values[i : i + 3]) for i in range(0, len(values), 3)]
    return stocks, budget, max_loss


def main(argv=None):
    """Read the puzzle from a file and write the answer to another."""
    parser = argparse.ArgumentParser(prog="stocks", description=max_profit.__doc__)
    parser.add_argument("input", nargs="?", default="stocks.in", type=Path)
    parser.add_argument("output", nargs="?", default="stocks.out", type=Path)
    args = parser.parse_args(argv)
    stocks, budget, max_loss = parse_input(args.input.read_text())
    args.output.write_text(str(max_profit(stocks, budget, max_loss)))
    return 0