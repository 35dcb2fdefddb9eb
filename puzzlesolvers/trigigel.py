"""Count the subsequences of the trigigel sequence, modulo a large prime."""

from __future__ import annotations

import argparse
from pathlib import Path

MOD = 1_000_000_007

# dp[i] = dp[i-1] + dp[i-3] + 3, state (dp[i], dp[i-1], dp[i-2], 3)
_STEP = (
    (1, 0, 1, 1),
    (1, 0, 0, 0),
    (0, 1, 0, 0),
    (0, 0, 0, 1),
)
_BASE_STATE = (10, 6, 3, 3)
_BASE_INDEX = 4


def _multiply(left, right):
    columns = list(zip(*right))
    return tuple(
        tuple(sum(a * b for a, b in zip(row, column)) % MOD for column in columns)
        for row in left
    )


def _power(matrix, exponent):
    size = len(matrix)
    result = tuple(tuple(int(i == j) for j in range(size)) for i in range(size))
    while exponent:
        if exponent & 1:
            result = _multiply(result, matrix)
        matrix = _multiply(matrix, matrix)
        exponent >>= 1
    return result


def count_subsequences(n):
    """Return the number of valid subsequences of length ``n``, modulo ``MOD``."""
    if n < 0:
        raise ValueError("length must not be negative")
    if n <= _BASE_INDEX:
        return n * (n + 1) // 2
    first_row = _power(_STEP, n - _BASE_INDEX)[0]
    return sum(s * c for s, c in zip(_BASE_STATE, first_row)) % MOD


def main(argv=None):
    """Read the length from a file and write the count to another."""
    parser = argparse.ArgumentParser(prog="trigigel", description=count_subsequences.__doc__)
    parser.add_argument("input", nargs="?", default="trigigel.in", type=Path)
    parser.add_argument("output", nargs="?", default="trigigel.out", type=Path)
    args = parser.parse_args(argv)
    tokens = args.input.read_text().split()
    if not tokens:
        raise ValueError("expected the sequence length")
    try:
        n = int(tokens[0])
    except ValueError as exc:
        raise ValueError(f"malformed input: {exc}") from exc
    args.output.write_text(str(count_subsequences(n)))
    return 0