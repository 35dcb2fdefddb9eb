"""Solvers for algorithmic puzzles: dynamic programming, sequence structures and graph search."""

__version__ = "1.0.0"