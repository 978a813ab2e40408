"""Solvers for tree, greedy and modular-counting contest problems, with commands."""

__version__ = "0.1.0"