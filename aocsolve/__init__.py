"""Solvers for daily programming puzzles, one module per day (day01 to day09, day11)."""

__version__ = "0.1.0"