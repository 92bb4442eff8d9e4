"""Hexadecimal (16x16) Sudoku solver: constraint propagation plus backtracking search."""

__version__ = "1.0.0"
