"""Solvers module for hexadecimal Sudoku puzzles."""

from .base_solver import BaseSolver, SolverStats
from .propagation import ConstraintPropagator
from .search_solver import SearchSolver

__all__ = [
    "BaseSolver",
    "SolverStats",
    "ConstraintPropagator",
    "SearchSolver",
]
