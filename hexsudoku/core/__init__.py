"""Core module for board representation, topology and validation."""

from .board import HexBoard, SYMBOLS, EMPTY
from .exceptions import SudokuError, Contradiction, NoSolution, MalformedPuzzle, SearchTimeout
from .topology import Topology, get_topology
from .validator import is_solved_domains, validate_solution

__all__ = [
    "HexBoard",
    "SYMBOLS",
    "EMPTY",
    "SudokuError",
    "Contradiction",
    "NoSolution",
    "MalformedPuzzle",
    "SearchTimeout",
    "Topology",
    "get_topology",
    "is_solved_domains",
    "validate_solution",
]
