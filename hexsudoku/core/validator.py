"""Validation utilities for hexadecimal Sudoku puzzles."""

from __future__ import annotations
import numpy as np
from typing import TYPE_CHECKING, Optional

from .domains import POPCOUNT
from .topology import Topology, get_topology

if TYPE_CHECKING:
    from .board import HexBoard


def is_solved_domains(domains: Optional[np.ndarray], topology: Optional[Topology] = None) -> bool:
    """
    Check a domain state for a full, valid assignment.

    Every cell must hold exactly one candidate, and no cell may share its
    value with any of its peers. A failed state (None) is never solved.
    """
    if domains is None:
        return False

    topology = topology or get_topology()
    if domains.shape != (topology.num_cells,):
        return False
    if not np.all(POPCOUNT[domains] == 1):
        return False

    # Singletons clash exactly when a peer carries the same bit
    clashes = domains[:, np.newaxis] & domains[topology.peer_index]
    return not np.any(clashes)


def validate_solution(puzzle: HexBoard, solution: HexBoard) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if solution is valid and keeps every given of the puzzle.
    """
    if puzzle.size != solution.size:
        return False

    for row, col, value in puzzle.givens():
        if solution.get(row, col) != value:
            return False

    return solution.is_solved()
