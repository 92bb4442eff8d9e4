"""Backtracking search over propagated domains with MRV and LCV heuristics."""

from __future__ import annotations
import sys
import time
from typing import Optional, List

import numpy as np

from .base_solver import BaseSolver
from .propagation import ConstraintPropagator
from ..core.board import HexBoard
from ..core.domains import board_from_domains, domain_sizes, mask_values
from ..core.exceptions import Contradiction, SearchTimeout
from ..core.topology import Topology, get_topology
from ..core.validator import is_solved_domains

# Propagation chains on a 256-cell grid nest far deeper than the default limit
RECURSION_LIMIT = 20000


def _ensure_recursion_limit(limit: int = RECURSION_LIMIT) -> int:
    """Raise the recursion limit to at least ``limit``, returning the old one."""
    previous = sys.getrecursionlimit()
    if previous < limit:
        sys.setrecursionlimit(limit)
    return previous


class SearchSolver(BaseSolver):
    """
    Depth-first backtracking solver driven by constraint propagation.

    Features:
    - Recursive assign/eliminate propagation with hidden-single placement
    - Pigeonhole consistency check on every group touched by an elimination
    - Most Restrained Variable: branch on the cell with fewest candidates
    - Least Constraining Value: try the value held by fewest peers first
    - Copy-on-branch: every candidate is tried on its own copy of the state
    """

    name = "Backtracking+CP+MRV+LCV"

    def __init__(
        self,
        track_memory: bool = True,
        time_limit: Optional[float] = None,
        topology: Optional[Topology] = None,
    ):
        """
        Initialize the solver.

        Args:
            track_memory: Record peak memory with tracemalloc.
            time_limit: Seconds the search may run before giving up. None
                        means no limit.
            topology: Grid topology, 16x16 with 4x4 boxes by default.
        """
        super().__init__(track_memory=track_memory)
        self.time_limit = time_limit
        self.topology = topology or get_topology()
        self.propagator = ConstraintPropagator(self.topology)
        self._deadline: Optional[float] = None

    def _solve(self, board: HexBoard) -> Optional[HexBoard]:
        """Propagate the givens, then search."""
        self.stats.iterations = 0
        self.stats.backtracks = 0
        self.stats.nodes_explored = 0
        self.propagator.reset()

        previous_limit = _ensure_recursion_limit()
        if self.time_limit is not None:
            self._deadline = time.perf_counter() + self.time_limit
        else:
            self._deadline = None

        try:
            domains = self.propagator.initial_domains(board)
            result = self._search(domains)
        finally:
            self.stats.consistency_failures = self.propagator.consistency_failures
            sys.setrecursionlimit(previous_limit)

        if not is_solved_domains(result, self.topology):
            return None
        return board_from_domains(result, board.size)

    def _search(self, domains: np.ndarray) -> Optional[np.ndarray]:
        """
        Recursive search step.

        Returns:
            A fully assigned domain array, or None if this state has no
            solution.
        """
        self.stats.iterations += 1

        sizes = domain_sizes(domains)
        if not sizes.all():
            return None

        cell = self._select_most_restrained(sizes)
        if cell is None:
            return domains

        self.stats.nodes_explored += 1

        for value in self._order_values(domains, cell):
            self._check_deadline()

            attempt = domains.copy()
            try:
                self.propagator.assign(attempt, cell, value)
            except Contradiction:
                self.stats.backtracks += 1
                continue

            result = self._search(attempt)
            if result is not None:
                return result
            self.stats.backtracks += 1

        return None

    def _select_most_restrained(self, sizes: np.ndarray) -> Optional[int]:
        """
        Cell with the smallest domain larger than one, first in row-major
        order on ties. None when every cell is fixed.
        """
        open_cells = np.flatnonzero(sizes > 1)
        if open_cells.size == 0:
            return None
        return int(open_cells[np.argmin(sizes[open_cells])])

    def _order_values(self, domains: np.ndarray, cell: int) -> List[int]:
        """
        Candidates of ``cell`` ordered by how many peers still allow them,
        fewest first, ties by value.
        """
        candidates = mask_values(domains[cell])
        return sorted(
            candidates,
            key=lambda value: (self.propagator.count_in_peers(domains, cell, value), value),
        )

    def _check_deadline(self) -> None:
        if self._deadline is not None and time.perf_counter() > self._deadline:
            raise SearchTimeout(f"Search exceeded {self.time_limit:.2f}s")
