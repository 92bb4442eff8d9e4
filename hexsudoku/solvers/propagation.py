"""Constraint propagation over bitmask domains: assign, eliminate, consistency check."""

from __future__ import annotations
from typing import Optional

import numpy as np

from ..core.board import HexBoard
from ..core.domains import POPCOUNT, domains_from_board, is_single, mask_values, single_value
from ..core.exceptions import Contradiction
from ..core.topology import Topology, get_topology


class ConstraintPropagator:
    """
    Propagation engine for a fixed grid topology.

    A puzzle state is a 1-D numpy array with one 16-bit candidate mask per
    cell. ``assign`` and ``eliminate`` update that array in place and return
    it; failure is signalled by raising Contradiction, after which the array
    contents are meaningless. Callers that need to keep a state copy it first.

    Propagation rules applied on every value removal:

    - a cell reduced to one value removes that value from all its peers
    - a group with no place left for the removed value fails; a group with
      exactly one place left gets the value assigned there
    - a group whose domains together hold fewer distinct values than it has
      cells fails (pigeonhole / AllDifferent check)
    """

    def __init__(self, topology: Optional[Topology] = None):
        self.topology = topology or get_topology()
        self.size = self.topology.size
        self.consistency_failures = 0

        # Plain lists iterate faster than numpy rows in the recursive hot path
        self._peers = self.topology.peer_index.tolist()
        self._groups = self.topology.group_index

    def reset(self) -> None:
        """Reset the consistency-heuristic counter."""
        self.consistency_failures = 0

    def initial_domains(self, board: HexBoard) -> np.ndarray:
        """
        Build the propagated starting state for a board.

        Blank cells start with every value, givens with their own value.
        Each given's value is then eliminated from its peers with the full
        recursive ``eliminate``, so forced cells found on the way propagate too.

        Raises:
            Contradiction: The givens cannot be completed (e.g. a repeated
                value in one row).
        """
        if board.size != self.size:
            raise ValueError(f"Board size {board.size} does not match topology size {self.size}")

        domains = domains_from_board(board)
        for row, col, value in board.givens():
            cell = self.topology.index(row, col)
            for peer in self._peers[cell]:
                self.eliminate(domains, peer, value)
        return domains

    def assign(self, domains: np.ndarray, cell: int, value: int) -> np.ndarray:
        """Fix ``cell`` to ``value`` by eliminating every other candidate."""
        others = int(domains[cell]) & ~(1 << value)
        for other in mask_values(others):
            self.eliminate(domains, cell, other)
        return domains

    def eliminate(self, domains: np.ndarray, cell: int, value: int) -> np.ndarray:
        """
        Remove ``value`` from the domain of ``cell`` and propagate.

        Removing a value that is not a candidate is a no-op.
        """
        bit = 1 << value
        current = int(domains[cell])
        if not current & bit:
            return domains

        remaining = current & ~bit
        if not remaining:
            raise Contradiction(f"No candidates left for cell {self.topology.coords(cell)}")
        domains[cell] = remaining

        if is_single(remaining):
            last = single_value(remaining)
            for peer in self._peers[cell]:
                self.eliminate(domains, peer, last)

        self._place_value(domains, cell, value)
        self.check_consistency(domains, cell)
        return domains

    def _place_value(self, domains: np.ndarray, cell: int, value: int) -> None:
        """
        Find where ``value`` can still go in each group of ``cell``.

        Each group is checked on its own, so a value with a single place left
        in any one group is assigned there. Backtrack counts can differ from a
        check over the union of the three groups, solutions cannot.
        """
        bit = 1 << value
        for group in self._groups[cell]:
            places = group[(domains[group] & bit) != 0]
            if places.size == 0:
                raise Contradiction(
                    f"Value {value:X} has no place left in a group of cell "
                    f"{self.topology.coords(cell)}"
                )
            if places.size == 1:
                self.assign(domains, int(places[0]), value)

    def check_consistency(self, domains: np.ndarray, cell: int) -> None:
        """
        Fail when a group of ``cell`` has fewer distinct candidates than cells.

        Raises:
            Contradiction: The AllDifferent constraint of some group can no
                longer be satisfied.
        """
        blocks = domains[self._groups[cell]]
        distinct = POPCOUNT[np.bitwise_or.reduce(blocks, axis=1)]
        if np.any(distinct < blocks.shape[1]):
            self.consistency_failures += 1
            raise Contradiction(
                f"A group of cell {self.topology.coords(cell)} has fewer "
                f"candidates than cells"
            )

    def count_in_peers(self, domains: np.ndarray, cell: int, value: int) -> int:
        """How many peers of ``cell`` still hold ``value`` as a candidate."""
        peer_masks = domains[self.topology.peer_index[cell]]
        return int(np.count_nonzero(peer_masks & (1 << value)))
