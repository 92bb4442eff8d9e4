"""Static unit/peer topology of a Sudoku grid."""

from __future__ import annotations
from functools import lru_cache
from typing import List, Tuple

import numpy as np

Cell = Tuple[int, int]

GROUPS_PER_CELL = 3


class Topology:
    """
    Precomputed groups and peers for every cell of a square grid.

    Each cell belongs to three groups (its row, its column and its box, in
    that order). Its peers are the other cells sharing at least one of those
    groups, deduplicated. A 16x16 grid with 4x4 boxes gives 39 peers per cell.

    Besides the coordinate lists, two flat-index numpy tables are kept for
    the propagation engine:

    - ``group_index``: shape ``(num_cells, 3, size)``
    - ``peer_index``: shape ``(num_cells, num_peers)``
    """

    def __init__(self, size: int = 16, box_size: int = 4):
        """
        Build the topology tables.

        Args:
            size: Side length of the grid.
            box_size: Side length of a box. Must satisfy box_size**2 == size.
        """
        if box_size * box_size != size:
            raise ValueError(f"Box size {box_size} does not tile a {size}x{size} grid")

        self.size = size
        self.box_size = box_size
        self.num_cells = size * size

        self._groups: List[List[List[Cell]]] = []
        self._peers: List[List[Cell]] = []

        for row in range(size):
            for col in range(size):
                groups = [
                    self._row_cells(row),
                    self._col_cells(col),
                    self._box_cells(row, col),
                ]
                # Ordered dedupe: row peers first, then column, then box
                peers = dict.fromkeys(
                    cell for group in groups for cell in group if cell != (row, col)
                )
                self._groups.append(groups)
                self._peers.append(list(peers))

        self.num_peers = len(self._peers[0])

        self.group_index = np.array(
            [[[self.index(r, c) for r, c in group] for group in groups]
             for groups in self._groups],
            dtype=np.intp,
        )
        self.peer_index = np.array(
            [[self.index(r, c) for r, c in peers] for peers in self._peers],
            dtype=np.intp,
        )

    def _row_cells(self, row: int) -> List[Cell]:
        return [(row, c) for c in range(self.size)]

    def _col_cells(self, col: int) -> List[Cell]:
        return [(r, col) for r in range(self.size)]

    def _box_cells(self, row: int, col: int) -> List[Cell]:
        box_row = (row // self.box_size) * self.box_size
        box_col = (col // self.box_size) * self.box_size
        return [(box_row + i, box_col + j)
                for i in range(self.box_size)
                for j in range(self.box_size)]

    def index(self, row: int, col: int) -> int:
        """Flat row-major index of (row, col)."""
        return row * self.size + col

    def coords(self, index: int) -> Cell:
        """Inverse of :meth:`index`."""
        return divmod(int(index), self.size)

    def box_index(self, row: int, col: int) -> int:
        """Get the box index (0 to size-1) for a cell."""
        return (row // self.box_size) * self.box_size + (col // self.box_size)

    def groups_of(self, row: int, col: int) -> List[List[Cell]]:
        """The row, column and box groups containing (row, col)."""
        return self._groups[self.index(row, col)]

    def peers_of(self, row: int, col: int) -> List[Cell]:
        """All distinct cells sharing a group with (row, col), excluding it."""
        return self._peers[self.index(row, col)]

    def all_groups(self) -> List[List[Cell]]:
        """Every row, column and box of the grid, each listed once."""
        rows = [self._row_cells(r) for r in range(self.size)]
        cols = [self._col_cells(c) for c in range(self.size)]
        boxes = [self._box_cells(r, c)
                 for r in range(0, self.size, self.box_size)
                 for c in range(0, self.size, self.box_size)]
        return rows + cols + boxes

    def __repr__(self) -> str:
        return f"Topology(size={self.size}, box_size={self.box_size}, peers={self.num_peers})"


def get_topology(size: int = 16, box_size: int = 4) -> Topology:
    """Shared read-only topology for a grid shape."""
    return _build_topology(int(size), int(box_size))


@lru_cache(maxsize=None)
def _build_topology(size: int, box_size: int) -> Topology:
    return Topology(size, box_size)
