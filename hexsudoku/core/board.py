"""Hexadecimal Sudoku board representation."""

from __future__ import annotations
import numpy as np
from typing import List, Tuple, Optional

from .exceptions import MalformedPuzzle

SYMBOLS = "0123456789ABCDEF"
BLANKS = ".-"
EMPTY = -1


def clean_template(template: str) -> str:
    """
    Normalize a puzzle template before decoding.

    Whitespace and control characters are dropped, letters are uppercased
    and the alternative blank marker '-' becomes '.'.
    """
    chars = [ch for ch in template if not ch.isspace() and ch.isprintable()]
    cleaned = "".join(chars).upper()
    for blank in BLANKS[1:]:
        cleaned = cleaned.replace(blank, BLANKS[0])
    return cleaned


class HexBoard:
    """
    A Sudoku board whose cell values are written as hexadecimal digits.

    The standard board is 16x16 with 4x4 boxes and values 0-F. Smaller
    square sizes (4, 9) use a prefix of the same alphabet. Empty cells hold
    EMPTY (-1) since 0 is a legal value.
    """

    def __init__(self, size: int = 16, grid: Optional[np.ndarray] = None):
        """
        Initialize a board.

        Args:
            size: Board size (4, 9 or 16). Must be a perfect square.
            grid: Optional initial grid of values, EMPTY for blanks.
        """
        box_size = int(np.sqrt(size))
        if box_size * box_size != size:
            raise ValueError(f"Size must be a perfect square, got {size}")
        if size > len(SYMBOLS):
            raise ValueError(f"Size must be at most {len(SYMBOLS)}, got {size}")

        self.size = size
        self.box_size = box_size
        self.symbols = SYMBOLS[:size]

        if grid is not None:
            if grid.shape != (size, size):
                raise ValueError(f"Grid shape must be ({size}, {size})")
            self.grid = grid.copy().astype(np.int32)
        else:
            self.grid = np.full((size, size), EMPTY, dtype=np.int32)

    def copy(self) -> HexBoard:
        """Create a deep copy of the board."""
        return HexBoard(self.size, self.grid)

    def get(self, row: int, col: int) -> int:
        """Get value at (row, col). EMPTY means blank."""
        return int(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at (row, col). Use EMPTY to clear."""
        if value < EMPTY or value >= self.size:
            raise ValueError(f"Value must be {EMPTY}-{self.size - 1}, got {value}")
        self.grid[row, col] = value

    def clear(self, row: int, col: int) -> None:
        self.grid[row, col] = EMPTY

    def is_empty(self, row: int, col: int) -> bool:
        return self.grid[row, col] == EMPTY

    def get_row(self, row: int) -> np.ndarray:
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        return self.grid[:, col]

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the box containing (row, col)."""
        box_row = (row // self.box_size) * self.box_size
        box_col = (col // self.box_size) * self.box_size
        return self.grid[box_row:box_row + self.box_size,
                         box_col:box_col + self.box_size].flatten()

    def givens(self) -> List[Tuple[int, int, int]]:
        """List of (row, col, value) for every filled cell, row-major."""
        rows, cols = np.nonzero(self.grid != EMPTY)
        return [(int(r), int(c), int(self.grid[r, c])) for r, c in zip(rows, cols)]

    def count_empty(self) -> int:
        return int(np.sum(self.grid == EMPTY))

    def count_filled(self) -> int:
        return int(np.sum(self.grid != EMPTY))

    def is_complete(self) -> bool:
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """
        Check that no row, column or box repeats a value.
        Does not check completeness.
        """
        units = [self.get_row(i) for i in range(self.size)]
        units += [self.get_col(j) for j in range(self.size)]
        units += [self.get_box(r, c)
                  for r in range(0, self.size, self.box_size)
                  for c in range(0, self.size, self.box_size)]

        for unit in units:
            filled = unit[unit != EMPTY]
            if len(filled) != len(set(filled.tolist())):
                return False
        return True

    def is_solved(self) -> bool:
        """Check if the puzzle is completely and correctly solved."""
        return self.is_complete() and self.is_valid()

    def to_string(self) -> str:
        """
        Row-major string of the board, '.' for blanks.
        """
        return "".join(
            "." if val == EMPTY else self.symbols[val]
            for val in self.grid.flatten().tolist()
        )

    @classmethod
    def from_string(cls, s: str, size: int = 16) -> HexBoard:
        """
        Create a board from a puzzle template.

        Args:
            s: Template of size*size symbols. Values are 0-9/A-F in either
               case, '.' or '-' mark blanks. Whitespace is ignored.
            size: Board size.

        Raises:
            MalformedPuzzle: Wrong symbol count or an unknown symbol.
        """
        template = clean_template(s)
        if len(template) != size * size:
            raise MalformedPuzzle(
                f"Template must have {size * size} symbols, got {len(template)}"
            )

        symbols = SYMBOLS[:size]
        grid = np.full((size, size), EMPTY, dtype=np.int32)
        for idx, ch in enumerate(template):
            if ch == ".":
                continue
            value = symbols.find(ch)
            if value < 0:
                raise MalformedPuzzle(f"Unknown symbol {ch!r} at position {idx}")
            grid[idx // size, idx % size] = value

        return cls(size, grid)

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = '+' + (('-' * (self.box_size * 2 + 1)) + '+') * self.box_size

        for i in range(self.size):
            if i % self.box_size == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(self.size):
                val = self.grid[i, j]
                row_str += ' .' if val == EMPTY else f' {self.symbols[val]}'
                if (j + 1) % self.box_size == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"HexBoard(size={self.size}, filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HexBoard):
            return False
        return self.size == other.size and np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())
