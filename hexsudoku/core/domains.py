"""Bitmask encoding of candidate-value domains."""

from __future__ import annotations
from typing import List

import numpy as np

from .board import HexBoard, EMPTY, SYMBOLS

DOMAIN_DTYPE = np.uint16

# Number of set bits for every possible 16-bit mask
POPCOUNT = np.array([bin(mask).count("1") for mask in range(1 << 16)], dtype=np.uint8)


def full_mask(size: int) -> int:
    """Mask holding every value 0..size-1."""
    return (1 << size) - 1


def mask_values(mask: int) -> List[int]:
    """Values present in a mask, ascending."""
    mask = int(mask)
    values = []
    value = 0
    while mask:
        if mask & 1:
            values.append(value)
        mask >>= 1
        value += 1
    return values


def is_single(mask: int) -> bool:
    mask = int(mask)
    return mask != 0 and mask & (mask - 1) == 0


def single_value(mask: int) -> int:
    """The only value of a singleton mask."""
    return int(mask).bit_length() - 1


def domain_sizes(domains: np.ndarray) -> np.ndarray:
    """Candidate count per cell."""
    return POPCOUNT[domains]


def domains_from_board(board: HexBoard) -> np.ndarray:
    """
    Starting domains for a board: full masks for blanks, singletons for givens.
    No propagation is done here.
    """
    flat = board.grid.flatten()
    domains = np.full(flat.shape, full_mask(board.size), dtype=DOMAIN_DTYPE)
    filled = flat != EMPTY
    domains[filled] = np.left_shift(1, flat[filled]).astype(DOMAIN_DTYPE)
    return domains


def board_from_domains(domains: np.ndarray, size: int = 16) -> HexBoard:
    """
    Board with the value of every singleton domain filled in.
    Cells with several candidates stay blank.
    """
    board = HexBoard(size)
    for idx, mask in enumerate(domains.tolist()):
        if is_single(mask):
            board.set(idx // size, idx % size, single_value(mask))
    return board


def format_domains(domains: np.ndarray, size: int = 16) -> str:
    """
    Debug dump of every cell's candidates, one grid row per line.
    """
    symbols = SYMBOLS[:size]
    lines = []
    for row in range(size):
        cells = []
        for col in range(size):
            mask = domains[row * size + col]
            cells.append("".join(symbols[v] for v in mask_values(mask)) or "-")
        lines.append(" ".join(cell.ljust(size) for cell in cells))
    return "\n".join(lines)
