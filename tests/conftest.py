"""Shared puzzle fixtures."""

import pytest

# Valid complete grid: value(r, c) = (4 * (r % 4) + r // 4 + c) % 16
SOLVED_GRID = (
    "0123456789ABCDEF"
    "456789ABCDEF0123"
    "89ABCDEF01234567"
    "CDEF0123456789AB"
    "123456789ABCDEF0"
    "56789ABCDEF01234"
    "9ABCDEF012345678"
    "DEF0123456789ABC"
    "23456789ABCDEF01"
    "6789ABCDEF012345"
    "ABCDEF0123456789"
    "EF0123456789ABCD"
    "3456789ABCDEF012"
    "789ABCDEF0123456"
    "BCDEF0123456789A"
    "F0123456789ABCDE"
)

# 123 givens, needs search
DEMO_PUZZLE = (
    ".E8F..39724BD5.6"
    "7C9.....D.A...E0"
    "..B...E...601.C."
    ".0.6F.......7..."
    "....0F6...94BD.."
    "...C..9.8..20.5A"
    "8....A.4.7..31.."
    "92..8..E3.5....4"
    "A.736CF82B..E.0D"
    "B61493..E..82..C"
    "C8..A..D4..56.1."
    ".9.....06.F.8..5"
    "F...EB0..42.A6.8"
    "E..1.5A.B.8D90.F"
    "...8.9.F.6...EB1"
    "..D..681..E....."
)


def blank_cells(grid: str, predicate) -> str:
    """Replace every cell whose (row, col) satisfies predicate with '.'."""
    return "".join(
        "." if predicate(i // 16, i % 16) else ch
        for i, ch in enumerate(grid)
    )


@pytest.fixture
def solved_grid():
    return SOLVED_GRID


@pytest.fixture
def demo_puzzle():
    return DEMO_PUZZLE


@pytest.fixture
def diagonal_puzzle():
    """Solved grid with the main diagonal blanked; propagation alone solves it."""
    return blank_cells(SOLVED_GRID, lambda r, c: r == c)


@pytest.fixture
def duplicate_row_puzzle():
    """Two '0' givens in the first row, everything else blank."""
    return "00" + "." * 254


@pytest.fixture
def empty_puzzle():
    return "." * 256
