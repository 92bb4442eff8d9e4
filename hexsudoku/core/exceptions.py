"""Exceptions raised while parsing and solving hexadecimal Sudoku puzzles."""


class SudokuError(Exception):
    """Base class for all hexsudoku errors."""


class Contradiction(SudokuError):
    """A domain emptied out or a value can no longer be placed in a group."""


class NoSolution(SudokuError):
    """The search exhausted every branch without finding a solution."""


class MalformedPuzzle(SudokuError, ValueError):
    """The puzzle template does not decode to a full grid of valid symbols."""


class SearchTimeout(SudokuError):
    """The search ran past its time limit."""
