"""Unit tests for the hexadecimal board and validation."""

import pytest
import numpy as np
from hexsudoku.core.board import HexBoard, EMPTY, clean_template
from hexsudoku.core.exceptions import MalformedPuzzle
from hexsudoku.core.validator import validate_solution


class TestHexBoard:
    """Tests for HexBoard class."""

    def test_create_empty_board(self):
        """Test creating an empty 16x16 board."""
        board = HexBoard()
        assert board.size == 16
        assert board.box_size == 4
        assert board.count_empty() == 256
        assert board.count_filled() == 0

    def test_zero_is_a_value(self):
        """0 is a legal value, blanks are EMPTY."""
        board = HexBoard()
        board.set(0, 0, 0)
        assert board.get(0, 0) == 0
        assert not board.is_empty(0, 0)

        board.clear(0, 0)
        assert board.is_empty(0, 0)
        assert board.get(0, 0) == EMPTY

    def test_set_rejects_out_of_range(self):
        board = HexBoard()
        with pytest.raises(ValueError):
            board.set(0, 0, 16)

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            HexBoard(size=12)
        with pytest.raises(ValueError):
            HexBoard(size=25)

    def test_from_string(self, solved_grid):
        """Letters map to 10-15."""
        board = HexBoard.from_string(solved_grid)
        assert board.get(0, 0) == 0
        assert board.get(0, 10) == 10
        assert board.get(0, 15) == 15
        assert board.get(15, 0) == 15
        assert board.is_complete()

    def test_from_string_lowercase(self, solved_grid):
        """Symbols are case-insensitive."""
        assert HexBoard.from_string(solved_grid.lower()) == HexBoard.from_string(solved_grid)

    def test_both_blank_markers(self, demo_puzzle):
        """'-' and '.' both mean blank."""
        dashed = demo_puzzle.replace(".", "-")
        assert HexBoard.from_string(dashed) == HexBoard.from_string(demo_puzzle)

    def test_whitespace_is_stripped(self, demo_puzzle):
        """Newlines, tabs and spaces between rows are ignored."""
        rows = [demo_puzzle[i:i + 16] for i in range(0, 256, 16)]
        laid_out = "\n".join("\t" + " ".join(row[j:j + 4] for j in range(0, 16, 4)) for row in rows)
        laid_out = laid_out + "\r\n"

        assert HexBoard.from_string(laid_out) == HexBoard.from_string(demo_puzzle)

    def test_control_characters_are_stripped(self, demo_puzzle):
        """Non-printable characters between symbols are ignored."""
        noisy = "\x00" + demo_puzzle[:128] + "\x0b\x1b" + demo_puzzle[128:] + "\x7f"

        assert HexBoard.from_string(noisy) == HexBoard.from_string(demo_puzzle)

    @pytest.mark.parametrize("length", [255, 257, 0])
    def test_wrong_length_is_malformed(self, length):
        with pytest.raises(MalformedPuzzle):
            HexBoard.from_string("." * length)

    def test_unknown_symbol_is_malformed(self):
        with pytest.raises(MalformedPuzzle):
            HexBoard.from_string("G" + "." * 255)

    def test_malformed_is_value_error(self):
        with pytest.raises(ValueError):
            HexBoard.from_string("." * 255)

    def test_to_string(self, demo_puzzle, solved_grid):
        """Blanks come back as '.'."""
        assert HexBoard.from_string(demo_puzzle).to_string() == demo_puzzle
        assert HexBoard.from_string(solved_grid).to_string() == solved_grid
        assert HexBoard().to_string() == "." * 256

    def test_clean_template(self):
        assert clean_template(" a-\tb.\n") == "A.B."

    def test_is_valid(self):
        """Test board validation."""
        board = HexBoard()
        assert board.is_valid()

        board.set(0, 0, 0xA)
        board.set(0, 9, 0xA)
        assert not board.is_valid()

    def test_box_duplicate_is_invalid(self):
        board = HexBoard()
        board.set(0, 0, 3)
        board.set(3, 3, 3)
        assert not board.is_valid()

    def test_is_solved(self, solved_grid, diagonal_puzzle):
        assert HexBoard.from_string(solved_grid).is_solved()
        assert not HexBoard.from_string(diagonal_puzzle).is_solved()

    def test_givens(self):
        board = HexBoard()
        board.set(2, 3, 0xF)
        board.set(0, 1, 0)
        assert board.givens() == [(0, 1, 0), (2, 3, 15)]

    def test_copy(self):
        """Modify copy, original should be unchanged."""
        board = HexBoard()
        board.set(4, 4, 7)
        copy = board.copy()
        copy.set(4, 4, 8)
        assert board.get(4, 4) == 7

    def test_pretty_print(self, demo_puzzle):
        text = str(HexBoard.from_string(demo_puzzle))
        lines = text.splitlines()
        assert len(lines) == 16 + 5
        assert lines[1].startswith("| . E 8 F |")

    def test_smaller_board(self):
        """9x9 boards use symbols 0-8."""
        board = HexBoard.from_string("0" + "." * 80, size=9)
        assert board.get(0, 0) == 0
        with pytest.raises(MalformedPuzzle):
            HexBoard.from_string("9" + "." * 80, size=9)


class TestValidator:
    """Tests for validation utilities."""

    def test_validate_solution(self, diagonal_puzzle, solved_grid):
        puzzle = HexBoard.from_string(diagonal_puzzle)
        solution = HexBoard.from_string(solved_grid)
        assert validate_solution(puzzle, solution)

    def test_validate_solution_rejects_changed_given(self, solved_grid):
        puzzle = HexBoard.from_string("1" + "." * 255)
        solution = HexBoard.from_string(solved_grid)
        assert not validate_solution(puzzle, solution)

    def test_validate_solution_rejects_incomplete(self, diagonal_puzzle):
        puzzle = HexBoard.from_string(diagonal_puzzle)
        assert not validate_solution(puzzle, puzzle.copy())


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
