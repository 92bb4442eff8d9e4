"""Tests for the command-line interface."""

import pytest
from hexsudoku.cli import main


class TestCLI:
    """Tests for the solve and benchmark commands."""

    def test_solve_inline(self, capsys, diagonal_puzzle, solved_grid):
        main(["solve", "--puzzle", diagonal_puzzle])
        out = capsys.readouterr().out

        assert solved_grid in out
        assert "Is the sudoku solved? True" in out
        assert "Number of backtracks: 0" in out

    def test_solve_from_file(self, capsys, tmp_path, diagonal_puzzle):
        rows = [diagonal_puzzle[i:i + 16] for i in range(0, 256, 16)]
        path = tmp_path / "puzzle.txt"
        path.write_text("\n".join(rows) + "\n")

        main(["solve", "--file", str(path), "--verbose"])
        out = capsys.readouterr().out

        assert "Is the sudoku solved? True" in out
        assert "Memory:" in out

    def test_solve_unsolvable(self, capsys, duplicate_row_puzzle):
        main(["solve", "-p", duplicate_row_puzzle])
        out = capsys.readouterr().out

        assert "The sudoku does not have a solution" in out
        assert "Is the sudoku solved? False" in out

    def test_candidates(self, capsys, empty_puzzle):
        main(["solve", "-p", empty_puzzle, "--candidates", "--time-limit", "0"])
        out = capsys.readouterr().out

        assert "Candidates after initial propagation:" in out
        assert "0123456789ABCDEF" in out

    def test_time_limit_reports_timeout(self, capsys, empty_puzzle):
        main(["solve", "-p", empty_puzzle, "--time-limit", "0"])
        out = capsys.readouterr().out

        assert "Error: Timeout" in out
        assert "Is the sudoku solved? False" in out

    def test_malformed_exits(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["solve", "--puzzle", "." * 255])
        assert exc.value.code == 1
        assert "Error parsing puzzle" in capsys.readouterr().out

    def test_benchmark(self, capsys, tmp_path, solved_grid, diagonal_puzzle):
        path = tmp_path / "all.txt"
        path.write_text(f"{solved_grid}\n{diagonal_puzzle}\n")

        main(["benchmark", str(path), "--no-progress"])
        out = capsys.readouterr().out

        assert "All sudokus solved successfully: True" in out
        assert "Benchmark complete!" in out

    def test_no_command(self):
        with pytest.raises(SystemExit):
            main([])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
