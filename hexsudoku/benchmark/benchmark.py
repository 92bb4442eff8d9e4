"""Batch benchmarking of the solver over many puzzle strings."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional, Iterable

from tqdm import tqdm

from ..core.board import HexBoard
from ..core.exceptions import MalformedPuzzle
from ..solvers import BaseSolver, SearchSolver


@dataclass
class BenchmarkResult:
    """Results from a single puzzle run."""
    puzzle_id: int
    puzzle: str
    solution: Optional[str]
    solved: bool
    time_seconds: float
    memory_bytes: int
    backtracks: int
    consistency_failures: int
    nodes_explored: int
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle_id": self.puzzle_id,
            "puzzle": self.puzzle,
            "solution": self.solution,
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            "backtracks": self.backtracks,
            "consistency_failures": self.consistency_failures,
            "nodes_explored": self.nodes_explored,
            **self.extra
        }


class Benchmark:
    """
    Runs a solver over a list of puzzle templates and aggregates its counters.

    Malformed templates are recorded as unsolved results instead of aborting
    the run.
    """

    def __init__(
        self,
        puzzles: Iterable[str],
        solver: Optional[BaseSolver] = None,
        timeout_seconds: Optional[float] = 60.0,
    ):
        """
        Initialize the benchmark.

        Args:
            puzzles: Puzzle templates, one per puzzle.
            solver: Solver instance (default: SearchSolver without memory
                    tracking).
            timeout_seconds: Maximum search time per puzzle, None for no
                             limit. Only applied to the default solver.
        """
        self.puzzles = list(puzzles)
        self.timeout_seconds = timeout_seconds
        if solver is None:
            solver = SearchSolver(track_memory=False, time_limit=timeout_seconds)
        self.solver = solver
        self.results: List[BenchmarkResult] = []

    @staticmethod
    def read_puzzles(path: str) -> List[str]:
        """Read one puzzle template per non-blank line of a text file."""
        with open(path, "r") as f:
            return [line.strip() for line in f if line.strip()]

    @classmethod
    def from_file(cls, path: str, **kwargs) -> Benchmark:
        return cls(cls.read_puzzles(path), **kwargs)

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Solve every puzzle.

        Returns:
            List of BenchmarkResult objects, in input order.
        """
        self.results = []

        for puzzle_id, puzzle in enumerate(
            tqdm(self.puzzles, desc="Benchmarking", disable=not show_progress)
        ):
            self.results.append(self._run_single(puzzle_id, puzzle))

        return self.results

    def _run_single(self, puzzle_id: int, puzzle: str) -> BenchmarkResult:
        """Run the solver on a single template."""
        try:
            board = HexBoard.from_string(puzzle)
        except MalformedPuzzle as e:
            return BenchmarkResult(
                puzzle_id=puzzle_id,
                puzzle=puzzle,
                solution=None,
                solved=False,
                time_seconds=0.0,
                memory_bytes=0,
                backtracks=0,
                consistency_failures=0,
                nodes_explored=0,
                extra={"error": f"Malformed: {e}"}
            )

        solution, stats = self.solver.solve(board)

        return BenchmarkResult(
            puzzle_id=puzzle_id,
            puzzle=puzzle,
            solution=solution.to_string() if solution is not None else None,
            solved=stats.solved,
            time_seconds=stats.time_seconds,
            memory_bytes=stats.memory_bytes,
            backtracks=stats.backtracks,
            consistency_failures=stats.consistency_failures,
            nodes_explored=stats.nodes_explored,
            extra=dict(stats.extra)
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        total = len(self.results)
        solved = [r for r in self.results if r.solved]
        malformed = [r for r in self.results
                     if str(r.extra.get("error", "")).startswith("Malformed")]
        timeouts = [r for r in self.results if r.extra.get("error") == "Timeout"]
        times = [r.time_seconds for r in self.results]
        backtracks = [r.backtracks for r in self.results]
        heuristic = [r.consistency_failures for r in self.results]

        return {
            "algorithm": self.solver.name,
            "total_puzzles": total,
            "total_solved": len(solved),
            "all_solved": total > 0 and len(solved) == total,
            "malformed": len(malformed),
            "timeouts": len(timeouts),
            "total_time_seconds": sum(times),
            "avg_time_seconds": sum(times) / total if total else 0.0,
            "max_time_seconds": max(times) if times else 0.0,
            "avg_backtracks": sum(backtracks) / total if total else 0.0,
            "max_backtracks": max(backtracks) if backtracks else 0,
            "avg_consistency_failures": sum(heuristic) / total if total else 0.0,
        }

    def format_report(self) -> str:
        """Plain-text report: one block per puzzle, then the aggregates."""
        lines = []
        for r in self.results:
            lines.append("")
            lines.append(r.puzzle)
            if "error" in r.extra:
                lines.append(f"Error: {r.extra['error']}")
            lines.append(r.solution if r.solution is not None
                         else "The sudoku does not have a solution")
            lines.append(f"Is the sudoku solved? {r.solved}")
            lines.append(f"Time: {r.time_seconds * 1000:.1f} milliseconds.")
            lines.append(f"Number of backtracks: {r.backtracks}")
            lines.append(f"Times used the consistency heuristic: {r.consistency_failures}")

        summary = self.get_summary()
        lines.append("")
        lines.append(f"All sudokus solved successfully: {summary['all_solved']}")
        lines.append(
            f"{summary['total_puzzles']} processed in "
            f"{summary['total_time_seconds'] * 1000:.1f} milliseconds."
        )
        lines.append(
            f"The average sudoku solving time is: "
            f"{summary['avg_time_seconds'] * 1000:.1f} milliseconds."
        )
        lines.append(
            f"The average number of backtracks per solving is: "
            f"{summary['avg_backtracks']:.1f} backtracks."
        )
        lines.append(
            f"The average number of times the consistency heuristic is used "
            f"per solving is: {summary['avg_consistency_failures']:.1f} times."
        )
        if summary["malformed"]:
            lines.append(f"Malformed puzzles skipped: {summary['malformed']}")
        if summary["timeouts"]:
            lines.append(f"Puzzles timed out: {summary['timeouts']}")
        return "\n".join(lines)
