"""Base solver interface and common utilities."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Tuple
import time
import tracemalloc

from ..core.board import HexBoard
from ..core.exceptions import Contradiction, NoSolution, SearchTimeout


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    # Core metrics
    solved: bool = False
    time_seconds: float = 0.0
    memory_bytes: int = 0
    iterations: int = 0

    # Algorithm-specific metrics
    backtracks: int = 0
    nodes_explored: int = 0
    consistency_failures: int = 0

    # Additional metadata
    algorithm: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            "consistency_failures": self.consistency_failures,
            "algorithm": self.algorithm,
            **self.extra
        }


class BaseSolver(ABC):
    """Abstract base class for hexadecimal Sudoku solvers."""

    name: str = "BaseSolver"

    def __init__(self, track_memory: bool = True):
        """
        Args:
            track_memory: Record peak memory with tracemalloc. Tracing slows
                          allocation-heavy searches noticeably.
        """
        self.track_memory = track_memory
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, board: HexBoard) -> Tuple[Optional[HexBoard], SolverStats]:
        """
        Solve a puzzle with timing and memory tracking.

        Inconsistent givens and timeouts are reported through the stats
        rather than raised.

        Args:
            board: The puzzle to solve.

        Returns:
            Tuple of (solution or None, stats).
        """
        self.stats = SolverStats(algorithm=self.name)

        if self.track_memory:
            tracemalloc.start()

        start_time = time.perf_counter()

        try:
            solution = self._solve(board.copy())
        except Contradiction as e:
            self.stats.extra["contradiction"] = str(e)
            solution = None
        except SearchTimeout as e:
            self.stats.extra["error"] = "Timeout"
            self.stats.extra["timeout_detail"] = str(e)
            solution = None
        finally:
            self.stats.time_seconds = time.perf_counter() - start_time
            if self.track_memory:
                _, peak = tracemalloc.get_traced_memory()
                tracemalloc.stop()
                self.stats.memory_bytes = peak

        self.stats.solved = solution is not None and solution.is_solved()
        return solution, self.stats

    def solve_or_raise(self, board: HexBoard) -> Tuple[HexBoard, SolverStats]:
        """
        Like :meth:`solve`, but an unsolved puzzle raises NoSolution.
        """
        solution, stats = self.solve(board)
        if solution is None or not stats.solved:
            raise NoSolution(f"{self.name} found no solution for {board!r}")
        return solution, stats

    @abstractmethod
    def _solve(self, board: HexBoard) -> Optional[HexBoard]:
        """
        Internal solve method to be implemented by subclasses.

        Args:
            board: A copy of the puzzle to solve (can be modified).

        Returns:
            The solved board, or None if no solution found.
        """
        pass

    def reset_stats(self) -> None:
        """Reset solver statistics."""
        self.stats = SolverStats(algorithm=self.name)
