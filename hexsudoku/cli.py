"""Command-line interface for the hexadecimal Sudoku solver."""

import argparse
import sys
from typing import List, Optional

from .benchmark import Benchmark
from .core.board import HexBoard
from .core.domains import format_domains
from .core.exceptions import Contradiction, MalformedPuzzle
from .solvers import ConstraintPropagator, SearchSolver


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Hexadecimal (16x16) Sudoku solver: constraint propagation + backtracking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve a puzzle given inline ('.' or '-' for blanks)
  python -m hexsudoku.cli solve --puzzle ".E8F..39724BD5.67C9....."

  # Solve a puzzle laid out over several lines of a file
  python -m hexsudoku.cli solve --file puzzle.txt --verbose

  # Benchmark every puzzle of a file, one per line
  python -m hexsudoku.cli benchmark all.txt
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a single puzzle")
    source = solve_parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--puzzle", "-p", type=str,
        help="Puzzle string (256 symbols 0-F, '.' or '-' for empty cells)"
    )
    source.add_argument(
        "--file", "-f", type=str,
        help="File holding one puzzle, whitespace and newlines are ignored"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show detailed solving statistics"
    )
    solve_parser.add_argument(
        "--candidates", action="store_true",
        help="Print every cell's candidates after the initial propagation"
    )
    solve_parser.add_argument(
        "--time-limit", type=float, default=None,
        help="Give up after this many seconds (default: no limit)"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Solve every puzzle in a file")
    bench_parser.add_argument(
        "path", type=str,
        help="Text file with one puzzle per line"
    )
    bench_parser.add_argument(
        "--timeout", "-t", type=float, default=60.0,
        help="Per-puzzle time limit in seconds (default: 60)"
    )
    bench_parser.add_argument(
        "--no-progress", action="store_true",
        help="Disable the progress bar"
    )

    return parser


def main(argv: Optional[List[str]] = None):
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "solve":
        cmd_solve(args)
    elif args.command == "benchmark":
        cmd_benchmark(args)


def cmd_solve(args):
    """Handle the solve command."""
    if args.file:
        with open(args.file, "r") as f:
            template = f.read()
    else:
        template = args.puzzle

    try:
        board = HexBoard.from_string(template)
    except MalformedPuzzle as e:
        print(f"Error parsing puzzle: {e}")
        sys.exit(1)

    print("Input puzzle:")
    print(board)
    print()

    if args.candidates:
        try:
            domains = ConstraintPropagator().initial_domains(board)
        except Contradiction as e:
            print(f"Initial propagation failed: {e}")
        else:
            print("Candidates after initial propagation:")
            print(format_domains(domains, board.size))
        print()

    solver = SearchSolver(track_memory=args.verbose, time_limit=args.time_limit)
    print(f"Solving with {solver.name}...")
    solution, stats = solver.solve(board)

    if stats.solved:
        print(solution.to_string())
        print(solution)
    else:
        print("The sudoku does not have a solution")
        if "error" in stats.extra:
            print(f"  Error: {stats.extra['error']}")
        if "contradiction" in stats.extra:
            print(f"  Contradiction in givens: {stats.extra['contradiction']}")

    print(f"Is the sudoku solved? {stats.solved}")
    print(f"Time: {stats.time_seconds * 1000:.1f} milliseconds.")
    print(f"Number of backtracks: {stats.backtracks}")
    print(f"Times used the consistency heuristic: {stats.consistency_failures}")
    if args.verbose:
        print(f"  Search calls: {stats.iterations:,}")
        print(f"  Branching nodes: {stats.nodes_explored:,}")
        print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")


def cmd_benchmark(args):
    """Handle the benchmark command."""
    benchmark = Benchmark.from_file(args.path, timeout_seconds=args.timeout)

    print("=" * 60)
    print("HEXADECIMAL SUDOKU SOLVING TEST")
    print("=" * 60)
    print(benchmark.solver.name)
    print(f"Puzzles: {len(benchmark.puzzles)}")
    print(f"Timeout: {args.timeout}s")
    print("=" * 60)

    benchmark.run(show_progress=not args.no_progress)

    print(benchmark.format_report())
    print("\n" + "=" * 60)
    print("Benchmark complete!")


if __name__ == "__main__":
    main()
