"""Command-line interface for the Hexudoku generator."""

import argparse
import json
import logging
import sys

from .core.errors import DeserialisationError, GenerationError
from .core.validator import find_invalid_cells, update_board_validity
from .generator import DEFAULT_MAX_FILL_ATTEMPTS, DEFAULT_TARGET_CLUES, HexudokuGenerator
from .serialiser import deserialise_game_state, serialise_game_state


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Hexudoku Puzzle Generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate 3 puzzles with 15 clues each
  hexudoku generate --count 3 --clues 15

  # Check a saved board
  hexudoku check --input board.json

  # Benchmark 50 generations
  hexudoku benchmark --runs 50 --output results/
        """
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Generate Hexudoku puzzles")
    gen_parser.add_argument(
        "--count", "-n", type=int, default=1,
        help="Number of puzzles to generate (default: 1)"
    )
    gen_parser.add_argument(
        "--clues", "-c", type=int, default=DEFAULT_TARGET_CLUES,
        help=f"Clue cells left in each puzzle (default: {DEFAULT_TARGET_CLUES})"
    )
    gen_parser.add_argument(
        "--attempts", type=int, default=DEFAULT_MAX_FILL_ATTEMPTS,
        help=f"Fill attempts per puzzle (default: {DEFAULT_MAX_FILL_ATTEMPTS})"
    )
    gen_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )
    gen_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output file for serialised puzzles (JSON list)"
    )
    gen_parser.add_argument(
        "--solution", action="store_true",
        help="Also print the solution of each puzzle"
    )

    # Check command
    check_parser = subparsers.add_parser("check", help="Check a serialised board")
    check_parser.add_argument(
        "--input", "-i", type=str, required=True,
        help="File holding one serialised board"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Benchmark board generation")
    bench_parser.add_argument(
        "--runs", "-n", type=int, default=20,
        help="Boards to generate (default: 20)"
    )
    bench_parser.add_argument(
        "--seed", "-s", type=int, default=42,
        help="Seed of the first run (default: 42)"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "generate":
        cmd_generate(args)
    elif args.command == "check":
        cmd_check(args)
    elif args.command == "benchmark":
        cmd_benchmark(args)


def cmd_generate(args):
    """Handle the generate command."""
    generator = HexudokuGenerator(
        seed=args.seed,
        target_clues=args.clues,
        max_fill_attempts=args.attempts,
    )

    records = []
    for i in range(1, args.count + 1):
        try:
            puzzle, solution = generator.generate_with_solution()
        except GenerationError as e:
            print(f"Error generating puzzle {i}: {e}")
            sys.exit(1)

        print(f"\n--- Puzzle {i} ({puzzle.count_filled()} clues) ---")
        print(puzzle)
        if args.solution:
            print(f"\n--- Solution {i} ---")
            print(solution)

        records.append(json.loads(serialise_game_state(puzzle)))

    if args.output:
        with open(args.output, "w") as f:
            json.dump(records, f, indent=2)
        print(f"\nAll puzzles saved to {args.output}")

    print(f"\nTotal puzzles generated: {len(records)}")


def cmd_check(args):
    """Handle the check command."""
    try:
        with open(args.input, "r") as f:
            board = deserialise_game_state(f.read())
    except (OSError, DeserialisationError) as e:
        print(f"Error reading board: {e}")
        sys.exit(1)

    board = update_board_validity(board)
    print(board)
    print()

    invalid = find_invalid_cells(board)
    if invalid:
        print(f"✗ {len(invalid)} conflicting cell(s):")
        for cell in invalid:
            print(f"  {cell.coordinate} = {cell.value} (group {cell.group})")
    elif board.is_complete:
        print("✓ Board is complete and valid")
    else:
        print(f"✓ No conflicts, {board.count_empty()} cell(s) left to fill")


def cmd_benchmark(args):
    """Handle the benchmark command."""
    # Imported lazily: plotting libraries are slow to load.
    from .benchmark import GenerationBenchmark, Visualizer

    print("=" * 60)
    print("HEXUDOKU GENERATION BENCHMARK")
    print("=" * 60)
    print(f"Runs: {args.runs}")
    print(f"First seed: {args.seed}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    benchmark = GenerationBenchmark(runs=args.runs, seed=args.seed)
    results = benchmark.run()
    summary = benchmark.get_summary()

    print(f"\nSolved: {summary['solved']}/{summary['runs']} ({summary['success_rate']:.1f}%)")
    if summary["solved"]:
        print(f"Avg Time: {summary['avg_time_seconds'] * 1000:.1f} ms")
        print(f"Median Time: {summary['median_time_seconds'] * 1000:.1f} ms")
        print(f"Avg Backtracks: {summary['avg_backtracks']:,.0f}")
        print(f"Repeating fills rejected: {summary['total_repeats_rejected']}")

    benchmark.save_results(args.output)

    if not args.no_charts:
        print("\nGenerating charts...")
        visualizer = Visualizer(results, args.output)
        charts = visualizer.generate_all()
        visualizer.generate_summary_table()
        print(f"Charts saved to {args.output}/")
        for chart in charts:
            print(f"  - {chart.split('/')[-1]}")

    print("\n" + "=" * 60)
    print("Benchmark complete!")


if __name__ == "__main__":
    main()
