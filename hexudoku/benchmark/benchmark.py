"""Benchmarking framework for the puzzle generator."""

from __future__ import annotations
import json
import logging
import os
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np
from tqdm import tqdm

from ..core.errors import GenerationError
from ..generator import DEFAULT_MAX_FILL_ATTEMPTS, DEFAULT_TARGET_CLUES, FillStats, HexudokuGenerator
from ..serialiser import serialise_game_state

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Results from a single generation run."""
    run_id: int
    seed: int
    solved: bool
    time_seconds: float
    attempts: int
    placements: int
    backtracks: int
    repeats_rejected: int
    clues: int
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "run_id": self.run_id,
            "seed": self.seed,
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "attempts": self.attempts,
            "placements": self.placements,
            "backtracks": self.backtracks,
            "repeats_rejected": self.repeats_rejected,
            "clues": self.clues,
            **self.extra
        }


class GenerationBenchmark:
    """
    Benchmark for the random fill and pruning pipeline.

    Generates a number of boards from consecutive seeds and collects
    timing and search statistics for each.
    """

    def __init__(
        self,
        runs: int = 20,
        seed: Optional[int] = None,
        target_clues: int = DEFAULT_TARGET_CLUES,
        max_fill_attempts: int = DEFAULT_MAX_FILL_ATTEMPTS,
    ):
        """
        Initialize the benchmark.

        Args:
            runs: Number of boards to generate.
            seed: Seed of the first run; run ``i`` uses ``seed + i``.
                  A random base seed is drawn if omitted.
            target_clues: Clue cells left in each puzzle.
            max_fill_attempts: Fill attempt budget per board.
        """
        self.runs = runs
        self.seed = seed if seed is not None else int(np.random.default_rng().integers(0, 2**31))
        self.target_clues = target_clues
        self.max_fill_attempts = max_fill_attempts
        self.results: List[BenchmarkResult] = []
        self.puzzles: List[str] = []

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run every generation.

        Returns:
            List of BenchmarkResult objects.
        """
        self.results = []
        self.puzzles = []

        for run_id in tqdm(range(self.runs), desc="Generating", disable=not show_progress):
            self.results.append(self._run_single(run_id, self.seed + run_id))

        return self.results

    def _run_single(self, run_id: int, seed: int) -> BenchmarkResult:
        """Generate one board and record how it went."""
        generator = HexudokuGenerator(
            seed=seed,
            target_clues=self.target_clues,
            max_fill_attempts=self.max_fill_attempts,
        )

        start_time = time.perf_counter()
        try:
            puzzle = generator.generate()
        except GenerationError as e:
            logger.warning("Run %d (seed %d) failed: %s", run_id, seed, e)
            stats = e.stats or FillStats(attempts=self.max_fill_attempts)
            return BenchmarkResult(
                run_id=run_id,
                seed=seed,
                solved=False,
                time_seconds=time.perf_counter() - start_time,
                attempts=stats.attempts,
                placements=stats.placements,
                backtracks=stats.backtracks,
                repeats_rejected=stats.repeats_rejected,
                clues=0,
                extra={"error": str(e)}
            )

        elapsed = time.perf_counter() - start_time
        self.puzzles.append(serialise_game_state(puzzle))
        stats = generator.last_stats

        return BenchmarkResult(
            run_id=run_id,
            seed=seed,
            solved=True,
            time_seconds=elapsed,
            attempts=stats.attempts,
            placements=stats.placements,
            backtracks=stats.backtracks,
            repeats_rejected=stats.repeats_rejected,
            clues=puzzle.count_filled()
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        solved = [r for r in self.results if r.solved]
        summary: Dict[str, Any] = {
            "runs": len(self.results),
            "seed": self.seed,
            "target_clues": self.target_clues,
            "max_fill_attempts": self.max_fill_attempts,
            "solved": len(solved),
            "success_rate": len(solved) / len(self.results) * 100 if self.results else 0.0,
        }

        if solved:
            times = np.array([r.time_seconds for r in solved])
            backtracks = np.array([r.backtracks for r in solved])
            attempts = np.array([r.attempts for r in solved])
            summary.update({
                "avg_time_seconds": float(np.mean(times)),
                "median_time_seconds": float(np.median(times)),
                "max_time_seconds": float(np.max(times)),
                "min_time_seconds": float(np.min(times)),
                "avg_backtracks": float(np.mean(backtracks)),
                "max_backtracks": int(np.max(backtracks)),
                "avg_attempts": float(np.mean(attempts)),
                "total_repeats_rejected": int(sum(r.repeats_rejected for r in solved)),
            })

        return summary

    def save_results(self, output_dir: str) -> None:
        """Save benchmark results and generated puzzles to files."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "benchmark_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "benchmark_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        puzzles_file = os.path.join(output_dir, "puzzles.json")
        with open(puzzles_file, "w") as f:
            json.dump([json.loads(p) for p in self.puzzles], f)

        logger.info("Results and puzzles saved to %s", output_dir)
