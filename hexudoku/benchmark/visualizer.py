"""Visualization utilities for generation benchmark results."""

from __future__ import annotations
import os
from typing import List

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import BenchmarkResult


class Visualizer:
    """
    Chart generator for generation benchmark results.

    Only successful runs are plotted; failed runs show up in the summary table.
    """

    COLOR = "#3498db"
    FAILED_COLOR = "#e74c3c"

    def __init__(self, results: List[BenchmarkResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of benchmark results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.solved = [r for r in results if r.solved]
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        plt.style.use('seaborn-v0_8-whitegrid')
        sns.set_palette("husl")

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        charts = []

        charts.append(self.plot_time_distribution())
        charts.append(self.plot_backtracks_distribution())
        charts.append(self.plot_attempts())
        charts.append(self.plot_backtracks_vs_time())

        return charts

    def plot_time_distribution(self) -> str:
        """Histogram of board generation times."""
        fig, ax = plt.subplots(figsize=(10, 6))

        times = [r.time_seconds * 1000 for r in self.solved]
        if times:
            sns.histplot(times, bins=min(30, max(5, len(times) // 2)), color=self.COLOR, ax=ax)
            ax.axvline(float(np.median(times)), color='black', linestyle='--', alpha=0.6,
                       label=f'Median {np.median(times):.1f} ms')
            ax.legend()

        ax.set_xlabel('Generation Time (ms)', fontsize=12)
        ax.set_ylabel('Boards', fontsize=12)
        ax.set_title('Board Generation Time', fontsize=14, fontweight='bold')

        return self._save(fig, "time_distribution.png")

    def plot_backtracks_distribution(self) -> str:
        """Histogram of backtracks per board."""
        fig, ax = plt.subplots(figsize=(10, 6))

        backtracks = [r.backtracks for r in self.solved]
        if backtracks:
            sns.histplot(backtracks, bins=min(30, max(5, len(backtracks) // 2)), color=self.COLOR, ax=ax)

        ax.set_xlabel('Backtracks', fontsize=12)
        ax.set_ylabel('Boards', fontsize=12)
        ax.set_title('Backtracking Effort per Board', fontsize=14, fontweight='bold')

        return self._save(fig, "backtracks_distribution.png")

    def plot_attempts(self) -> str:
        """Bar chart of how many fill attempts each board needed."""
        fig, ax = plt.subplots(figsize=(8, 6))

        max_attempts = max((r.attempts for r in self.results), default=1)
        labels = [str(i) for i in range(1, max_attempts + 1)]
        counts = [sum(1 for r in self.solved if r.attempts == i) for i in range(1, max_attempts + 1)]
        failed = len(self.results) - len(self.solved)

        colors = [self.COLOR] * len(labels)
        if failed:
            labels.append('failed')
            counts.append(failed)
            colors.append(self.FAILED_COLOR)

        bars = ax.bar(labels, counts, color=colors, edgecolor='black', linewidth=0.5)
        for bar, count in zip(bars, counts):
            ax.annotate(f'{count}',
                        xy=(bar.get_x() + bar.get_width() / 2, bar.get_height()),
                        xytext=(0, 3),
                        textcoords="offset points",
                        ha='center', va='bottom', fontsize=10)

        ax.set_xlabel('Fill Attempts', fontsize=12)
        ax.set_ylabel('Boards', fontsize=12)
        ax.set_title('Fill Attempts per Board', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)

        return self._save(fig, "attempts.png")

    def plot_backtracks_vs_time(self) -> str:
        """Scatter plot of backtracks against generation time."""
        fig, ax = plt.subplots(figsize=(10, 6))

        if self.solved:
            sns.scatterplot(
                x=[r.backtracks for r in self.solved],
                y=[r.time_seconds * 1000 for r in self.solved],
                hue=[r.attempts for r in self.solved],
                palette="viridis",
                ax=ax,
            )
            ax.legend(title='Attempts')

        ax.set_xlabel('Backtracks', fontsize=12)
        ax.set_ylabel('Generation Time (ms)', fontsize=12)
        ax.set_title('Backtracks vs Generation Time', fontsize=14, fontweight='bold')

        return self._save(fig, "backtracks_vs_time.png")

    def generate_summary_table(self) -> str:
        """Generate a markdown summary table."""
        lines = [
            "# Generation Benchmark Summary\n",
            "| Runs | Solved | Avg Time | Median Time | Avg Backtracks | Avg Attempts |",
            "|------|--------|----------|-------------|----------------|--------------|"
        ]

        if self.solved:
            times = [r.time_seconds for r in self.solved]
            lines.append(
                f"| {len(self.results)} | {len(self.solved)} "
                f"| {np.mean(times) * 1000:.1f} ms | {np.median(times) * 1000:.1f} ms "
                f"| {np.mean([r.backtracks for r in self.solved]):,.0f} "
                f"| {np.mean([r.attempts for r in self.solved]):.2f} |"
            )
        else:
            lines.append(f"| {len(self.results)} | 0 | - | - | - | - |")

        content = "\n".join(lines)

        path = os.path.join(self.output_dir, "benchmark_summary.md")
        with open(path, "w") as f:
            f.write(content)

        return path

    def _save(self, fig, filename: str) -> str:
        fig.tight_layout()
        path = os.path.join(self.output_dir, filename)
        fig.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)
        return path
