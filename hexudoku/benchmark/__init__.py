"""Benchmark module for the puzzle generator."""

from .benchmark import BenchmarkResult, GenerationBenchmark
from .visualizer import Visualizer

__all__ = ["BenchmarkResult", "GenerationBenchmark", "Visualizer"]
