"""Hexudoku puzzle generator."""

from __future__ import annotations
import logging
import random
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import List, Optional, Tuple

from ..core.board import GameBoardState, GameMetadata
from ..core.errors import GenerationError
from ..core.validator import update_board_validity
from .fill import DEFAULT_MAX_FILL_ATTEMPTS, FillStats, fill_board_with_random_numbers
from .prune import DEFAULT_TARGET_CLUES, prune_board

logger = logging.getLogger(__name__)


def generate_board(
    metadata: Optional[GameMetadata] = None,
    rng: Optional[random.Random] = None,
    target_clues: int = DEFAULT_TARGET_CLUES,
) -> GameBoardState:
    """
    Generate a new puzzle: flower topology, random fill, then pruning.

    Args:
        metadata: Accepted for the caller's convenience; the flower shape is fixed.
        rng: Random source. A fresh unseeded one is used if omitted.
        target_clues: Number of clue cells left after pruning.

    Returns:
        The puzzle with validity flags computed.
    """
    return HexudokuGenerator(rng=rng, target_clues=target_clues).generate()


def generate_board_async(
    metadata: Optional[GameMetadata] = None,
    executor: Optional[Executor] = None,
    rng: Optional[random.Random] = None,
) -> Future:
    """
    Run ``generate_board`` off the calling thread.

    Args:
        metadata: Passed through to ``generate_board``.
        executor: Executor to run on. If omitted, a private single-worker
                  thread pool is used and shut down once the job finishes.
        rng: Passed through to ``generate_board``. Must not be shared with
             another job running at the same time.

    Returns:
        A Future resolving to the generated board. Generation errors are
        raised from ``Future.result()``.
    """
    if executor is not None:
        return executor.submit(generate_board, metadata, rng)

    logger.debug("Starting background worker to generate a board")
    own_executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="hexudoku-generate")
    future = own_executor.submit(generate_board, metadata, rng)
    own_executor.shutdown(wait=False)
    return future


class HexudokuGenerator:
    """
    Generator for flower-board puzzles.

    Algorithm:
    1. Build the empty 49-cell flower board
    2. Fill it with a random valid solution using backtracking
    3. Clear random cells until the target number of clues remains
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        target_clues: int = DEFAULT_TARGET_CLUES,
        max_fill_attempts: int = DEFAULT_MAX_FILL_ATTEMPTS,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the generator.

        Args:
            seed: Random seed for reproducibility. Ignored if ``rng`` is given.
            target_clues: Clue cells left in each puzzle.
            max_fill_attempts: Fill attempts before a repeating pattern is fatal.
            rng: Random source to share with the caller.
        """
        self.rng = rng if rng is not None else random.Random(seed)
        self.target_clues = target_clues
        self.max_fill_attempts = max_fill_attempts
        self.last_stats: Optional[FillStats] = None

    def generate(self) -> GameBoardState:
        """
        Generate a puzzle.

        Returns:
            A board holding the clues only, with validity flags computed.
        """
        puzzle, _ = self.generate_with_solution()
        return puzzle

    def generate_with_solution(self) -> Tuple[GameBoardState, GameBoardState]:
        """
        Generate a puzzle along with its solution.

        Returns:
            Tuple of (puzzle, solution) boards.
        """
        board = self._generate_complete_board()
        solution = update_board_validity(board)

        prune_board(board, self.target_clues, self.rng)
        puzzle = update_board_validity(board)

        return puzzle, solution

    def generate_batch(self, count: int) -> List[GameBoardState]:
        """Generate multiple puzzles."""
        return [self.generate() for _ in range(count)]

    def _generate_complete_board(self) -> GameBoardState:
        """Generate a fully filled, valid board."""
        board = GameBoardState.flower()
        try:
            self.last_stats = fill_board_with_random_numbers(board, self.rng, self.max_fill_attempts)
        except GenerationError as e:
            self.last_stats = e.stats
            raise
        return board
