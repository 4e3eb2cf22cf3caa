"""Unit tests for the random fill, pruning and puzzle generator."""

import random
from concurrent.futures import ThreadPoolExecutor

import pytest
from hexudoku.core.board import GameBoardState
from hexudoku.core.coordinates import HexCoordinate
from hexudoku.core.errors import ContractViolation, GenerationError
from hexudoku.core.validator import CellValidity, check_cell_validity
from hexudoku.generator import (
    HexudokuGenerator,
    fill_board_with_random_numbers,
    generate_board,
    generate_board_async,
    prune_board,
)
from hexudoku.generator import fill as fill_module

# Every 4-attempt fill from this seed repeats clusters 0 and 1.
EXHAUSTING_SEED = 117


class TestRandomFill:
    """Tests for fill_board_with_random_numbers."""

    def test_fills_every_cell_validly(self):
        """Every cell gets a digit that is valid in all its units."""
        board = GameBoardState.flower()
        stats = fill_board_with_random_numbers(board, random.Random(7))

        assert 1 <= stats.attempts <= 4
        assert stats.placements >= 49
        for cell in board:
            assert cell.value in range(1, 8)
            assert not cell.is_editable
            assert check_cell_validity(cell, board) is CellValidity.VALID

    def test_clusters_zero_and_one_differ(self):
        """Accepted fills never repeat cluster 0 in cluster 1."""
        for seed in range(5):
            board = GameBoardState.flower()
            fill_board_with_random_numbers(board, random.Random(seed))
            first = [cell.value for cell in board.group_cells(0)]
            second = [cell.value for cell in board.group_cells(1)]
            assert first != second

    def test_same_seed_same_board(self):
        """Equal seeds give equal fills."""
        a = GameBoardState.flower()
        b = GameBoardState.flower()
        fill_board_with_random_numbers(a, random.Random(123))
        fill_board_with_random_numbers(b, random.Random(123))
        assert a.to_string() == b.to_string()

    def test_malformed_group_zero(self):
        """A cluster 0 without seven cells is rejected up front."""
        board = GameBoardState.flower()
        del board.cells[HexCoordinate(4, 2)]
        with pytest.raises(ContractViolation):
            fill_board_with_random_numbers(board, random.Random(1))

    def test_repeating_every_time_fails(self, monkeypatch):
        """Exhausting the attempt budget on repeating fills is fatal."""
        monkeypatch.setattr(fill_module, "_is_repeating", lambda first, second: True)
        board = GameBoardState.flower()
        with pytest.raises(GenerationError) as excinfo:
            fill_board_with_random_numbers(board, random.Random(1), max_attempts=2)

        stats = excinfo.value.stats
        assert stats.attempts == 2
        assert stats.repeats_rejected == 2
        assert stats.placements >= 98
        assert stats.time_seconds > 0

    def test_exhausting_seed_fails(self):
        """A seed whose fills all repeat runs out of attempts."""
        board = GameBoardState.flower()
        with pytest.raises(GenerationError) as excinfo:
            fill_board_with_random_numbers(board, random.Random(EXHAUSTING_SEED))

        assert excinfo.value.stats.attempts == 4
        assert excinfo.value.stats.repeats_rejected == 4

    def test_zero_attempts_fails(self):
        """A zero attempt budget never fills anything."""
        with pytest.raises(GenerationError) as excinfo:
            fill_board_with_random_numbers(GameBoardState.flower(), random.Random(1), max_attempts=0)
        assert excinfo.value.stats.attempts == 0

    def test_retry_after_repeat(self, monkeypatch):
        """A repeating fill is retried and counted."""
        calls = []

        def repeating_once(first, second):
            calls.append(1)
            return len(calls) == 1

        monkeypatch.setattr(fill_module, "_is_repeating", repeating_once)
        stats = fill_board_with_random_numbers(GameBoardState.flower(), random.Random(3))
        assert stats.attempts == 2
        assert stats.repeats_rejected == 1


class TestPrune:
    """Tests for prune_board."""

    def test_prune_to_fifteen(self, solved_board):
        """Pruning a solved board leaves exactly fifteen clues."""
        removed = prune_board(solved_board, 15, random.Random(5))

        assert removed == 34
        filled = [cell for cell in solved_board if cell.value is not None]
        empty = [cell for cell in solved_board if cell.value is None]
        assert len(filled) == 15
        assert len(empty) == 34
        assert all(cell.is_editable for cell in empty)
        assert all(not cell.is_editable for cell in filled)

    def test_prune_keeps_solution_digits(self, solved_board):
        """Remaining clues keep their solved digits."""
        solution = solved_board.to_string()
        prune_board(solved_board, 20, random.Random(5))
        for digit, cell in zip(solution, solved_board):
            if cell.value is not None:
                assert str(cell.value) == digit

    def test_target_above_filled_count(self, empty_board):
        """Nothing is cleared when the board already has few enough digits."""
        assert prune_board(empty_board, 15, random.Random(5)) == 0

    def test_target_out_of_range(self, solved_board):
        """Targets outside 0-49 are rejected."""
        with pytest.raises(ValueError):
            prune_board(solved_board, 50, random.Random(5))
        with pytest.raises(ValueError):
            prune_board(solved_board, -1, random.Random(5))


class TestHexudokuGenerator:
    """Tests for the generator front end."""

    def test_generate_board(self):
        """generate_board returns a valid fifteen-clue puzzle."""
        board = generate_board(rng=random.Random(42))
        assert len(board) == 49
        assert board.count_filled() == 15
        assert not board.is_complete
        assert all(cell.is_valid for cell in board)

    def test_generate_with_solution(self):
        """The puzzle's clues agree with its solution."""
        generator = HexudokuGenerator(seed=42)
        puzzle, solution = generator.generate_with_solution()

        assert solution.is_complete
        assert puzzle.count_filled() == 15
        for clue, solved in zip(puzzle, solution):
            assert clue.coordinate == solved.coordinate
            if clue.value is not None:
                assert clue.value == solved.value
        assert generator.last_stats is not None
        assert generator.last_stats.attempts >= 1

    def test_exhausting_seed_raises(self):
        """A generator seeded into repeating fills raises and keeps the stats."""
        generator = HexudokuGenerator(seed=EXHAUSTING_SEED)
        with pytest.raises(GenerationError):
            generator.generate()
        assert generator.last_stats.attempts == 4

    def test_target_clues(self):
        """The clue target is honoured."""
        puzzle = HexudokuGenerator(seed=1, target_clues=30).generate()
        assert puzzle.count_filled() == 30

    def test_seed_reproducible(self):
        """Equal seeds give equal puzzles."""
        a = HexudokuGenerator(seed=99).generate()
        b = HexudokuGenerator(seed=99).generate()
        assert a == b

    def test_generate_batch(self):
        """A batch holds the requested number of puzzles."""
        puzzles = HexudokuGenerator(seed=2).generate_batch(3)
        assert len(puzzles) == 3
        for puzzle in puzzles:
            assert puzzle.count_filled() == 15


class TestAsyncGeneration:
    """Tests for generate_board_async."""

    def test_private_executor(self):
        """Without an executor the board is built on a private worker."""
        future = generate_board_async(rng=random.Random(42))
        board = future.result(timeout=60)
        assert len(board) == 49
        assert board.count_filled() == 15

    def test_matches_synchronous_generation(self):
        """The background board equals the one built in the foreground."""
        board = generate_board_async(rng=random.Random(1)).result(timeout=60)
        assert board == generate_board(rng=random.Random(1))

    def test_caller_executor(self):
        """Jobs run on the caller's executor."""
        with ThreadPoolExecutor(max_workers=2) as executor:
            futures = [
                generate_board_async(executor=executor, rng=random.Random(seed))
                for seed in (1, 2)
            ]
            boards = [f.result(timeout=60) for f in futures]
        assert all(board.count_filled() == 15 for board in boards)

    def test_error_raised_from_result(self):
        """Generation errors surface from Future.result()."""
        future = generate_board_async(rng=random.Random(EXHAUSTING_SEED))
        with pytest.raises(GenerationError):
            future.result(timeout=60)
