import random

import pytest

from hexudoku.core.board import GameBoardState
from hexudoku.generator.fill import fill_board_with_random_numbers


@pytest.fixture
def empty_board():
    """A freshly generated flower board with no digits."""
    return GameBoardState.flower()


@pytest.fixture
def solved_board():
    """A completely filled flower board from a fixed seed."""
    board = GameBoardState.flower()
    fill_board_with_random_numbers(board, random.Random(42))
    return board
