"""Unit tests for the versioned board record format."""

import json
import logging
import random

import pytest
from hexudoku.core.coordinates import HexCoordinate
from hexudoku.core.errors import DeserialisationError
from hexudoku.core.validator import update_board_validity
from hexudoku.generator import HexudokuGenerator, generate_board
from hexudoku.serialiser import (
    SCHEMA_VERSION,
    deserialise_game_state,
    restore_or_generate_board,
    serialise_game_state,
)


@pytest.fixture
def puzzle():
    """A seeded puzzle with a selected cell and some notes."""
    board = HexudokuGenerator(seed=11).generate()
    board[HexCoordinate(4, 2)].is_selected = True
    for cell in board:
        if cell.is_editable:
            cell.center_notes.update({1, 4})
            cell.outer_notes.add(7)
            break
    return board


class TestSerialise:
    """Tests for serialise_game_state."""

    def test_record_shape(self, puzzle):
        """Records carry the version, camelCase keys and every cell."""
        data = json.loads(serialise_game_state(puzzle))

        assert data["version"] == SCHEMA_VERSION
        assert data["isComplete"] is False
        assert len(data["cells"]) == 49
        assert set(data["cells"][0]) == {
            "coordinate", "value", "isSelected", "isEditable",
            "centerNotes", "outerNotes", "group", "isValid",
        }
        assert data["cells"][0]["coordinate"] == {"q": 4, "r": 2}

    def test_round_trip(self, puzzle):
        """Decoding a record gives back the same board in the same order."""
        restored = deserialise_game_state(serialise_game_state(puzzle))
        assert restored == puzzle
        assert list(restored.cells) == list(puzzle.cells)

    def test_round_trip_generated_board(self):
        """A freshly generated board survives a round trip."""
        board = generate_board(rng=random.Random(42))
        assert deserialise_game_state(serialise_game_state(board)) == board

    def test_round_trip_solved_board(self, solved_board):
        """Completion survives a round trip."""
        board = update_board_validity(solved_board)
        restored = deserialise_game_state(serialise_game_state(board))
        assert restored.is_complete
        assert restored == board


class TestDeserialise:
    """Tests for rejecting bad records."""

    def _record(self, puzzle):
        return json.loads(serialise_game_state(puzzle))

    def test_version_mismatch(self, puzzle):
        """Any other schema version is rejected."""
        data = self._record(puzzle)
        data["version"] = SCHEMA_VERSION + 1
        with pytest.raises(DeserialisationError):
            deserialise_game_state(json.dumps(data))

    def test_missing_version(self, puzzle):
        """A record without a version is rejected."""
        data = self._record(puzzle)
        del data["version"]
        with pytest.raises(DeserialisationError):
            deserialise_game_state(json.dumps(data))

    @pytest.mark.parametrize("key, value", [
        ("value", 8),
        ("value", 0),
        ("value", "3"),
        ("group", 7),
        ("group", 0.0),
        ("centerNotes", [9]),
        ("outerNotes", ["2"]),
        ("isEditable", "maybe"),
        ("isEditable", "yes"),
        ("isSelected", 1),
    ])
    def test_bad_cell_field(self, puzzle, key, value):
        """Out-of-range or wrongly typed cell fields are rejected, not coerced."""
        data = self._record(puzzle)
        data["cells"][3][key] = value
        with pytest.raises(DeserialisationError):
            deserialise_game_state(json.dumps(data))

    @pytest.mark.parametrize("key", [
        "value", "isSelected", "isEditable", "centerNotes", "outerNotes", "group", "isValid",
    ])
    def test_missing_cell_field(self, puzzle, key):
        """Every cell field is required."""
        data = self._record(puzzle)
        del data["cells"][3][key]
        with pytest.raises(DeserialisationError):
            deserialise_game_state(json.dumps(data))

    def test_complete_flag_must_be_bool(self, puzzle):
        """isComplete is not coerced from an integer."""
        data = self._record(puzzle)
        data["isComplete"] = 0
        with pytest.raises(DeserialisationError):
            deserialise_game_state(json.dumps(data))

    def test_unknown_field(self, puzzle):
        """Unknown keys are rejected."""
        data = self._record(puzzle)
        data["cells"][0]["colour"] = "red"
        with pytest.raises(DeserialisationError):
            deserialise_game_state(json.dumps(data))

    def test_duplicate_coordinate(self, puzzle):
        """Two cells at one coordinate are rejected."""
        data = self._record(puzzle)
        data["cells"][1]["coordinate"] = dict(data["cells"][0]["coordinate"])
        with pytest.raises(DeserialisationError):
            deserialise_game_state(json.dumps(data))

    def test_malformed_json(self):
        """Text that is not JSON is rejected."""
        with pytest.raises(DeserialisationError):
            deserialise_game_state("{not json")


class TestRestoreOrGenerate:
    """Tests for restore_or_generate_board."""

    def test_restores_saved_board(self, puzzle):
        """A valid record is restored as is."""
        restored = restore_or_generate_board(serialise_game_state(puzzle))
        assert restored == puzzle

    def test_generates_when_nothing_saved(self):
        """With no record a new puzzle is generated."""
        board = restore_or_generate_board(None, rng=random.Random(42))
        assert board.count_filled() == 15

    def test_falls_back_on_bad_record(self, caplog):
        """A bad record is logged and replaced by a new puzzle."""
        with caplog.at_level(logging.ERROR, logger="hexudoku.serialiser"):
            board = restore_or_generate_board(
                '{"version": 0, "cells": [], "isComplete": false}',
                rng=random.Random(1),
            )

        assert len(board) == 49
        assert board.count_filled() == 15
        assert "Failed to parse persisted game state" in caplog.text
