"""Sliding puzzle engine tests."""

from __future__ import annotations

import random

import pytest

from adventure.backend.engine.gameplay import MoveOutcome, PuzzleGame
from adventure.backend.models.board import Board, Direction

# Gap in the centre so every direction has a tile behind it
_CENTRE = [1, 2, 3, 4, 0, 5, 6, 7, 8]


def _game(flat: list[int]) -> PuzzleGame:
    return PuzzleGame.from_board(Board.from_flat(flat))


def test_new_game_starts_unsolved(rng: random.Random) -> None:
    game = PuzzleGame(rng=rng)
    assert not game.is_won
    assert game.state.moves == 0


@pytest.mark.parametrize("index", [0, 2, 6, 8, 4, -1, 9, 42])
def test_non_adjacent_move_is_invalid_and_leaves_board(index: int) -> None:
    game = _game(_CENTRE)
    before = game.board.cells[:]

    assert game.try_move(index) is MoveOutcome.INVALID
    assert game.board.cells == before
    assert game.state.moves == 0


@pytest.mark.parametrize("index", [1, 3, 5, 7])
def test_adjacent_move_swaps_with_gap(index: int) -> None:
    game = _game(_CENTRE)
    tile = game.board.cells[index]

    assert game.try_move(index) is MoveOutcome.MOVED
    assert game.board.cells[4] == tile
    assert game.board.empty_index == index
    assert game.state.moves == 1


def test_moving_back_restores_board() -> None:
    game = _game(_CENTRE)
    before = game.board.cells[:]

    game.try_move(1)
    game.try_move(4)

    assert game.board.cells == before


def test_solving_move_sets_solved_and_locks_board() -> None:
    game = _game([1, 0, 2, 3, 4, 5, 6, 7, 8])

    assert game.try_move(0) is MoveOutcome.MOVED
    assert game.is_won
    assert game.board.cells == list(range(9))

    assert game.try_move(1) is MoveOutcome.IGNORED
    assert game.move(Direction.UP) is MoveOutcome.IGNORED
    assert game.board.cells == list(range(9))


@pytest.mark.parametrize(
    "direction, target",
    [
        (Direction.UP, 7),     # tile below the gap slides up
        (Direction.DOWN, 1),
        (Direction.LEFT, 5),
        (Direction.RIGHT, 3),
    ],
)
def test_direction_targets_from_centre(direction: Direction, target: int) -> None:
    assert _game(_CENTRE).target_for(direction) == target


def test_direction_at_edge_has_no_target() -> None:
    # Gap top-left: nothing above or to the left of it
    game = _game([0, 2, 1, 4, 3, 5, 6, 7, 8])
    assert game.target_for(Direction.DOWN) is None
    assert game.target_for(Direction.RIGHT) is None
    assert game.move(Direction.DOWN) is MoveOutcome.IGNORED
    assert game.target_for(Direction.UP) == 3
    assert game.target_for(Direction.LEFT) == 1


def test_direction_move_slides_tile() -> None:
    game = _game(_CENTRE)
    assert game.move(Direction.UP) is MoveOutcome.MOVED
    assert game.board.cells == [1, 2, 3, 4, 7, 5, 6, 0, 8]
