"""Board model tests."""

from __future__ import annotations

import pytest

from adventure.backend.models.board import Board


def test_solved_layout_puts_gap_first() -> None:
    board = Board.solved()
    assert board.cells == [0, 1, 2, 3, 4, 5, 6, 7, 8]
    assert board.empty_index == 0
    assert board.is_solved()


def test_blank_last_layout_is_not_solved() -> None:
    assert not Board.from_flat([1, 2, 3, 4, 5, 6, 7, 8, 0]).is_solved()


@pytest.mark.parametrize(
    "flat",
    [
        [0, 1, 2, 3, 4, 5, 6, 7],
        [0, 1, 2, 3, 4, 5, 6, 7, 7],
        [1, 2, 3, 4, 5, 6, 7, 8, 9],
    ],
)
def test_from_flat_rejects_non_permutations(flat: list[int]) -> None:
    with pytest.raises(ValueError):
        Board.from_flat(flat)


def test_adjacency_is_manhattan_distance_one() -> None:
    board = Board.solved()
    assert board.is_adjacent(4, 1)
    assert board.is_adjacent(4, 5)
    assert not board.is_adjacent(2, 3)  # row wrap
    assert not board.is_adjacent(0, 4)  # diagonal
    assert not board.is_adjacent(4, 4)


def test_neighbors_of_corner_and_centre() -> None:
    board = Board.solved()
    assert sorted(board.neighbors(0)) == [1, 3]
    assert sorted(board.neighbors(4)) == [1, 3, 5, 7]


def test_copy_is_independent() -> None:
    board = Board.solved()
    other = board.copy()
    other.swap_with_empty(1)
    assert board.cells[0] == 0
    assert other.cells[:2] == [1, 0]
