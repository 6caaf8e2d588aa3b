"""Tracks the mutable state of a puzzle in progress."""

from __future__ import annotations

from adventure.backend.models.board import Board


class PuzzleState:
    """Holds the current board, move counter, and cached solved flag."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0
        self.solved: bool = board.is_solved()

    # -- moves ----------------------------------------------------------------

    def record_move(self) -> None:
        self.moves += 1
        self.solved = self.board.is_solved()

    @property
    def empty_index(self) -> int:
        return self.board.empty_index
