"""Core puzzle logic — validates moves and checks the win condition."""

from __future__ import annotations

import logging
import random
from enum import StrEnum

from adventure.backend.engine.gamegenerator import GameGenerator
from adventure.backend.engine.gamestate import PuzzleState
from adventure.backend.models.board import PUZZLE_SIZE, Board, Direction

logger = logging.getLogger(__name__)


class MoveOutcome(StrEnum):
    MOVED = "moved"
    INVALID = "invalid"
    # Board already solved, or a direction with no tile behind the gap
    IGNORED = "ignored"


class PuzzleGame:
    """Orchestrates a single sliding puzzle."""

    def __init__(self, size: int = PUZZLE_SIZE, rng: random.Random | None = None) -> None:
        self.size = size
        self.state = PuzzleState(GameGenerator.generate(size, rng))

    @classmethod
    def from_board(cls, board: Board) -> "PuzzleGame":
        """Create a puzzle from an existing board (e.g. a test fixture)."""
        obj = object.__new__(cls)
        obj.size = board.size
        obj.state = PuzzleState(board)
        return obj

    # -- movement -------------------------------------------------------------

    def target_for(self, direction: Direction) -> int | None:
        """Return the index of the tile that would slide in *direction*.

        E.g. ``Direction.UP`` picks the tile **below** the gap, which then
        slides up. Returns None when that tile would be off the board.
        """
        n = self.size
        empty = self.state.empty_index
        row, col = divmod(empty, n)

        if direction is Direction.UP and row < n - 1:
            return empty + n
        if direction is Direction.DOWN and row > 0:
            return empty - n
        if direction is Direction.LEFT and col < n - 1:
            return empty + 1
        if direction is Direction.RIGHT and col > 0:
            return empty - 1
        return None

    def move(self, direction: Direction) -> MoveOutcome:
        """Slide a tile in *direction* into the gap."""
        if self.state.solved:
            return MoveOutcome.IGNORED
        target = self.target_for(direction)
        if target is None:
            return MoveOutcome.IGNORED
        return self.try_move(target)

    def try_move(self, index: int) -> MoveOutcome:
        """Move the tile at *index* into the gap if they are 4-adjacent."""
        if self.state.solved:
            return MoveOutcome.IGNORED

        board = self.state.board
        if not board.in_bounds(index) or not board.is_adjacent(index, board.empty_index):
            logger.debug("Rejected move of cell %s (gap at %d)", index, board.empty_index)
            return MoveOutcome.INVALID

        board.swap_with_empty(index)
        self.state.record_move()
        if self.state.solved:
            logger.info("Puzzle solved in %d moves", self.state.moves)
        return MoveOutcome.MOVED

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def is_won(self) -> bool:
        return self.state.solved
