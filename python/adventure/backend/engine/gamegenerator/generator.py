"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from adventure.backend.engine.gamesolver import Solver
from adventure.backend.models.board import PUZZLE_SIZE, Board

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 10_000


class GenerationError(RuntimeError):
    """Raised when no acceptable board turned up within the attempt cap."""


class GameGenerator:
    """Creates solvable puzzles by rejection-sampling random shuffles."""

    @staticmethod
    def shuffled(size: int = PUZZLE_SIZE, rng: random.Random | None = None) -> Board:
        """Return a uniformly random permutation, solvable or not."""
        cells = list(range(size * size))
        (rng or random).shuffle(cells)
        return Board(size=size, cells=cells)

    @staticmethod
    def generate(
        size: int = PUZZLE_SIZE,
        rng: random.Random | None = None,
        max_attempts: int = MAX_ATTEMPTS,
    ) -> Board:
        """Return a random *solvable*, not-yet-solved board of the given size.

        Roughly half of all shuffles are solvable, so a handful of attempts is
        typical; ``max_attempts`` only bounds a broken random source.
        """
        for attempt in range(1, max_attempts + 1):
            board = GameGenerator.shuffled(size, rng)
            if Solver.is_solvable(board) and not board.is_solved():
                logger.debug("Generated board %s after %d attempt(s)", board.cells, attempt)
                return board
        raise GenerationError(
            f"No solvable shuffle found in {max_attempts} attempts."
        )
