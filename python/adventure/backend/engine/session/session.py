"""Routes player input to the active level and relays outcomes as feedback."""

from __future__ import annotations

import logging
import random
from enum import StrEnum

from adventure.backend.engine.gameplay import MoveOutcome, PuzzleGame
from adventure.backend.engine.gamesolver import Solver
from adventure.backend.engine.notifier import Category, Notifier, ToneSink
from adventure.backend.engine.patternmemory import PatternMemory, RoundOutcome
from adventure.backend.engine.scheduler import Scheduler
from adventure.backend.engine.session import story
from adventure.backend.models.board import Direction
from adventure.backend.models.palette import color_name
from adventure.backend.models.settings import Settings, SettingsStore

logger = logging.getLogger(__name__)


class Level(StrEnum):
    NONE = "none"
    PUZZLE = "puzzle"
    MEMORY = "memory"


class GameSession:
    """Holds the active level and its engine.

    Only one engine is alive at a time; switching level drops the old one
    and stops its pending playback.
    """

    def __init__(
        self,
        settings: SettingsStore | None = None,
        scheduler: Scheduler | None = None,
        tone: ToneSink | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.settings = settings or SettingsStore()
        self.scheduler = scheduler or Scheduler()
        self.notifier = Notifier(self.settings, self.scheduler, tone)
        self._rng = rng
        self.level = Level.NONE
        self.puzzle: PuzzleGame | None = None
        self.memory: PatternMemory | None = None
        self.finished = False

    # -- level control --------------------------------------------------------

    @property
    def story(self) -> str:
        if self.finished:
            return story.ENDING
        return {
            Level.NONE: story.INTRO,
            Level.PUZZLE: story.PUZZLE,
            Level.MEMORY: story.MEMORY,
        }[self.level]

    def start_puzzle(self) -> None:
        self.exit_level()
        self.level = Level.PUZZLE
        self.puzzle = PuzzleGame(rng=self._rng)
        logger.info("Puzzle level started: %s", self.puzzle.board.cells)
        self.notifier.notify(
            Category.MOVE, "Puzzle started. Use arrow keys or click tiles to move."
        )

    def start_memory(self) -> None:
        self.exit_level()
        self.level = Level.MEMORY
        self.memory = PatternMemory(
            self.scheduler,
            self._rng,
            on_reveal=self._on_reveal,
            on_ready=self._on_ready,
        )
        logger.info("Memory level started")
        self.notifier.notify(Category.NEUTRAL, "Watch the pattern.")
        self.memory.start()

    def exit_level(self) -> None:
        if self.memory is not None:
            self.memory.stop()
        self.puzzle = None
        self.memory = None
        self.level = Level.NONE

    def restart(self) -> None:
        if self.level is Level.PUZZLE:
            self.start_puzzle()
        elif self.level is Level.MEMORY:
            self.start_memory()

    def advance(self) -> bool:
        """Move on once the current level is won. Returns True if it did."""
        if self.level is Level.PUZZLE and self.puzzle is not None and self.puzzle.is_won:
            self.start_memory()
            return True
        if self.level is Level.MEMORY and self.memory is not None and self.memory.is_won:
            self.exit_level()
            self.finished = True
            self.notifier.announce(story.ENDING)
            return True
        return False

    @property
    def level_won(self) -> bool:
        if self.level is Level.PUZZLE and self.puzzle is not None:
            return self.puzzle.is_won
        if self.level is Level.MEMORY and self.memory is not None:
            return self.memory.is_won
        return False

    # -- input ----------------------------------------------------------------

    def dispatch(self, action: Direction | int) -> MoveOutcome | RoundOutcome | None:
        """Route a direction key or a cell/color index to the active engine."""
        if self.level is Level.PUZZLE and self.puzzle is not None:
            if isinstance(action, Direction):
                outcome = self.puzzle.move(action)
            else:
                outcome = self.puzzle.try_move(action)
            self._relay_move(outcome)
            return outcome

        if self.level is Level.MEMORY and self.memory is not None:
            if isinstance(action, Direction):
                return None
            completed = len(self.memory.sequence)
            outcome = self.memory.submit_input(action)
            self._relay_round(outcome, action, completed)
            return outcome

        return None

    def hint(self) -> Direction | None:
        """Apply the solver's next best move on the puzzle level."""
        if self.level is not Level.PUZZLE or self.puzzle is None:
            return None
        direction = Solver.hint(self.puzzle.board)
        if direction is not None:
            self.dispatch(direction)
        return direction

    def apply_settings(self, settings: Settings) -> None:
        self.settings.apply(settings)
        self.notifier.announce("Settings applied.")

    def tick(self) -> int:
        """Run due timers; the frontend calls this from its loop."""
        return self.scheduler.run_due()

    # -- feedback -------------------------------------------------------------

    def _relay_move(self, outcome: MoveOutcome) -> None:
        if outcome is MoveOutcome.MOVED:
            self.notifier.notify(Category.MOVE, "Moved tile.")
            if self.puzzle is not None and self.puzzle.is_won:
                self.notifier.notify(Category.WIN, "Puzzle complete! Well done.")
        elif outcome is MoveOutcome.INVALID:
            self.notifier.notify(Category.INVALID, "Invalid move.")

    def _relay_round(self, outcome: RoundOutcome, color: int, completed: int) -> None:
        if outcome is RoundOutcome.CONTINUING:
            self.notifier.notify(Category.PATTERN, color_name(color))
        elif outcome is RoundOutcome.MISMATCH:
            self.notifier.notify(Category.INVALID, "Wrong color. Starting over.")
        elif outcome is RoundOutcome.ROUND_COMPLETE:
            if self.memory is not None and self.memory.is_won:
                self.notifier.notify(Category.WIN, "Pattern mastered! You win.")
            else:
                self.notifier.notify(Category.MOVE, f"Round {completed} complete.")

    def _on_reveal(self, color: int) -> None:
        self.notifier.notify(Category.PATTERN, color_name(color))

    def _on_ready(self) -> None:
        self.notifier.notify(Category.NEUTRAL, "Your turn. Repeat the pattern.")
