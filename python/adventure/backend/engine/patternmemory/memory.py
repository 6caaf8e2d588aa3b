"""Simon-style pattern memory — sequence growth, playback, replay checks."""

from __future__ import annotations

import logging
import random
from enum import StrEnum
from typing import Callable

from adventure.backend.engine.scheduler import Scheduler, Timer
from adventure.backend.models.palette import PALETTE

logger = logging.getLogger(__name__)

WIN_LENGTH = 5
INITIAL_DELAY = 0.9  # seconds before the first flash of a round
FLASH_DURATION = 0.4
FLASH_GAP = 0.2


class Phase(StrEnum):
    IDLE = "idle"
    PLAYBACK = "playback"
    INPUT = "input"
    WON = "won"


class RoundOutcome(StrEnum):
    CONTINUING = "continuing"
    MISMATCH = "mismatch"
    ROUND_COMPLETE = "round_complete"
    # Input arrived outside the INPUT phase
    IGNORED = "ignored"


class PatternMemory:
    """One pattern-memory game.

    The sequence grows by one random color per round. During playback the
    colors are lit one at a time through scheduler callbacks; ``lit`` holds
    the index of the color currently shown (or None). Only one playback
    timer is ever pending, and every callback checks the round token it was
    created with so a restarted game never sees a stale flash.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        rng: random.Random | None = None,
        *,
        colors: int = len(PALETTE),
        win_length: int = WIN_LENGTH,
        on_reveal: Callable[[int], None] | None = None,
        on_ready: Callable[[], None] | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._rng = rng or random.Random()
        self.colors = colors
        self.win_length = win_length
        self.on_reveal = on_reveal
        self.on_ready = on_ready

        self.sequence: list[int] = []
        self.replay: list[int] = []
        self.phase = Phase.IDLE
        self.lit: int | None = None

        self._round = 0
        self._step = 0
        self._timer: Timer | None = None

    # -- lifecycle ------------------------------------------------------------

    def start(self) -> None:
        """Begin a fresh game from a one-color sequence."""
        self.sequence = []
        self.start_round()

    def start_round(self) -> None:
        self.replay = []
        self.sequence.append(self._rng.randrange(self.colors))
        self._round += 1
        self._step = 0
        self.lit = None
        self.phase = Phase.PLAYBACK
        logger.debug("Round %d: sequence %s", self._round, self.sequence)
        self._schedule(INITIAL_DELAY, self._flash_on)

    def stop(self) -> None:
        """Abandon any playback in flight."""
        self._cancel()
        self._round += 1
        self.lit = None

    # -- playback -------------------------------------------------------------

    def _schedule(self, delay: float, step: Callable[[], None]) -> None:
        self._cancel()
        token = self._round

        def fire() -> None:
            if token != self._round:
                return
            step()

        self._timer = self._scheduler.call_later(delay, fire)

    def _cancel(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _flash_on(self) -> None:
        color = self.sequence[self._step]
        self.lit = color
        if self.on_reveal is not None:
            self.on_reveal(color)
        self._schedule(FLASH_DURATION, self._flash_off)

    def _flash_off(self) -> None:
        self.lit = None
        self._step += 1
        if self._step < len(self.sequence):
            self._schedule(FLASH_GAP, self._flash_on)
            return
        self._timer = None
        self.replay = []
        self.phase = Phase.INPUT
        if self.on_ready is not None:
            self.on_ready()

    # -- input ----------------------------------------------------------------

    def submit_input(self, color: int) -> RoundOutcome:
        if self.phase is not Phase.INPUT:
            return RoundOutcome.IGNORED

        pos = len(self.replay)
        self.replay.append(color)
        if not 0 <= color < self.colors or self.sequence[pos] != color:
            logger.debug("Mismatch at position %d: got %s", pos, color)
            self.sequence = []
            self.replay = []
            self.start_round()
            return RoundOutcome.MISMATCH

        if len(self.replay) < len(self.sequence):
            return RoundOutcome.CONTINUING

        if len(self.sequence) >= self.win_length:
            self.phase = Phase.WON
            logger.info("Pattern game won at length %d", len(self.sequence))
        else:
            self.start_round()
        return RoundOutcome.ROUND_COMPLETE

    # -- queries --------------------------------------------------------------

    @property
    def round_number(self) -> int:
        return len(self.sequence)

    @property
    def is_won(self) -> bool:
        return self.phase is Phase.WON

    @property
    def accepting_input(self) -> bool:
        return self.phase is Phase.INPUT
