"""Paired audio cue + caption feedback for game events."""

from __future__ import annotations

import logging
from enum import StrEnum

from adventure.backend.engine.notifier.tone import SilentTone, ToneSink
from adventure.backend.engine.scheduler import Scheduler, Timer
from adventure.backend.models.settings import SettingsStore

logger = logging.getLogger(__name__)

TONE_DURATION = 0.16
TONE_GAIN = 0.11
CAPTION_DURATION = 2.5


class Category(StrEnum):
    MOVE = "move"
    NEUTRAL = "neutral"
    INVALID = "invalid"
    WIN = "win"
    PATTERN = "pattern"


FREQUENCIES: dict[Category, float] = {
    Category.MOVE: 440.0,
    Category.NEUTRAL: 330.0,
    Category.INVALID: 220.0,
    Category.WIN: 660.0,
    Category.PATTERN: 550.0,
}


class Notifier:
    """Plays a tone per category and shows captions that clear themselves.

    Audio and captions are gated independently by the live settings. Only
    the latest caption's clear timer is ever pending.
    """

    def __init__(
        self,
        settings: SettingsStore,
        scheduler: Scheduler,
        tone: ToneSink | None = None,
    ) -> None:
        self._settings = settings
        self._scheduler = scheduler
        self._tone = tone or SilentTone()
        self._clear_timer: Timer | None = None
        self.caption: str = ""

    def notify(self, category: Category, message: str | None = None) -> None:
        current = self._settings.current
        if current.audio_cues:
            self._tone.play_tone(FREQUENCIES[category], TONE_DURATION, TONE_GAIN)
        if message:
            self.announce(message)

    def announce(self, message: str) -> None:
        """Show a caption without a tone."""
        if not self._settings.current.captions:
            return
        logger.debug("Caption: %s", message)
        self.caption = message
        if self._clear_timer is not None:
            self._clear_timer.cancel()
        self._clear_timer = self._scheduler.call_later(CAPTION_DURATION, self._clear)

    def _clear(self) -> None:
        self.caption = ""
        self._clear_timer = None
