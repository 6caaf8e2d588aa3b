"""Accessibility settings shared by the notifier and the views."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    high_contrast: bool = False
    dyslexia_font: bool = False
    audio_cues: bool = True
    captions: bool = True

    def toggled(self, name: str) -> Settings:
        """Return a copy with the boolean option ``name`` flipped."""
        if name not in self.__dataclass_fields__:
            raise ValueError(f"Unknown setting {name!r}")
        return replace(self, **{name: not getattr(self, name)})


class SettingsStore:
    """Handle on the live settings record.

    Game logic only reads ``current``; the views change it through
    :meth:`apply`, which is the only mutation point.
    """

    def __init__(self, initial: Settings | None = None) -> None:
        self._current = initial or Settings()

    @property
    def current(self) -> Settings:
        return self._current

    def apply(self, settings: Settings) -> None:
        logger.debug("Applying settings: %s", settings)
        self._current = settings
