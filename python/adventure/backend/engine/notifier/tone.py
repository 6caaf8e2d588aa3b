"""Tone output for audio cues.

The notifier only asks for "a tone at this frequency"; how that becomes
sound is up to the sink. ``PygameTone`` synthesizes a triangle wave into
a ``pygame.mixer.Sound`` buffer and caches it per frequency.
"""

from __future__ import annotations

import array
import logging
from typing import Protocol

import pygame

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050


class ToneSink(Protocol):
    def play_tone(self, frequency: float, duration: float, gain: float) -> None: ...


class SilentTone:
    """Sink that drops every request (no audio device, or headless runs)."""

    def play_tone(self, frequency: float, duration: float, gain: float) -> None:
        return None


def triangle_wave(frequency: float, duration: float, gain: float,
                  sample_rate: int = SAMPLE_RATE) -> array.array:
    """Return signed 16-bit mono samples of a triangle wave."""
    count = int(sample_rate * duration)
    period = sample_rate / frequency
    peak = int(32767 * max(0.0, min(1.0, gain)))
    samples = array.array("h", [0] * count)
    for i in range(count):
        phase = (i % period) / period
        # 0 → 1 → -1 → 0 over one period
        value = 4 * phase if phase < 0.25 else 2 - 4 * phase if phase < 0.75 else 4 * phase - 4
        samples[i] = int(peak * value)
    return samples


class PygameTone:
    """Plays synthesized tones through ``pygame.mixer``."""

    def __init__(self, sample_rate: int = SAMPLE_RATE) -> None:
        self._sample_rate = sample_rate
        self._cache: dict[tuple[float, float, float], pygame.mixer.Sound] = {}
        self.enabled = True
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=sample_rate, size=-16, channels=1, buffer=512)
            logger.info("Sound system initialized")
        except pygame.error as e:
            logger.warning("Failed to initialize sound system: %s", e)
            self.enabled = False

    def play_tone(self, frequency: float, duration: float, gain: float) -> None:
        if not self.enabled:
            return
        key = (frequency, duration, gain)
        sound = self._cache.get(key)
        if sound is None:
            samples = triangle_wave(frequency, duration, gain, self._sample_rate)
            sound = pygame.mixer.Sound(buffer=samples.tobytes())
            self._cache[key] = sound
        sound.play()
