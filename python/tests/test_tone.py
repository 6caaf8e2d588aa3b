"""Tone synthesis tests (no audio device needed)."""

from __future__ import annotations

from adventure.backend.engine.notifier.tone import SilentTone, triangle_wave


def test_triangle_wave_length_and_peak() -> None:
    samples = triangle_wave(440.0, 0.16, 0.11, sample_rate=22050)
    assert len(samples) == int(22050 * 0.16)
    peak = int(32767 * 0.11)
    assert max(samples) <= peak
    assert min(samples) >= -peak
    assert max(samples) > peak * 0.9


def test_triangle_wave_starts_at_zero() -> None:
    assert triangle_wave(330.0, 0.01, 0.5)[0] == 0


def test_silent_tone_accepts_requests() -> None:
    assert SilentTone().play_tone(440.0, 0.16, 0.11) is None
