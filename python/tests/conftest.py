"""Shared fixtures: a hand-driven clock and a tone sink that records requests."""

from __future__ import annotations

import random

import pytest

from adventure.backend.engine.scheduler import Scheduler
from adventure.backend.models.settings import Settings, SettingsStore


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class RecordingTone:
    def __init__(self) -> None:
        self.played: list[tuple[float, float, float]] = []

    def play_tone(self, frequency: float, duration: float, gain: float) -> None:
        self.played.append((frequency, duration, gain))

    @property
    def frequencies(self) -> list[float]:
        return [f for f, _, _ in self.played]


class Driver:
    """Advances the fake clock and runs whatever timers came due."""

    def __init__(self, clock: FakeClock, scheduler: Scheduler) -> None:
        self.clock = clock
        self.scheduler = scheduler

    def advance(self, seconds: float) -> None:
        # Step in small increments so chained timers fire in order
        end = self.clock.now + seconds
        while self.clock.now < end:
            self.clock.now = min(end, self.clock.now + 0.05)
            self.scheduler.run_due()

    def settle(self) -> None:
        self.advance(30.0)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def scheduler(clock: FakeClock) -> Scheduler:
    return Scheduler(clock=clock)


@pytest.fixture
def driver(clock: FakeClock, scheduler: Scheduler) -> Driver:
    return Driver(clock, scheduler)


@pytest.fixture
def tone() -> RecordingTone:
    return RecordingTone()


@pytest.fixture
def store() -> SettingsStore:
    return SettingsStore(Settings())


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
