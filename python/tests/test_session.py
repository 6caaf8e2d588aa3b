"""Game session tests: routing, feedback mapping, level switching."""

from __future__ import annotations

import random

import pytest

from adventure.backend.engine.gameplay import MoveOutcome
from adventure.backend.engine.notifier.notifier import FREQUENCIES, Category
from adventure.backend.engine.patternmemory import Phase, RoundOutcome
from adventure.backend.engine.session import GameSession, Level, story
from adventure.backend.models.board import Board, Direction
from adventure.backend.models.settings import Settings, SettingsStore


@pytest.fixture
def session(scheduler, tone, rng: random.Random) -> GameSession:
    return GameSession(SettingsStore(Settings()), scheduler, tone, rng)


def _set_board(session: GameSession, flat: list[int]) -> None:
    assert session.puzzle is not None
    session.puzzle.state.board = Board.from_flat(flat)
    session.puzzle.state.solved = False


def _replay_round(session: GameSession) -> RoundOutcome | None:
    assert session.memory is not None
    outcome = None
    for color in list(session.memory.sequence):
        outcome = session.dispatch(color)
    return outcome


def test_starts_with_no_level(session: GameSession) -> None:
    assert session.level is Level.NONE
    assert session.dispatch(Direction.UP) is None
    assert session.dispatch(0) is None
    assert session.story == story.INTRO


def test_puzzle_start_announces(session: GameSession, tone) -> None:
    session.start_puzzle()
    assert session.level is Level.PUZZLE
    assert session.notifier.caption.startswith("Puzzle started.")
    assert tone.frequencies == [FREQUENCIES[Category.MOVE]]


def test_valid_move_notifies_move(session: GameSession, tone) -> None:
    session.start_puzzle()
    _set_board(session, [1, 2, 3, 4, 0, 5, 6, 7, 8])
    tone.played.clear()

    assert session.dispatch(1) is MoveOutcome.MOVED
    assert session.notifier.caption == "Moved tile."
    assert tone.frequencies == [FREQUENCIES[Category.MOVE]]


def test_invalid_move_notifies_invalid(session: GameSession, tone) -> None:
    session.start_puzzle()
    _set_board(session, [1, 2, 3, 4, 0, 5, 6, 7, 8])
    tone.played.clear()

    assert session.dispatch(0) is MoveOutcome.INVALID
    assert session.notifier.caption == "Invalid move."
    assert tone.frequencies == [FREQUENCIES[Category.INVALID]]


def test_direction_with_no_target_is_silent(session: GameSession, tone) -> None:
    session.start_puzzle()
    _set_board(session, [0, 2, 1, 4, 3, 5, 6, 7, 8])
    tone.played.clear()

    assert session.dispatch(Direction.DOWN) is MoveOutcome.IGNORED
    assert tone.played == []


def test_solving_move_notifies_win_and_advances(session: GameSession, tone) -> None:
    session.start_puzzle()
    _set_board(session, [1, 0, 2, 3, 4, 5, 6, 7, 8])
    tone.played.clear()

    assert session.dispatch(Direction.RIGHT) is MoveOutcome.MOVED
    assert session.level_won
    assert session.notifier.caption == "Puzzle complete! Well done."
    assert tone.frequencies == [FREQUENCIES[Category.MOVE], FREQUENCIES[Category.WIN]]

    assert session.advance()
    assert session.level is Level.MEMORY
    assert session.puzzle is None


def test_advance_requires_a_won_level(session: GameSession) -> None:
    session.start_puzzle()
    _set_board(session, [1, 2, 3, 4, 0, 5, 6, 7, 8])
    assert not session.advance()
    assert session.level is Level.PUZZLE


def test_hint_moves_towards_goal(session: GameSession) -> None:
    session.start_puzzle()
    _set_board(session, [1, 0, 2, 3, 4, 5, 6, 7, 8])
    assert session.hint() is Direction.RIGHT
    assert session.level_won


def test_memory_playback_then_turn(session: GameSession, driver, tone) -> None:
    session.start_memory()
    assert session.notifier.caption == "Watch the pattern."
    assert session.dispatch(0) is RoundOutcome.IGNORED

    driver.settle()
    assert session.memory is not None
    assert session.memory.phase is Phase.INPUT
    assert FREQUENCIES[Category.PATTERN] in tone.frequencies
    assert session.dispatch(Direction.UP) is None


def test_memory_round_complete_caption(session: GameSession, driver) -> None:
    session.start_memory()
    driver.settle()
    assert _replay_round(session) is RoundOutcome.ROUND_COMPLETE
    assert session.notifier.caption == "Round 1 complete."


def test_memory_mismatch_caption(session: GameSession, driver, tone) -> None:
    session.start_memory()
    driver.settle()
    assert session.memory is not None
    wrong = (session.memory.sequence[0] + 1) % 4
    tone.played.clear()

    assert session.dispatch(wrong) is RoundOutcome.MISMATCH
    assert session.notifier.caption == "Wrong color. Starting over."
    assert tone.frequencies == [FREQUENCIES[Category.INVALID]]


def test_memory_win_then_ending(session: GameSession, driver) -> None:
    session.start_memory()
    for _ in range(5):
        driver.settle()
        _replay_round(session)

    assert session.level_won
    assert session.notifier.caption == "Pattern mastered! You win."
    assert session.advance()
    assert session.finished
    assert session.level is Level.NONE
    assert session.story == story.ENDING


def test_switching_level_abandons_playback(session: GameSession, driver, scheduler) -> None:
    session.start_memory()
    old = session.memory
    session.start_puzzle()
    driver.settle()

    assert old is not None
    assert old.lit is None
    assert old.phase is Phase.PLAYBACK
    assert session.level is Level.PUZZLE


def test_restart_replaces_engine(session: GameSession) -> None:
    session.start_puzzle()
    first = session.puzzle
    session.restart()
    assert session.puzzle is not first
    assert session.level is Level.PUZZLE


def test_apply_settings(session: GameSession, tone) -> None:
    session.apply_settings(Settings(audio_cues=False, high_contrast=True))
    assert session.settings.current.high_contrast
    assert session.notifier.caption == "Settings applied."

    session.start_puzzle()
    assert tone.played == []
