"""Settings panel tests: draft editing and focus trapping."""

from __future__ import annotations

import pytest

from adventure.backend.models.settings import Settings, SettingsStore
from adventure.frontend.settings_panel import APPLY, BACK, CONTROLS, SettingsPanel


def test_tab_wraps_from_last_to_first() -> None:
    panel = SettingsPanel(draft=Settings())
    panel.focus_on(BACK)
    panel.handle("tab")
    assert panel.focus == 0


def test_backtab_wraps_from_first_to_last() -> None:
    panel = SettingsPanel(draft=Settings())
    panel.handle("backtab")
    assert panel.focused == CONTROLS[-1]


def test_toggle_only_changes_draft() -> None:
    store = SettingsStore(Settings())
    panel = SettingsPanel(draft=store.current)

    assert panel.handle("select") is None
    assert panel.draft.high_contrast
    assert not store.current.high_contrast


def test_digit_toggles_option() -> None:
    panel = SettingsPanel(draft=Settings())
    panel.handle("3")
    assert not panel.draft.audio_cues


@pytest.mark.parametrize("control, result", [(APPLY, APPLY), (BACK, BACK)])
def test_buttons_close_panel(control: str, result: str) -> None:
    panel = SettingsPanel(draft=Settings())
    panel.focus_on(control)
    assert panel.handle("select") == result


def test_escape_is_back() -> None:
    assert SettingsPanel(draft=Settings()).handle("quit") == BACK


def test_unknown_setting_name() -> None:
    with pytest.raises(ValueError):
        Settings().toggled("volume")
