"""Settings panel state shared by the terminal and windowed frontends.

The panel edits a draft copy of the settings; nothing changes until the
player activates *Apply*. Keyboard focus is trapped inside the panel:
Tab past the last control wraps to the first and Shift-Tab before the
first wraps to the last.
"""

from __future__ import annotations

from dataclasses import dataclass

from adventure.backend.models.settings import Settings

# (settings field, label)
OPTIONS: tuple[tuple[str, str], ...] = (
    ("high_contrast", "High contrast"),
    ("dyslexia_font", "Dyslexia-friendly font"),
    ("audio_cues", "Audio cues"),
    ("captions", "Captions"),
)

APPLY = "apply"
BACK = "back"
CONTROLS: tuple[str, ...] = tuple(name for name, _ in OPTIONS) + (APPLY, BACK)


@dataclass
class SettingsPanel:
    draft: Settings
    focus: int = 0

    @property
    def focused(self) -> str:
        return CONTROLS[self.focus]

    def focus_next(self) -> None:
        self.focus = (self.focus + 1) % len(CONTROLS)

    def focus_prev(self) -> None:
        self.focus = (self.focus - 1) % len(CONTROLS)

    def focus_on(self, control: str) -> None:
        self.focus = CONTROLS.index(control)

    def activate(self) -> str | None:
        """Act on the focused control.

        Toggles a checkbox and returns None, or returns ``APPLY`` / ``BACK``
        for the two buttons so the caller can close the panel.
        """
        control = self.focused
        if control in (APPLY, BACK):
            return control
        self.draft = self.draft.toggled(control)
        return None

    def handle(self, action: str) -> str | None:
        """Feed a normalised key action; returns ``APPLY`` / ``BACK`` / None."""
        if action in ("tab", "down", "right"):
            self.focus_next()
        elif action in ("backtab", "up", "left"):
            self.focus_prev()
        elif action == "select":
            return self.activate()
        elif action == "quit":
            return BACK
        elif action.isdigit() and 1 <= int(action) <= len(OPTIONS):
            self.focus = int(action) - 1
            return self.activate()
        return None
