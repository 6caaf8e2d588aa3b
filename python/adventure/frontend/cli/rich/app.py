"""Rich terminal frontend — panels, tables, and captions.

Runs both levels and the settings panel in one loop. Input is polled with
a short timeout so the session's timers (pattern playback, caption
clearing) keep firing while the player thinks.
"""

from __future__ import annotations

import enum

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from adventure.backend.engine.gameplay import PuzzleGame
from adventure.backend.engine.notifier import ToneSink
from adventure.backend.engine.patternmemory import Phase, PatternMemory
from adventure.backend.engine.session import GameSession, Level
from adventure.backend.models.board import Direction
from adventure.backend.models.palette import PALETTE
from adventure.backend.models.settings import Settings, SettingsStore
from adventure.frontend.cli.input_handler import get_key_timeout
from adventure.frontend.settings_panel import APPLY, BACK, OPTIONS, SettingsPanel

console = Console()

POLL_INTERVAL = 0.1


_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


class _Screen(enum.Enum):
    TITLE = "title"
    PLAYING = "playing"
    SETTINGS = "settings"
    ENDING = "ending"


# -- styles -------------------------------------------------------------------


def _styles(settings: Settings) -> dict[str, str]:
    if settings.high_contrast:
        return {
            "border": "bold white",
            "tile": "bold black on white",
            "correct": "bold black on bright_yellow",
            "muted": "white",
            "caption": "bold black on bright_yellow",
            "title": "bold white",
        }
    return {
        "border": "bright_blue",
        "tile": "bold white",
        "correct": "bold green",
        "muted": "dim",
        "caption": "bold yellow",
        "title": "bold cyan",
    }


def _spaced(text: str, settings: Settings) -> str:
    """Widen letter spacing in dyslexia mode (the terminal font is fixed)."""
    if settings.dyslexia_font:
        return " ".join(text)
    return text


# -- rendering ----------------------------------------------------------------


def _render_board(game: PuzzleGame, st: dict[str, str]) -> Table:
    board = game.board
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style=st["border"],
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=3, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            idx = r * board.size + c
            if val == 0:
                cells.append(f"[{st['muted']}]·[/]")
            elif game.is_won or board.is_tile_correct(idx):
                cells.append(f"[{st['correct']}]{val}[/]")
            else:
                cells.append(f"[{st['tile']}]{val}[/]")
        table.add_row(*cells)
    return table


def _render_pads(memory: PatternMemory, st: dict[str, str], settings: Settings) -> Table:
    table = Table(show_header=False, box=rich.box.ROUNDED, border_style=st["border"])
    for _ in PALETTE:
        table.add_column(width=10, justify="center")
    cells: list[Text] = []
    for i, color in enumerate(PALETTE):
        label = f"{i + 1} {color.name}"
        if memory.lit == i:
            cells.append(Text(f"█ {label} █", style=f"reverse {color.rich_style}"))
        else:
            style = color.rich_style if settings.high_contrast else f"{color.rich_style} dim"
            cells.append(Text(label, style=style))
    table.add_row(*cells)
    return table


def _phase_line(memory: PatternMemory) -> str:
    if memory.phase is Phase.PLAYBACK:
        return "Watch…"
    if memory.phase is Phase.INPUT:
        return f"Your turn: {len(memory.replay)}/{len(memory.sequence)}"
    if memory.phase is Phase.WON:
        return "Pattern mastered!"
    return ""


def _caption(session: GameSession, st: dict[str, str]) -> Text:
    text = session.notifier.caption
    if not text:
        return Text("")
    return Text(_spaced(text, session.settings.current), style=st["caption"])


def _draw_title(session: GameSession) -> None:
    settings = session.settings.current
    st = _styles(settings)
    opts = Text()
    opts.append("  Enter", style="bold cyan")
    opts.append("  Start    ")
    opts.append("O", style="bold yellow")
    opts.append("  Settings    ")
    opts.append("Q", style="bold")
    opts.append("  Quit")
    body = Group(
        Text(""),
        Align.center(Text(_spaced(session.story, settings), justify="center")),
        Text(""),
        Align.center(opts),
        Text(""),
        Align.center(_caption(session, st)),
    )
    console.print()
    console.print(
        Align.center(
            Panel(
                body,
                title=f"[{st['title']}]P U Z Z L E   A D V E N T U R E[/]",
                border_style=st["border"],
                padding=(1, 4),
                width=72,
            )
        )
    )


def _draw_playing(session: GameSession) -> None:
    settings = session.settings.current
    st = _styles(settings)
    parts: list = [Align.center(Text(_spaced(session.story, settings), justify="center")), Text("")]

    controls = Text()
    if session.level is Level.PUZZLE and session.puzzle is not None:
        title = "Level 1 — Sliding Puzzle"
        parts.append(Align.center(_render_board(session.puzzle, st)))
        parts.append(Align.center(Text(f"Moves: {session.puzzle.state.moves}", style="bold yellow")))
        controls.append("↑↓←→/WASD", style="bold cyan")
        controls.append(" slide  ")
        controls.append("1-9", style="bold cyan")
        controls.append(" tile  ")
        controls.append("N", style="bold cyan")
        controls.append(" hint  ")
    elif session.level is Level.MEMORY and session.memory is not None:
        title = "Level 2 — Pattern Memory"
        parts.append(Align.center(_render_pads(session.memory, st, settings)))
        parts.append(
            Align.center(
                Text(f"Round {session.memory.round_number}/{session.memory.win_length}   "
                     f"{_phase_line(session.memory)}", style="bold yellow")
            )
        )
        controls.append("1-4", style="bold cyan")
        controls.append(" choose color  ")
    else:
        return

    if session.level_won:
        controls.append("C", style="bold green")
        controls.append(" continue  ")
    controls.append("R", style="bold cyan")
    controls.append(" restart  ")
    controls.append("O", style="bold cyan")
    controls.append(" settings  ")
    controls.append("Q", style="bold cyan")
    controls.append(" back")

    parts.extend([Text(""), Align.center(_caption(session, st))])
    console.print()
    console.print(
        Align.center(
            Panel(
                Group(*parts),
                title=f"[{st['title']}]{title}[/]",
                border_style="bold green" if session.level_won else st["border"],
                padding=(1, 2),
                width=72,
            )
        )
    )
    console.print(Align.center(controls))


def _draw_settings(session: GameSession, panel: SettingsPanel) -> None:
    st = _styles(session.settings.current)
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(justify="right")
    table.add_column()
    for i, (name, label) in enumerate(OPTIONS):
        mark = "[x]" if getattr(panel.draft, name) else "[ ]"
        style = "reverse" if panel.focused == name else ""
        table.add_row(Text(f"{i + 1}", style=st["muted"]), Text(f"{mark} {label}", style=style))
    buttons = Text()
    buttons.append(" Apply ", style="reverse bold" if panel.focused == APPLY else "bold")
    buttons.append("   ")
    buttons.append(" Back ", style="reverse bold" if panel.focused == BACK else "bold")

    hint = Text("Tab/arrows move  •  Space toggles  •  Esc back", style=st["muted"])
    console.print()
    console.print(
        Align.center(
            Panel(
                Group(table, Text(""), Align.center(buttons), Text(""), Align.center(hint)),
                title=f"[{st['title']}]Settings[/]",
                border_style=st["border"],
                padding=(1, 4),
                width=60,
            )
        )
    )


def _draw_ending(session: GameSession) -> None:
    st = _styles(session.settings.current)
    congrats = Text()
    congrats.append("★ ", style="bold yellow")
    congrats.append("Both locks are open!", style="bold green")
    congrats.append(" ★", style="bold yellow")
    body = Group(
        Align.center(congrats),
        Text(""),
        Align.center(Text(_spaced(session.story, session.settings.current))),
        Text(""),
        Align.center(Text("Press Enter to play again, Q to quit.", style=st["muted"])),
    )
    console.print()
    console.print(
        Align.center(Panel(body, border_style="bold green", padding=(1, 4), width=72))
    )


# -- app ----------------------------------------------------------------------


class RichApp:
    def __init__(self, settings: Settings, tone: ToneSink | None = None) -> None:
        self._session = GameSession(SettingsStore(settings), tone=tone)
        self._screen = _Screen.TITLE
        self._return_to = _Screen.TITLE
        self._panel: SettingsPanel | None = None

    # -- input ----------------------------------------------------------------

    def _on_title(self, key: str) -> bool:
        if key == "quit":
            return False
        if key in ("select", "1"):
            self._session.start_puzzle()
            self._screen = _Screen.PLAYING
        elif key == "settings":
            self._open_settings()
        return True

    def _on_playing(self, key: str) -> bool:
        session = self._session
        if key == "quit":
            session.exit_level()
            self._screen = _Screen.TITLE
        elif key == "restart":
            session.restart()
        elif key == "settings":
            self._open_settings()
        elif key == "continue" and session.level_won:
            session.advance()
            if session.finished:
                self._screen = _Screen.ENDING
        elif key == "hint":
            session.hint()
        elif key in _DIRECTIONS:
            session.dispatch(_DIRECTIONS[key])
        elif key.isdigit():
            self._dispatch_digit(int(key))
        return True

    def _dispatch_digit(self, digit: int) -> None:
        session = self._session
        if session.level is Level.PUZZLE and session.puzzle is not None:
            # Tiles are picked by the number printed on them
            cells = session.puzzle.board.cells
            if digit in cells and digit != 0:
                session.dispatch(cells.index(digit))
        elif session.level is Level.MEMORY and 1 <= digit <= len(PALETTE):
            session.dispatch(digit - 1)

    def _on_settings(self, key: str) -> bool:
        assert self._panel is not None
        result = self._panel.handle(key)
        if result == APPLY:
            self._session.apply_settings(self._panel.draft)
        if result in (APPLY, BACK):
            self._panel = None
            self._screen = self._return_to
        return True

    def _on_ending(self, key: str) -> bool:
        if key == "quit":
            return False
        if key == "select":
            self._session.finished = False
            self._session.start_puzzle()
            self._screen = _Screen.PLAYING
        return True

    def _open_settings(self) -> None:
        self._return_to = self._screen
        self._panel = SettingsPanel(draft=self._session.settings.current)
        self._screen = _Screen.SETTINGS

    # -- loop -----------------------------------------------------------------

    def _draw(self) -> None:
        console.clear()
        if self._screen is _Screen.TITLE:
            _draw_title(self._session)
        elif self._screen is _Screen.PLAYING:
            _draw_playing(self._session)
        elif self._screen is _Screen.SETTINGS:
            assert self._panel is not None
            _draw_settings(self._session, self._panel)
        elif self._screen is _Screen.ENDING:
            _draw_ending(self._session)

    def run_loop(self) -> None:
        handlers = {
            _Screen.TITLE: self._on_title,
            _Screen.PLAYING: self._on_playing,
            _Screen.SETTINGS: self._on_settings,
            _Screen.ENDING: self._on_ending,
        }
        self._draw()
        running = True
        while running:
            key = get_key_timeout(POLL_INTERVAL)
            dirty = self._session.tick() > 0
            if key is not None:
                running = handlers[self._screen](key)
                dirty = True
            if running and dirty:
                self._draw()

        self._session.exit_level()
        console.clear()
        console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))


# -- public entry point -------------------------------------------------------


def run(settings: Settings, tone: ToneSink | None = None) -> None:
    """Launch the Rich terminal frontend."""
    RichApp(settings, tone).run_loop()
