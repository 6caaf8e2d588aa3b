"""Pygame GUI frontend — fully self-contained.

Title screen, both levels, the settings panel, and the ending. Every
control is reachable from the keyboard; the settings panel traps Tab
focus the same way the terminal version does.
"""

from __future__ import annotations

import enum

import pygame

from adventure.backend.engine.notifier import ToneSink
from adventure.backend.engine.patternmemory import Phase
from adventure.backend.engine.session import GameSession, Level
from adventure.backend.models.board import Direction
from adventure.backend.models.palette import PALETTE
from adventure.backend.models.settings import Settings, SettingsStore
from adventure.frontend.settings_panel import APPLY, BACK, CONTROLS, OPTIONS, SettingsPanel


# ---------------------------------------------------------------------------
# Palettes (Catppuccin Mocha, and a high-contrast alternative)
# ---------------------------------------------------------------------------
_THEME = {
    "base": (30, 30, 46),
    "mantle": (24, 24, 37),
    "surface": (49, 50, 68),
    "overlay": (108, 112, 134),
    "text": (205, 214, 244),
    "subtext": (166, 173, 200),
    "tile": (137, 180, 250),
    "tile_text": (30, 30, 46),
    "good": (166, 227, 161),
    "accent": (249, 226, 175),
    "focus": (245, 194, 231),
}
_THEME_CONTRAST = {
    "base": (0, 0, 0),
    "mantle": (0, 0, 0),
    "surface": (40, 40, 40),
    "overlay": (255, 255, 255),
    "text": (255, 255, 255),
    "subtext": (255, 255, 255),
    "tile": (255, 255, 255),
    "tile_text": (0, 0, 0),
    "good": (255, 255, 0),
    "accent": (255, 255, 0),
    "focus": (0, 255, 255),
}

_FONT_DEFAULT = "Helvetica"
_FONT_DYSLEXIA = "OpenDyslexic,Comic Sans MS,Verdana"


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 520, 680
TILE_GAP = 6
BOARD_PX = 330
PAD_PX = 150
BOARD_TOP = 140


class _Screen(enum.Enum):
    TITLE = "title"
    PLAYING = "playing"
    SETTINGS = "settings"
    ENDING = "ending"


_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}

_DIGITS = {getattr(pygame, f"K_{i}"): i for i in range(1, 10)}


def _cx(w: int) -> int:
    return (WIN_W - w) // 2


def _wrap(text: str, font: pygame.font.Font, width: int) -> list[str]:
    lines: list[str] = []
    line = ""
    for word in text.split():
        trial = f"{line} {word}".strip()
        if font.size(trial)[0] <= width:
            line = trial
        else:
            lines.append(line)
            line = word
    if line:
        lines.append(line)
    return lines


class PygameApp:
    def __init__(self, settings: Settings, tone: ToneSink | None = None) -> None:
        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("Puzzle Adventure")
        self._clock = pygame.time.Clock()

        self._session = GameSession(SettingsStore(settings), tone=tone)
        self._screen = _Screen.TITLE
        self._return_to = _Screen.TITLE
        self._panel: SettingsPanel | None = None
        self._fonts_for: Settings | None = None
        self._load_fonts()

    # ── theming ─────────────────────────────────────────────────────────────

    @property
    def _settings(self) -> Settings:
        return self._session.settings.current

    @property
    def _col(self) -> dict[str, tuple[int, int, int]]:
        return _THEME_CONTRAST if self._settings.high_contrast else _THEME

    def _load_fonts(self) -> None:
        if self._fonts_for == self._settings:
            return
        name = _FONT_DYSLEXIA if self._settings.dyslexia_font else _FONT_DEFAULT
        self._f_big = pygame.font.SysFont(name, 34, bold=True)
        self._f_title = pygame.font.SysFont(name, 22, bold=True)
        self._f_body = pygame.font.SysFont(name, 16)
        self._f_tile = pygame.font.SysFont(name, 40, bold=True)
        self._f_small = pygame.font.SysFont(name, 13)
        self._fonts_for = self._settings

    def _text(self, text: str, font: pygame.font.Font, color: str, y: int) -> int:
        rendered = font.render(text, True, self._col[color])
        self._surf.blit(rendered, (_cx(rendered.get_width()), y))
        return y + rendered.get_height()

    def _paragraph(self, text: str, y: int) -> int:
        for line in _wrap(text, self._f_body, WIN_W - 60):
            y = self._text(line, self._f_body, "subtext", y) + 2
        return y

    def _caption(self) -> None:
        caption = self._session.notifier.caption
        if not caption:
            return
        label = self._f_body.render(caption, True, self._col["base"])
        rect = pygame.Rect(0, 0, label.get_width() + 24, label.get_height() + 12)
        rect.center = (WIN_W // 2, WIN_H - 70)
        pygame.draw.rect(self._surf, self._col["accent"], rect, border_radius=8)
        self._surf.blit(label, (rect.x + 12, rect.y + 6))

    # ── geometry ────────────────────────────────────────────────────────────

    def _tile_rect(self, index: int) -> pygame.Rect:
        n = 3
        tpx = (BOARD_PX - (n + 1) * TILE_GAP) // n
        r, c = divmod(index, n)
        ox = _cx(BOARD_PX) + TILE_GAP
        return pygame.Rect(
            ox + c * (tpx + TILE_GAP), BOARD_TOP + TILE_GAP + r * (tpx + TILE_GAP), tpx, tpx
        )

    def _pad_rect(self, index: int) -> pygame.Rect:
        r, c = divmod(index, 2)
        ox = _cx(2 * PAD_PX + TILE_GAP)
        return pygame.Rect(
            ox + c * (PAD_PX + TILE_GAP), BOARD_TOP + r * (PAD_PX + TILE_GAP), PAD_PX, PAD_PX
        )

    def _settings_rect(self, i: int) -> pygame.Rect:
        return pygame.Rect(_cx(360), 150 + i * 56, 360, 44)

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw_title(self) -> None:
        y = self._text("PUZZLE  ADVENTURE", self._f_big, "text", 90)
        y = self._paragraph(self._session.story, y + 40)
        self._text("Enter  start      O  settings      Esc  quit", self._f_small, "overlay", y + 50)

    def _draw_playing(self) -> None:
        session = self._session
        col = self._col
        y = self._paragraph(session.story, 16)

        if session.level is Level.PUZZLE and session.puzzle is not None:
            game = session.puzzle
            self._text(f"Level 1 — Sliding Puzzle      Moves: {game.state.moves}",
                       self._f_title, "text", max(y + 6, BOARD_TOP - 34))
            pygame.draw.rect(
                self._surf, col["mantle"],
                pygame.Rect(_cx(BOARD_PX), BOARD_TOP, BOARD_PX, BOARD_PX), border_radius=10,
            )
            for idx, val in enumerate(game.board.cells):
                if val == 0:
                    continue
                rect = self._tile_rect(idx)
                fill = col["good"] if game.is_won or game.board.is_tile_correct(idx) else col["tile"]
                pygame.draw.rect(self._surf, fill, rect, border_radius=6)
                lbl = self._f_tile.render(str(val), True, col["tile_text"])
                self._surf.blit(lbl, lbl.get_rect(center=rect.center))
            hint = "Arrows / WASD / click  move     N  hint"
        elif session.level is Level.MEMORY and session.memory is not None:
            memory = session.memory
            phase = {
                Phase.PLAYBACK: "Watch…",
                Phase.INPUT: f"Your turn {len(memory.replay)}/{len(memory.sequence)}",
                Phase.WON: "Pattern mastered!",
            }.get(memory.phase, "")
            self._text(f"Level 2 — Round {memory.round_number}/{memory.win_length}   {phase}",
                       self._f_title, "text", max(y + 6, BOARD_TOP - 34))
            for i, color in enumerate(PALETTE):
                rect = self._pad_rect(i)
                rgb = color.rgb_contrast if self._settings.high_contrast else color.rgb
                if memory.lit != i:
                    rgb = tuple(v // 3 for v in rgb)
                pygame.draw.rect(self._surf, rgb, rect, border_radius=12)
                if memory.lit == i:
                    pygame.draw.rect(self._surf, col["text"], rect, width=4, border_radius=12)
                lbl = self._f_body.render(f"{i + 1}  {color.name}", True, col["text"])
                self._surf.blit(lbl, lbl.get_rect(center=rect.center))
            hint = "1-4 / click  choose color"
        else:
            return

        footer = f"{hint}     R  restart     O  settings     Esc  back"
        if session.level_won:
            footer = f"C  continue     {footer}"
        for i, line in enumerate(_wrap(footer, self._f_small, WIN_W - 40)):
            self._text(line, self._f_small, "overlay", WIN_H - 40 + i * 16)
        self._caption()

    def _draw_settings(self) -> None:
        panel = self._panel
        assert panel is not None
        col = self._col
        self._text("SETTINGS", self._f_big, "text", 70)
        labels = [label for _, label in OPTIONS] + ["Apply", "Back"]
        for i, (control, label) in enumerate(zip(CONTROLS, labels)):
            rect = self._settings_rect(i)
            pygame.draw.rect(self._surf, col["surface"], rect, border_radius=8)
            if control in (APPLY, BACK):
                text = label
            else:
                text = f"[{'x' if getattr(panel.draft, control) else ' '}]  {label}"
            lbl = self._f_body.render(text, True, col["text"])
            self._surf.blit(lbl, (rect.x + 14, rect.centery - lbl.get_height() // 2))
            if panel.focus == i:
                pygame.draw.rect(self._surf, col["focus"], rect, width=3, border_radius=8)
        self._text("Tab  move     Space / Enter  toggle     Esc  back",
                   self._f_small, "overlay", WIN_H - 40)

    def _draw_ending(self) -> None:
        y = self._text("★  BOTH LOCKS OPEN  ★", self._f_big, "good", 150)
        y = self._paragraph(self._session.story, y + 40)
        self._text("Enter  play again      Esc  quit", self._f_small, "overlay", y + 50)
        self._caption()

    # ── event handling ──────────────────────────────────────────────────────

    def _ev_title(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.KEYDOWN:
            if ev.key in (pygame.K_RETURN, pygame.K_SPACE):
                self._session.start_puzzle()
                self._screen = _Screen.PLAYING
            elif ev.key == pygame.K_o:
                self._open_settings()
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
        return True

    def _ev_playing(self, ev: pygame.event.Event) -> bool:
        session = self._session
        if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if session.level is Level.PUZZLE:
                for idx in range(9):
                    if self._tile_rect(idx).collidepoint(ev.pos):
                        session.dispatch(idx)
                        break
            elif session.level is Level.MEMORY:
                for i in range(len(PALETTE)):
                    if self._pad_rect(i).collidepoint(ev.pos):
                        session.dispatch(i)
                        break
        elif ev.type == pygame.KEYDOWN:
            if ev.key in _DIRECTIONS:
                session.dispatch(_DIRECTIONS[ev.key])
            elif ev.key in _DIGITS and session.level is Level.MEMORY:
                if _DIGITS[ev.key] <= len(PALETTE):
                    session.dispatch(_DIGITS[ev.key] - 1)
            elif ev.key == pygame.K_n:
                session.hint()
            elif ev.key == pygame.K_r:
                session.restart()
            elif ev.key == pygame.K_o:
                self._open_settings()
            elif ev.key == pygame.K_c and session.level_won:
                session.advance()
                if session.finished:
                    self._screen = _Screen.ENDING
            elif ev.key == pygame.K_ESCAPE:
                session.exit_level()
                self._screen = _Screen.TITLE
        return True

    def _ev_settings(self, ev: pygame.event.Event) -> bool:
        panel = self._panel
        assert panel is not None
        result: str | None = None
        if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            for i, control in enumerate(CONTROLS):
                if self._settings_rect(i).collidepoint(ev.pos):
                    panel.focus_on(control)
                    result = panel.activate()
                    break
        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_TAB:
                action = "backtab" if ev.mod & pygame.KMOD_SHIFT else "tab"
            elif ev.key in (pygame.K_RETURN, pygame.K_SPACE):
                action = "select"
            elif ev.key == pygame.K_ESCAPE:
                action = "quit"
            elif ev.key in (pygame.K_UP, pygame.K_DOWN):
                action = "up" if ev.key == pygame.K_UP else "down"
            else:
                action = ""
            result = panel.handle(action)

        if result == APPLY:
            self._session.apply_settings(panel.draft)
            self._load_fonts()
        if result in (APPLY, BACK):
            self._panel = None
            self._screen = self._return_to
        return True

    def _ev_ending(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.KEYDOWN:
            if ev.key in (pygame.K_RETURN, pygame.K_SPACE):
                self._session.finished = False
                self._session.start_puzzle()
                self._screen = _Screen.PLAYING
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
        return True

    def _open_settings(self) -> None:
        self._return_to = self._screen
        self._panel = SettingsPanel(draft=self._settings)
        self._screen = _Screen.SETTINGS

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        _dispatch = {
            _Screen.TITLE: self._ev_title,
            _Screen.PLAYING: self._ev_playing,
            _Screen.SETTINGS: self._ev_settings,
            _Screen.ENDING: self._ev_ending,
        }
        _draw = {
            _Screen.TITLE: self._draw_title,
            _Screen.PLAYING: self._draw_playing,
            _Screen.SETTINGS: self._draw_settings,
            _Screen.ENDING: self._draw_ending,
        }

        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    running = False
                    break
                if not _dispatch[self._screen](ev):
                    running = False
                    break

            self._session.tick()
            self._surf.fill(self._col["base"])
            _draw[self._screen]()
            pygame.display.flip()
            self._clock.tick(30)

        self._session.exit_level()
        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(settings: Settings, tone: ToneSink | None = None) -> None:
    """Launch the Pygame GUI (opens on the title screen)."""
    PygameApp(settings, tone).run_loop()
