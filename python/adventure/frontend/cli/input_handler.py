"""Non-blocking single-keypress reader for the terminal frontend.

The game loop has to keep running timers while it waits, so the only
public reader takes a timeout. Works on macOS / Linux (tty + termios +
select) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys
import time

# -- key mapping ---------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "n": "hint",
    "o": "settings",
    "c": "continue",
    "\t": "tab",
    " ": "select",
    "\r": "select",
    "\n": "select",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "Z": "backtab",  # Shift-Tab
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string.

    Digits and other printable characters come back unchanged so the
    frontends can use them as menu or color choices.
    """
    action = _KEY_MAP.get(ch) or _KEY_MAP.get(ch.lower())
    if action:
        return action
    return ch if ch.isprintable() else ""


# -- platform readers ----------------------------------------------------------


def _read_windows(timeout: float) -> str | None:
    import msvcrt  # type: ignore[import-not-found]

    end = time.monotonic() + timeout
    while time.monotonic() < end:
        if msvcrt.kbhit():
            ch = msvcrt.getwch()
            if ch in ("\x00", "\xe0"):
                code = msvcrt.getwch()
                return {"H": "up", "P": "down", "K": "left", "M": "right"}.get(code, "")
            if ch == "\x1b":
                return "quit"
            return resolve(ch)
        time.sleep(0.02)
    return None


def _read_unix(timeout: float) -> str | None:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)

    def pending(wait: float) -> bool:
        ready, _, _ = select.select([fd], [], [], wait)
        return bool(ready)

    try:
        tty.setraw(fd)
        if not pending(timeout):
            return None

        # os.read is unbuffered so select() still sees the rest of an
        # escape sequence.
        ch = os.read(fd, 1).decode("utf-8", errors="ignore")
        if ch != "\x1b":
            return resolve(ch)

        # ESC [ A/B/C/D/Z, or a bare Escape
        if not pending(0.1):
            return "quit"
        if os.read(fd, 1).decode("utf-8", errors="ignore") != "[":
            return "quit"
        if not pending(0.1):
            return ""
        return _ARROW_MAP.get(os.read(fd, 1).decode("utf-8", errors="ignore"), "")
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


# -- public API ----------------------------------------------------------------


def get_key_timeout(timeout: float) -> str | None:
    """Read one keypress, waiting at most *timeout* seconds.

    Returns ``None`` if nothing was pressed. Otherwise one of:
        "up", "down", "left", "right"  — movement
        "quit"                         — q / Ctrl-C / Escape
        "restart"                      — r
        "hint"                         — n
        "settings"                     — o
        "continue"                     — c (next level)
        "tab", "backtab"               — focus movement
        "select"                       — Enter / Space
        "<char>"                       — any other printable char
        ""                             — unrecognised key
    """
    if os.name == "nt":
        return _read_windows(timeout)
    return _read_unix(timeout)
