"""Puzzle Adventure.

Usage::

    puzzle-adventure                     # Rich terminal
    puzzle-adventure -f pygame           # Pygame window
    puzzle-adventure --high-contrast --no-audio
"""

from __future__ import annotations

import importlib
import logging
from enum import StrEnum

import typer
from rich.logging import RichHandler

from adventure.backend.engine.notifier import PygameTone, SilentTone, ToneSink
from adventure.backend.models.settings import Settings

logger = logging.getLogger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    rich = "rich"
    pygame = "pygame"


_RUNNERS = {
    Frontend.rich: "adventure.frontend.cli.rich.app",
    Frontend.pygame: "adventure.frontend.gui.pygame.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(show_time=False, show_path=False)],
    )


def _make_tone(silent: bool) -> ToneSink:
    if silent:
        return SilentTone()
    return PygameTone()


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Frontend to launch.",
    ),
    high_contrast: bool = typer.Option(
        False, "--high-contrast",
        help="Start with the high-contrast display.",
    ),
    dyslexia_font: bool = typer.Option(
        False, "--dyslexia-font",
        help="Start with the dyslexia-friendly typeface.",
    ),
    audio: bool = typer.Option(
        True, "--audio/--no-audio",
        help="Play audio cues.",
    ),
    captions: bool = typer.Option(
        True, "--captions/--no-captions",
        help="Show captions for game events.",
    ),
    silent: bool = typer.Option(
        False, "--silent",
        help="Never open an audio device (audio cues can't be re-enabled).",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log debug output.",
    ),
) -> None:
    """Puzzle Adventure — a sliding puzzle and a pattern memory game."""
    _configure_logging(verbose)
    settings = Settings(
        high_contrast=high_contrast,
        dyslexia_font=dyslexia_font,
        audio_cues=audio,
        captions=captions,
    )
    logger.debug("Launching %s frontend with %s", frontend.value, settings)

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(settings=settings, tone=_make_tone(silent))


if __name__ == "__main__":
    app()
