"""Narrative text shown around each level."""

from __future__ import annotations

INTRO = (
    "The old lighthouse keeper has vanished, leaving behind a locked "
    "cabinet and a lamp that flickers in strange colors."
)

PUZZLE = (
    "The cabinet lock is a sliding tile puzzle. Slide the tiles until the "
    "gap sits in the top-left corner and the numbers run 1 to 8."
)

MEMORY = (
    "Inside the cabinet is the lamp's control panel. It flashes a pattern. "
    "Repeat it back, one color at a time, until the beam holds steady."
)

ENDING = "To be continued… More adventure coming soon!"
