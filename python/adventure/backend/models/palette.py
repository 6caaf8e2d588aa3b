"""The four colors of the pattern-memory level."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PaletteColor:
    name: str
    rgb: tuple[int, int, int]
    # Used when high-contrast mode is on
    rgb_contrast: tuple[int, int, int]
    rich_style: str


PALETTE: tuple[PaletteColor, ...] = (
    PaletteColor("Red", (243, 139, 168), (255, 0, 0), "bold red"),
    PaletteColor("Green", (166, 227, 161), (0, 255, 0), "bold green"),
    PaletteColor("Blue", (137, 180, 250), (0, 128, 255), "bold blue"),
    PaletteColor("Yellow", (249, 226, 175), (255, 255, 0), "bold yellow"),
)


def color_name(index: int) -> str:
    if 0 <= index < len(PALETTE):
        return PALETTE[index].name
    return "Unknown"
