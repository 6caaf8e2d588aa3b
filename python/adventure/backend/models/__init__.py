from adventure.backend.models.board import Board, Direction
from adventure.backend.models.palette import PALETTE, PaletteColor
from adventure.backend.models.settings import Settings, SettingsStore

__all__ = [
    "Board",
    "Direction",
    "PALETTE",
    "PaletteColor",
    "Settings",
    "SettingsStore",
]
