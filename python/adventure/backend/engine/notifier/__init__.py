from adventure.backend.engine.notifier.notifier import Category, Notifier
from adventure.backend.engine.notifier.tone import PygameTone, SilentTone, ToneSink

__all__ = ["Category", "Notifier", "PygameTone", "SilentTone", "ToneSink"]
