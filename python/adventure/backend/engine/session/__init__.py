from adventure.backend.engine.session.session import GameSession, Level

__all__ = ["GameSession", "Level"]
