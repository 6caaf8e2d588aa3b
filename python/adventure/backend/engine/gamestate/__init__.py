from adventure.backend.engine.gamestate.state import PuzzleState

__all__ = ["PuzzleState"]
