from adventure.backend.engine.gameplay.game import MoveOutcome, PuzzleGame

__all__ = ["MoveOutcome", "PuzzleGame"]
