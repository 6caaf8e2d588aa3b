from adventure.backend.engine.gamegenerator.generator import GameGenerator, GenerationError

__all__ = ["GameGenerator", "GenerationError"]
