from adventure.backend.engine.patternmemory.memory import Phase, PatternMemory, RoundOutcome

__all__ = ["Phase", "PatternMemory", "RoundOutcome"]
