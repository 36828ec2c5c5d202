from eightpuzzle.engine.generator.generator import DEFAULT_SCRAMBLE_STEPS, BoardGenerator

__all__ = ["DEFAULT_SCRAMBLE_STEPS", "BoardGenerator"]
