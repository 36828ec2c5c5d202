from eightpuzzle.engine.puzzlesolver.solver import Solver

__all__ = ["Solver"]
