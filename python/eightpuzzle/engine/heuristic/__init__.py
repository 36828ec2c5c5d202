from eightpuzzle.engine.heuristic.manhattan import heuristic, manhattan

__all__ = ["heuristic", "manhattan"]
