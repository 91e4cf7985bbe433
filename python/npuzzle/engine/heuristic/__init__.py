from npuzzle.engine.heuristic.manhattan import estimate

__all__ = ["estimate"]
