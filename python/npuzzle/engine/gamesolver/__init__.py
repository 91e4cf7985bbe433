from npuzzle.engine.gamesolver.path import Step, reconstruct
from npuzzle.engine.gamesolver.search import AStarSearch, SearchNode, Solution, search
from npuzzle.engine.gamesolver.solver import Solver

__all__ = ["AStarSearch", "SearchNode", "Solution", "Solver", "Step", "reconstruct", "search"]
