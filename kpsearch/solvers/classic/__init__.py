# kpsearch/solvers/classic/__init__.py
from .exhaustive import ExhaustiveSolver
from .branch_and_bound import BranchAndBoundSolver
from .blocking import BlockingSolver, SortedBlockingSolver
from .dp_solver import DPSolver

__all__ = [
    "ExhaustiveSolver",
    "BranchAndBoundSolver",
    "BlockingSolver",
    "SortedBlockingSolver",
    "DPSolver",
]
