# kpsearch/solvers/classic/exhaustive.py
from typing import List, Tuple

from kpsearch.core.items import Item, copy_items, solution_value
from kpsearch.core.result import SolveResult
from kpsearch.solvers.interface import SolverInterface


class ExhaustiveSolver(SolverInterface):
    """
    Brute-force search over all 2^n subsets. Each item is first included, then
    excluded; the included branch is kept unless the excluded one is strictly
    better. Makes exactly 2^(n+1) - 1 calls.
    """
    def __init__(self, config=None):
        super().__init__(config)
        self.name = "Exhaustive Search"

    def _solve(self, items: List[Item], capacity: int) -> SolveResult:
        return SolveResult(*self._search(items, capacity, 0))

    def _search(self, items: List[Item], capacity: int, next_index: int) -> Tuple[List[Item], int, int]:
        if next_index >= len(items):
            return copy_items(items), solution_value(items, capacity), 1

        # Try to add the item
        items[next_index].is_selected = True
        best_items, best_value, calls = self._search(items, capacity, next_index + 1)

        # Try to leave it out
        items[next_index].is_selected = False
        other_items, other_value, other_calls = self._search(items, capacity, next_index + 1)

        calls += other_calls
        if other_value > best_value:
            best_items = other_items
            best_value = other_value
        return best_items, best_value, calls + 1
