# kpsearch/solvers/classic/branch_and_bound.py
from typing import List, Optional, Tuple

from kpsearch.core.items import Item, copy_items, sum_values
from kpsearch.core.result import SolveResult
from kpsearch.solvers.interface import SolverInterface

# (snapshot or None, value, calls)
Branch = Tuple[Optional[List[Item]], int, int]


def pick_better(included: Branch, excluded: Branch) -> Branch:
    """
    Chooses between the include and exclude results of a node and adds the
    node's own call. A branch without a snapshot was pruned and never wins;
    on equal values the include branch is kept.
    """
    inc_items, inc_value, inc_calls = included
    exc_items, exc_value, exc_calls = excluded
    calls = inc_calls + exc_calls + 1

    if inc_items is None:
        return exc_items, exc_value, calls
    if exc_items is None or inc_value >= exc_value:
        return inc_items, inc_value, calls
    return exc_items, exc_value, calls


class BranchAndBoundSolver(SolverInterface):
    """
    Depth-first search that abandons a branch as soon as the value committed
    so far plus the value of every undecided item cannot beat the best value
    already found.
    """
    def __init__(self, config=None):
        super().__init__(config)
        self.name = "Branch and Bound"

    def _solve(self, items: List[Item], capacity: int) -> SolveResult:
        remaining_value = sum_values(items, add_all=True)
        return SolveResult(*self._search(items, capacity, 0, 0, 0, 0, remaining_value))

    def _search(
        self,
        items: List[Item],
        capacity: int,
        next_index: int,
        best_value: int,
        current_value: int,
        current_weight: int,
        remaining_value: int,
    ) -> Branch:
        if next_index >= len(items):
            return copy_items(items), current_value, 1

        # No completion of this branch can improve on best_value
        if current_value + remaining_value <= best_value:
            return None, current_value, 1

        item = items[next_index]

        if current_weight + item.weight <= capacity:
            item.is_selected = True
            included = self._search(
                items, capacity, next_index + 1, best_value,
                current_value + item.value,
                current_weight + item.weight,
                remaining_value - item.value,
            )
            if included[0] is not None and included[1] > best_value:
                best_value = included[1]
        else:
            # The item does not fit: a cut node with no snapshot
            included = (None, 0, 1)

        item.is_selected = False
        excluded = self._search(
            items, capacity, next_index + 1, best_value,
            current_value,
            current_weight,
            remaining_value - item.value,
        )

        return pick_better(included, excluded)
