# kpsearch/solvers/classic/dp_solver.py
import logging
from typing import List, Tuple

from kpsearch.core.errors import InternalInconsistencyError
from kpsearch.core.items import Item, sum_values
from kpsearch.core.result import SolveResult
from kpsearch.solvers.interface import SolverInterface

logger = logging.getLogger(__name__)


def build_tables(items: List[Item], capacity: int) -> Tuple[List[List[int]], List[List[int]]]:
    """
    Fills the value table and the back-pointer table bottom-up.

    values[i][w] is the best value reachable with items 0..i inside weight w.
    back_pointers[i][w] is the weight to look up in row i - 1: equal to w when
    item i was left out, w - weight(i) when it was taken.

    Args:
        items (List[Item]): The item set.
        capacity (int): The maximum capacity of the knapsack.

    Returns:
        Tuple[List[List[int]], List[List[int]]]: (values, back_pointers), each
        len(items) rows by capacity + 1 columns.
    """
    n = len(items)
    values = [[0] * (capacity + 1) for _ in range(n)]
    back_pointers = [[0] * (capacity + 1) for _ in range(n)]

    # First row: item 0 alone
    first = items[0]
    for w in range(capacity + 1):
        if first.weight <= w:
            values[0][w] = first.value
            back_pointers[0][w] = w - first.weight
        else:
            values[0][w] = 0
            back_pointers[0][w] = w

    for i in range(1, n):
        current_weight = items[i].weight
        current_value = items[i].value
        for w in range(capacity + 1):
            # Case 1: Don't include the current item
            value_without_item = values[i - 1][w]

            # Case 2: Include the current item (if capacity allows); wins ties
            if current_weight <= w:
                value_with_item = values[i - 1][w - current_weight] + current_value
                if value_with_item >= value_without_item:
                    values[i][w] = value_with_item
                    back_pointers[i][w] = w - current_weight
                    continue

            values[i][w] = value_without_item
            back_pointers[i][w] = w

    return values, back_pointers


def reconstruct(items: List[Item], back_pointers: List[List[int]], capacity: int) -> None:
    """
    Marks the selected items by walking the back-pointers from the last row
    to the first.
    """
    for item in items:
        item.is_selected = False

    w = capacity
    for i in range(len(items) - 1, -1, -1):
        previous = back_pointers[i][w]
        if previous < 0 or previous > capacity:
            raise InternalInconsistencyError(
                f"Back-pointer at row {i}, weight {w} points to weight {previous}, "
                f"outside 0..{capacity}."
            )
        if previous != w:
            items[i].is_selected = True
            w = previous


class DPSolver(SolverInterface):
    """
    A solver for the 0-1 Knapsack Problem using a 2D Dynamic Programming table
    with back-pointer reconstruction of the chosen items.

    Time and space are O(n * capacity) regardless of the item order.
    """
    def __init__(self, config=None):
        super().__init__(config)
        self.name = "Dynamic Programming"

    def _solve(self, items: List[Item], capacity: int) -> SolveResult:
        values, back_pointers = build_tables(items, capacity)
        reconstruct(items, back_pointers, capacity)

        total_value = sum_values(items)
        if total_value != values[-1][capacity]:
            raise InternalInconsistencyError(
                f"Reconstructed value {total_value} does not match table value {values[-1][capacity]}."
            )
        logger.debug(f"{self.name}: filled a {len(values)}x{capacity + 1} table")
        return SolveResult(items, total_value, 1)
