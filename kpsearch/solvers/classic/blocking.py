# kpsearch/solvers/classic/blocking.py
# -*- coding: utf-8 -*-

'''
Branch and bound augmented with a domination ("blocking") relation.

Item A dominates item B when A is no heavier and no less valuable than B.
Once A is excluded in the active branch, including B can never beat
including A instead, so B is blocked until the search backtracks past A.
'''

import logging
from typing import List

from kpsearch.core.items import Item, copy_items, sum_values
from kpsearch.core.result import SolveResult
from .branch_and_bound import Branch, BranchAndBoundSolver, pick_better

logger = logging.getLogger(__name__)


def make_block_lists(items: List[Item]) -> None:
    """Rebuilds every item's block_list as the positions of the items it dominates."""
    for i, item in enumerate(items):
        item.block_list = [
            j for j, other in enumerate(items)
            if i != j and item.dominates(other)
        ]


def block_items(items: List[Item], source: int) -> None:
    """Blocks the items dominated by items[source] that nobody blocks yet."""
    for index in items[source].block_list:
        if items[index].blocked_by is None:
            items[index].blocked_by = source


def unblock_items(items: List[Item], source: int) -> None:
    """Releases only the items that items[source] itself blocked."""
    for index in items[source].block_list:
        if items[index].blocked_by == source:
            items[index].blocked_by = None


def sort_by_domination(items: List[Item]) -> List[Item]:
    """
    Reorders the item set so items that dominate the most others come first.

    The sort is stable: items with equally long block lists keep their
    relative order. Ids are reassigned to the new positions and the block
    lists are rebuilt against them.
    """
    make_block_lists(items)
    ordered = sorted(items, key=lambda item: len(item.block_list), reverse=True)

    for position, item in enumerate(ordered):
        item.id = position

    # The old lists point at the previous positions
    make_block_lists(ordered)
    return ordered


class BlockingSolver(BranchAndBoundSolver):
    """
    Branch and bound that never tries to include an item while an item
    dominating it is excluded in the active branch.
    """
    def __init__(self, config=None):
        super().__init__(config)
        self.name = "Blocking"

    def _prepare(self, items: List[Item]) -> List[Item]:
        make_block_lists(items)
        return items

    def _solve(self, items: List[Item], capacity: int) -> SolveResult:
        items = self._prepare(items)
        blocking = sum(1 for item in items if item.block_list)
        logger.debug(f"{self.name}: {blocking} of {len(items)} items dominate at least one other")

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

        if current_value + remaining_value <= best_value:
            return None, current_value, 1

        item = items[next_index]
        included = (None, 0, 0)

        if item.blocked_by is None and current_weight + item.weight <= capacity:
            item.is_selected = True
            included = self._search(
                items, capacity, next_index + 1, best_value,
                current_value + item.value,
                current_weight + item.weight,
                remaining_value - item.value,
            )
            if included[0] is not None and included[1] > best_value:
                best_value = included[1]

        item.is_selected = False
        block_items(items, next_index)
        try:
            excluded = self._search(
                items, capacity, next_index + 1, best_value,
                current_value,
                current_weight,
                remaining_value - item.value,
            )
        finally:
            unblock_items(items, next_index)

        return pick_better(included, excluded)


class SortedBlockingSolver(BlockingSolver):
    """
    Blocking search over the item set reordered by descending block-list
    length, so the strongest dominators are decided first and block sooner.
    The returned snapshot follows the reordered sequence and its new ids.
    """
    def __init__(self, config=None):
        super().__init__(config)
        self.name = "Sorted Blocking"

    def _prepare(self, items: List[Item]) -> List[Item]:
        return sort_by_domination(items)
