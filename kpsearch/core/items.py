# kpsearch/core/items.py
# -*- coding: utf-8 -*-

'''
Item set model shared by every engine, plus the aggregation helpers used to
score candidate solutions.
'''

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .errors import InvalidInputError


@dataclass
class Item:
    """
    A single knapsack item.

    Attributes
    ----------
    id : int
        0-based index fixed when the item set is created (reassigned only when
        an engine permutes the set).
    value : int
        Positive value gained when selected.
    weight : int
        Positive weight consumed when selected.
    is_selected : bool
        Selection flag, mutated during search.
    blocked_by : int | None
        Position of the item currently suppressing this one, or None.
    block_list : list[int]
        Positions of the items this one dominates.
    """
    id: int
    value: int
    weight: int
    is_selected: bool = False
    blocked_by: Optional[int] = None
    block_list: List[int] = field(default_factory=list)

    def copy(self) -> "Item":
        return Item(
            id=self.id,
            value=self.value,
            weight=self.weight,
            is_selected=self.is_selected,
            blocked_by=self.blocked_by,
            block_list=list(self.block_list),
        )

    def dominates(self, other: "Item") -> bool:
        """True if this item is no heavier and no less valuable than `other`."""
        return self.weight <= other.weight and self.value >= other.value


class Scope(Enum):
    ALL = "all"
    SELECTED = "selected"


def copy_items(items: List[Item]) -> List[Item]:
    """Return an independent copy of the item set."""
    return [item.copy() for item in items]


def total(items: List[Item], attribute: str = "value", scope: Scope = Scope.ALL) -> int:
    """
    Sums an item attribute across the item set.

    Args:
        items (List[Item]): The item set.
        attribute (str): Either 'value' or 'weight'.
        scope (Scope): Scope.ALL to add up every item, Scope.SELECTED to add up
            only the selected ones.

    Returns:
        int: The requested total.
    """
    if attribute not in ("value", "weight"):
        raise ValueError(f"Attribute must be 'value' or 'weight', got '{attribute}'")

    result = 0
    for item in items:
        if scope is Scope.ALL or item.is_selected:
            result += getattr(item, attribute)
    return result


def sum_values(items: List[Item], add_all: bool = False) -> int:
    return total(items, "value", Scope.ALL if add_all else Scope.SELECTED)


def sum_weights(items: List[Item], add_all: bool = False) -> int:
    return total(items, "weight", Scope.ALL if add_all else Scope.SELECTED)


def solution_value(items: List[Item], capacity: int) -> int:
    """
    Returns the value of the selected items, or -1 if they weigh more than
    `capacity`, so an over-weight candidate always loses to the empty one.
    """
    if sum_weights(items) > capacity:
        return -1
    return sum_values(items)


def validate_instance(items: List[Item], capacity: int) -> None:
    """Raises InvalidInputError unless the instance meets the solver preconditions."""
    if not items:
        raise InvalidInputError("Item set must contain at least one item.")
    if capacity < 0:
        raise InvalidInputError(f"Capacity must be >= 0, got {capacity}.")
    for item in items:
        if item.value <= 0:
            raise InvalidInputError(f"Item[{item.id}] value must be > 0.")
        if item.weight <= 0:
            raise InvalidInputError(f"Item[{item.id}] weight must be > 0.")
