"""
Tests for the item set model and the aggregation helpers.
"""

import pytest

from kpsearch.core.errors import InvalidInputError
from kpsearch.core.items import (
    Item,
    Scope,
    copy_items,
    total,
    sum_values,
    sum_weights,
    solution_value,
    validate_instance,
)
from tests.conftest import build_items


def test_total_all_and_selected(three_items):
    three_items[1].is_selected = True
    assert total(three_items, "value", Scope.ALL) == 22
    assert total(three_items, "weight", Scope.ALL) == 14
    assert total(three_items, "value", Scope.SELECTED) == 6
    assert total(three_items, "weight", Scope.SELECTED) == 4


def test_total_rejects_unknown_attribute(three_items):
    with pytest.raises(ValueError):
        total(three_items, "id")


def test_sum_helpers_match_total(three_items):
    three_items[0].is_selected = True
    assert sum_values(three_items) == 10
    assert sum_weights(three_items) == 6
    assert sum_values(three_items, add_all=True) == 22
    assert sum_weights(three_items, add_all=True) == 14


def test_solution_value_within_capacity(three_items):
    three_items[1].is_selected = True
    three_items[2].is_selected = True
    assert solution_value(three_items, 8) == 12


def test_solution_value_over_capacity_is_minus_one(three_items):
    for item in three_items:
        item.is_selected = True
    assert solution_value(three_items, 13) == -1


def test_empty_selection_scores_zero(three_items):
    assert solution_value(three_items, 0) == 0


def test_copy_items_is_independent(three_items):
    three_items[0].block_list = [1, 2]
    copied = copy_items(three_items)

    copied[0].is_selected = True
    copied[0].blocked_by = 2
    copied[0].block_list.append(5)

    assert three_items[0].is_selected is False
    assert three_items[0].blocked_by is None
    assert three_items[0].block_list == [1, 2]
    assert copied[0] is not three_items[0]


def test_dominates():
    light_rich = Item(id=0, value=8, weight=3)
    heavy_poor = Item(id=1, value=5, weight=7)
    assert light_rich.dominates(heavy_poor)
    assert not heavy_poor.dominates(light_rich)
    # Equal items dominate each other
    twin = Item(id=2, value=8, weight=3)
    assert light_rich.dominates(twin) and twin.dominates(light_rich)


@pytest.mark.parametrize("items, capacity", [
    ([], 10),
    (build_items([(1, 1)]), -1),
    (build_items([(0, 1)]), 5),
    (build_items([(1, 0)]), 5),
    (build_items([(3, -2)]), 5),
])
def test_validate_instance_rejects_bad_input(items, capacity):
    with pytest.raises(InvalidInputError):
        validate_instance(items, capacity)


def test_validate_instance_accepts_zero_capacity(three_items):
    validate_instance(three_items, 0)
