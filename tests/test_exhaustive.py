"""
Tests for the exhaustive search engine.
"""

import pytest

from kpsearch.core.items import sum_values, sum_weights
from kpsearch.solvers.classic import ExhaustiveSolver
from tests.conftest import build_items


@pytest.mark.parametrize("n", [1, 2, 5, 8])
def test_call_count_is_full_tree(n):
    items = build_items([(i + 1, i + 2) for i in range(n)])
    result = ExhaustiveSolver().solve(items, capacity=n)
    assert result.calls == 2 ** (n + 1) - 1


def test_three_items_capacity_eight(three_items):
    solution, value, calls = ExhaustiveSolver().solve(three_items, 8)
    assert value == 12
    assert [item.is_selected for item in solution] == [False, True, True]
    assert sum_weights(solution) == 8
    assert calls == 15


def test_three_items_capacity_ten(three_items):
    solution, value, _ = ExhaustiveSolver().solve(three_items, 10)
    assert value == 16
    # Include is explored first and kept on ties, so item 1 wins over item 2
    assert [item.is_selected for item in solution] == [True, True, False]
    assert sum_values(solution) == value


def test_does_not_mutate_caller_items(three_items):
    ExhaustiveSolver().solve(three_items, 8)
    assert not any(item.is_selected for item in three_items)
