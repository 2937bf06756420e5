"""
Tests for the dynamic-programming tabulator.
"""

import pytest

from kpsearch.core.errors import InternalInconsistencyError
from kpsearch.core.items import copy_items, sum_values
from kpsearch.solvers.classic import DPSolver
from kpsearch.solvers.classic.dp_solver import build_tables, reconstruct


def test_table_shape(three_items):
    values, back_pointers = build_tables(three_items, 8)
    assert len(values) == 3 and len(back_pointers) == 3
    assert all(len(row) == 9 for row in values)
    assert all(len(row) == 9 for row in back_pointers)


def test_first_row(three_items):
    values, back_pointers = build_tables(three_items, 8)
    assert values[0] == [0, 0, 0, 0, 0, 0, 10, 10, 10]
    # Excluded cells point at their own weight, included ones at w - 6
    assert back_pointers[0] == [0, 1, 2, 3, 4, 5, 0, 1, 2]


def test_table_values(three_items):
    values, back_pointers = build_tables(three_items, 8)
    assert values[1][8] == 10
    assert values[2][8] == 12
    assert back_pointers[2][8] == 4
    assert back_pointers[1][4] == 0


def test_include_wins_ties():
    from tests.conftest import build_items
    items = build_items([(5, 3), (5, 3)])
    values, back_pointers = build_tables(items, 3)
    assert values[1][3] == 5
    # Row 1 could keep item 0 or take item 1; it takes item 1
    assert back_pointers[1][3] == 0


def test_solve_capacity_eight(three_items):
    solution, value, calls = DPSolver().solve(three_items, 8)
    assert value == 12
    assert [item.is_selected for item in solution] == [False, True, True]
    assert calls == 1


def test_reconstructed_value_matches_table(random_instances):
    for items, capacity in random_instances:
        values, _ = build_tables(items, capacity)
        solution, value, _ = DPSolver().solve(items, capacity)
        assert value == values[-1][capacity]
        assert sum_values(solution) == value


def test_reconstruct_rejects_out_of_range_pointer(three_items):
    _, back_pointers = build_tables(three_items, 8)
    back_pointers[2][8] = 42
    with pytest.raises(InternalInconsistencyError):
        reconstruct(copy_items(three_items), back_pointers, 8)


def test_reconstruct_rejects_negative_pointer(three_items):
    _, back_pointers = build_tables(three_items, 8)
    back_pointers[1][4] = -1
    with pytest.raises(InternalInconsistencyError):
        reconstruct(copy_items(three_items), back_pointers, 8)
