"""
Tests for the branch-and-bound engine.
"""

from kpsearch.core.items import Item
from kpsearch.solvers.classic import BranchAndBoundSolver, ExhaustiveSolver
from kpsearch.solvers.classic.branch_and_bound import pick_better


def test_three_items_capacity_eight(three_items):
    solution, value, calls = BranchAndBoundSolver().solve(three_items, 8)
    assert value == 12
    assert [item.is_selected for item in solution] == [False, True, True]
    # 15 calls for exhaustive search, bound pruning cuts this to 11
    assert calls == 11


def test_three_items_capacity_ten(three_items):
    solution, value, _ = BranchAndBoundSolver().solve(three_items, 10)
    assert value == 16
    assert [item.is_selected for item in solution] == [True, True, False]


def test_never_more_calls_than_exhaustive(random_instances):
    for items, capacity in random_instances:
        exhaustive = ExhaustiveSolver().solve(items, capacity)
        bnb = BranchAndBoundSolver().solve(items, capacity)
        assert bnb.value == exhaustive.value
        assert bnb.calls <= exhaustive.calls


def test_pick_better_prefers_include_on_ties():
    inc = ([Item(id=0, value=1, weight=1)], 5, 3)
    exc = ([Item(id=0, value=1, weight=1)], 5, 4)
    chosen = pick_better(inc, exc)
    assert chosen[0] is inc[0]
    assert chosen[1] == 5
    assert chosen[2] == 8


def test_pick_better_ignores_pruned_branches():
    snapshot = [Item(id=0, value=1, weight=1)]
    # A pruned exclude branch carries a number but no snapshot
    assert pick_better((snapshot, 3, 1), (None, 7, 1))[0] is snapshot
    assert pick_better((None, 9, 1), (snapshot, 2, 1))[0] is snapshot


def test_pick_better_takes_strictly_better_exclude():
    a = [Item(id=0, value=1, weight=1)]
    b = [Item(id=0, value=1, weight=1)]
    assert pick_better((a, 4, 1), (b, 6, 1))[0] is b
