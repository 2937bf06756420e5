"""
Shared fixtures for the knapsack engine tests.
"""

import pytest

from kpsearch.core.items import Item
from kpsearch.solvers.classic import (
    ExhaustiveSolver,
    BranchAndBoundSolver,
    BlockingSolver,
    SortedBlockingSolver,
    DPSolver,
)
from kpsearch.utils.generator import make_items


ALL_SOLVERS = [
    ExhaustiveSolver,
    BranchAndBoundSolver,
    BlockingSolver,
    SortedBlockingSolver,
    DPSolver,
]


def build_items(pairs):
    """Items from (value, weight) pairs, ids in order."""
    return [Item(id=i, value=v, weight=w) for i, (v, w) in enumerate(pairs)]


@pytest.fixture
def three_items():
    """One heavy valuable item and two identical lighter ones."""
    return build_items([(10, 6), (6, 4), (6, 4)])


@pytest.fixture
def random_instances():
    """Small seeded instances, capacity at half the total weight."""
    instances = []
    for seed in range(8):
        items = make_items(num_items=10, min_value=1, max_value=10,
                           min_weight=4, max_weight=10, seed=seed)
        capacity = sum(item.weight for item in items) // 2
        instances.append((items, capacity))
    return instances
