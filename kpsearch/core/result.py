# kpsearch/core/result.py
from typing import List, NamedTuple, Optional

from .items import Item


class SolveResult(NamedTuple):
    """
    Outcome of a single engine run.

    Attributes
    ----------
    solution : list[Item] | None
        Snapshot of the item set with the chosen items marked as selected.
    value : int
        Total value of the selected items.
    calls : int
        Number of recursive invocations the engine made (a cost proxy).
    """
    solution: Optional[List[Item]]
    value: int
    calls: int
