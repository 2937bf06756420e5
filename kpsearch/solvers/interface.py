# kpsearch/solvers/interface.py
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from kpsearch.core.items import Item, copy_items, validate_instance
from kpsearch.core.result import SolveResult

logger = logging.getLogger(__name__)


class SolverInterface(ABC):
    """
    Base class for every knapsack engine.

    `solve` validates the instance and hands the engine a private copy of the
    item set, so no engine run can see the selection or blocking state left
    behind by another.
    """
    def __init__(self, config: Dict[str, Any] = None):
        self.config = config or {}
        self.name = self.__class__.__name__
        # Largest item set this engine is run on; None means no limit
        self.max_items: Optional[int] = self.config.get("max_items")

    def accepts(self, items: List[Item]) -> bool:
        return self.max_items is None or len(items) <= self.max_items

    def solve(self, items: List[Item], capacity: int) -> SolveResult:
        validate_instance(items, capacity)
        work_items = copy_items(items)
        logger.debug(f"{self.name}: solving {len(work_items)} items with capacity {capacity}")
        result = self._solve(work_items, capacity)
        logger.debug(f"{self.name}: value {result.value}, calls {result.calls}")
        return result

    @abstractmethod
    def _solve(self, items: List[Item], capacity: int) -> SolveResult:
        """Runs the engine on a private item set it may freely mutate."""
