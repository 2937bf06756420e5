# kpsearch/core/__init__.py
"""
Public exports for the item-set model layer.
"""

from .errors import InvalidInputError, InternalInconsistencyError
from .items import (
    Item,
    Scope,
    copy_items,
    total,
    sum_values,
    sum_weights,
    solution_value,
    validate_instance,
)
from .result import SolveResult

__all__ = [
    # errors
    "InvalidInputError",
    "InternalInconsistencyError",
    # item set model
    "Item",
    "Scope",
    "copy_items",
    "total",
    "sum_values",
    "sum_weights",
    "solution_value",
    "validate_instance",
    # results
    "SolveResult",
]
