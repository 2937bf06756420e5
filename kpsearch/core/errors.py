# kpsearch/core/errors.py
"""
Common exceptions for the knapsack engines.
"""


class InvalidInputError(ValueError):
    """Raised when an item set or capacity violates the solver preconditions."""


class InternalInconsistencyError(RuntimeError):
    """Raised when an engine's own bookkeeping is found to be corrupt."""
