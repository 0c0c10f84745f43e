"""
Domain models and value objects.

Contains the coin value types: Moneybag, Value and the comparison outcomes.
"""

from src.core.domain.moneybag import Denier, Livre, Moneybag, Solidus
from src.core.domain.ordering import (
    PartialOrdering,
    WeakOrdering,
    compare_counters,
    compare_scalars,
    is_eq,
    is_gt,
    is_gteq,
    is_lt,
    is_lteq,
)
from src.core.domain.value import Value, moneybag_to_deniers

__all__ = [
    # Ordering
    "PartialOrdering",
    "WeakOrdering",
    "compare_counters",
    "compare_scalars",
    "is_eq",
    "is_lt",
    "is_lteq",
    "is_gt",
    "is_gteq",
    # Moneybag model
    "Moneybag",
    "Livre",
    "Solidus",
    "Denier",
    # Value model
    "Value",
    "moneybag_to_deniers",
]
