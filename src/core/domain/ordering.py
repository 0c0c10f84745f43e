"""
Ordering — Результаты сравнения значений

Два вида сравнения:
- PartialOrdering: частичный порядок (четыре исхода, включая UNORDERED)
- WeakOrdering: полный порядок (три исхода)

Сравнение возвращает явный enum, а не bool: для частичного порядка
трихотомия не выполняется (ни <, ни ==, ни > может не выполняться).
"""

from enum import Enum
from typing import Union


# =============================================================================
# ENUMS
# =============================================================================


class PartialOrdering(str, Enum):
    """Результат частичного сравнения"""

    LESS = "less"
    EQUIVALENT = "equivalent"
    GREATER = "greater"
    UNORDERED = "unordered"


class WeakOrdering(str, Enum):
    """Результат полного сравнения"""

    LESS = "less"
    EQUIVALENT = "equivalent"
    GREATER = "greater"


Ordering = Union[PartialOrdering, WeakOrdering]


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def is_eq(result: Ordering) -> bool:
    return result.value == "equivalent"


def is_lt(result: Ordering) -> bool:
    return result.value == "less"


def is_gt(result: Ordering) -> bool:
    return result.value == "greater"


def is_lteq(result: Ordering) -> bool:
    return is_lt(result) or is_eq(result)


def is_gteq(result: Ordering) -> bool:
    return is_gt(result) or is_eq(result)


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_counters(
    lhs: tuple[int, ...], rhs: tuple[int, ...]
) -> PartialOrdering:
    """
    Покомпонентный частичный порядок.

    - все компоненты равны → EQUIVALENT
    - все компоненты lhs >= rhs → GREATER
    - все компоненты lhs <= rhs → LESS
    - иначе → UNORDERED

    Examples:
        >>> compare_counters((1, 0, 0), (1, 0, 0))
        <PartialOrdering.EQUIVALENT: 'equivalent'>
        >>> compare_counters((2, 1, 0), (1, 1, 0))
        <PartialOrdering.GREATER: 'greater'>
        >>> compare_counters((1, 0, 0), (0, 1, 0))
        <PartialOrdering.UNORDERED: 'unordered'>
    """
    if len(lhs) != len(rhs):
        raise ValueError(
            f"Counter tuples differ in length: {len(lhs)} != {len(rhs)}"
        )

    pairs = list(zip(lhs, rhs))

    if all(a == b for a, b in pairs):
        return PartialOrdering.EQUIVALENT
    if all(a >= b for a, b in pairs):
        return PartialOrdering.GREATER
    if all(a <= b for a, b in pairs):
        return PartialOrdering.LESS
    return PartialOrdering.UNORDERED


def compare_scalars(lhs: int, rhs: int) -> WeakOrdering:
    """Полный порядок на целых числах."""
    if lhs > rhs:
        return WeakOrdering.GREATER
    if lhs < rhs:
        return WeakOrdering.LESS
    return WeakOrdering.EQUIVALENT
