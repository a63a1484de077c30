"""
Decimal Utilities
admission_scoring/scoring/utils.py

Precision-safe decimal math and grouping helpers for the scorers.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, Dict, Hashable, Iterable, TypeVar

T = TypeVar("T")

ZERO = Decimal("0")


def as_decimal(value) -> Decimal:
    """Convert a number to Decimal without rounding; None becomes 0."""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def quantize_score(value: Decimal, places: int = 4) -> Decimal:
    return value.quantize(Decimal(10) ** -places, rounding=ROUND_HALF_UP)


def clamp(
    value: Decimal,
    min_val: Decimal = Decimal("0"),
    max_val: Decimal = Decimal("100"),
) -> Decimal:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def best_per_key(
    items: Iterable[T],
    key: Callable[[T], Hashable],
    value: Callable[[T], Decimal],
) -> Dict[Hashable, Decimal]:
    """
    Keep the highest value seen for each key.

    Keys are returned in first-appearance order. The first value seen for a
    key is always stored, so a group of zero-valued items still yields an
    entry.
    """
    best: Dict[Hashable, Decimal] = {}
    for item in items:
        k = key(item)
        v = value(item)
        if k not in best or v > best[k]:
            best[k] = v
    return best


def group_by_key(
    items: Iterable[T],
    key: Callable[[T], Hashable],
) -> Dict[Hashable, list]:
    """Group items by key, preserving first-appearance order of keys and items."""
    groups: Dict[Hashable, list] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups
