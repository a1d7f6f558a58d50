"""Shared helpers for allocation strategies.

Contains rounding, remainder absorption and result ordering.
"""

import logging
import math
from collections.abc import Sequence

from budget_allocate.models import AllocationResult

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties going up.

    Compares the fractional part directly, so values just below a half such
    as ``0.49999999999999994`` round down. Amounts are never negative, so
    this is the same as rounding half away from zero.

    Parameters
    ----------
    value : float
        Unrounded amount.

    Returns
    -------
    int
    """
    whole = math.floor(value)
    return whole + 1 if value - whole >= 0.5 else whole


def is_allocatable(total_budget: float, platforms: Sequence[str]) -> bool:
    """Return whether a budget and selection can be allocated at all."""
    if not platforms:
        return False
    try:
        return math.isfinite(total_budget) and total_budget > 0
    except TypeError:
        return False


def split_budget(
    buckets: Sequence[tuple[str, float, float]],
    total_budget: float,
) -> list[AllocationResult]:
    """Turn bucket shares into amounts that add up to ``total_budget``.

    Every bucket except the last gets its share rounded to a whole amount.
    The last bucket receives whatever is left, so the amounts always sum to
    the total exactly.

    Parameters
    ----------
    buckets : Sequence[tuple[str, float, float]]
        ``(label, share, percentage)`` triples in allocation order. Shares
        are fractions of the total, percentages are what gets reported.
    total_budget : float
        Amount to distribute.

    Returns
    -------
    list[AllocationResult]
        Rows in input order, not yet sorted.
    """
    if not buckets:
        return []
    results: list[AllocationResult] = []
    allocated = 0
    last = len(buckets) - 1
    for index, (label, share, percentage) in enumerate(buckets):
        if index < last:
            amount = round_half_up(share * total_budget)
            allocated += amount
        else:
            amount = total_budget - allocated
        results.append(AllocationResult(platform=label, allocation_percentage=percentage, budget=amount))
    logger.debug("Split %s across %d buckets, remainder bucket got %s", total_budget, len(results), amount)
    return results


def sort_by_budget(results: Sequence[AllocationResult]) -> list[AllocationResult]:
    """Order rows by descending budget, keeping input order for ties."""
    return sorted(results, key=lambda r: r.budget, reverse=True)
