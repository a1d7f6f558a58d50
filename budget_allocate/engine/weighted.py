"""Multi-platform weighted split.

Looks up each selected platform's base weight for the objective, optionally
re-weights it inversely to its cost benchmark, normalizes the weights and
converts the shares into whole amounts.
"""

import logging
import math
from collections.abc import Mapping, Sequence

from budget_allocate.catalog import base_weight, benchmark_metric, platform_name
from budget_allocate.engine._common import sort_by_budget, split_budget
from budget_allocate.models import AllocationRequest, AllocationResult

logger = logging.getLogger(__name__)


def _is_positive(value: float | None) -> bool:
    return value is not None and math.isfinite(value) and value > 0


def adjust_for_benchmarks(
    weights: Mapping[str, float],
    benchmarks: Mapping[str, float | None],
) -> dict[str, float]:
    """Scale weights by the ratio of the average benchmark to each platform's own.

    The average is taken over the platforms in ``weights`` that supplied a
    finite, positive benchmark. Platforms without one keep their weight, and if no
    platform supplied one nothing changes. Cheaper than average scales a
    weight up, more expensive scales it down. Does not mutate input.

    Parameters
    ----------
    weights : Mapping[str, float]
        Base weight by platform key, in selection order.
    benchmarks : Mapping[str, float | None]
        Cost metric by platform key for the active objective.

    Returns
    -------
    dict[str, float]
        Adjusted weight by platform key, same order as ``weights``.
    """
    active = [benchmarks[p] for p in weights if _is_positive(benchmarks.get(p))]
    if not active:
        return dict(weights)
    average = sum(active) / len(active)

    adjusted = {}
    for platform, weight in weights.items():
        own = benchmarks.get(platform)
        adjusted[platform] = weight * (average / own) if _is_positive(own) else weight
    return adjusted


def calculate_weights(request: AllocationRequest) -> dict[str, float]:
    """Compute the (possibly benchmark-adjusted) weight of each selected platform.

    Parameters
    ----------
    request : AllocationRequest
        Objective, platforms and, in advanced mode, benchmarks are read.

    Returns
    -------
    dict[str, float]
        Weight by platform key, in selection order.
    """
    weights = {p: base_weight(request.objective, p) for p in request.platforms}
    if request.advanced_mode:
        metric = benchmark_metric(request.objective)
        weights = adjust_for_benchmarks(weights, request.benchmarks.for_metric(metric))
    for platform, weight in weights.items():
        logger.debug("Platform '%s': weight = %.4f", platform, weight)
    return weights


def normalize(weights: Mapping[str, float]) -> dict[str, float]:
    """Divide each weight by the total; empty if the total is zero or not finite."""
    total = sum(weights.values())
    if total == 0 or not math.isfinite(total):
        return {}
    return {platform: weight / total for platform, weight in weights.items()}


class WeightedSplitStrategy:
    """Split the budget across platforms in proportion to their weights.

    The last platform in selection order absorbs the rounding remainder.
    Returns an empty list when every selected platform has zero weight, or
    when extreme benchmarks push the total weight out of the finite range.
    """

    name = "weighted"

    def __call__(self, request: AllocationRequest) -> list[AllocationResult]:
        """Allocate ``request.total_budget`` across ``request.platforms``.

        Parameters
        ----------
        request : AllocationRequest
            Request with at least one selected platform.

        Returns
        -------
        list[AllocationResult]
        """
        shares = normalize(calculate_weights(request))
        if not shares:
            logger.warning(
                "Total weight for objective '%s' is zero or not finite",
                request.objective,
            )
            return []

        buckets: Sequence[tuple[str, float, float]] = [
            (platform_name(platform), share, share * 100) for platform, share in shares.items()
        ]
        return sort_by_budget(split_budget(buckets, request.total_budget))
