"""Input checks run before the allocation engine.

The engine only signals failure with an empty result. These checks catch
the common causes first so callers can show a precise message.
"""

import math
from numbers import Real

from budget_allocate.catalog import OBJECTIVES, PLATFORMS, base_weight, benchmark_metric
from budget_allocate.models import AllocationRequest

MIN_BUDGET = 1000.0


class AllocationInputError(ValueError):
    """Raised when a request fails validation. The message is user-facing."""


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def validate_request(request: AllocationRequest, min_budget: float = MIN_BUDGET) -> None:
    """Check that ``request`` can be allocated.

    Checks run in a fixed order and the first failure is raised:

    1. the budget is a number of at least ``min_budget``;
    2. at least one platform is selected;
    3. the objective and platforms are known;
    4. in advanced, multi-platform, non-funnel mode, no benchmark for the
       active metric is negative or non-finite;
    5. in multi-platform, non-funnel mode, the selected platforms' base
       weights do not all sum to zero.

    Parameters
    ----------
    request : AllocationRequest
        Request to check.
    min_budget : float
        Smallest budget accepted.

    Raises
    ------
    AllocationInputError
        With the message for the first failed check.
    """
    if not _is_number(request.total_budget) or request.total_budget < min_budget:
        raise AllocationInputError(f"Total Budget must be a number and at least {min_budget:g}.")
    if not request.platforms:
        raise AllocationInputError("Please select at least one platform.")
    if request.objective not in OBJECTIVES:
        raise AllocationInputError(f"Unknown objective: {request.objective}")
    for platform in request.platforms:
        if platform not in PLATFORMS:
            raise AllocationInputError(f"Unknown platform: {platform}")

    multi_platform = not request.full_funnel and len(request.platforms) > 1
    if not multi_platform:
        return

    if request.advanced_mode:
        benchmarks = request.benchmarks.for_metric(benchmark_metric(request.objective))
        for platform in request.platforms:
            value = benchmarks.get(platform)
            if value is None:
                continue
            if not math.isfinite(value):
                raise AllocationInputError("Benchmark values must be finite numbers.")
            if value < 0:
                raise AllocationInputError("Benchmark values cannot be negative.")

    if sum(base_weight(request.objective, p) for p in request.platforms) == 0:
        raise AllocationInputError(
            "Cannot allocate budget: all selected platforms have zero weight for the chosen objective."
        )
