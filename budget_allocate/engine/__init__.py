"""Budget allocation engine.

Provides the three allocation modes (full funnel, single platform,
weighted), the shared rounding and remainder helpers, and the
``AllocationStrategy`` protocol the modes satisfy.

Convenience function ``allocate`` builds the request from plain arguments
and runs the default :class:`BudgetAllocator` in a single call.
"""

from collections.abc import Iterable

from budget_allocate.engine._common import is_allocatable, round_half_up, sort_by_budget, split_budget
from budget_allocate.engine._types import AllocationStrategy
from budget_allocate.engine.allocator import BudgetAllocator
from budget_allocate.engine.funnel import FullFunnelStrategy
from budget_allocate.engine.single import SinglePlatformStrategy
from budget_allocate.engine.weighted import (
    WeightedSplitStrategy,
    adjust_for_benchmarks,
    calculate_weights,
    normalize,
)
from budget_allocate.models import AllocationRequest, AllocationResult, BenchmarkInputs

__all__ = [
    "AllocationStrategy",
    "BudgetAllocator",
    "FullFunnelStrategy",
    "SinglePlatformStrategy",
    "WeightedSplitStrategy",
    "adjust_for_benchmarks",
    "allocate",
    "allocate_request",
    "calculate_weights",
    "is_allocatable",
    "normalize",
    "round_half_up",
    "sort_by_budget",
    "split_budget",
]

_DEFAULT_ALLOCATOR = BudgetAllocator()


def allocate_request(request: AllocationRequest) -> list[AllocationResult]:
    """Run the default allocator on ``request``."""
    return _DEFAULT_ALLOCATOR(request)


def allocate(
    total_budget: float,
    objective: str,
    selected_platforms: Iterable[str],
    advanced_mode: bool = False,
    benchmarks: BenchmarkInputs | None = None,
    full_funnel_enabled: bool = False,
) -> list[AllocationResult]:
    """Split ``total_budget`` across the selected platforms or funnel stages.

    Repeated platform keys are collapsed to their first occurrence.

    Parameters
    ----------
    total_budget : float
        Amount to split.
    objective : str
        Campaign objective key.
    selected_platforms : Iterable[str]
        Platform keys in selection order.
    advanced_mode : bool
        Re-weight platforms inversely to their benchmarks.
    benchmarks : BenchmarkInputs, optional
        Benchmark values. Defaults to none supplied.
    full_funnel_enabled : bool
        Split across fixed funnel stages instead of platforms.

    Returns
    -------
    list[AllocationResult]
        Rows sorted by descending budget, summing to ``total_budget``, or
        an empty list if the budget cannot be allocated.
    """
    request = AllocationRequest(
        total_budget=total_budget,
        objective=objective,
        platforms=tuple(dict.fromkeys(selected_platforms)),
        advanced_mode=advanced_mode,
        benchmarks=benchmarks or BenchmarkInputs(),
        full_funnel=full_funnel_enabled,
    )
    return allocate_request(request)
