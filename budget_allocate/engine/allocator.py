"""Mode selection and dispatch to the allocation strategies."""

import logging

from budget_allocate.engine._common import is_allocatable
from budget_allocate.engine._types import AllocationStrategy
from budget_allocate.engine.funnel import FullFunnelStrategy
from budget_allocate.engine.single import SinglePlatformStrategy
from budget_allocate.engine.weighted import WeightedSplitStrategy
from budget_allocate.models import AllocationRequest, AllocationResult

logger = logging.getLogger(__name__)


class BudgetAllocator:
    """Pick the allocation mode for a request and run it.

    Modes are checked in order: full funnel, single platform, weighted.
    Degenerate requests (non-positive budget, no platforms) and requests
    the chosen mode cannot allocate yield an empty list; the allocator
    never raises for bad input.

    Parameters
    ----------
    full_funnel : AllocationStrategy, optional
        Strategy for full-funnel requests. Defaults to :class:`FullFunnelStrategy`.
    single : AllocationStrategy, optional
        Strategy for one-platform requests. Defaults to :class:`SinglePlatformStrategy`.
    weighted : AllocationStrategy, optional
        Strategy for multi-platform requests. Defaults to :class:`WeightedSplitStrategy`.
    """

    def __init__(
        self,
        full_funnel: AllocationStrategy | None = None,
        single: AllocationStrategy | None = None,
        weighted: AllocationStrategy | None = None,
    ) -> None:
        self._full_funnel = full_funnel or FullFunnelStrategy()
        self._single = single or SinglePlatformStrategy()
        self._weighted = weighted or WeightedSplitStrategy()

    def select(self, request: AllocationRequest) -> AllocationStrategy | None:
        """Return the strategy that applies to ``request``, or ``None`` if it cannot be allocated."""
        if not is_allocatable(request.total_budget, request.platforms):
            return None
        if request.full_funnel:
            return self._full_funnel
        if len(request.platforms) == 1:
            return self._single
        return self._weighted

    def __call__(self, request: AllocationRequest) -> list[AllocationResult]:
        """Allocate ``request`` and return rows sorted by descending budget.

        Parameters
        ----------
        request : AllocationRequest

        Returns
        -------
        list[AllocationResult]
            Empty if the request cannot be allocated.
        """
        strategy = self.select(request)
        if strategy is None:
            logger.warning(
                "Cannot allocate budget %r across %d platforms",
                request.total_budget,
                len(request.platforms),
            )
            return []

        results = strategy(request)
        logger.info("Allocation complete: mode=%s, buckets=%d", strategy.name, len(results))
        return results
