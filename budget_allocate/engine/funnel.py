"""Full-funnel split.

Ignores objective and platform weighting and splits the budget across fixed
funnel stages at constant percentages.
"""

import logging
from collections.abc import Sequence

from budget_allocate.catalog import FUNNEL_STAGES
from budget_allocate.engine._common import sort_by_budget, split_budget
from budget_allocate.models import AllocationRequest, AllocationResult

logger = logging.getLogger(__name__)


class FullFunnelStrategy:
    """Fixed funnel-stage split.

    The last stage absorbs the rounding remainder.

    Parameters
    ----------
    stages : Sequence[tuple[str, float]]
        ``(stage name, percentage)`` pairs in allocation order. Percentages
        must be non-negative and sum to 100. Defaults to Awareness 40,
        Traffic 35, Conversions 25.

    Raises
    ------
    ValueError
        If there are no stages, if a percentage is negative, or if the
        percentages do not sum to 100.
    """

    name = "full_funnel"

    def __init__(self, stages: Sequence[tuple[str, float]] = FUNNEL_STAGES) -> None:
        if not stages:
            raise ValueError("At least one funnel stage is required.")
        if any(pct < 0 for _, pct in stages):
            raise ValueError("Stage percentages must be non-negative.")
        if abs(sum(pct for _, pct in stages) - 100) > 1e-9:
            raise ValueError("Stage percentages must sum to 100.")
        self.stages = tuple((stage, pct) for stage, pct in stages)

    def __call__(self, request: AllocationRequest) -> list[AllocationResult]:
        """Split ``request.total_budget`` across the funnel stages.

        Parameters
        ----------
        request : AllocationRequest
            Only ``total_budget`` is read.

        Returns
        -------
        list[AllocationResult]
        """
        buckets = [(stage, pct / 100, pct) for stage, pct in self.stages]
        logger.info("Applying full-funnel split across %d stages", len(buckets))
        return sort_by_budget(split_budget(buckets, request.total_budget))
