"""Single-platform allocation: the whole budget goes to one platform."""

from budget_allocate.catalog import platform_name
from budget_allocate.models import AllocationRequest, AllocationResult


class SinglePlatformStrategy:
    """Assign 100% of the budget to the only selected platform."""

    name = "single"

    def __call__(self, request: AllocationRequest) -> list[AllocationResult]:
        """Allocate the full budget to ``request.platforms[0]``."""
        return [
            AllocationResult(
                platform=platform_name(request.platforms[0]),
                allocation_percentage=100,
                budget=request.total_budget,
            )
        ]
