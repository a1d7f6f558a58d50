"""Type definitions for the allocation strategy protocol."""

from typing import Protocol

from budget_allocate.models import AllocationRequest, AllocationResult


class AllocationStrategy(Protocol):
    """Protocol for allocation modes.

    Implementations receive a request that already has a positive budget
    and a non-empty, duplicate-free platform selection, and return the
    allocation rows sorted by descending budget. An empty list means the
    request cannot be allocated.
    """

    name: str

    def __call__(self, request: AllocationRequest) -> list[AllocationResult]: ...
