"""Marketing budget allocation across advertising platforms."""

from budget_allocate.adapter import BudgetAllocateComponent
from budget_allocate.engine import BudgetAllocator, allocate, allocate_request
from budget_allocate.models import AllocationRequest, AllocationResult, BenchmarkInputs
from budget_allocate.validation import AllocationInputError, validate_request

__all__ = [
    "AllocationInputError",
    "AllocationRequest",
    "AllocationResult",
    "BenchmarkInputs",
    "BudgetAllocateComponent",
    "BudgetAllocator",
    "allocate",
    "allocate_request",
    "validate_request",
]
