"""Budget allocation component: form event in, serialized allocation out."""

import logging
from dataclasses import asdict
from typing import Any, Protocol

from budget_allocate.catalog import DEFAULT_OBJECTIVE
from budget_allocate.engine import BudgetAllocator
from budget_allocate.models import BENCHMARK_FIELDS, AllocationRequest, BenchmarkInputs
from budget_allocate.validation import MIN_BUDGET, validate_request

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Budget allocated successfully!"
FAILURE_MESSAGE = "Could not calculate allocation. Please check your inputs."


class PipelineComponent(Protocol):
    """Structural interface for event-processing components."""

    def execute(self, event: dict) -> dict:
        """Process event and return result."""
        ...


_FIELD_MAP_IN: dict[str, str] = {
    "selected_platforms": "platforms",
    "is_advanced_mode": "advanced_mode",
    "is_full_funnel_enabled": "full_funnel",
}


def _to_request_format(event: dict[str, Any]) -> dict[str, Any]:
    """Map form field names to request field names.

    Parameters
    ----------
    event : dict[str, Any]
        Event dict with form field names.

    Returns
    -------
    dict[str, Any]
        Event dict with request field names.
    """
    return {_FIELD_MAP_IN.get(key, key): value for key, value in event.items()}


def parse_number(value: Any) -> float | None:
    """Parse a form value into a number, ``None`` if blank or unparsable.

    Numbers pass through unchanged so whole budgets stay integers.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    try:
        return float(str(value).strip())
    except ValueError:
        return None


def parse_benchmarks(raw: dict[str, dict[str, Any]] | None) -> BenchmarkInputs:
    """Build :class:`BenchmarkInputs` from raw form values.

    Values that do not parse as numbers are treated as not supplied.
    """
    raw = raw or {}
    parsed = {}
    for metric in BENCHMARK_FIELDS:
        values = {platform: parse_number(value) for platform, value in (raw.get(metric) or {}).items()}
        parsed[metric] = {platform: value for platform, value in values.items() if value is not None}
    return BenchmarkInputs(**parsed)


class BudgetAllocateComponent(PipelineComponent):
    """Validate a form submission and run the allocation engine on it.

    Parameters
    ----------
    allocator : BudgetAllocator, optional
        Engine to run. Defaults to a :class:`BudgetAllocator` with the
        standard strategies.
    min_budget : float
        Smallest total budget accepted.
    """

    def __init__(
        self,
        allocator: BudgetAllocator | None = None,
        min_budget: float = MIN_BUDGET,
    ) -> None:
        self._allocator = allocator or BudgetAllocator()
        self.min_budget = min_budget

    def build_request(self, event: dict[str, Any]) -> AllocationRequest:
        """Turn a form event into an :class:`AllocationRequest`.

        Advanced mode only takes effect when more than one platform is
        selected.

        Raises
        ------
        ValueError
            If the selection contains duplicate platforms.
        """
        fields = _to_request_format(event)
        platforms = tuple(fields.get("platforms") or ())
        budget = parse_number(fields.get("total_budget"))
        return AllocationRequest(
            total_budget=budget,
            objective=fields.get("objective") or DEFAULT_OBJECTIVE,
            platforms=platforms,
            advanced_mode=bool(fields.get("advanced_mode")) and len(platforms) > 1,
            benchmarks=parse_benchmarks(fields.get("benchmarks")),
            full_funnel=bool(fields.get("full_funnel")),
        )

    def execute(self, event: dict) -> dict:
        """Run allocation and return a status dict with the allocation rows.

        Parameters
        ----------
        event : dict
            Form fields: ``total_budget``, ``objective``,
            ``selected_platforms``, ``is_advanced_mode``,
            ``is_full_funnel_enabled`` and ``benchmarks``
            (``{"cpm": {...}, "cpc": {...}, "cpa": {...}}``).

        Returns
        -------
        dict
            ``status`` (``"success"`` or ``"error"``), ``message``,
            ``mode`` (strategy name or ``None``) and ``allocations`` (list
            of serialized ``AllocationResult``).
        """
        try:
            request = self.build_request(event)
            validate_request(request, self.min_budget)
        except ValueError as exc:
            logger.warning("Rejected allocation input: %s", exc)
            return {"status": "error", "message": str(exc), "mode": None, "allocations": []}

        strategy = self._allocator.select(request)
        results = self._allocator(request)
        if not results:
            logger.warning("Allocator returned no rows, reporting failure")
            return {"status": "error", "message": FAILURE_MESSAGE, "mode": None, "allocations": []}

        logger.info(
            "Allocated %s across %d buckets (mode=%s)",
            request.total_budget,
            len(results),
            strategy.name,
        )
        return {
            "status": "success",
            "message": SUCCESS_MESSAGE,
            "mode": strategy.name,
            "allocations": [asdict(r) for r in results],
        }
