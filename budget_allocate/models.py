"""Data models for budget allocation requests and results."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from budget_allocate.catalog import DEFAULT_OBJECTIVE

BENCHMARK_FIELDS = ("cpm", "cpc", "cpa")


@dataclass(frozen=True)
class BenchmarkInputs:
    """Per-platform expected cost metrics used in advanced mode.

    Parameters
    ----------
    cpm : dict[str, float]
        Cost per mille by platform key (awareness).
    cpc : dict[str, float]
        Cost per click by platform key (engagement).
    cpa : dict[str, float]
        Cost per action by platform key (conversions and leads).
    """

    cpm: dict[str, float] = field(default_factory=dict)
    cpc: dict[str, float] = field(default_factory=dict)
    cpa: dict[str, float] = field(default_factory=dict)

    def for_metric(self, metric: str | None) -> Mapping[str, float]:
        """Return the benchmark mapping for ``metric``, empty if unknown."""
        if metric not in BENCHMARK_FIELDS:
            return {}
        return getattr(self, metric)


@dataclass(frozen=True)
class AllocationRequest:
    """Complete input for one allocation run.

    Parameters
    ----------
    total_budget : float
        Amount to split, in whole currency units.
    objective : str
        Campaign objective key.
    platforms : tuple[str, ...]
        Selected platform keys, in selection order. Must be unique.
    advanced_mode : bool
        Re-weight platforms by their benchmarks.
    benchmarks : BenchmarkInputs
        Benchmark values, only read in advanced mode.
    full_funnel : bool
        Split across the fixed funnel stages instead of platforms.
    """

    total_budget: float
    objective: str = DEFAULT_OBJECTIVE
    platforms: tuple[str, ...] = ()
    advanced_mode: bool = False
    benchmarks: BenchmarkInputs = field(default_factory=BenchmarkInputs)
    full_funnel: bool = False

    def __post_init__(self) -> None:
        """Freeze the platform selection and reject duplicates."""
        platforms = tuple(self.platforms)
        if len(set(platforms)) != len(platforms):
            raise ValueError("platforms must not contain duplicates")
        object.__setattr__(self, "platforms", platforms)


@dataclass(frozen=True)
class AllocationResult:
    """One row of an allocation table.

    Parameters
    ----------
    platform : str
        Platform display name, or funnel stage name in full-funnel mode.
    allocation_percentage : float
        Share of the total budget, 0 to 100.
    budget : float
        Amount allocated to this bucket.
    """

    platform: str
    allocation_percentage: float
    budget: float
