"""Unit tests for mode selection and the ``allocate`` entry point."""

import math

import pytest

from budget_allocate.engine import BudgetAllocator, FullFunnelStrategy, allocate, allocate_request
from budget_allocate.models import AllocationRequest, BenchmarkInputs

SELECTIONS = [
    ("awareness", ["meta", "tiktok"]),
    ("awareness", ["meta", "tiktok", "snapchat", "linkedin"]),
    ("engagement", ["meta", "google_search", "google_display", "tiktok", "linkedin", "twitter", "snapchat"]),
    ("conversions", ["google_search", "linkedin", "twitter"]),
    ("leads", ["meta", "google_search", "linkedin", "snapchat"]),
]


class TestDegenerateInput:
    def test_zero_budget(self):
        assert allocate(0, "awareness", ["meta", "tiktok"]) == []

    def test_negative_budget(self):
        assert allocate(-500, "awareness", ["meta"]) == []

    def test_no_platforms(self):
        assert allocate(10000, "awareness", []) == []

    def test_no_platforms_in_full_funnel(self):
        assert allocate(10000, "awareness", [], full_funnel_enabled=True) == []

    def test_non_finite_budget(self):
        assert allocate(math.inf, "awareness", ["meta", "tiktok"]) == []
        assert allocate(math.nan, "awareness", ["meta", "tiktok"]) == []

    def test_zero_weight_selection(self):
        # google_search has no awareness weight; unknown keys count as zero.
        assert allocate(10000, "awareness", ["google_search", "pinterest"]) == []

    def test_degenerate_input_logs_warning(self, caplog):
        with caplog.at_level("WARNING", logger="budget_allocate.engine.allocator"):
            allocate(0, "awareness", ["meta"])
        assert "cannot allocate" in caplog.text.lower()


class TestConservation:
    @pytest.mark.parametrize("total_budget", [1000, 1001, 12345, 99999, 100000, 2500.5])
    @pytest.mark.parametrize(("objective", "platforms"), SELECTIONS)
    def test_amounts_sum_to_budget(self, total_budget, objective, platforms):
        results = allocate(total_budget, objective, platforms)
        assert sum(r.budget for r in results) == total_budget

    @pytest.mark.parametrize("total_budget", [1000, 1001, 12345, 99999])
    def test_full_funnel_sums_to_budget(self, total_budget):
        results = allocate(total_budget, "leads", ["meta"], full_funnel_enabled=True)
        assert sum(r.budget for r in results) == total_budget

    def test_advanced_mode_sums_to_budget(self):
        benchmarks = BenchmarkInputs(cpc={"meta": 1.3, "tiktok": 0.7, "twitter": 2.9})
        results = allocate(7777, "engagement", ["meta", "tiktok", "twitter"], True, benchmarks)
        assert sum(r.budget for r in results) == 7777


class TestSinglePlatform:
    @pytest.mark.parametrize("objective", ["awareness", "engagement", "conversions", "leads"])
    def test_whole_budget_to_one_platform(self, objective):
        results = allocate(5000, objective, ["linkedin"])
        assert len(results) == 1
        assert results[0].platform == "LinkedIn Ads"
        assert results[0].allocation_percentage == 100
        assert results[0].budget == 5000

    def test_zero_weight_platform_still_gets_everything(self):
        results = allocate(5000, "awareness", ["google_search"])
        assert results[0].platform == "Google Search Ads"
        assert results[0].budget == 5000

    def test_benchmarks_ignored(self):
        benchmarks = BenchmarkInputs(cpm={"meta": 50.0})
        results = allocate(5000, "awareness", ["meta"], True, benchmarks)
        assert results[0].allocation_percentage == 100


class TestFullFunnel:
    def test_fixed_split(self):
        results = allocate(100000, "awareness", ["meta", "tiktok"], full_funnel_enabled=True)
        assert [(r.platform, r.allocation_percentage, r.budget) for r in results] == [
            ("Awareness", 40, 40000),
            ("Traffic", 35, 35000),
            ("Conversions", 25, 25000),
        ]

    def test_takes_precedence_over_single_platform(self):
        results = allocate(100000, "conversions", ["meta"], full_funnel_enabled=True)
        assert [r.platform for r in results] == ["Awareness", "Traffic", "Conversions"]

    def test_last_stage_absorbs_remainder(self):
        # 999 * 0.40 = 399.6 -> 400, 999 * 0.35 = 349.65 -> 350, remainder 249.
        results = allocate(999, "awareness", ["meta"], full_funnel_enabled=True)
        assert {r.platform: r.budget for r in results} == {"Awareness": 400, "Traffic": 350, "Conversions": 249}


class TestWeighted:
    def test_proportional_split(self):
        results = allocate(10000, "awareness", ["meta", "tiktok", "snapchat"])
        assert [(r.platform, r.budget) for r in results] == [
            ("Meta Ads", 3846),
            ("TikTok Ads", 3846),
            ("Snapchat Ads", 2308),
        ]

    def test_percentages_not_rounded(self):
        results = allocate(10000, "awareness", ["meta", "tiktok", "snapchat"])
        assert results[0].allocation_percentage == pytest.approx(25 / 65 * 100)
        assert results[2].allocation_percentage == pytest.approx(15 / 65 * 100)

    def test_rounds_half_up(self):
        # 1001 / 2 = 500.5 -> 501 for the first platform, 500 left for the last.
        results = allocate(1001, "awareness", ["meta", "tiktok"])
        assert [(r.platform, r.budget) for r in results] == [("Meta Ads", 501), ("TikTok Ads", 500)]

    def test_sorted_by_descending_budget(self):
        results = allocate(10000, "conversions", ["twitter", "linkedin", "google_search"])
        budgets = [r.budget for r in results]
        assert budgets == sorted(budgets, reverse=True)
        assert results[0].platform == "Google Search Ads"

    def test_zero_weight_platform_kept_in_table(self):
        results = allocate(10000, "awareness", ["google_search", "meta"])
        assert {r.platform: r.budget for r in results} == {"Meta Ads": 10000, "Google Search Ads": 0}

    def test_unknown_platform_falls_back_to_key(self):
        results = allocate(10000, "engagement", ["meta", "pinterest"])
        assert [r.platform for r in results] == ["Meta Ads", "pinterest"]

    def test_duplicate_keys_collapsed(self):
        results = allocate(10000, "awareness", ["meta", "tiktok", "meta"])
        assert [r.platform for r in results] == ["Meta Ads", "TikTok Ads"]
        assert sum(r.budget for r in results) == 10000


class TestAdvancedMode:
    def test_cheaper_platform_gets_more(self, awareness_benchmarks):
        results = allocate(9000, "awareness", ["meta", "tiktok"], True, awareness_benchmarks)
        assert {r.platform: r.budget for r in results} == {"TikTok Ads": 6000, "Meta Ads": 3000}
        assert results[0].platform == "TikTok Ads"

    def test_benchmarks_unused_when_advanced_off(self, awareness_benchmarks):
        results = allocate(9000, "awareness", ["meta", "tiktok"], False, awareness_benchmarks)
        assert [r.budget for r in results] == [4500, 4500]

    def test_leads_uses_cpa(self):
        benchmarks = BenchmarkInputs(cpm={"meta": 1.0}, cpa={"meta": 20.0, "google_search": 10.0})
        results = allocate(9000, "leads", ["meta", "google_search"], True, benchmarks)
        assert {r.platform: r.budget for r in results} == {"Google Search Ads": 6000, "Meta Ads": 3000}

    def test_missing_benchmark_keeps_base_weight(self):
        benchmarks = BenchmarkInputs(cpc={"meta": 2.0, "google_search": 1.0})
        results = allocate(10000, "engagement", ["meta", "tiktok", "google_search"], True, benchmarks)
        by_name = {r.platform: r for r in results}
        # Adjusted: meta 25 * 1.5 / 2 = 18.75, google_search 20 * 1.5 / 1 = 30, tiktok stays 20.
        assert by_name["TikTok Ads"].allocation_percentage == pytest.approx(20 / 68.75 * 100)
        assert by_name["Google Search Ads"].allocation_percentage == pytest.approx(30 / 68.75 * 100)


class TestDeterminism:
    def test_repeated_calls_identical(self, awareness_benchmarks):
        args = (12345, "awareness", ["meta", "tiktok", "snapchat", "twitter"], True, awareness_benchmarks)
        assert allocate(*args) == allocate(*args)

    def test_request_not_mutated(self, weighted_request):
        before = (weighted_request.platforms, weighted_request.total_budget)
        allocate_request(weighted_request)
        assert (weighted_request.platforms, weighted_request.total_budget) == before


class TestBudgetAllocator:
    def test_select_modes(self, weighted_request):
        allocator = BudgetAllocator()
        assert allocator.select(weighted_request).name == "weighted"
        single = AllocationRequest(total_budget=1000, platforms=("meta",))
        assert allocator.select(single).name == "single"
        funnel = AllocationRequest(total_budget=1000, platforms=("meta",), full_funnel=True)
        assert allocator.select(funnel).name == "full_funnel"

    def test_select_none_for_degenerate(self):
        assert BudgetAllocator().select(AllocationRequest(total_budget=0, platforms=("meta",))) is None

    def test_custom_funnel_strategy(self):
        allocator = BudgetAllocator(full_funnel=FullFunnelStrategy(stages=[("Top", 50), ("Bottom", 50)]))
        request = AllocationRequest(total_budget=1001, platforms=("meta",), full_funnel=True)
        results = allocator(request)
        assert [(r.platform, r.budget) for r in results] == [("Top", 501), ("Bottom", 500)]

    def test_success_logs_mode(self, weighted_request, caplog):
        with caplog.at_level("INFO", logger="budget_allocate.engine.allocator"):
            BudgetAllocator()(weighted_request)
        assert "mode=weighted" in caplog.text


class TestExtremeBenchmarks:
    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan, 1e-310, 1e308, 0.0])
    @pytest.mark.parametrize("other", [2.0, 1e308, None])
    def test_never_raises(self, value, other):
        cpm = {"meta": value} if other is None else {"meta": value, "tiktok": other}
        results = allocate(10000, "awareness", ["meta", "tiktok", "google_search"], True, BenchmarkInputs(cpm=cpm))
        assert results == [] or sum(r.budget for r in results) == 10000

    def test_infinite_benchmark_treated_as_missing(self):
        benchmarks = BenchmarkInputs(cpm={"meta": math.inf, "tiktok": 2.0})
        results = allocate(10000, "awareness", ["meta", "tiktok"], True, benchmarks)
        assert [r.budget for r in results] == [5000, 5000]

    def test_overflowing_adjustment_returns_empty(self):
        benchmarks = BenchmarkInputs(cpm={"meta": 1e-310, "tiktok": 1.0})
        assert allocate(10000, "awareness", ["meta", "tiktok"], True, benchmarks) == []
