"""Shared fixtures for budget allocation tests."""

import pytest

from budget_allocate.models import AllocationRequest, BenchmarkInputs


@pytest.fixture()
def awareness_benchmarks():
    """CPM benchmarks where TikTok is half the price of Meta."""
    return BenchmarkInputs(cpm={"meta": 10.0, "tiktok": 5.0})


@pytest.fixture()
def weighted_request():
    """Three-platform awareness request with uneven base weights."""
    return AllocationRequest(
        total_budget=10000,
        objective="awareness",
        platforms=("meta", "tiktok", "snapchat"),
    )


@pytest.fixture()
def sample_event():
    """Form-shaped event as submitted by the budgeting form."""
    return {
        "total_budget": 10000,
        "objective": "awareness",
        "selected_platforms": ["meta", "tiktok", "snapchat"],
        "is_advanced_mode": False,
        "is_full_funnel_enabled": False,
        "benchmarks": {"cpm": {}, "cpc": {}, "cpa": {}},
    }
