"""Static catalogs: platforms, objectives, base weights and funnel stages.

All tables are read-only for the lifetime of the process.
"""

from types import MappingProxyType

PLATFORMS: MappingProxyType = MappingProxyType(
    {
        "meta": "Meta Ads",
        "google_search": "Google Search Ads",
        "google_display": "Google Display YouTube",
        "tiktok": "TikTok Ads",
        "linkedin": "LinkedIn Ads",
        "twitter": "Twitter X Ads",
        "snapchat": "Snapchat Ads",
    }
)

OBJECTIVES: MappingProxyType = MappingProxyType(
    {
        "awareness": "Awareness",
        "engagement": "Traffic Engagement",
        "conversions": "Conversions Sales",
        "leads": "Leads",
    }
)

DEFAULT_OBJECTIVE = "awareness"

BASE_WEIGHTS: MappingProxyType = MappingProxyType(
    {
        "awareness": MappingProxyType(
            {
                "meta": 25,
                "google_search": 0,
                "google_display": 20,
                "tiktok": 25,
                "linkedin": 5,
                "twitter": 10,
                "snapchat": 15,
            }
        ),
        "engagement": MappingProxyType(
            {
                "meta": 25,
                "google_search": 20,
                "google_display": 5,
                "tiktok": 20,
                "linkedin": 10,
                "twitter": 15,
                "snapchat": 5,
            }
        ),
        "conversions": MappingProxyType(
            {
                "meta": 25,
                "google_search": 35,
                "google_display": 5,
                "tiktok": 10,
                "linkedin": 15,
                "twitter": 5,
                "snapchat": 5,
            }
        ),
        "leads": MappingProxyType(
            {
                "meta": 30,
                "google_search": 30,
                "linkedin": 20,
                "tiktok": 10,
                "google_display": 5,
                "twitter": 3,
                "snapchat": 2,
            }
        ),
    }
)

# Cost metric used to re-weight platforms in advanced mode.
BENCHMARK_METRICS: MappingProxyType = MappingProxyType(
    {
        "awareness": "cpm",
        "engagement": "cpc",
        "conversions": "cpa",
        "leads": "cpa",
    }
)

FUNNEL_STAGES: tuple[tuple[str, float], ...] = (
    ("Awareness", 40),
    ("Traffic", 35),
    ("Conversions", 25),
)


def platform_name(platform: str) -> str:
    """Return the display name of ``platform``, or the key itself if unknown."""
    return PLATFORMS.get(platform, platform)


def base_weight(objective: str, platform: str) -> float:
    """Look up the base weight of ``platform`` for ``objective``.

    Parameters
    ----------
    objective : str
        Objective key.
    platform : str
        Platform key.

    Returns
    -------
    float
        The catalog weight, or ``0`` when the pair is not listed.
    """
    return BASE_WEIGHTS.get(objective, {}).get(platform, 0)


def benchmark_metric(objective: str) -> str | None:
    """Return the benchmark metric (``cpm``, ``cpc`` or ``cpa``) for ``objective``."""
    return BENCHMARK_METRICS.get(objective)
