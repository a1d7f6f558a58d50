"""Tabular rendering of allocation results."""

from collections.abc import Sequence
from dataclasses import asdict

import pandas as pd

from budget_allocate.models import AllocationResult

WEIGHT_COLUMN = "Weight (%)"
BUDGET_COLUMN = "Budget ($)"


def bucket_column(full_funnel: bool = False) -> str:
    """Header of the bucket column."""
    return "Funnel Stage" if full_funnel else "Platform"


def table_title(full_funnel: bool = False) -> str:
    """Heading shown above the allocation table."""
    return "Full Funnel Allocation" if full_funnel else "Budget Allocation"


def to_frame(results: Sequence[AllocationResult], full_funnel: bool = False) -> pd.DataFrame:
    """Build the allocation table as a DataFrame.

    Parameters
    ----------
    results : Sequence[AllocationResult]
        Rows as returned by the engine.
    full_funnel : bool
        Label the bucket column as funnel stages.

    Returns
    -------
    pd.DataFrame
        Columns: bucket, ``Weight (%)`` rounded to one decimal, ``Budget ($)``.
        Row order is preserved.
    """
    frame = pd.DataFrame(
        [asdict(r) for r in results],
        columns=["platform", "allocation_percentage", "budget"],
    )
    frame = frame.rename(
        columns={
            "platform": bucket_column(full_funnel),
            "allocation_percentage": WEIGHT_COLUMN,
            "budget": BUDGET_COLUMN,
        }
    )
    frame[WEIGHT_COLUMN] = frame[WEIGHT_COLUMN].astype(float).round(1)
    return frame


def format_table(results: Sequence[AllocationResult], full_funnel: bool = False) -> str:
    """Render the allocation table as display text.

    Percentages get one decimal and a ``%`` sign, budgets a ``$`` sign,
    thousands separators and no decimals.
    """
    frame = to_frame(results, full_funnel)
    frame[WEIGHT_COLUMN] = frame[WEIGHT_COLUMN].map(lambda v: f"{v:.1f}%")
    frame[BUDGET_COLUMN] = frame[BUDGET_COLUMN].map(lambda v: f"${v:,.0f}")
    return f"{table_title(full_funnel)}\n{frame.to_string(index=False)}"
