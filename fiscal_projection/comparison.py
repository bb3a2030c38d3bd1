"""
Projection Comparison

Differences between two projections at chosen horizons, and the debt-interest
"doom loop" heuristic.
"""

from dataclasses import dataclass
from typing import List, Literal, Sequence

import pandas as pd

from .exceptions import EmptyProjectionError
from .projection import Projection
from .rounding import round_bps, round_display

Severity = Literal["low", "medium", "high"]

DEFAULT_TARGET_OFFSETS = (1, 2, 5, 10)


@dataclass(frozen=True)
class ProjectionComparison:
    """Signed difference (A - B) between two projections at one year offset."""
    year: int
    year_offset: int
    debt_ratio_diff: float      # pp of GDP
    deficit_ratio_diff: float   # pp of GDP
    interest_diff: float        # Md


def compare_projections(projection_a: Projection,
                        projection_b: Projection,
                        target_year_offsets: Sequence[int] = DEFAULT_TARGET_OFFSETS) -> List[ProjectionComparison]:
    """
    Compare two projections at key time horizons.

    Args:
        projection_a: Scenario projection
        projection_b: Reference projection (usually the baseline)
        target_year_offsets: Year indices (0 = starting year), not calendar years

    Returns:
        One comparison per offset present in both projections; offsets
        outside either projection are skipped.
    """
    comparisons = []

    for offset in target_year_offsets:
        if offset < 0 or offset >= len(projection_a) or offset >= len(projection_b):
            continue

        a = projection_a[offset]
        b = projection_b[offset]

        comparisons.append(ProjectionComparison(
            year=a.year,
            year_offset=offset,
            debt_ratio_diff=round_display(a.debt_ratio - b.debt_ratio, 1),
            deficit_ratio_diff=round_display(a.deficit_ratio - b.deficit_ratio, 1),
            interest_diff=round_display(a.interest - b.interest, 1),
        ))

    return comparisons


def comparisons_to_dataframe(comparisons: Sequence[ProjectionComparison]) -> pd.DataFrame:
    """Convert comparison results to a DataFrame."""
    return pd.DataFrame({
        "Year": [c.year for c in comparisons],
        "Offset": [c.year_offset for c in comparisons],
        "Debt Ratio Diff (pp)": [c.debt_ratio_diff for c in comparisons],
        "Deficit Ratio Diff (pp)": [c.deficit_ratio_diff for c in comparisons],
        "Interest Diff (Md)": [c.interest_diff for c in comparisons],
    })


@dataclass(frozen=True)
class DoomLoopThresholds:
    """
    Cut-offs for the doom-loop heuristic.

    These are uncalibrated rules of thumb, not estimates.
    """
    high_severity: float = 0.3
    medium_severity: float = 0.15
    active_premium_bps: float = 20


@dataclass(frozen=True)
class DoomLoopAssessment:
    """Debt-interest feedback between the first and last projected year."""
    debt_ratio_change: float
    interest_ratio_change: float
    premium_increase_bps: int
    severity_ratio: float
    severity: Severity
    doom_loop_active: bool


def assess_doom_loop(projection: Projection,
                     thresholds: DoomLoopThresholds = DoomLoopThresholds()) -> DoomLoopAssessment:
    """
    Assess how strongly interest costs are crowding out fiscal space.

    Heuristic classifier using only the first and last years: severity is
    the rise in interest/GDP relative to the final deficit/GDP, and the loop
    is "active" once the premium has risen by more than
    ``thresholds.active_premium_bps``.

    Raises:
        EmptyProjectionError: If the projection holds no year
    """
    if len(projection) == 0:
        raise EmptyProjectionError("Doom-loop assessment needs a non-empty projection")

    start = projection.first
    end = projection.last

    debt_increase = end.debt_ratio - start.debt_ratio
    interest_increase = end.interest_ratio - start.interest_ratio
    premium_increase = end.risk_premium_bps - start.risk_premium_bps

    deficit_ratio = abs(end.deficit_ratio)
    if deficit_ratio == 0:
        # Balanced final year: any interest increase dominates
        if interest_increase > 0:
            severity_ratio = float("inf")
        elif interest_increase < 0:
            severity_ratio = float("-inf")
        else:
            severity_ratio = 0.0
    else:
        severity_ratio = interest_increase / deficit_ratio

    if severity_ratio > thresholds.high_severity:
        severity = "high"
    elif severity_ratio > thresholds.medium_severity:
        severity = "medium"
    else:
        severity = "low"

    return DoomLoopAssessment(
        debt_ratio_change=round_display(debt_increase, 1),
        interest_ratio_change=round_display(interest_increase, 2),
        premium_increase_bps=round_bps(premium_increase),
        severity_ratio=severity_ratio,
        severity=severity,
        doom_loop_active=premium_increase > thresholds.active_premium_bps,
    )
