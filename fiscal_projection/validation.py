"""
Projection diagnostics.

Flags economically implausible outcomes so the user can judge them. These
are heuristics for odd parameter combinations, not correctness checks; a
projection is never rejected.
"""

from dataclasses import dataclass
import logging
import math
from typing import Tuple

import numpy as np

from .projection import Projection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationBounds:
    """Red-flag levels checked for every year after the first."""
    max_debt_ratio: float = 200.0        # % of GDP
    max_interest_rate: float = 10.0      # %
    max_gdp_decline: float = 5.0         # % year-over-year


@dataclass(frozen=True)
class ProjectionValidation:
    """Result of projection diagnostics."""
    valid: bool
    warnings: Tuple[str, ...] = ()

    def __str__(self) -> str:
        if self.valid:
            return "✓ PASS: projection within plausible bounds"
        return f"✗ WARN: {len(self.warnings)} implausible value(s)\n" + "\n".join(
            f"  - {w}" for w in self.warnings
        )


def validate_projection(projection: Projection,
                        bounds: ValidationBounds = ValidationBounds()) -> ProjectionValidation:
    """
    Check a projection against plausibility bounds.

    Checks (every year after the first):
    - Debt ratio above bounds.max_debt_ratio
    - Effective interest rate above bounds.max_interest_rate
    - GDP falling by more than bounds.max_gdp_decline year over year

    A year whose GDP or debt ratio is not finite (nan/inf) is always
    flagged, the starting year included, and the bound checks are skipped
    for it.

    Returns:
        ProjectionValidation, valid iff no warning was raised
    """
    warnings = []

    gdp = projection.column("gdp").astype(float)
    with np.errstate(divide="ignore", invalid="ignore"):
        gdp_growth = (gdp[1:] / gdp[:-1] - 1) * 100

    for i, year in enumerate(projection):
        # Comparisons against nan are all False, so check it explicitly
        if not (math.isfinite(year.gdp) and math.isfinite(year.debt_ratio)):
            warnings.append(
                f"Year {year.year}: Non-finite projection values "
                f"(GDP {year.gdp}, debt ratio {year.debt_ratio}%)"
            )
            continue

        if i == 0:
            continue

        if year.debt_ratio > bounds.max_debt_ratio:
            warnings.append(
                f"Year {year.year}: Debt ratio exceeds {bounds.max_debt_ratio:g}% ({year.debt_ratio}%)"
            )

        if year.effective_interest_rate > bounds.max_interest_rate:
            warnings.append(
                f"Year {year.year}: Interest rate exceeds {bounds.max_interest_rate:g}% "
                f"({year.effective_interest_rate}%)"
            )

        growth = gdp_growth[i - 1]
        if growth < -bounds.max_gdp_decline:
            warnings.append(
                f"Year {year.year}: GDP decline exceeds {bounds.max_gdp_decline:g}% ({growth:.1f}%)"
            )

    for w in warnings:
        logger.warning(w)

    return ProjectionValidation(valid=len(warnings) == 0, warnings=tuple(warnings))
