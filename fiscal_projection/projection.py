"""
Multi-Year Fiscal Projection

Projects GDP, deficit and debt year by year, integrating:
1. Policy changes (revenue/spending adjustments)
2. Economic feedback (growth effects, tax elasticity)
3. Sovereign risk premium (endogenous interest rates)
4. Structural reforms (potential growth)

The path is deterministic: each year's interest bill depends on the debt
stock accumulated by all previous years, and the debt ratio in turn sets the
risk premium.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field, fields
import hashlib
import json
import logging
import math
from numbers import Integral, Real
from typing import Any, Dict, Iterable, Iterator, List, Optional

import numpy as np
import pandas as pd

from .baseline import MACRO_BASELINE, MacroBaseline
from .exceptions import ProjectionConfigError
from .interest import effective_interest_rate
from .reforms import ReformSpec, reform_growth_boost
from .rounding import round_bps, round_display

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PolicyImpact:
    """
    Net effect of the tax/spending levers for the current year.

    Attributes:
        revenue_change: Revenue change vs baseline (Md, positive = more revenue)
        spending_change: Spending change vs baseline (Md, positive = more spending)
        growth_effect: Change in nominal growth from the policy mix (decimal pp/year)
    """
    revenue_change: float = 0.0
    spending_change: float = 0.0
    growth_effect: float = 0.0

    @property
    def deficit_improvement(self) -> float:
        """Reduction in the primary deficit (positive = better)."""
        return self.revenue_change - self.spending_change

    @classmethod
    def zero(cls) -> 'PolicyImpact':
        """No policy change."""
        return cls()


@dataclass(frozen=True)
class ProjectionConfig:
    """
    Configuration for a projection run.

    Attributes:
        horizon_years: Years projected after the starting year
        enable_risk_premium: Use the debt-dependent premium curve
        political_risk_premium: Exogenous political risk add-on (decimal)
        reform: Resolved structural reform, if any
    """
    horizon_years: int = 10
    enable_risk_premium: bool = True
    political_risk_premium: float = 0.0
    reform: Optional[ReformSpec] = None

    def __post_init__(self):
        if isinstance(self.horizon_years, bool) or not isinstance(self.horizon_years, Integral):
            raise ProjectionConfigError(
                f"horizon_years must be an integer, got {self.horizon_years!r}"
            )
        if self.horizon_years < 0:
            raise ProjectionConfigError(f"horizon_years must be >= 0, got {self.horizon_years}")

        if not isinstance(self.enable_risk_premium, bool):
            raise ProjectionConfigError(
                f"enable_risk_premium must be a bool, got {self.enable_risk_premium!r}"
            )

        if not isinstance(self.political_risk_premium, Real) or not math.isfinite(self.political_risk_premium):
            raise ProjectionConfigError(
                f"political_risk_premium must be a finite number, got {self.political_risk_premium!r}"
            )

        if self.reform is not None and not isinstance(self.reform, ReformSpec):
            raise ProjectionConfigError(
                f"reform must be a resolved ReformSpec, got {type(self.reform).__name__}"
            )

    @classmethod
    def from_bps(cls,
                 horizon_years: int = 10,
                 political_risk_bps: float = 0.0,
                 enable_risk_premium: bool = True,
                 reform: Optional[ReformSpec] = None) -> 'ProjectionConfig':
        """Build a config from a political risk premium quoted in basis points."""
        return cls(
            horizon_years=horizon_years,
            enable_risk_premium=enable_risk_premium,
            political_risk_premium=political_risk_bps / 10000,
            reform=reform,
        )


@dataclass(frozen=True)
class ProjectionYear:
    """
    One year of a fiscal projection.

    Flows and stocks in Md currency units (1 decimal), ratios in % of GDP,
    rates in %. Stocks are start-of-year values; flows are that year's.
    """
    year: int

    # Flow variables
    gdp: float
    deficit: float
    interest: float
    primary_deficit: float

    # Stock variable
    debt: float

    # Ratios (% GDP)
    debt_ratio: float
    deficit_ratio: float
    interest_ratio: float

    # Parameters used
    effective_interest_rate: float
    nominal_growth_rate: float

    # Total spread over the baseline rate (premium + political risk)
    risk_premium_bps: int

    # Unrounded state, kept out of serialization
    raw_gdp: float = field(default=0.0, repr=False, compare=False)
    raw_debt: float = field(default=0.0, repr=False, compare=False)
    raw_deficit: float = field(default=0.0, repr=False, compare=False)
    raw_nominal_growth: float = field(default=0.0, repr=False, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in PROJECTION_FIELDS}


PROJECTION_FIELDS = tuple(f.name for f in fields(ProjectionYear) if not f.name.startswith("raw_"))
_ALL_FIELDS = frozenset(f.name for f in fields(ProjectionYear))


class Projection(Sequence):
    """
    Ordered, immutable sequence of ProjectionYear.

    Index 0 is the starting year; a run over ``horizon_years`` holds
    ``horizon_years + 1`` entries.
    """

    def __init__(self, years: Iterable[ProjectionYear]):
        self._years = tuple(years)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Projection(self._years[index])
        return self._years[index]

    def __len__(self) -> int:
        return len(self._years)

    def __iter__(self) -> Iterator[ProjectionYear]:
        return iter(self._years)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Projection):
            return NotImplemented
        return self._years == other._years

    def __hash__(self) -> int:
        return hash(self._years)

    def __repr__(self) -> str:
        if not self._years:
            return "Projection([])"
        return f"Projection({self.first.year}-{self.last.year}, {len(self)} years)"

    @property
    def first(self) -> ProjectionYear:
        return self._years[0]

    @property
    def last(self) -> ProjectionYear:
        return self._years[-1]

    @property
    def years(self) -> np.ndarray:
        return self.column("year")

    def column(self, name: str) -> np.ndarray:
        """Values of one ProjectionYear field across all years."""
        if name not in _ALL_FIELDS:
            raise KeyError(f"Unknown projection field: {name}")
        return np.array([getattr(y, name) for y in self._years])

    def to_records(self) -> List[Dict[str, Any]]:
        """Plain records, safe to serialize to JSON."""
        return [y.to_dict() for y in self._years]

    def to_dataframe(self) -> pd.DataFrame:
        """Convert the projection to a DataFrame (one row per year)."""
        return pd.DataFrame(self.to_records(), columns=list(PROJECTION_FIELDS))

    def fingerprint(self) -> str:
        """Stable identifier of the rounded output."""
        raw = json.dumps(self.to_records(), sort_keys=True).encode("utf-8")
        return hashlib.sha256(raw).hexdigest()[:16]


def _share_of_gdp(value: float, gdp: float) -> float:
    # A collapsed GDP gives inf/nan rather than an exception
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(value) / gdp * 100)


class FiscalPathProjector:
    """
    Year-by-year fiscal path with interest rate feedback and reforms.

    The projector holds only the immutable macro baseline; every call to
    ``project`` starts from the baseline stocks, so runs are independent.
    """

    def __init__(self, baseline: MacroBaseline = MACRO_BASELINE):
        self.baseline = baseline

    def project(self,
                policy_impact: PolicyImpact,
                config: Optional[ProjectionConfig] = None) -> Projection:
        """
        Run the projection over the configured horizon.

        Args:
            policy_impact: Net revenue/spending/growth effect of the policy mix
            config: Horizon, premium toggle, political risk and reform

        Returns:
            Projection with horizon_years + 1 entries
        """
        config = config or ProjectionConfig()
        base = self.baseline
        reform = config.reform

        logger.debug(
            f"Projecting {config.horizon_years} years: premium={config.enable_risk_premium}, "
            f"political_risk={config.political_risk_premium:.4f}, "
            f"reform={reform.label if reform else None}"
        )

        # Deficit improvement from policy is constant over the horizon
        primary_deficit = base.primary_deficit - policy_impact.deficit_improvement

        gdp = base.gdp
        debt = base.debt
        results = []

        for t in range(config.horizon_years + 1):
            # 1. Growth this year
            nominal_growth = base.nominal_growth + policy_impact.growth_effect
            if reform is not None:
                nominal_growth += reform_growth_boost(t, reform)

            # 2. Endogenous interest rate
            debt_ratio = _share_of_gdp(debt, gdp)
            rate = effective_interest_rate(
                debt_ratio,
                base_rate=base.base_interest_rate,
                political_risk=config.political_risk_premium,
                premium_enabled=config.enable_risk_premium,
                curve=base.risk_premium,
            )

            # 3. Fiscal outcomes
            interest = debt * rate
            total_deficit = primary_deficit + interest

            # 4. Automatic stabilizers: growth above baseline raises revenue
            growth_feedback = (nominal_growth - base.nominal_growth) * gdp * base.tax_elasticity
            deficit = total_deficit - growth_feedback

            results.append(self._snapshot(
                t, gdp, debt, deficit, interest, primary_deficit,
                debt_ratio, rate, nominal_growth,
            ))

            # 5. Evolve to next year
            gdp = gdp * (1 + nominal_growth)
            debt = debt + deficit

        return Projection(results)

    def _snapshot(self, t: int, gdp: float, debt: float, deficit: float,
                  interest: float, primary_deficit: float, debt_ratio: float,
                  rate: float, nominal_growth: float) -> ProjectionYear:
        return ProjectionYear(
            year=self.baseline.year + t,
            gdp=round_display(gdp, 1),
            deficit=round_display(deficit, 1),
            interest=round_display(interest, 1),
            primary_deficit=round_display(primary_deficit, 1),
            debt=round_display(debt, 1),
            debt_ratio=round_display(debt_ratio, 1),
            deficit_ratio=round_display(_share_of_gdp(deficit, gdp), 1),
            interest_ratio=round_display(_share_of_gdp(interest, gdp), 2),
            effective_interest_rate=round_display(rate * 100, 2),
            nominal_growth_rate=round_display(nominal_growth * 100, 2),
            risk_premium_bps=round_bps((rate - self.baseline.base_interest_rate) * 10000),
            raw_gdp=gdp,
            raw_debt=debt,
            raw_deficit=deficit,
            raw_nominal_growth=nominal_growth,
        )


def project_fiscal_path(policy_impact: PolicyImpact,
                        config: Optional[ProjectionConfig] = None,
                        baseline: MacroBaseline = MACRO_BASELINE) -> Projection:
    """Project the fiscal path for a policy mix (see FiscalPathProjector.project)."""
    return FiscalPathProjector(baseline).project(policy_impact, config)


def get_baseline_projection(years: int = 10,
                            baseline: MacroBaseline = MACRO_BASELINE) -> Projection:
    """Reference trajectory: no policy change, no reform, risk premium on."""
    return project_fiscal_path(
        PolicyImpact.zero(),
        ProjectionConfig(horizon_years=years, enable_risk_premium=True, reform=None),
        baseline=baseline,
    )


if __name__ == "__main__":
    proj = get_baseline_projection(10)

    print("--- BASELINE FISCAL PATH ---")
    print(proj.to_dataframe()[["year", "debt_ratio", "deficit_ratio",
                               "effective_interest_rate", "risk_premium_bps"]].to_string(index=False))
