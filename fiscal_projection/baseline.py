"""
Macro Baseline

Calibration constants for the multi-year projection: starting stocks,
growth assumptions, fiscal parameters and the sovereign risk-premium curve.

Default values describe France in 2025 (Md EUR).

Sources:
- Interest rates: IMF (2017), EC (2018), Kumar & Baldacci (2010),
  France OAT spreads 2024-2025
- Growth: ECB inflation target, IMF Article IV France (2025)
"""

from dataclasses import dataclass, field, fields
import math
from typing import Any, Mapping

from .exceptions import BaselineConfigError


@dataclass(frozen=True)
class RiskPremiumCurve:
    """
    Piecewise-linear sovereign risk-premium curve.

    Thresholds are debt/GDP ratios in percent, slopes are the premium added
    per percentage point of debt above the regime threshold (decimal rate,
    0.0003 = 3 bps per pp).

    Regimes:
    - Below threshold1: no premium
    - threshold1 - threshold2: stable spread (IMF/EC consensus)
    - threshold2 - threshold3: increasing pressure (France historical)
    - Above threshold3: crisis risk, non-linear acceleration
    """
    threshold1: float = 60.0
    slope1: float = 0.0003
    threshold2: float = 90.0
    slope2: float = 0.0004
    threshold3: float = 120.0
    slope3: float = 0.0010

    def __post_init__(self):
        values = [getattr(self, f.name) for f in fields(self)]
        if not all(math.isfinite(v) for v in values):
            raise BaselineConfigError("Risk premium curve parameters must be finite")

        if not (self.threshold1 < self.threshold2 < self.threshold3):
            raise BaselineConfigError(
                f"Risk premium thresholds must be strictly increasing, got "
                f"{self.threshold1}, {self.threshold2}, {self.threshold3}"
            )

        if self.slope1 < 0:
            raise BaselineConfigError(f"Risk premium slopes must be non-negative, got slope1={self.slope1}")

        if not (self.slope1 <= self.slope2 <= self.slope3):
            raise BaselineConfigError(
                f"Risk premium slopes must be non-decreasing across regimes, got "
                f"{self.slope1}, {self.slope2}, {self.slope3}"
            )

    @property
    def regime2_ceiling(self) -> float:
        """Premium accrued across the whole second regime."""
        return (self.threshold2 - self.threshold1) * self.slope1

    @property
    def regime3_ceiling(self) -> float:
        """Premium accrued across the whole third regime."""
        return (self.threshold3 - self.threshold2) * self.slope2


@dataclass(frozen=True)
class MacroBaseline:
    """
    Starting state and structural parameters of the economy.

    Stocks and flows in billions (Md) of currency units, rates as decimals.
    """
    year: int = 2025
    gdp: float = 2850.0                 # Nominal GDP
    debt: float = 3300.0                # Public debt (~115.8% GDP)

    # 3.2% average rate on outstanding debt
    base_interest_rate: float = 0.032
    risk_premium: RiskPremiumCurve = field(default_factory=RiskPremiumCurve)

    # Growth parameters (1.1% real + 1.8% inflation)
    nominal_growth: float = 0.029
    real_growth: float = 0.011
    inflation: float = 0.018

    # Deficit excluding interest
    primary_deficit: float = 84.0

    # Share of above-baseline GDP growth that flows back as revenue
    tax_elasticity: float = 0.45

    def __post_init__(self):
        if not isinstance(self.risk_premium, RiskPremiumCurve):
            raise BaselineConfigError(
                f"risk_premium must be a RiskPremiumCurve, got {type(self.risk_premium).__name__}"
            )

        for name in ("gdp", "debt", "base_interest_rate", "nominal_growth",
                     "real_growth", "inflation", "primary_deficit", "tax_elasticity"):
            if not math.isfinite(getattr(self, name)):
                raise BaselineConfigError(f"Baseline parameter {name} must be finite")

        if self.gdp <= 0:
            raise BaselineConfigError(f"Baseline GDP must be positive, got {self.gdp}")

    @property
    def debt_to_gdp(self) -> float:
        """Starting debt as percentage of GDP."""
        return self.debt / self.gdp * 100

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'MacroBaseline':
        """
        Build a baseline from a plain mapping (e.g. parsed JSON).

        Missing keys keep their default calibration; unknown keys are
        rejected so that a typo never silently falls back to a default.

        Args:
            data: Baseline parameters; ``risk_premium`` may itself be a
                  mapping of curve parameters.

        Returns:
            Fully resolved MacroBaseline
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise BaselineConfigError(f"Unknown baseline parameters: {unknown}")

        kwargs = dict(data)
        curve = kwargs.get("risk_premium")
        if isinstance(curve, Mapping):
            curve_known = {f.name for f in fields(RiskPremiumCurve)}
            curve_unknown = sorted(set(curve) - curve_known)
            if curve_unknown:
                raise BaselineConfigError(f"Unknown risk premium parameters: {curve_unknown}")
            kwargs["risk_premium"] = RiskPremiumCurve(**curve)

        return cls(**kwargs)


# Default calibration shared by every projection run
MACRO_BASELINE = MacroBaseline()
