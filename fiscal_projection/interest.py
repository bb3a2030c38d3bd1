"""
Sovereign Risk Premium

Maps a debt/GDP ratio to the effective interest rate paid on outstanding
debt. The premium is a continuous, piecewise-linear, non-decreasing function
of the debt ratio with four regimes; each regime starts from the premium
accrued at the previous regime's ceiling, so there is no jump at any
threshold.

Calibrated to France OAT spreads 2010-2025 and checked against IMF debt
sustainability analysis. The top regime extrapolates linearly without a
cap, which overstates spreads for extreme debt levels.

References:
- IMF (2017), EC (2018): 3 bps per pp of debt above 60%
- Kumar & Baldacci (2010): accelerating spreads at high debt
"""

from .baseline import MACRO_BASELINE, RiskPremiumCurve


def premium_regime(debt_ratio: float, curve: RiskPremiumCurve = MACRO_BASELINE.risk_premium) -> int:
    """Return the premium regime (1-4) a debt ratio falls into."""
    if debt_ratio <= curve.threshold1:
        return 1
    elif debt_ratio <= curve.threshold2:
        return 2
    elif debt_ratio <= curve.threshold3:
        return 3
    return 4


def risk_premium(debt_ratio: float, curve: RiskPremiumCurve = MACRO_BASELINE.risk_premium) -> float:
    """
    Risk premium (decimal rate) for a debt ratio.

    Args:
        debt_ratio: Debt-to-GDP ratio (%). Negative values are regime 1.
        curve: Risk-premium curve parameters

    Returns:
        Premium added to the base rate (0.01 = 100 bps)
    """
    regime = premium_regime(debt_ratio, curve)

    if regime == 1:
        return 0.0

    if regime == 2:
        return (debt_ratio - curve.threshold1) * curve.slope1

    if regime == 3:
        excess = debt_ratio - curve.threshold2
        return curve.regime2_ceiling + excess * curve.slope2

    excess = debt_ratio - curve.threshold3
    return curve.regime2_ceiling + curve.regime3_ceiling + excess * curve.slope3


def effective_interest_rate(debt_ratio: float,
                            base_rate: float = MACRO_BASELINE.base_interest_rate,
                            political_risk: float = 0.0,
                            premium_enabled: bool = True,
                            curve: RiskPremiumCurve = MACRO_BASELINE.risk_premium) -> float:
    """
    Effective interest rate with sovereign risk premium.

    Args:
        debt_ratio: Debt-to-GDP ratio (%)
        base_rate: Average rate on outstanding debt (decimal)
        political_risk: Exogenous political risk add-on (decimal)
        premium_enabled: If False, the premium curve is bypassed entirely
        curve: Risk-premium curve parameters

    Returns:
        Effective interest rate (decimal, e.g. 0.035 = 3.5%)
    """
    if not premium_enabled:
        return base_rate + political_risk

    return base_rate + risk_premium(debt_ratio, curve) + political_risk
