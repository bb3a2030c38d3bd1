"""
Tests for the sovereign risk premium model.

Tests cover:
- Regime boundaries and the zero-premium regime
- Continuity and monotonicity of the premium curve
- Premium toggle and political risk add-on
"""

import numpy as np
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from fiscal_projection import (
    MACRO_BASELINE,
    RiskPremiumCurve,
    effective_interest_rate,
    premium_regime,
    risk_premium,
)


BASE_RATE = MACRO_BASELINE.base_interest_rate


class TestRiskPremium:
    """Test the piecewise-linear premium curve."""

    @pytest.mark.parametrize("ratio", [-20.0, 0.0, 30.0, 59.9, 60.0])
    def test_no_premium_below_first_threshold(self, ratio):
        assert risk_premium(ratio) == 0.0
        assert effective_interest_rate(ratio, BASE_RATE, 0.002) == pytest.approx(BASE_RATE + 0.002)

    def test_second_regime_slope(self):
        # 10pp above 60% at 3 bps per pp
        assert risk_premium(70.0) == pytest.approx(0.003)

    def test_france_2025_rate(self):
        """115.8% debt/GDP -> 0.009 + 25.8 * 0.0004 = 0.01932 premium."""
        assert risk_premium(115.8) == pytest.approx(0.01932)
        assert effective_interest_rate(115.8, 0.032, 0.0) == pytest.approx(0.05132)

    def test_fourth_regime_extrapolates(self):
        # 0.009 + 0.012 + 30 * 0.0010
        assert risk_premium(150.0) == pytest.approx(0.051)
        # No cap at extreme levels
        assert risk_premium(1000.0) == pytest.approx(0.021 + 880 * 0.0010)

    @pytest.mark.parametrize("threshold", [60.0, 90.0, 120.0])
    def test_continuity_at_thresholds(self, threshold):
        below = risk_premium(threshold)
        above = risk_premium(threshold + 1e-9)
        assert above == pytest.approx(below, abs=1e-10)

    def test_regime_ceilings_match_formula(self, curve):
        # Regime 2 formula at threshold2 equals regime 3 formula at zero excess
        regime2_at_t2 = (curve.threshold2 - curve.threshold1) * curve.slope1
        assert curve.regime2_ceiling == pytest.approx(regime2_at_t2)
        assert risk_premium(curve.threshold2) == pytest.approx(curve.regime2_ceiling)
        assert risk_premium(curve.threshold3) == pytest.approx(
            curve.regime2_ceiling + curve.regime3_ceiling
        )

    def test_monotonic_non_decreasing(self):
        ratios = np.linspace(-50, 300, 1401)
        rates = np.array([effective_interest_rate(r, BASE_RATE, 0.001) for r in ratios])
        assert np.all(np.diff(rates) >= 0)

    def test_custom_curve(self):
        curve = RiskPremiumCurve(threshold1=50, slope1=0.001, threshold2=70,
                                 slope2=0.002, threshold3=100, slope3=0.005)
        # 0.02 + 0.06 + 10 * 0.005
        assert risk_premium(110.0, curve) == pytest.approx(0.13)


class TestPremiumRegime:
    """Test regime classification."""

    @pytest.mark.parametrize("ratio,expected", [
        (-5.0, 1),
        (60.0, 1),
        (60.1, 2),
        (90.0, 2),
        (115.8, 3),
        (120.0, 3),
        (120.1, 4),
        (500.0, 4),
    ])
    def test_regimes(self, ratio, expected):
        assert premium_regime(ratio) == expected


class TestEffectiveRate:
    """Test premium toggle and political risk."""

    def test_premium_disabled_bypasses_curve(self):
        rate = effective_interest_rate(150.0, BASE_RATE, 0.0015, premium_enabled=False)
        assert rate == pytest.approx(BASE_RATE + 0.0015)

    def test_political_risk_is_additive(self):
        without = effective_interest_rate(115.8, BASE_RATE, 0.0)
        with_risk = effective_interest_rate(115.8, BASE_RATE, 0.0021)
        assert with_risk - without == pytest.approx(0.0021)

    def test_defaults_use_macro_baseline(self):
        assert effective_interest_rate(50.0) == pytest.approx(MACRO_BASELINE.base_interest_rate)
