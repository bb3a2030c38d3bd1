"""
Tests for the baseline / policy / policy + reform scenario runner.
"""

import logging
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from fiscal_projection import (
    PolicyImpact,
    ReformKey,
    UnknownReformError,
    get_baseline_projection,
    run_scenarios,
)


class TestRunScenarios:
    """Test scenario assembly."""

    def test_no_policy_no_reform_matches_baseline(self):
        scenarios = run_scenarios(PolicyImpact.zero(), horizon_years=10)
        assert scenarios.reform is None
        assert scenarios.policy == scenarios.baseline
        assert scenarios.full == scenarios.baseline
        assert scenarios.baseline == get_baseline_projection(10)
        assert all(c.debt_ratio_diff == 0.0 for c in scenarios.comparisons())

    def test_reforms_improve_full_scenario(self, consolidation_policy):
        scenarios = run_scenarios(
            consolidation_policy,
            horizon_years=15,
            reforms=[ReformKey.LABOR_MARKET, "product_market_regulation"],
        )
        assert scenarios.reform.growth_effect == pytest.approx(0.002125)
        assert scenarios.full.last.debt_ratio < scenarios.policy.last.debt_ratio
        assert all(c.debt_ratio_diff <= 0 for c in scenarios.reform_gain())

    def test_political_risk_applies_to_policy_scenarios(self):
        scenarios = run_scenarios(PolicyImpact.zero(), horizon_years=5, political_risk_bps=20)
        assert scenarios.policy.first.risk_premium_bps == scenarios.baseline.first.risk_premium_bps + 20
        assert scenarios.full.first.risk_premium_bps == scenarios.policy.first.risk_premium_bps

    def test_assessment_of_full_scenario(self, stimulus_policy):
        scenarios = run_scenarios(stimulus_policy, horizon_years=10)
        assert scenarios.doom_loop.doom_loop_active
        assert not scenarios.validation.valid

    def test_dataframe(self):
        scenarios = run_scenarios(PolicyImpact.zero(), horizon_years=4, reforms=["energy"])
        df = scenarios.to_dataframe()
        assert len(df) == 15
        assert set(df["scenario"]) == {"baseline", "policy", "full"}

    def test_unknown_reform_key(self):
        with pytest.raises(UnknownReformError):
            run_scenarios(PolicyImpact.zero(), reforms=["tax_amnesty"])

    def test_logs_summary(self, caplog):
        with caplog.at_level(logging.INFO, logger="fiscal_projection.scenarios"):
            run_scenarios(PolicyImpact.zero(), horizon_years=2)
        assert any("Scenarios built" in r.getMessage() for r in caplog.records)
