"""
Scenario runner.

Builds the three trajectories shown side by side to the user:
- Baseline: no policy change, no reform
- Policy: current lever settings, no reform
- Full: current lever settings plus the selected structural reforms

Example usage:
    from fiscal_projection import PolicyImpact, ReformKey, run_scenarios

    scenarios = run_scenarios(
        PolicyImpact(revenue_change=20, spending_change=-10),
        horizon_years=10,
        political_risk_bps=20,
        reforms=[ReformKey.LABOR_MARKET, ReformKey.ENERGY],
    )
    print(scenarios.doom_loop.severity)
"""

from dataclasses import dataclass
import logging
from typing import Iterable, List, Optional, Sequence, Union

import pandas as pd

from .baseline import MACRO_BASELINE, MacroBaseline
from .comparison import (
    DEFAULT_TARGET_OFFSETS,
    DoomLoopAssessment,
    ProjectionComparison,
    assess_doom_loop,
    compare_projections,
)
from .projection import (
    PolicyImpact,
    Projection,
    ProjectionConfig,
    get_baseline_projection,
    project_fiscal_path,
)
from .reforms import ReformKey, ReformSpec, resolve_reform
from .validation import ProjectionValidation, validate_projection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScenarioSet:
    """Baseline, policy-only and policy + reform projections."""
    baseline: Projection
    policy: Projection
    full: Projection
    reform: Optional[ReformSpec]
    doom_loop: DoomLoopAssessment
    validation: ProjectionValidation

    def comparisons(self, target_year_offsets: Sequence[int] = DEFAULT_TARGET_OFFSETS) -> List[ProjectionComparison]:
        """Full scenario relative to the baseline."""
        return compare_projections(self.full, self.baseline, target_year_offsets)

    def reform_gain(self, target_year_offsets: Sequence[int] = DEFAULT_TARGET_OFFSETS) -> List[ProjectionComparison]:
        """Full scenario relative to the policy-only scenario."""
        return compare_projections(self.full, self.policy, target_year_offsets)

    def to_dataframe(self) -> pd.DataFrame:
        """Long-format frame of all three scenarios."""
        frames = []
        for name in ("baseline", "policy", "full"):
            df = getattr(self, name).to_dataframe()
            df.insert(0, "scenario", name)
            frames.append(df)
        return pd.concat(frames, ignore_index=True)


def run_scenarios(policy_impact: PolicyImpact,
                  horizon_years: int = 10,
                  political_risk_bps: float = 0.0,
                  reforms: Iterable[Union[ReformKey, str]] = (),
                  baseline: MacroBaseline = MACRO_BASELINE) -> ScenarioSet:
    """
    Run baseline, policy and policy + reform projections.

    Args:
        policy_impact: Net effect of the lever settings
        horizon_years: Years projected after the starting year
        political_risk_bps: Political risk premium (basis points)
        reforms: Catalog keys of the selected structural reforms
        baseline: Macro calibration

    Returns:
        ScenarioSet with the doom-loop assessment and diagnostics of the
        full scenario
    """
    reform = resolve_reform(reforms)

    base_projection = get_baseline_projection(horizon_years, baseline=baseline)
    policy_projection = project_fiscal_path(
        policy_impact,
        ProjectionConfig.from_bps(horizon_years, political_risk_bps),
        baseline=baseline,
    )
    full_projection = project_fiscal_path(
        policy_impact,
        ProjectionConfig.from_bps(horizon_years, political_risk_bps, reform=reform),
        baseline=baseline,
    )

    doom_loop = assess_doom_loop(full_projection)
    validation = validate_projection(full_projection)

    logger.info(
        f"Scenarios built over {horizon_years} years "
        f"(reform: {reform.label if reform else 'none'}): "
        f"final debt ratio {full_projection.last.debt_ratio}% vs baseline "
        f"{base_projection.last.debt_ratio}%, doom loop severity {doom_loop.severity}"
    )

    return ScenarioSet(
        baseline=base_projection,
        policy=policy_projection,
        full=full_projection,
        reform=reform,
        doom_loop=doom_loop,
        validation=validation,
    )
