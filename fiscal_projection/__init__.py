"""
Fiscal Projection Engine

Multi-year projection of deficit, debt and interest costs with an
endogenous sovereign risk premium and structural reform growth effects.
"""

from .baseline import MACRO_BASELINE, MacroBaseline, RiskPremiumCurve
from .exceptions import (
    FiscalProjectionError,
    BaselineConfigError,
    ReformConfigError,
    ProjectionConfigError,
    UnknownReformError,
    EmptyProjectionError,
)
from .interest import effective_interest_rate, premium_regime, risk_premium
from .reforms import (
    REFORM_DECAY_RATE,
    REFORM_OVERLAP_PENALTY,
    STRUCTURAL_REFORMS,
    ReformKey,
    ReformSpec,
    combine_reforms,
    get_reform,
    reform_growth_boost,
    resolve_reform,
)
from .projection import (
    FiscalPathProjector,
    PolicyImpact,
    Projection,
    ProjectionConfig,
    ProjectionYear,
    get_baseline_projection,
    project_fiscal_path,
)
from .comparison import (
    DoomLoopAssessment,
    DoomLoopThresholds,
    ProjectionComparison,
    assess_doom_loop,
    compare_projections,
)
from .validation import ProjectionValidation, ValidationBounds, validate_projection
from .scenarios import ScenarioSet, run_scenarios

__version__ = "1.8.0"
__all__ = [
    "MACRO_BASELINE",
    "MacroBaseline",
    "RiskPremiumCurve",
    "FiscalProjectionError",
    "BaselineConfigError",
    "ReformConfigError",
    "ProjectionConfigError",
    "UnknownReformError",
    "EmptyProjectionError",
    "effective_interest_rate",
    "premium_regime",
    "risk_premium",
    "REFORM_DECAY_RATE",
    "REFORM_OVERLAP_PENALTY",
    "STRUCTURAL_REFORMS",
    "ReformKey",
    "ReformSpec",
    "combine_reforms",
    "get_reform",
    "reform_growth_boost",
    "resolve_reform",
    "FiscalPathProjector",
    "PolicyImpact",
    "Projection",
    "ProjectionConfig",
    "ProjectionYear",
    "get_baseline_projection",
    "project_fiscal_path",
    "DoomLoopAssessment",
    "DoomLoopThresholds",
    "ProjectionComparison",
    "assess_doom_loop",
    "compare_projections",
    "ProjectionValidation",
    "ValidationBounds",
    "validate_projection",
    "ScenarioSet",
    "run_scenarios",
]
