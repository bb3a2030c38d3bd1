"""
Pytest fixtures for fiscal projection tests.
"""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from fiscal_projection import (
    PolicyImpact,
    ProjectionConfig,
    ReformSpec,
    RiskPremiumCurve,
    get_baseline_projection,
    project_fiscal_path,
)


# =============================================================================
# REFORM FIXTURES
# =============================================================================

@pytest.fixture
def labor_reform():
    """Reform with a 2-year lag and 10 years at peak."""
    return ReformSpec(
        label="Test labor reform",
        growth_effect=0.0015,
        lag=2,
        duration=10,
    )


@pytest.fixture
def immediate_reform():
    """Reform with no phase-in."""
    return ReformSpec(
        label="Immediate reform",
        growth_effect=0.002,
        lag=0,
        duration=3,
    )


# =============================================================================
# POLICY FIXTURES
# =============================================================================

@pytest.fixture
def consolidation_policy():
    """Fiscal consolidation: +30Md revenue, -20Md spending."""
    return PolicyImpact(revenue_change=30.0, spending_change=-20.0, growth_effect=-0.001)


@pytest.fixture
def stimulus_policy():
    """Deficit-financed stimulus."""
    return PolicyImpact(revenue_change=-40.0, spending_change=30.0, growth_effect=0.002)


# =============================================================================
# PROJECTION FIXTURES
# =============================================================================

@pytest.fixture
def curve():
    return RiskPremiumCurve()


@pytest.fixture
def baseline_projection():
    """10-year reference trajectory."""
    return get_baseline_projection(10)


@pytest.fixture
def reform_projection(consolidation_policy, labor_reform):
    return project_fiscal_path(
        consolidation_policy,
        ProjectionConfig(horizon_years=15, reform=labor_reform),
    )
