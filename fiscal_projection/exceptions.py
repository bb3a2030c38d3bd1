"""
Exceptions raised for malformed projection inputs.

Projection arithmetic itself never raises: implausible outcomes are reported
by ``validate_projection`` as warnings. These errors only guard the
configuration boundary.
"""


class FiscalProjectionError(Exception):
    """Base class for all fiscal_projection errors."""


class BaselineConfigError(FiscalProjectionError, ValueError):
    """Macro baseline or risk-premium curve violates its invariants."""


class ReformConfigError(FiscalProjectionError, ValueError):
    """Structural reform parameters are out of range."""


class ProjectionConfigError(FiscalProjectionError, ValueError):
    """Projection configuration (horizon, premium toggle, political risk) is malformed."""


class UnknownReformError(FiscalProjectionError, KeyError):
    """Reform key is not part of the structural reform catalog."""


class EmptyProjectionError(FiscalProjectionError, ValueError):
    """Operation needs at least one projected year."""
