"""levelint: find the order of integration of a univariate time series."""

from __future__ import annotations

from levelint.differencing import (
    DifferencingReport,
    OracleSet,
    TestVerdict,
    run_differencing,
    stationarize,
)
from levelint.errors import DependencyMissing, LevelintError, NonConvergence, OracleFailure

__version__ = "0.1.0"

__all__ = [
    "DependencyMissing",
    "DifferencingReport",
    "LevelintError",
    "NonConvergence",
    "OracleFailure",
    "OracleSet",
    "TestVerdict",
    "run_differencing",
    "stationarize",
]
