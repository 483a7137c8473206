"""Utility functions for validation and series manipulation.

This package provides modular utilities organized by functionality:
- validation: series and parameter validation
- series: finite differencing, truncation and lag rules
- statsmodels_utils: warning handling around statsmodels tests
"""

from __future__ import annotations

from levelint.config_logging import get_logger

# Series primitives
from levelint.utils.series import adf_default_lags, diff, head, lag_truncation

# Statsmodels utilities
from levelint.utils.statsmodels_utils import suppress_interpolation_warnings

# Validation utilities
from levelint.utils.validation import (
    validate_alpha,
    validate_head_size,
    validate_max_order,
    validate_series,
)

__all__ = [
    "get_logger",
    # Series
    "adf_default_lags",
    "diff",
    "head",
    "lag_truncation",
    # Statsmodels
    "suppress_interpolation_warnings",
    # Validation
    "validate_alpha",
    "validate_head_size",
    "validate_max_order",
    "validate_series",
]
