"""Validation utilities for series and decision parameters.

This module provides validation functions for:
- Series validation (non-empty, one-dimensional, finite)
- Significance level validation
- Truncation size and order ceiling validation
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
import pandas as pd

__all__ = [
    "validate_series",
    "validate_alpha",
    "validate_head_size",
    "validate_max_order",
]


def validate_series(series: Any) -> pd.Series:
    """Return a clean float Series.

    Accepts a list, tuple, numpy array or pandas Series. NaN values are
    dropped; an existing index is kept so that differenced output stays
    aligned with the caller's labels.

    Args:
        series: Input time series.

    Returns:
        Cleaned Series with NaN values removed and converted to float.

    Raises:
        ValueError: If series is None, not one-dimensional, empty after
            dropna, or holds infinite values.

    Examples:
        >>> validate_series([1.0, np.nan, 3.0]).tolist()
        [1.0, 3.0]
    """
    if series is None:
        raise ValueError("series is None")
    if isinstance(series, pd.DataFrame) or np.ndim(series) != 1:
        raise ValueError("series must be one-dimensional")
    s = pd.Series(series, copy=True).dropna().astype(float)
    if s.empty:
        raise ValueError("series is empty after dropna")
    if not np.isfinite(s.to_numpy()).all():
        raise ValueError("series contains infinite values")
    return s


def validate_alpha(alpha: float) -> float:
    """Validate a significance level.

    ``0.0`` is accepted here; the controller decides what a zero level means
    for its loops.

    Args:
        alpha: Significance level.

    Returns:
        alpha as a float.

    Raises:
        TypeError: If alpha is not a real number.
        ValueError: If alpha is NaN or outside [0, 1).
    """
    if isinstance(alpha, bool) or not isinstance(alpha, (int, float, np.floating)):
        raise TypeError(f"alpha must be a float, got {type(alpha).__name__}")
    alpha = float(alpha)
    if math.isnan(alpha) or not 0 <= alpha < 1:
        raise ValueError(f"alpha must be in [0, 1), got {alpha}")
    return alpha


def validate_head_size(head_size: int) -> int:
    """Validate the number of observations returned to the caller.

    Raises:
        ValueError: If head_size is not a positive integer.
    """
    if isinstance(head_size, bool) or not isinstance(head_size, (int, np.integer)):
        raise ValueError(f"head_size must be a positive integer, got {head_size!r}")
    if head_size <= 0:
        raise ValueError(f"head_size must be a positive integer, got {head_size}")
    return int(head_size)


def validate_max_order(max_order: int) -> int:
    """Validate a differencing order ceiling.

    Raises:
        ValueError: If max_order is not a non-negative integer.
    """
    if isinstance(max_order, bool) or not isinstance(max_order, (int, np.integer)):
        raise ValueError(f"max_order must be a non-negative integer, got {max_order!r}")
    if max_order < 0:
        raise ValueError(f"max_order must be a non-negative integer, got {max_order}")
    return int(max_order)
