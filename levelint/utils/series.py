"""Series primitives: finite differencing, truncation and lag rules."""

from __future__ import annotations

import numpy as np
import pandas as pd

from levelint.constants import LAG_RULE_FACTORS

__all__ = ["diff", "head", "lag_truncation", "adf_default_lags"]


def diff(series: pd.Series, order: int) -> pd.Series:
    """Return the ``order``-th finite difference of ``series``.

    The difference is taken in one step (``numpy.diff(x, n=order)``), so the
    result has ``len(series) - order`` observations and keeps the index
    labels of the last ones. ``order=0`` returns a copy.

    Args:
        series: Input series.
        order: Non-negative differencing order.

    Returns:
        Differenced series.

    Raises:
        ValueError: If order is negative or larger than the series.
    """
    if order < 0:
        raise ValueError(f"order must be non-negative, got {order}")
    if order > len(series):
        raise ValueError(f"cannot difference {len(series)} observations {order} times")
    if order == 0:
        return series.copy()
    values = np.diff(series.to_numpy(dtype=float), n=order)
    return pd.Series(values, index=series.index[order:], name=series.name)


def head(series: pd.Series, n: int) -> pd.Series:
    """Return the first ``n`` observations (fewer if the series is shorter)."""
    return series.iloc[:n].copy()


def lag_truncation(nobs: int, rule: str | int) -> int:
    """Resolve a lag truncation rule into a number of lags.

    ``"short"`` gives ``trunc(4 * (n / 100) ** 0.25)`` and ``"long"`` gives
    ``trunc(12 * (n / 100) ** 0.25)``; an integer is used as is.
    """
    if isinstance(rule, (int, np.integer)) and not isinstance(rule, bool):
        if rule < 0:
            raise ValueError(f"lags must be non-negative, got {rule}")
        return int(rule)
    try:
        factor = LAG_RULE_FACTORS[rule]
    except KeyError:
        raise ValueError(
            f"Unknown lag rule {rule!r}, expected one of {sorted(LAG_RULE_FACTORS)} or an int"
        ) from None
    return int(factor * (nobs / 100.0) ** 0.25)


def adf_default_lags(nobs: int) -> int:
    """Fixed ADF lag order ``trunc((n - 1) ** (1/3))``."""
    return int(max(nobs - 1, 0) ** (1.0 / 3.0))
