"""Statsmodels utilities for the stationarity oracles.

KPSS p-values come from a lookup table and are clipped to its range; when the
statistic falls outside the table statsmodels emits an ``InterpolationWarning``
on every call. Inside a differencing loop that means one warning per order, so
the oracles silence it locally instead of touching the global filter.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
import warnings

__all__ = ["suppress_interpolation_warnings"]


@contextmanager
def suppress_interpolation_warnings() -> Iterator[None]:
    """Silence statsmodels table-interpolation warnings inside the block.

    Only ``InterpolationWarning`` is filtered; every other warning, and every
    exception, still reaches the caller. The filter is restored on exit.

    Examples:
        >>> with suppress_interpolation_warnings():
        ...     stat, pval, lags, crit = kpss(values, regression="ct", nlags=4)
    """
    from statsmodels.tools.sm_exceptions import InterpolationWarning

    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", category=InterpolationWarning)
        yield
