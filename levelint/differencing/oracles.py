"""Unit-root and stationarity test oracles (ADF, Phillips-Perron, KPSS).

Each oracle takes a series and returns a ``TestVerdict``. The numerical work
is delegated to statsmodels (ADF, KPSS) and arch (Phillips-Perron). Backends
are imported inside the oracles so that a missing package is reported by
``check_dependencies`` as ``DependencyMissing`` before any loop starts, rather
than as an import error of this module.

Default settings:
- ADF: constant + trend, fixed lag order trunc((n-1)^(1/3))
- PP: Z-tau, constant model, short lags, 1% critical value
- KPSS: trend-stationary null, short lags
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
import importlib
import math
import warnings

import numpy as np
import pandas as pd

from levelint.config_logging import get_logger
from levelint.constants import (
    ADF_LABEL,
    ADF_REGRESSION,
    KPSS_LABEL,
    KPSS_LAG_RULE,
    KPSS_MAX_P_VALUE,
    KPSS_REGRESSION,
    MIN_OBSERVATIONS,
    PP_CRITICAL_LEVEL,
    PP_CRITICAL_LEVELS,
    PP_LABEL,
    PP_LAG_RULE,
    PP_TEST_TYPE,
    PP_TREND,
    REQUIRED_BACKENDS,
)
from levelint.errors import DependencyMissing, OracleFailure
from levelint.utils.series import adf_default_lags, lag_truncation
from levelint.utils.statsmodels_utils import suppress_interpolation_warnings

logger = get_logger(__name__)

__all__ = [
    "TestVerdict",
    "Oracle",
    "OracleSet",
    "adf_test",
    "pp_test",
    "kpss_test",
    "check_dependencies",
    "default_oracles",
]


@dataclass(frozen=True)
class TestVerdict:
    """Outcome of one test evaluation.

    ``critical_value`` is only filled by the Phillips-Perron oracle, whose loop
    compares the statistic against it instead of using the p-value.
    """

    __test__ = False  # not a pytest class

    test: str
    statistic: float
    p_value: float
    critical_value: float | None = None
    lags: int | None = None
    nobs: int | None = None


Oracle = Callable[[pd.Series], TestVerdict]


@dataclass(frozen=True)
class OracleSet:
    """The three oracles used by the controller and the modules they import.

    ``kpss_max_p_value`` is the largest p-value the KPSS oracle can report, if
    it is bounded; an alpha at or above it can never stop the KPSS loop.
    """

    adf: Oracle
    pp: Oracle
    kpss: Oracle
    requires: tuple[str, ...] = ()
    kpss_max_p_value: float | None = None


def _is_constant(values: np.ndarray) -> bool:
    """True when every value equals the first up to accumulated rounding error.

    Differencing a float trend leaves residues of a few ulps instead of exact
    zeros, so the tolerance scales with the magnitude and the length.
    """
    atol = np.finfo(float).eps * max(1.0, float(np.abs(values).max())) * values.size
    return bool(np.allclose(values, values[0], rtol=0.0, atol=atol))


def _prepare_values(series: pd.Series | np.ndarray | Sequence[float], label: str) -> np.ndarray:
    """Return the series as a float array, rejecting inputs no test can handle."""
    values = np.asarray(series, dtype=float)
    if values.ndim != 1:
        raise OracleFailure(f"{label} test failed: series must be one-dimensional")
    if values.size < MIN_OBSERVATIONS:
        raise OracleFailure(
            f"{label} test failed: {values.size} observations, "
            f"at least {MIN_OBSERVATIONS} required"
        )
    if not np.isfinite(values).all():
        raise OracleFailure(f"{label} test failed: series contains non-finite values")
    if _is_constant(values):
        raise OracleFailure(f"{label} test failed: series has zero variance")
    return values


def _infeasible_errors() -> tuple[type[BaseException], ...]:
    """Exceptions the backends raise when a test cannot be computed."""
    from arch.utility.exceptions import InfeasibleTestException

    return (ValueError, np.linalg.LinAlgError, ZeroDivisionError, InfeasibleTestException)


def adf_test(
    series: pd.Series,
    *,
    regression: str = ADF_REGRESSION,
    lags: int | None = None,
) -> TestVerdict:
    """Run the Augmented Dickey-Fuller test.

    Null hypothesis: the series has a unit root. The lag order is fixed at
    trunc((n-1)^(1/3)) unless ``lags`` is given.

    Args:
        series: Input time series.
        regression: statsmodels regression code ("c", "ct", "ctt", "n").
        lags: Explicit lag order. None uses the default rule.

    Returns:
        TestVerdict with statistic, p-value, lags and nobs.

    Raises:
        OracleFailure: If the test cannot be computed on the series.
    """
    from statsmodels.tsa.stattools import adfuller

    values = _prepare_values(series, ADF_LABEL)
    maxlag = adf_default_lags(values.size) if lags is None else lags
    try:
        result = adfuller(values, maxlag=maxlag, regression=regression, autolag=None)
    except (ValueError, np.linalg.LinAlgError) as exc:
        raise OracleFailure(f"{ADF_LABEL} test failed: {exc}") from exc
    stat, pval, usedlag, nobs = result[0], result[1], result[2], result[3]
    if not math.isfinite(float(pval)):
        raise OracleFailure(f"{ADF_LABEL} test failed: p-value is not finite")
    return TestVerdict(
        test=ADF_LABEL,
        statistic=float(stat),
        p_value=float(pval),
        lags=int(usedlag),
        nobs=int(nobs),
    )


def pp_test(
    series: pd.Series,
    *,
    test_type: str = PP_TEST_TYPE,
    trend: str = PP_TREND,
    lags: str | int = PP_LAG_RULE,
    critical_level: str = PP_CRITICAL_LEVEL,
) -> TestVerdict:
    """Run the Phillips-Perron test.

    Null hypothesis: the series has a unit root. The verdict carries the
    backend critical value at ``critical_level`` for the loop comparison.

    Args:
        series: Input time series.
        test_type: "tau" (Z-tau) or "rho" (Z-alpha).
        trend: arch trend code ("n", "c", "ct").
        lags: "short", "long" or an explicit number of Newey-West lags.
        critical_level: Critical value tier ("1%", "5%" or "10%").

    Returns:
        TestVerdict with statistic, p-value, critical value, lags and nobs.

    Raises:
        ValueError: If critical_level is not a known tier.
        OracleFailure: If the test cannot be computed on the series.
    """
    from arch.unitroot import PhillipsPerron

    if critical_level not in PP_CRITICAL_LEVELS:
        raise ValueError(
            f"critical_level must be one of {list(PP_CRITICAL_LEVELS)}, got {critical_level!r}"
        )
    values = _prepare_values(series, PP_LABEL)
    nlags = lag_truncation(values.size, lags)
    try:
        pp = PhillipsPerron(values, lags=nlags, trend=trend, test_type=test_type)
        stat = float(pp.stat)
        pval = float(pp.pvalue)
        crit = float(pp.critical_values[critical_level])
        nobs = int(pp.nobs)
    except _infeasible_errors() as exc:
        raise OracleFailure(f"{PP_LABEL} test failed: {exc}") from exc
    if not math.isfinite(stat):
        raise OracleFailure(f"{PP_LABEL} test failed: statistic is not finite")
    return TestVerdict(
        test=PP_LABEL,
        statistic=stat,
        p_value=pval,
        critical_value=crit,
        lags=nlags,
        nobs=nobs,
    )


def kpss_test(
    series: pd.Series,
    *,
    regression: str = KPSS_REGRESSION,
    lags: str | int = KPSS_LAG_RULE,
) -> TestVerdict:
    """Run the KPSS test.

    Null hypothesis: the series is (trend-)stationary. P-values come from the
    statsmodels lookup table and are bounded to [0.01, 0.1].

    Args:
        series: Input time series.
        regression: "c" (level) or "ct" (trend).
        lags: "short", "long" or an explicit number of lags.

    Returns:
        TestVerdict with statistic, p-value, lags and nobs.

    Raises:
        OracleFailure: If the test cannot be computed on the series.
    """
    from statsmodels.tsa.stattools import kpss

    values = _prepare_values(series, KPSS_LABEL)
    nlags = lag_truncation(values.size, lags)
    try:
        with suppress_interpolation_warnings(), warnings.catch_warnings():
            # tuple return is deprecated upstream; statsmodels is pinned below 0.16
            warnings.simplefilter("ignore", FutureWarning)
            stat, pval, used_lags, _crit = kpss(values, regression=regression, nlags=nlags)
    except (ValueError, np.linalg.LinAlgError) as exc:
        raise OracleFailure(f"{KPSS_LABEL} test failed: {exc}") from exc
    if not math.isfinite(float(pval)):
        raise OracleFailure(f"{KPSS_LABEL} test failed: p-value is not finite")
    return TestVerdict(
        test=KPSS_LABEL,
        statistic=float(stat),
        p_value=float(pval),
        lags=int(used_lags),
        nobs=int(values.size),
    )


def check_dependencies(modules: Sequence[str] = REQUIRED_BACKENDS) -> None:
    """Import every backend module once, failing on the first missing one.

    Args:
        modules: Importable module names.

    Raises:
        DependencyMissing: If a module cannot be imported.
    """
    for name in modules:
        try:
            importlib.import_module(name)
        except ImportError as exc:
            raise DependencyMissing(
                f"Package '{name}' is required but not installed. "
                f"Install it with: pip install {name}"
            ) from exc
        logger.debug("Backend available: %s", name)


def default_oracles() -> OracleSet:
    """Return the statsmodels/arch oracles with their default settings."""
    return OracleSet(
        adf=adf_test,
        pp=pp_test,
        kpss=kpss_test,
        requires=REQUIRED_BACKENDS,
        kpss_max_p_value=KPSS_MAX_P_VALUE,
    )
