"""Order-of-integration search driven by ADF, Phillips-Perron and KPSS.

Each test gets its own loop. A loop evaluates its test on the original series,
and while the test's stopping rule does not hold it raises the differencing
order by one and re-evaluates on ``diff(original, order)``; the order is always
applied to the untouched original, never to the previous loop output.

Stopping rules:
- ADF: p-value < alpha (unit-root null rejected)
- PP: statistic < critical value (unit-root null rejected)
- KPSS: p-value > alpha (stationarity null not rejected)

``stationarize`` returns the head of the KPSS loop's final series. The ADF and
PP orders are computed but only surface through ``run_differencing``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import pandas as pd

from levelint.config_logging import get_logger
from levelint.constants import (
    ADF_LABEL,
    DEFAULT_ALPHA,
    HEAD_SIZE,
    KPSS_LABEL,
    MIN_OBSERVATIONS,
    PP_LABEL,
)
from levelint.differencing.oracles import (
    Oracle,
    OracleSet,
    TestVerdict,
    adf_test,
    check_dependencies,
    default_oracles,
    kpss_test,
    pp_test,
)
from levelint.errors import NonConvergence
from levelint.utils.series import diff, head
from levelint.utils.validation import (
    validate_alpha,
    validate_head_size,
    validate_max_order,
    validate_series,
)

logger = get_logger(__name__)

IterationCallback = Callable[[str, int, float], None]

__all__ = [
    "IterationCallback",
    "LoopStep",
    "LoopResult",
    "DifferencingReport",
    "find_adf_order",
    "find_pp_order",
    "find_kpss_order",
    "run_differencing",
    "stationarize",
]


@dataclass(frozen=True)
class LoopStep:
    """One test evaluation inside a loop."""

    order: int
    verdict: TestVerdict


@dataclass(frozen=True)
class LoopResult:
    """Final state of one differencing loop."""

    test: str
    order: int
    steps: tuple[LoopStep, ...]
    series: pd.Series

    @property
    def last_verdict(self) -> TestVerdict:
        return self.steps[-1].verdict


@dataclass(frozen=True)
class DifferencingReport:
    """Results of the three loops and the truncated stationary series."""

    alpha: float
    adf: LoopResult
    pp: LoopResult
    kpss: LoopResult
    stationary: pd.Series

    @property
    def orders(self) -> dict[str, int]:
        """Differencing order chosen by each test, keyed by test label."""
        return {
            self.adf.test: self.adf.order,
            self.pp.test: self.pp.order,
            self.kpss.test: self.kpss.order,
        }


def _default_max_order(original: pd.Series) -> int:
    return max(len(original) - MIN_OBSERVATIONS, 0)


def _search_order(
    original: pd.Series,
    *,
    label: str,
    oracle: Oracle,
    keep_going: Callable[[TestVerdict], bool],
    observed: Callable[[TestVerdict], float],
    message: str,
    max_order: int | None,
    on_iteration: IterationCallback | None,
) -> LoopResult:
    """Raise the differencing order until ``keep_going`` turns false.

    Args:
        original: Series every order is computed from.
        label: Test label used in diagnostics and errors.
        oracle: Test to evaluate at each order.
        keep_going: Predicate on the verdict; True means difference further.
        observed: Value reported in diagnostics (p-value or statistic).
        message: printf-style diagnostic with the value and the order.
        max_order: Highest order allowed. None derives it from the length.
        on_iteration: Optional callback ``(label, order, value)``.

    Returns:
        LoopResult with the stopping order and every verdict seen.

    Raises:
        NonConvergence: If the next order would exceed max_order.
    """
    ceiling = _default_max_order(original) if max_order is None else max_order
    order = 0
    current = diff(original, order)
    verdict = oracle(current)
    steps = [LoopStep(order, verdict)]

    while keep_going(verdict):
        if order + 1 > ceiling:
            raise NonConvergence(
                label,
                order,
                observed(verdict),
                f"stopping rule still unmet and max_order={ceiling} reached",
            )
        order += 1
        current = diff(original, order)
        verdict = oracle(current)
        steps.append(LoopStep(order, verdict))
        value = observed(verdict)
        logger.info(message, value, order)
        if on_iteration is not None:
            on_iteration(label, order, value)

    logger.info("%s loop stopped at difference %d", label, order)
    return LoopResult(test=label, order=order, steps=tuple(steps), series=current)


def find_adf_order(
    original: pd.Series,
    alpha: float,
    *,
    oracle: Oracle = adf_test,
    max_order: int | None = None,
    on_iteration: IterationCallback | None = None,
) -> LoopResult:
    """Difference until the ADF p-value falls below ``alpha``."""
    return _search_order(
        original,
        label=ADF_LABEL,
        oracle=oracle,
        keep_going=lambda v: v.p_value >= alpha,
        observed=lambda v: v.p_value,
        message="ADF test: P-value %f at difference %d.",
        max_order=max_order,
        on_iteration=on_iteration,
    )


def find_pp_order(
    original: pd.Series,
    alpha: float | None = None,
    *,
    oracle: Oracle = pp_test,
    max_order: int | None = None,
    on_iteration: IterationCallback | None = None,
) -> LoopResult:
    """Difference until the PP statistic falls below its critical value.

    ``alpha`` is accepted for a uniform signature and ignored: the critical
    value tier is fixed by the oracle.
    """
    return _search_order(
        original,
        label=PP_LABEL,
        oracle=oracle,
        keep_going=_pp_not_rejected,
        observed=lambda v: v.statistic,
        message="PP test: Test statistic %f at difference %d.",
        max_order=max_order,
        on_iteration=on_iteration,
    )


def _pp_not_rejected(verdict: TestVerdict) -> bool:
    if verdict.critical_value is None:
        raise ValueError(f"{PP_LABEL} verdict carries no critical value")
    return verdict.statistic >= verdict.critical_value


def find_kpss_order(
    original: pd.Series,
    alpha: float,
    *,
    oracle: Oracle = kpss_test,
    max_order: int | None = None,
    on_iteration: IterationCallback | None = None,
) -> LoopResult:
    """Difference until the KPSS p-value rises above ``alpha``."""
    return _search_order(
        original,
        label=KPSS_LABEL,
        oracle=oracle,
        keep_going=lambda v: v.p_value <= alpha,
        observed=lambda v: v.p_value,
        message="KPSS test: P-value %f at difference %d.",
        max_order=max_order,
        on_iteration=on_iteration,
    )


def run_differencing(
    series: Any,
    alpha: float = DEFAULT_ALPHA,
    *,
    head_size: int = HEAD_SIZE,
    max_order: int | None = None,
    oracles: OracleSet | None = None,
    on_iteration: IterationCallback | None = None,
) -> DifferencingReport:
    """Run the ADF, PP and KPSS loops on ``series`` and collect their results.

    Args:
        series: Input time series (list, array or pandas Series).
        alpha: Significance level for the ADF and KPSS loops.
        head_size: Number of observations kept in ``stationary``.
        max_order: Highest differencing order any loop may try. None allows
            orders while at least MIN_OBSERVATIONS observations remain.
        oracles: Test implementations. Defaults to statsmodels/arch.
        on_iteration: Optional callback ``(test_label, order, value)`` called
            after every differencing attempt.

    Returns:
        DifferencingReport with the three loop results.

    Raises:
        DependencyMissing: If a backend required by the oracles is missing.
        NonConvergence: If alpha is 0.0, alpha is at or above the KPSS p-value
            cap of the oracles, or a loop reaches max_order.
        OracleFailure: If a test cannot be computed on a differenced series.
        ValueError: If an argument is invalid.
    """
    alpha = validate_alpha(alpha)
    head_size = validate_head_size(head_size)
    if max_order is not None:
        max_order = validate_max_order(max_order)
    original = validate_series(series)
    oracles = default_oracles() if oracles is None else oracles

    check_dependencies(oracles.requires)

    if alpha == 0.0:
        raise NonConvergence(ADF_LABEL, 0, None, "no p-value can be below alpha=0.0")
    if oracles.kpss_max_p_value is not None and alpha >= oracles.kpss_max_p_value:
        raise NonConvergence(
            KPSS_LABEL,
            0,
            None,
            f"KPSS p-values are capped at {oracles.kpss_max_p_value}, "
            f"none can exceed alpha={alpha}",
        )

    logger.info(
        "Searching differencing order for %d observations (alpha=%.3f)", len(original), alpha
    )
    adf_res = find_adf_order(
        original, alpha, oracle=oracles.adf, max_order=max_order, on_iteration=on_iteration
    )
    pp_res = find_pp_order(
        original, alpha, oracle=oracles.pp, max_order=max_order, on_iteration=on_iteration
    )
    kpss_res = find_kpss_order(
        original, alpha, oracle=oracles.kpss, max_order=max_order, on_iteration=on_iteration
    )
    logger.info(
        "Orders: ADF=%d, PP=%d, KPSS=%d", adf_res.order, pp_res.order, kpss_res.order
    )
    return DifferencingReport(
        alpha=alpha,
        adf=adf_res,
        pp=pp_res,
        kpss=kpss_res,
        stationary=head(kpss_res.series, head_size),
    )


def stationarize(
    series: Any,
    alpha: float = DEFAULT_ALPHA,
    *,
    head_size: int = HEAD_SIZE,
    max_order: int | None = None,
    oracles: OracleSet | None = None,
    on_iteration: IterationCallback | None = None,
) -> pd.Series:
    """Return the first ``head_size`` observations of the KPSS-stationary series.

    See ``run_differencing`` for arguments and errors. The ADF and PP loops
    still run (and may raise), but their series are discarded.
    """
    report = run_differencing(
        series,
        alpha,
        head_size=head_size,
        max_order=max_order,
        oracles=oracles,
        on_iteration=on_iteration,
    )
    return report.stationary

