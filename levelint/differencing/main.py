"""CLI entry point for the differencing order search.

Runs the three loops on a seeded random walk (cumulative sum of standard
normal draws) and logs the order each test settles on.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence

import numpy as np
import pandas as pd

from levelint.config_logging import get_logger, setup_logging
from levelint.constants import (
    DEFAULT_ALPHA,
    DEFAULT_RANDOM_STATE,
    DEFAULT_SERIES_LENGTH,
    HEAD_SIZE,
)
from levelint.differencing.controller import DifferencingReport, run_differencing

logger = get_logger(__name__)


def make_random_walk(length: int, random_state: int) -> pd.Series:
    """Build a reproducible random walk of ``length`` observations."""
    if length <= 0:
        raise ValueError(f"length must be positive, got {length}")
    rng = np.random.default_rng(random_state)
    return pd.Series(np.cumsum(rng.standard_normal(length)), name="random_walk")


def _log_report(report: DifferencingReport) -> None:
    for label, order in report.orders.items():
        logger.info("%s: difference order %d", label, order)
    values = ", ".join(f"{value:.6f}" for value in report.stationary.to_numpy())
    logger.info("Stationary series (first %d): [%s]", len(report.stationary), values)


def main(
    alpha: float = DEFAULT_ALPHA,
    length: int = DEFAULT_SERIES_LENGTH,
    random_state: int = DEFAULT_RANDOM_STATE,
    head_size: int = HEAD_SIZE,
    max_order: int | None = None,
) -> DifferencingReport:
    """Run the differencing search on a seeded random walk.

    Args:
        alpha: Significance level for the ADF and KPSS loops.
        length: Number of observations in the random walk.
        random_state: Seed for the random generator.
        head_size: Number of stationary observations to report.
        max_order: Optional differencing order ceiling.

    Returns:
        DifferencingReport for the generated series.
    """
    series = make_random_walk(length, random_state)
    logger.info("Generated random walk: n=%d, seed=%d", length, random_state)
    report = run_differencing(series, alpha, head_size=head_size, max_order=max_order)
    _log_report(report)
    return report


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find the differencing order of a random walk with ADF, PP and KPSS"
    )
    parser.add_argument(
        "--alpha",
        type=float,
        default=DEFAULT_ALPHA,
        help=f"Significance level (default: {DEFAULT_ALPHA})",
    )
    parser.add_argument(
        "--length",
        type=int,
        default=DEFAULT_SERIES_LENGTH,
        help=f"Random walk length (default: {DEFAULT_SERIES_LENGTH})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_RANDOM_STATE,
        help=f"Random seed for reproducibility (default: {DEFAULT_RANDOM_STATE})",
    )
    parser.add_argument(
        "--head-size",
        type=int,
        default=HEAD_SIZE,
        help=f"Observations of the stationary series to report (default: {HEAD_SIZE})",
    )
    parser.add_argument(
        "--max-order",
        type=int,
        default=None,
        help="Highest differencing order to try (default: limited by series length)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    return parser


def cli(argv: Sequence[str] | None = None) -> None:
    """Parse command line arguments and run ``main``."""
    args = _build_parser().parse_args(argv)
    setup_logging(args.log_level)
    try:
        main(
            alpha=args.alpha,
            length=args.length,
            random_state=args.seed,
            head_size=args.head_size,
            max_order=args.max_order,
        )
    except Exception as e:
        logger.error(f"Differencing search failed: {e}")
        raise


if __name__ == "__main__":
    cli()
