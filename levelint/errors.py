"""Exceptions raised by levelint."""

from __future__ import annotations

__all__ = [
    "LevelintError",
    "DependencyMissing",
    "OracleFailure",
    "NonConvergence",
]


class LevelintError(Exception):
    """Base class for all levelint errors."""


class DependencyMissing(LevelintError, ImportError):
    """A statistical backend required by the test oracles cannot be imported."""


class OracleFailure(LevelintError):
    """A unit-root or stationarity test could not be computed on its input."""


class NonConvergence(LevelintError):
    """A differencing loop reached its order ceiling without stopping.

    Attributes:
        test: Label of the test driving the loop ("ADF", "PP" or "KPSS").
        order: Last differencing order evaluated.
        last_value: Last p-value or statistic observed, if any.
    """

    def __init__(self, test: str, order: int, last_value: float | None, reason: str) -> None:
        self.test = test
        self.order = order
        self.last_value = last_value
        super().__init__(f"{test} loop did not converge at difference {order}: {reason}")
