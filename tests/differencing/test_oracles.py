"""Tests for the ADF, Phillips-Perron and KPSS oracles."""

from __future__ import annotations

import warnings

import numpy as np
import pandas as pd
import pytest

from levelint.differencing.oracles import (
    TestVerdict,
    adf_test,
    check_dependencies,
    default_oracles,
    kpss_test,
    pp_test,
)
from levelint.errors import DependencyMissing, OracleFailure
from levelint.utils.series import diff


def _random_walk(n: int, seed: int) -> pd.Series:
    rng = np.random.default_rng(seed)
    return pd.Series(np.cumsum(rng.normal(0.0, 1.0, size=n)))


class TestAdf:
    """Tests for adf_test."""

    def test_white_noise_rejects_unit_root(self, white_noise: pd.Series) -> None:
        verdict = adf_test(white_noise)
        assert isinstance(verdict, TestVerdict)
        assert verdict.test == "ADF"
        assert verdict.p_value < 0.05
        assert verdict.critical_value is None

    def test_default_lag_rule(self, white_noise: pd.Series) -> None:
        # trunc((200 - 1) ** (1/3)) == 5
        assert adf_test(white_noise).lags == 5

    def test_explicit_lags(self, white_noise: pd.Series) -> None:
        assert adf_test(white_noise, lags=2).lags == 2

    def test_integrated_of_order_two_keeps_unit_root(self) -> None:
        verdict = adf_test(pd.Series(np.cumsum(_random_walk(300, 123))))
        assert verdict.p_value >= 0.05

    def test_constant_series_fails(self) -> None:
        with pytest.raises(OracleFailure, match="zero variance"):
            adf_test(pd.Series(np.full(50, 3.0)))


class TestPhillipsPerron:
    """Tests for pp_test."""

    def test_white_noise_below_critical_value(self, white_noise: pd.Series) -> None:
        verdict = pp_test(white_noise)
        assert verdict.test == "PP"
        assert verdict.critical_value is not None
        assert verdict.statistic < verdict.critical_value

    def test_short_lags(self, white_noise: pd.Series) -> None:
        assert pp_test(white_noise).lags == 4

    def test_critical_tiers_ordered(self, white_noise: pd.Series) -> None:
        one = pp_test(white_noise, critical_level="1%").critical_value
        five = pp_test(white_noise, critical_level="5%").critical_value
        ten = pp_test(white_noise, critical_level="10%").critical_value
        assert one < five < ten < 0

    def test_unknown_critical_level_raises(self, white_noise: pd.Series) -> None:
        with pytest.raises(ValueError, match="critical_level"):
            pp_test(white_noise, critical_level="2.5%")

    def test_too_short_series_fails(self) -> None:
        with pytest.raises(OracleFailure, match="at least"):
            pp_test(pd.Series([1.0, 2.0, 0.5]))


class TestKpss:
    """Tests for kpss_test."""

    def test_p_value_bounded_by_table(self, white_noise: pd.Series) -> None:
        verdict = kpss_test(white_noise)
        assert verdict.test == "KPSS"
        assert 0.01 <= verdict.p_value <= 0.1
        assert verdict.nobs == 200

    def test_overdifferenced_noise_not_rejected(self, overdifferenced_noise: pd.Series) -> None:
        assert kpss_test(overdifferenced_noise).p_value > 0.05

    def test_quadratic_trend_rejected(self) -> None:
        t = np.arange(200, dtype=float)
        rng = np.random.default_rng(0)
        verdict = kpss_test(pd.Series(0.01 * t**2 + rng.normal(0.0, 1.0, size=200)))
        assert verdict.p_value <= 0.05

    def test_constant_series_fails(self) -> None:
        with pytest.raises(OracleFailure):
            kpss_test(pd.Series(np.zeros(40)))

    def test_differenced_float_trend_fails(self) -> None:
        trend = pd.Series(0.1 * np.arange(100) + 3.3)
        with pytest.raises(OracleFailure, match="zero variance"):
            kpss_test(diff(trend, 1))

    def test_no_future_warning(self, white_noise: pd.Series) -> None:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            kpss_test(white_noise)
        assert not [w for w in caught if issubclass(w.category, FutureWarning)]


class TestDependencies:
    """Tests for check_dependencies and default_oracles."""

    def test_installed_backends_pass(self) -> None:
        check_dependencies(("statsmodels", "arch"))

    def test_missing_backend_raises(self) -> None:
        with pytest.raises(DependencyMissing, match="levelint_no_such_backend"):
            check_dependencies(("statsmodels", "levelint_no_such_backend"))

    def test_dependency_missing_is_import_error(self) -> None:
        with pytest.raises(ImportError):
            check_dependencies(("levelint_no_such_backend",))

    def test_default_oracles(self) -> None:
        oracles = default_oracles()
        assert oracles.adf is adf_test
        assert oracles.pp is pp_test
        assert oracles.kpss is kpss_test
        assert oracles.requires == ("statsmodels", "arch")
        assert oracles.kpss_max_p_value == 0.1
