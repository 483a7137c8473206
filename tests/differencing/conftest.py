"""Fixtures for the differencing tests."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import numpy as np
import pandas as pd
import pytest

from levelint.differencing.oracles import OracleSet
from tests.differencing.scripted_oracles import PP_CRITICAL, ScriptedOracle


@pytest.fixture
def random_walk() -> pd.Series:
    rng = np.random.default_rng(2024)
    return pd.Series(np.cumsum(rng.standard_normal(100)))


@pytest.fixture
def make_oracles() -> Callable[..., OracleSet]:
    """Build an OracleSet from per-order p-values (ADF, KPSS) and PP statistics."""

    def _make(
        n_obs: int,
        adf: Sequence[float] = (0.01,),
        pp: Sequence[float] = (-5.0,),
        kpss: Sequence[float] = (0.1,),
        requires: tuple[str, ...] = (),
    ) -> OracleSet:
        return OracleSet(
            adf=ScriptedOracle("ADF", n_obs, adf),
            pp=ScriptedOracle("PP", n_obs, pp, critical_value=PP_CRITICAL),
            kpss=ScriptedOracle("KPSS", n_obs, kpss),
            requires=requires,
        )

    return _make
