"""Pytest configuration shared by all test packages."""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest


@pytest.fixture
def white_noise() -> pd.Series:
    rng = np.random.default_rng(42)
    return pd.Series(rng.normal(0.0, 1.0, size=200))


@pytest.fixture
def overdifferenced_noise() -> pd.Series:
    """First difference of white noise: stationary under ADF, PP and KPSS."""
    rng = np.random.default_rng(7)
    return pd.Series(np.diff(rng.normal(0.0, 1.0, size=201)))
