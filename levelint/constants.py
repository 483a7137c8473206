"""Constants for the levelint differencing toolkit."""

from __future__ import annotations

# Logging
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"

# Decision defaults
DEFAULT_ALPHA: float = 0.05
HEAD_SIZE: int = 5

# Smallest series an oracle accepts (ADF with constant + trend and
# trunc((n-1)^(1/3)) lags needs at least this many observations)
MIN_OBSERVATIONS: int = 10

# Test labels, used in diagnostics and reports
ADF_LABEL: str = "ADF"
PP_LABEL: str = "PP"
KPSS_LABEL: str = "KPSS"

# Augmented Dickey-Fuller: constant + linear trend, fixed lag order
ADF_REGRESSION: str = "ct"

# Phillips-Perron: Z-tau statistic, constant model, short lag truncation
PP_TEST_TYPE: str = "tau"
PP_TREND: str = "c"
PP_LAG_RULE: str = "short"
PP_CRITICAL_LEVEL: str = "1%"
PP_CRITICAL_LEVELS: tuple[str, ...] = ("1%", "5%", "10%")

# KPSS: trend-stationary null hypothesis
KPSS_REGRESSION: str = "ct"
KPSS_LAG_RULE: str = "short"
# statsmodels interpolates KPSS p-values from a table bounded to [0.01, 0.1]
KPSS_MAX_P_VALUE: float = 0.1

# Lag truncation rules: trunc(factor * (n / 100) ** 0.25)
LAG_RULE_FACTORS: dict[str, int] = {"short": 4, "long": 12}

# Modules the default oracles import
REQUIRED_BACKENDS: tuple[str, ...] = ("statsmodels", "arch")

# Command line demo
DEFAULT_RANDOM_STATE: int = 42
DEFAULT_SERIES_LENGTH: int = 100
