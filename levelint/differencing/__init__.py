"""Differencing order search (ADF + Phillips-Perron + KPSS)."""

from __future__ import annotations

from .controller import (
    DifferencingReport,
    LoopResult,
    LoopStep,
    find_adf_order,
    find_kpss_order,
    find_pp_order,
    run_differencing,
    stationarize,
)
from .oracles import (
    OracleSet,
    TestVerdict,
    adf_test,
    check_dependencies,
    default_oracles,
    kpss_test,
    pp_test,
)

__all__ = [
    "DifferencingReport",
    "LoopResult",
    "LoopStep",
    "OracleSet",
    "TestVerdict",
    "adf_test",
    "check_dependencies",
    "default_oracles",
    "find_adf_order",
    "find_kpss_order",
    "find_pp_order",
    "kpss_test",
    "pp_test",
    "run_differencing",
    "stationarize",
]
