"""Analysis tools for ROI simulations."""

from .breakdown import (
    SERIES_LABELS,
    benefit_breakdown_series,
    capital_efficiency_series,
    yield_comparison_series,
)
from .sensitivity import (
    AlphaSensitivityPoint,
    ParameterSweep,
    SensitivityAnalyzer,
    TornadoEntry,
    alpha_sensitivity,
)

__all__ = [
    "SERIES_LABELS",
    "AlphaSensitivityPoint",
    "ParameterSweep",
    "SensitivityAnalyzer",
    "TornadoEntry",
    "alpha_sensitivity",
    "benefit_breakdown_series",
    "capital_efficiency_series",
    "yield_comparison_series",
]
