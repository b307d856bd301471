"""Projected benefits of migrating real-world assets to faster settlement."""

from .engine.asset_classes import (
    ASSET_CLASS_PARAMETERS,
    average_default_alpha,
    default_alpha_for_asset_class,
    weighted_asset_class_parameters,
)
from .engine.defi import InvalidArgumentError, calculate_alpha_from_defi_params
from .engine.models import (
    AssetClass,
    CapitalEfficiencyResult,
    Currency,
    DifferentiatedYieldResult,
    SimulationInput,
    SimulationResult,
)
from .reporting.formatting import format_currency, format_percentage
from .simulation.runner import compute_simulation

__version__ = "1.0.0"

__all__ = [
    "ASSET_CLASS_PARAMETERS",
    "AssetClass",
    "CapitalEfficiencyResult",
    "Currency",
    "DifferentiatedYieldResult",
    "InvalidArgumentError",
    "SimulationInput",
    "SimulationResult",
    "average_default_alpha",
    "calculate_alpha_from_defi_params",
    "compute_simulation",
    "default_alpha_for_asset_class",
    "format_currency",
    "format_percentage",
    "weighted_asset_class_parameters",
]
