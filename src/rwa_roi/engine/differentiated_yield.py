"""Differentiated yield calculator - resolve alpha and project additional revenue.

Alpha precedence (first applicable wins):
1. Manual override (an explicit zero counts)
2. DeFi-derived alpha, when enabled and all three DeFi inputs are present
3. Asset class default alpha

A DeFi calculation that rejects its inputs falls back to the asset class
default and the fallback is logged.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..config.schema import AssetClassParameters, EngineConstants
from .currency import from_usd, to_usd
from .defi import try_calculate_alpha_from_defi_params
from .models import DifferentiatedYieldResult, SimulationInput

logger = logging.getLogger(__name__)


class AlphaSource(Enum):
    """Where the resolved alpha came from."""
    MANUAL = "manual"
    DEFI = "defi"
    ASSET_CLASS_DEFAULT = "asset_class_default"


@dataclass(frozen=True)
class AlphaResolution:
    """Resolved alpha with its provenance."""
    alpha: float
    source: AlphaSource
    fallback_reason: Optional[str] = None  # set when DeFi was requested but rejected


def resolve_alpha(
    sim_input: SimulationInput,
    params: AssetClassParameters,
    constants: EngineConstants = None
) -> AlphaResolution:
    """
    Resolve the differentiated alpha for an input.
    
    Args:
        sim_input: Simulation input
        params: Resolved asset class parameters
        constants: Engine constants
        
    Returns:
        AlphaResolution with alpha (%) and its source
    """
    if sim_input.differentiated_alpha is not None:
        return AlphaResolution(alpha=sim_input.differentiated_alpha, source=AlphaSource.MANUAL)

    if sim_input.use_defi_calculation and sim_input.has_defi_params:
        outcome = try_calculate_alpha_from_defi_params(
            sim_input.collateralization_ratio,
            sim_input.borrowing_rate,
            sim_input.defi_reinvestment_rate,
            sim_input.current_yield,
            constants,
        )
        if outcome.ok:
            return AlphaResolution(alpha=outcome.alpha, source=AlphaSource.DEFI)

        logger.warning(
            "DeFi alpha calculation failed, using asset class default %.2f%%: %s",
            params.default_differentiated_alpha,
            outcome.error,
        )
        return AlphaResolution(
            alpha=params.default_differentiated_alpha,
            source=AlphaSource.ASSET_CLASS_DEFAULT,
            fallback_reason=outcome.error,
        )

    return AlphaResolution(
        alpha=params.default_differentiated_alpha,
        source=AlphaSource.ASSET_CLASS_DEFAULT,
    )


def calculate_differentiated_yield(
    sim_input: SimulationInput,
    params: AssetClassParameters,
    constants: EngineConstants = None
) -> DifferentiatedYieldResult:
    """
    Project total return and additional annual revenue.
    
    Formula:
        projected_total_return = base_yield + alpha
        additional_revenue = AUM_usd × alpha / 100, converted back to input currency
    """
    constants = constants or EngineConstants()
    resolution = resolve_alpha(sim_input, params, constants)
    alpha = resolution.alpha
    base_yield = sim_input.current_yield

    aum_usd = to_usd(sim_input.aum, sim_input.currency, constants)
    additional_revenue = aum_usd * (alpha / 100)

    return DifferentiatedYieldResult(
        base_yield=base_yield,
        differentiated_alpha=alpha,
        projected_total_return=base_yield + alpha,
        estimated_annual_additional_revenue=from_usd(additional_revenue, sim_input.currency, constants),
    )
