"""Sanity checks and validation for simulation inputs and outputs."""

import math
from dataclasses import dataclass
from typing import List, Optional

from ..config.loader import get_default_config
from ..config.schema import Config
from ..engine.differentiated_yield import AlphaSource
from ..engine.models import SimulationInput, SimulationResult
from ..simulation.runner import SimulationRunner


@dataclass
class ValidationWarning:
    """A validation warning with severity and message."""
    severity: str  # "warning" or "error"
    category: str  # e.g., "input", "defi", "bounds", "nan"
    message: str
    details: Optional[str] = None


class SanityChecker:
    """Run sanity checks on simulation inputs and results."""

    MAX_TYPICAL_SETTLEMENT_DAYS = 10
    MAX_TYPICAL_YIELD = 50.0

    def __init__(self, config: Config = None):
        """Initialize with configuration."""
        self.config = config or get_default_config()
        self.runner = SimulationRunner(self.config)

    def check_input(self, sim_input: SimulationInput) -> List[ValidationWarning]:
        """
        Check a simulation input for implausible values.

        Returns:
            List of validation warnings
        """
        warnings = []

        resolution = self.runner.resolve_alpha(sim_input)
        if resolution.fallback_reason is not None:
            warnings.append(ValidationWarning(
                severity="warning",
                category="defi",
                message="DeFi parameters rejected, asset class default alpha used",
                details=resolution.fallback_reason
            ))

        if sim_input.use_defi_calculation and not sim_input.has_defi_params:
            warnings.append(ValidationWarning(
                severity="warning",
                category="defi",
                message="DeFi calculation enabled but not all DeFi parameters were supplied",
                details="Collateralization ratio, borrowing rate and reinvestment rate are all required"
            ))

        if sim_input.has_defi_params and not sim_input.use_defi_calculation:
            warnings.append(ValidationWarning(
                severity="warning",
                category="defi",
                message="DeFi parameters supplied but DeFi calculation is disabled",
                details="Enable use_defi_calculation to derive alpha from them"
            ))

        if (
            sim_input.use_defi_calculation
            and sim_input.differentiated_alpha is not None
            and sim_input.has_defi_params
        ):
            warnings.append(ValidationWarning(
                severity="warning",
                category="defi",
                message="Manual alpha override takes precedence over DeFi parameters",
                details=f"Override: {sim_input.differentiated_alpha:.2f}%"
            ))

        if sim_input.settlement_cycle > self.MAX_TYPICAL_SETTLEMENT_DAYS:
            warnings.append(ValidationWarning(
                severity="warning",
                category="bounds",
                message=f"Settlement cycle T+{sim_input.settlement_cycle} is unusually long",
                details="Released capital scales linearly with settlement days"
            ))

        if sim_input.current_yield > self.MAX_TYPICAL_YIELD:
            warnings.append(ValidationWarning(
                severity="warning",
                category="bounds",
                message=f"Current yield of {sim_input.current_yield:.1f}% is unusually high",
                details="Consider if this is realistic for sustained periods"
            ))

        max_alpha = self.config.constants.max_defi_alpha
        if resolution.source == AlphaSource.MANUAL and resolution.alpha > max_alpha:
            warnings.append(ValidationWarning(
                severity="warning",
                category="bounds",
                message=f"Manual alpha of {resolution.alpha:.2f}% exceeds the DeFi cap",
                details=f"DeFi-derived alpha is capped at {max_alpha:.1f}%"
            ))

        return warnings

    def check_result(self, result: SimulationResult) -> List[ValidationWarning]:
        """
        Check computed results for issues.

        Returns:
            List of validation warnings
        """
        warnings = []

        metrics = dict(result.capital_efficiency.to_dict())
        metrics.update(result.differentiated_yield.to_dict())
        metrics['totalAnnualBenefit'] = result.total_annual_benefit

        for key, value in metrics.items():
            if math.isnan(value) or math.isinf(value):
                warnings.append(ValidationWarning(
                    severity="error",
                    category="nan",
                    message=f"Invalid metric value for {key}",
                    details=f"Value: {value}"
                ))

        cost_reduction = result.capital_efficiency.annual_operating_cost_reduction
        if cost_reduction < 0:
            warnings.append(ValidationWarning(
                severity="warning",
                category="bounds",
                message="Operating cost reduction is negative",
                details=f"Network fees exceed legacy settlement costs by {-cost_reduction:,.4f}"
            ))

        alpha = result.differentiated_yield.differentiated_alpha
        if alpha < 0:
            warnings.append(ValidationWarning(
                severity="warning",
                category="bounds",
                message=f"Differentiated alpha is negative ({alpha:.2f}%)",
                details="Borrowing cost exceeds reinvestment yield at this leverage"
            ))

        return warnings


def validate_simulation(
    sim_input: SimulationInput,
    result: SimulationResult,
    config: Config = None
) -> List[ValidationWarning]:
    """
    Validate a simulation input together with its result.

    Returns:
        List of all validation warnings
    """
    checker = SanityChecker(config)
    warnings = []
    warnings.extend(checker.check_input(sim_input))
    warnings.extend(checker.check_result(result))
    return warnings
