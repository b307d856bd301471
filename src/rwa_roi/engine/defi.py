"""DeFi alpha calculator - additional yield from collateralized borrowing and reinvestment."""

from dataclasses import dataclass
from typing import Optional

from ..config.schema import EngineConstants


class InvalidArgumentError(ValueError):
    """Raised when DeFi parameters are outside their valid range."""


@dataclass(frozen=True)
class DefiAlphaOutcome:
    """Result of a DeFi alpha calculation: either an alpha or the rejection reason."""
    alpha: Optional[float] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def calculate_alpha_from_defi_params(
    collateralization_ratio: float,
    borrowing_rate: float,
    reinvestment_rate: float,
    base_yield: float = 8.5,
    constants: EngineConstants = None
) -> float:
    """
    Calculate differentiated alpha from DeFi parameters.
    
    Formula:
        leverage = 1 / collateralization_ratio
        leveraged_alpha = (reinvestment - borrowing) × (leverage - 1) × 0.8
        reinvestment_contribution = reinvestment × (1 - collateralization_ratio) × 0.6
        alpha = min(leveraged_alpha + reinvestment_contribution, 15.0)
    
    The result is capped above but not floored; a negative spread at high
    leverage yields a negative alpha.
    
    Args:
        collateralization_ratio: Collateralization ratio in (0, 1], e.g. 0.6
        borrowing_rate: Annual borrowing rate (%)
        reinvestment_rate: Annual reinvestment rate (%)
        base_yield: Current base yield (%). Accepted for context, not used.
        constants: Engine constants (defaults to built-in values)
        
    Returns:
        Differentiated alpha (%)
        
    Raises:
        InvalidArgumentError: ratio outside (0, 1] or a negative rate
    """
    constants = constants or EngineConstants()

    if collateralization_ratio <= 0 or collateralization_ratio > 1:
        raise InvalidArgumentError(
            f"Collateralization ratio must be between 0 and 1, got {collateralization_ratio}"
        )
    if borrowing_rate < 0 or reinvestment_rate < 0:
        raise InvalidArgumentError(
            f"Rates must be non-negative, got borrowing={borrowing_rate}, reinvestment={reinvestment_rate}"
        )

    leverage_factor = 1 / collateralization_ratio
    yield_spread = reinvestment_rate - borrowing_rate
    leveraged_spread = yield_spread * (leverage_factor - 1)
    leveraged_alpha = leveraged_spread * constants.defi_efficiency_factor

    reinvestment_contribution = (
        reinvestment_rate * (1 - collateralization_ratio) * constants.defi_reinvestment_weight
    )

    raw_alpha = leveraged_alpha + reinvestment_contribution
    return min(raw_alpha, constants.max_defi_alpha)


def try_calculate_alpha_from_defi_params(
    collateralization_ratio: float,
    borrowing_rate: float,
    reinvestment_rate: float,
    base_yield: float = 8.5,
    constants: EngineConstants = None
) -> DefiAlphaOutcome:
    """Same as calculate_alpha_from_defi_params, returning a DefiAlphaOutcome instead of raising."""
    try:
        alpha = calculate_alpha_from_defi_params(
            collateralization_ratio,
            borrowing_rate,
            reinvestment_rate,
            base_yield,
            constants,
        )
    except InvalidArgumentError as e:
        return DefiAlphaOutcome(error=str(e))
    return DefiAlphaOutcome(alpha=alpha)
