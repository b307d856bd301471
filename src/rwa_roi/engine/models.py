"""Input and result types for the benefit calculation engine."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, FrozenSet, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel


class AssetClass(str, Enum):
    """Selectable real-world asset classes."""
    DIGITAL_BONDS = "Digital Bonds"
    TOKENIZED_FUND_INTERESTS = "Tokenized Fund Interests"
    TRADE_FINANCE_ASSETS = "Trade Finance Assets"
    REAL_ESTATE = "Real Estate"
    OTHER_RWA = "Other RWA"


class Currency(str, Enum):
    """Supported reporting currencies."""
    USD = "USD"
    JPY = "JPY"


def canonical_order(asset_classes) -> Tuple[AssetClass, ...]:
    """Sort asset classes in declaration order so sums are reproducible."""
    order = list(AssetClass)
    return tuple(sorted(set(asset_classes), key=order.index))


class SimulationInput(BaseModel):
    """Client-supplied portfolio parameters for one computation."""
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        allow_inf_nan=False,
    )

    aum: float = Field(gt=0, description="Assets under management, in `currency`")
    currency: Currency = Field(description="Currency of AUM and of every monetary output")
    asset_classes: FrozenSet[AssetClass] = Field(description="Selected asset classes")
    current_yield: float = Field(gt=0, description="Current base yield (%)")
    settlement_cycle: int = Field(ge=0, description="Legacy settlement lag N in T+N (days)")
    annual_transaction_frequency: float = Field(gt=0, description="Transactions per year")

    conservative_reinvestment_rate: Optional[float] = Field(
        default=None, description="Reinvestment rate on released capital (%), 0/None = default"
    )
    differentiated_alpha: Optional[float] = Field(
        default=None, description="Manual alpha override (%), zero is honoured"
    )
    legacy_settlement_costs: Optional[float] = Field(
        default=None, description="Legacy cost per transaction (USD), 0/None = default"
    )

    # DeFi parameters are range-checked by the DeFi calculator, not here
    collateralization_ratio: Optional[float] = Field(default=None, description="Collateralization ratio (0, 1]")
    borrowing_rate: Optional[float] = Field(default=None, description="Borrowing rate (annual %)")
    defi_reinvestment_rate: Optional[float] = Field(default=None, description="DeFi reinvestment rate (annual %)")
    use_defi_calculation: bool = Field(default=False, description="Derive alpha from DeFi parameters")

    @field_validator('asset_classes')
    @classmethod
    def validate_asset_classes(cls, v):
        """Require at least one asset class."""
        if not v:
            raise ValueError("At least one asset class must be selected")
        return v

    @field_serializer('asset_classes')
    def serialize_asset_classes(self, v):
        return [ac.value for ac in canonical_order(v)]

    @property
    def has_defi_params(self) -> bool:
        """True when all three DeFi inputs are present."""
        return (
            self.collateralization_ratio is not None
            and self.borrowing_rate is not None
            and self.defi_reinvestment_rate is not None
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SimulationInput':
        """Create input from a dictionary with snake_case or camelCase keys."""
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-compatible dictionary with camelCase keys."""
        return self.model_dump(mode='json', by_alias=True, exclude_none=True)


@dataclass(frozen=True)
class CapitalEfficiencyResult:
    """Capital efficiency metrics, denominated in the input currency."""
    rwa_reduction: float
    annual_liquidity_release: float
    average_released_capital: float
    annual_operating_cost_reduction: float  # may be negative
    reinvestment_roi: float

    def to_dict(self) -> Dict[str, float]:
        return {
            'rwaReduction': self.rwa_reduction,
            'annualLiquidityRelease': self.annual_liquidity_release,
            'averageReleasedCapital': self.average_released_capital,
            'annualOperatingCostReduction': self.annual_operating_cost_reduction,
            'reinvestmentROI': self.reinvestment_roi,
        }


@dataclass(frozen=True)
class DifferentiatedYieldResult:
    """Yield alpha metrics. Percentages except the revenue figure."""
    base_yield: float
    differentiated_alpha: float
    projected_total_return: float
    estimated_annual_additional_revenue: float

    def to_dict(self) -> Dict[str, float]:
        return {
            'baseYield': self.base_yield,
            'differentiatedAlpha': self.differentiated_alpha,
            'projectedTotalReturn': self.projected_total_return,
            'estimatedAnnualAdditionalRevenue': self.estimated_annual_additional_revenue,
        }


@dataclass(frozen=True)
class SimulationResult:
    """Complete result of one computation."""
    capital_efficiency: CapitalEfficiencyResult
    differentiated_yield: DifferentiatedYieldResult
    total_annual_benefit: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            'capitalEfficiency': self.capital_efficiency.to_dict(),
            'differentiatedYield': self.differentiated_yield.to_dict(),
            'totalAnnualBenefit': self.total_annual_benefit,
        }
