"""Pydantic schema for engine configuration validation."""

import hashlib
import json
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..engine.models import AssetClass


class AssetClassParameters(BaseModel):
    """Financial assumptions for a single asset class."""
    model_config = ConfigDict(frozen=True)

    default_differentiated_alpha: float = Field(description="Default additional yield (%)")
    rwa_reduction_multiplier: float = Field(ge=0, description="Multiplier on RWA reduction (1.0 = standard)")
    transaction_frequency_multiplier: float = Field(gt=0, description="Multiplier on transaction frequency")
    default_collateralization_ratio: float = Field(gt=0, le=1, description="Default collateralization ratio")
    default_borrowing_rate: float = Field(ge=0, description="Default borrowing rate (annual %)")
    default_defi_reinvestment_rate: float = Field(ge=0, description="Default DeFi reinvestment rate (annual %)")


class EngineConstants(BaseModel):
    """Fixed constants used by the calculators."""
    model_config = ConfigDict(frozen=True)

    jpy_to_usd: float = Field(default=0.0067, gt=0, description="JPY to USD conversion rate")
    usd_to_jpy: float = Field(default=149.3, gt=0, description="USD to JPY conversion rate")
    days_per_year: float = Field(default=365.25, gt=0, description="Day count including leap years")
    network_fee_per_transaction: float = Field(default=0.0005, ge=0, description="Network fee (USD/tx)")
    rwa_reduction_factor_per_day: float = Field(
        default=0.15, ge=0, description="RWA reduction per day of settlement cycle (% of AUM)"
    )
    default_reinvestment_rate: float = Field(default=2.0, ge=0, description="Reinvestment rate (annual %)")
    default_legacy_settlement_cost: float = Field(default=10.0, ge=0, description="Legacy cost (USD/tx)")
    defi_efficiency_factor: float = Field(
        default=0.8, ge=0, le=1, description="Haircut on leveraged spread for risk/liquidity costs"
    )
    defi_reinvestment_weight: float = Field(
        default=0.6, ge=0, le=1, description="Weight of the unencumbered reinvestment contribution"
    )
    max_defi_alpha: float = Field(default=15.0, description="Upper cap on DeFi-derived alpha (%)")
    fallback_asset_class: AssetClass = Field(
        default=AssetClass.OTHER_RWA, description="Row used when no asset class is selected"
    )


class Config(BaseModel):
    """Complete configuration for the ROI engine."""
    model_config = ConfigDict(frozen=True)

    constants: EngineConstants = Field(default_factory=EngineConstants)
    asset_classes: Dict[AssetClass, AssetClassParameters]

    @model_validator(mode='after')
    def validate_asset_table(self):
        """Ensure every asset class has a parameter row."""
        missing = [ac.value for ac in AssetClass if ac not in self.asset_classes]
        if missing:
            raise ValueError(f"Asset class table is missing rows for: {', '.join(missing)}")
        return self

    def compute_hash(self) -> str:
        """Compute config hash for reproducibility."""
        config_dict = self.model_dump(mode='json')
        config_str = json.dumps(config_dict, sort_keys=True)
        return hashlib.sha256(config_str.encode()).hexdigest()[:16]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return self.model_dump(mode='json')
