"""Sensitivity analysis for ROI simulation inputs."""

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

import numpy as np

from ..config.loader import get_default_config
from ..config.schema import Config
from ..engine.currency import from_usd, to_usd
from ..engine.models import SimulationInput, SimulationResult
from ..reporting.formatting import to_fixed
from ..simulation.runner import SimulationRunner


@dataclass
class AlphaSensitivityPoint:
    """Projected revenue at one alpha value."""
    alpha: float
    label: str  # e.g. "+6.5%"
    revenue: float  # in input currency


@dataclass
class ParameterSweep:
    """Result of a single parameter sweep."""
    parameter_name: str
    parameter_label: str
    base_value: float
    sweep_values: List[float]
    metric_values: Dict[str, List[float]]  # metric_name -> values at each sweep point


@dataclass
class TornadoEntry:
    """Single entry in a tornado chart."""
    parameter_name: str
    parameter_label: str
    base_value: float
    low_value: float
    high_value: float
    metric_at_low: float
    metric_at_high: float
    impact_range: float  # abs(high - low) metric value


def alpha_sensitivity(
    sim_input: SimulationInput,
    result: SimulationResult,
    steps: int = 5,
    config: Config = None
) -> List[AlphaSensitivityPoint]:
    """
    Additional revenue at the resolved alpha shifted by -steps..+steps points.

    Args:
        sim_input: Simulation input
        result: Result computed for that input
        steps: Number of one-point shifts on each side
        config: Engine config (for conversion rates)

    Returns:
        2 * steps + 1 points in ascending alpha order
    """
    constants = (config or get_default_config()).constants
    base_alpha = result.differentiated_yield.differentiated_alpha
    aum_usd = to_usd(sim_input.aum, sim_input.currency, constants)

    points = []
    for shift in range(-steps, steps + 1):
        alpha = base_alpha + shift
        revenue = from_usd(aum_usd * (alpha / 100), sim_input.currency, constants)
        sign = '+' if alpha > 0 else ''
        points.append(AlphaSensitivityPoint(
            alpha=alpha,
            label=f"{sign}{to_fixed(alpha, 1)}%",
            revenue=revenue
        ))
    return points


class SensitivityAnalyzer:
    """Perform one-at-a-time sensitivity analysis on simulation inputs."""

    # (input_field, label, low_mult, high_mult)
    DEFAULT_PARAMETERS = {
        'settlement_cycle': ('settlement_cycle', 'Settlement Cycle (T+N)', 0.5, 2.0),
        'transaction_frequency': ('annual_transaction_frequency', 'Annual Transaction Frequency', 0.5, 2.0),
        'reinvestment_rate': ('conservative_reinvestment_rate', 'Reinvestment Rate', 0.5, 2.0),
        'legacy_cost': ('legacy_settlement_costs', 'Legacy Settlement Cost', 0.5, 2.0),
        'aum': ('aum', 'AUM', 0.5, 2.0),
        'current_yield': ('current_yield', 'Current Yield', 0.5, 2.0),
    }

    CORE_METRICS = [
        'total_annual_benefit',
        'reinvestment_roi',
        'annual_operating_cost_reduction',
        'estimated_annual_additional_revenue',
        'average_released_capital',
        'projected_total_return',
    ]

    def __init__(
        self,
        sim_input: SimulationInput,
        config: Config = None,
        parameters: Dict[str, Tuple] = None
    ):
        """
        Initialize sensitivity analyzer.

        Args:
            sim_input: Base simulation input
            config: Engine configuration
            parameters: Optional custom parameter definitions
                Format: {name: (input_field, label, low_mult, high_mult)}
        """
        self.sim_input = sim_input
        self.runner = SimulationRunner(config)
        self.parameters = parameters or self.DEFAULT_PARAMETERS

    def _get_input_value(self, field_name: str) -> float:
        """Input value, substituting the engine default for unset optionals."""
        value = getattr(self.sim_input, field_name)
        if value:
            return value
        constants = self.runner.config.constants
        defaults = {
            'conservative_reinvestment_rate': constants.default_reinvestment_rate,
            'legacy_settlement_costs': constants.default_legacy_settlement_cost,
        }
        return defaults.get(field_name, value or 0.0)

    @staticmethod
    def _coerce(field_name: str, value: float) -> float:
        """Snap the settlement cycle to whole days, rounding half up."""
        if field_name == 'settlement_cycle':
            return int(math.floor(value + 0.5))
        return float(value)

    def _with_value(self, field_name: str, value: float) -> SimulationInput:
        """Copy of the base input with one field replaced (re-validated)."""
        data = self.sim_input.model_dump()
        data[field_name] = value
        return SimulationInput.model_validate(data)

    @staticmethod
    def _extract_metrics(result: SimulationResult) -> Dict[str, Any]:
        return {
            'total_annual_benefit': result.total_annual_benefit,
            'reinvestment_roi': result.capital_efficiency.reinvestment_roi,
            'annual_operating_cost_reduction': result.capital_efficiency.annual_operating_cost_reduction,
            'estimated_annual_additional_revenue': result.differentiated_yield.estimated_annual_additional_revenue,
            'average_released_capital': result.capital_efficiency.average_released_capital,
            'projected_total_return': result.differentiated_yield.projected_total_return,
        }

    def _run_at(self, field_name: str, value: float) -> Dict[str, Any]:
        return self._extract_metrics(self.runner.run(self._with_value(field_name, value)))

    def run_sweep(self, parameter_name: str, num_points: int = 11) -> ParameterSweep:
        """
        Run one-at-a-time sweep for a single parameter.

        Args:
            parameter_name: Name of parameter to sweep
            num_points: Number of sweep points

        Returns:
            ParameterSweep result
        """
        if parameter_name not in self.parameters:
            raise ValueError(f"Unknown parameter: {parameter_name}")

        field_name, label, low_mult, high_mult = self.parameters[parameter_name]
        base_value = self._get_input_value(field_name)

        low_value = base_value * low_mult
        high_value = base_value * high_mult
        sweep_values = [self._coerce(field_name, v) for v in np.linspace(low_value, high_value, num_points)]

        metric_values = {metric: [] for metric in self.CORE_METRICS}
        for val in sweep_values:
            metrics = self._run_at(field_name, val)
            for metric in self.CORE_METRICS:
                metric_values[metric].append(metrics[metric])

        return ParameterSweep(
            parameter_name=parameter_name,
            parameter_label=label,
            base_value=base_value,
            sweep_values=sweep_values,
            metric_values=metric_values
        )

    def compute_tornado(self, target_metric: str = 'total_annual_benefit') -> List[TornadoEntry]:
        """
        Compute tornado chart data for a target metric.

        Returns:
            List of TornadoEntry sorted by impact (largest first)
        """
        if target_metric not in self.CORE_METRICS:
            raise ValueError(f"Unknown metric: {target_metric}")

        entries = []
        for param_name, (field_name, label, low_mult, high_mult) in self.parameters.items():
            base_value = self._get_input_value(field_name)
            low_value = self._coerce(field_name, base_value * low_mult)
            high_value = self._coerce(field_name, base_value * high_mult)

            metric_at_low = self._run_at(field_name, low_value)[target_metric]
            metric_at_high = self._run_at(field_name, high_value)[target_metric]

            entries.append(TornadoEntry(
                parameter_name=param_name,
                parameter_label=label,
                base_value=base_value,
                low_value=low_value,
                high_value=high_value,
                metric_at_low=metric_at_low,
                metric_at_high=metric_at_high,
                impact_range=abs(metric_at_high - metric_at_low)
            ))

        entries.sort(key=lambda e: e.impact_range, reverse=True)
        return entries
