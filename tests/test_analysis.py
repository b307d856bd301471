"""Tests for sensitivity analysis, dashboard series and sanity checks."""

import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from rwa_roi.analysis import (
    SensitivityAnalyzer,
    alpha_sensitivity,
    benefit_breakdown_series,
    capital_efficiency_series,
    yield_comparison_series,
)
from rwa_roi.engine.models import SimulationInput
from rwa_roi.simulation.runner import compute_simulation
from rwa_roi.validation import SanityChecker, validate_simulation


BASE_INPUT = SimulationInput.from_dict({
    'aum': 1000,
    'currency': 'USD',
    'assetClasses': ['Digital Bonds'],
    'currentYield': 8.5,
    'settlementCycle': 2,
    'annualTransactionFrequency': 12,
})


def with_overrides(**overrides) -> SimulationInput:
    data = BASE_INPUT.model_dump()
    data.update(overrides)
    return SimulationInput.model_validate(data)


class TestAlphaSensitivity:
    """Tests for the alpha sensitivity series."""

    def test_points_centered_on_resolved_alpha(self):
        result = compute_simulation(BASE_INPUT)
        points = alpha_sensitivity(BASE_INPUT, result)

        assert len(points) == 11
        assert points[5].alpha == 6.5
        assert points[5].revenue == pytest.approx(result.differentiated_yield.estimated_annual_additional_revenue)
        assert points[0].label == "+1.5%"
        assert points[-1].label == "+11.5%"

    def test_negative_alpha_label(self):
        sim_input = with_overrides(differentiated_alpha=1.0)
        points = alpha_sensitivity(sim_input, compute_simulation(sim_input), steps=2)
        assert [p.label for p in points] == ["-1.0%", "0.0%", "+1.0%", "+2.0%", "+3.0%"]

    def test_revenue_is_linear_in_alpha(self):
        points = alpha_sensitivity(BASE_INPUT, compute_simulation(BASE_INPUT))
        deltas = [b.revenue - a.revenue for a, b in zip(points, points[1:])]
        for delta in deltas:
            assert delta == pytest.approx(10.0)


class TestSensitivityAnalyzer:
    """Tests for one-at-a-time sweeps and tornado data."""

    def test_settlement_cycle_sweep(self):
        analyzer = SensitivityAnalyzer(BASE_INPUT)
        sweep = analyzer.run_sweep('settlement_cycle', num_points=5)

        assert sweep.base_value == 2
        assert sweep.sweep_values[0] == pytest.approx(1.0)
        assert sweep.sweep_values[-1] == pytest.approx(4.0)
        totals = sweep.metric_values['total_annual_benefit']
        assert len(totals) == 5
        assert all(b >= a for a, b in zip(totals, totals[1:]))

    def test_optional_parameter_uses_default_base(self):
        analyzer = SensitivityAnalyzer(BASE_INPUT)
        sweep = analyzer.run_sweep('reinvestment_rate', num_points=3)
        assert sweep.base_value == 2.0
        assert sweep.sweep_values == pytest.approx([1.0, 2.5, 4.0])

    def test_settlement_cycle_sweep_reports_days_run(self):
        """Reported cycles are whole days, rounded half up, and match the metrics."""
        analyzer = SensitivityAnalyzer(with_overrides(settlement_cycle=3))
        sweep = analyzer.run_sweep('settlement_cycle', num_points=4)

        assert sweep.sweep_values == [2, 3, 5, 6]
        for cycle, released in zip(sweep.sweep_values, sweep.metric_values['average_released_capital']):
            assert released == pytest.approx(cycle * 1000 * 12 * 1.2 / 365.25)

    def test_tornado_reports_rounded_cycle_bounds(self):
        entries = SensitivityAnalyzer(with_overrides(settlement_cycle=3)).compute_tornado()
        entry = next(e for e in entries if e.parameter_name == 'settlement_cycle')
        assert (entry.low_value, entry.high_value) == (2, 6)

    def test_current_yield_sweep(self):
        """Base yield moves the projected return but not the benefit."""
        assert 'current_yield' in SensitivityAnalyzer.DEFAULT_PARAMETERS
        sweep = SensitivityAnalyzer(BASE_INPUT).run_sweep('current_yield', num_points=3)

        assert sweep.sweep_values == pytest.approx([4.25, 10.625, 17.0])
        assert sweep.metric_values['projected_total_return'] == pytest.approx([10.75, 17.125, 23.5])
        totals = sweep.metric_values['total_annual_benefit']
        assert totals[0] == totals[1] == totals[2]

    def test_unknown_parameter(self):
        with pytest.raises(ValueError, match="Unknown parameter"):
            SensitivityAnalyzer(BASE_INPUT).run_sweep('volatility')

    def test_tornado_sorted_by_impact(self):
        entries = SensitivityAnalyzer(BASE_INPUT).compute_tornado()
        assert len(entries) == len(SensitivityAnalyzer.DEFAULT_PARAMETERS)
        impacts = [e.impact_range for e in entries]
        assert impacts == sorted(impacts, reverse=True)

    def test_tornado_unknown_metric(self):
        with pytest.raises(ValueError, match="Unknown metric"):
            SensitivityAnalyzer(BASE_INPUT).compute_tornado('rwa_reduction')


class TestDashboardSeries:
    """Tests for chart-ready series."""

    def test_benefit_breakdown_sums_to_total(self):
        result = compute_simulation(BASE_INPUT)
        series = benefit_breakdown_series(result)
        assert sum(item['value'] for item in series) == pytest.approx(result.total_annual_benefit)

    def test_yield_comparison(self):
        result = compute_simulation(BASE_INPUT)
        series = yield_comparison_series(result)
        assert [item['yield'] for item in series] == [8.5, pytest.approx(15.0)]

    def test_japanese_labels(self):
        series = capital_efficiency_series(compute_simulation(BASE_INPUT), language="ja")
        assert series[0]['name'] == "RWA削減"
        assert len(series) == 4

    def test_unsupported_language(self):
        with pytest.raises(ValueError, match="Unsupported language"):
            capital_efficiency_series(compute_simulation(BASE_INPUT), language="fr")


class TestSanityChecks:
    """Tests for input and result sanity checks."""

    def test_clean_input_has_no_warnings(self):
        result = compute_simulation(BASE_INPUT)
        assert validate_simulation(BASE_INPUT, result) == []

    def test_defi_fallback_is_surfaced(self):
        sim_input = with_overrides(
            use_defi_calculation=True,
            collateralization_ratio=1.5, borrowing_rate=5.0, defi_reinvestment_rate=8.0,
        )
        warnings = SanityChecker().check_input(sim_input)
        assert any(w.category == "defi" and "rejected" in w.message for w in warnings)

    def test_incomplete_defi_params(self):
        sim_input = with_overrides(use_defi_calculation=True, collateralization_ratio=0.6)
        warnings = SanityChecker().check_input(sim_input)
        assert any("not all DeFi parameters" in w.message for w in warnings)

    def test_defi_params_without_flag(self):
        sim_input = with_overrides(
            collateralization_ratio=0.6, borrowing_rate=5.0, defi_reinvestment_rate=8.0,
        )
        warnings = SanityChecker().check_input(sim_input)
        assert [w.category for w in warnings] == ["defi"]
        assert "disabled" in warnings[0].message

    def test_manual_override_shadows_defi(self):
        sim_input = with_overrides(
            differentiated_alpha=4.0, use_defi_calculation=True,
            collateralization_ratio=0.6, borrowing_rate=5.0, defi_reinvestment_rate=8.0,
        )
        warnings = SanityChecker().check_input(sim_input)
        assert any("takes precedence" in w.message for w in warnings)

    def test_unusual_bounds(self):
        sim_input = with_overrides(settlement_cycle=30, current_yield=60.0, differentiated_alpha=20.0)
        messages = [w.message for w in SanityChecker().check_input(sim_input)]
        assert any("T+30" in m for m in messages)
        assert any("unusually high" in m for m in messages)
        assert any("exceeds the DeFi cap" in m for m in messages)

    def test_negative_cost_reduction_warning(self):
        sim_input = with_overrides(legacy_settlement_costs=0.0001)
        warnings = SanityChecker().check_result(compute_simulation(sim_input))
        assert any("Operating cost reduction is negative" in w.message for w in warnings)

    def test_negative_alpha_warning(self):
        sim_input = with_overrides(
            use_defi_calculation=True,
            collateralization_ratio=0.5, borrowing_rate=10.0, defi_reinvestment_rate=2.0,
        )
        warnings = SanityChecker().check_result(compute_simulation(sim_input))
        assert any("negative" in w.message and "alpha" in w.message for w in warnings)
