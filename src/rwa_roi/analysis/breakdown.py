"""Dashboard series derived from a simulation result."""

from typing import Dict, List

from ..engine.models import SimulationResult

SERIES_LABELS = {
    "en": {
        "rwa_reduction": "RWA Reduction",
        "average_released_capital": "Average Released Capital",
        "operating_cost_reduction": "Operating Cost Reduction",
        "reinvestment_roi": "Reinvestment ROI",
        "current": "Current",
        "with_network": "With Network",
        "capital_efficiency": "Capital Efficiency",
        "yield_alpha": "Yield Alpha",
    },
    "ja": {
        "rwa_reduction": "RWA削減",
        "average_released_capital": "平均解放資本",
        "operating_cost_reduction": "運用コスト削減",
        "reinvestment_roi": "再投資ROI",
        "current": "現在",
        "with_network": "ネットワーク利用時",
        "capital_efficiency": "資本効率",
        "yield_alpha": "利回りアルファ",
    },
}


def _labels(language: str) -> Dict[str, str]:
    if language not in SERIES_LABELS:
        raise ValueError(f"Unsupported language: {language}")
    return SERIES_LABELS[language]


def capital_efficiency_series(result: SimulationResult, language: str = "en") -> List[Dict[str, float]]:
    """Capital efficiency bar data (liquidity release is omitted, as on the dashboard)."""
    t = _labels(language)
    ce = result.capital_efficiency
    return [
        {"name": t["rwa_reduction"], "value": ce.rwa_reduction},
        {"name": t["average_released_capital"], "value": ce.average_released_capital},
        {"name": t["operating_cost_reduction"], "value": ce.annual_operating_cost_reduction},
        {"name": t["reinvestment_roi"], "value": ce.reinvestment_roi},
    ]


def yield_comparison_series(result: SimulationResult, language: str = "en") -> List[Dict[str, float]]:
    """Current yield against projected total return."""
    t = _labels(language)
    dy = result.differentiated_yield
    return [
        {"name": t["current"], "yield": dy.base_yield},
        {"name": t["with_network"], "yield": dy.projected_total_return},
    ]


def benefit_breakdown_series(result: SimulationResult, language: str = "en") -> List[Dict[str, float]]:
    """Split of the total annual benefit. The two values sum to the total."""
    t = _labels(language)
    ce = result.capital_efficiency
    return [
        {"name": t["capital_efficiency"], "value": ce.reinvestment_roi + ce.annual_operating_cost_reduction},
        {"name": t["yield_alpha"], "value": result.differentiated_yield.estimated_annual_additional_revenue},
    ]
