"""Export functionality for report tables, CSV, JSON and HTML."""

import json
from typing import Any, Dict

import pandas as pd

from ..analysis.sensitivity import alpha_sensitivity
from ..config.loader import get_default_config
from ..config.schema import Config
from ..engine.models import SimulationInput, SimulationResult
from .charts import (
    create_alpha_sensitivity_chart,
    create_benefit_breakdown_chart,
    create_capital_efficiency_chart,
    create_yield_comparison_chart,
)
from .formatting import format_currency, format_percentage

REPORT_LABELS = {
    "en": {
        "parameter": "Parameter",
        "metric": "Metric",
        "value": "Value",
        "aum": "Assets Under Management",
        "asset_class": "Asset Class",
        "current_yield": "Current Yield",
        "settlement_cycle": "Settlement Cycle",
        "transaction_frequency": "Annual Transaction Frequency",
        "times_per_year": "times/year",
        "reinvestment_rate": "Conservative Reinvestment Rate",
        "differentiated_alpha": "Differentiated Alpha",
        "rwa_reduction": "RWA Reduction",
        "annual_liquidity_release": "Annual Liquidity Release",
        "average_released_capital": "Average Released Capital",
        "operating_cost_reduction": "Operating Cost Reduction",
        "reinvestment_roi": "Reinvestment ROI",
        "base_yield": "Base Yield",
        "projected_total_return": "Projected Total Return",
        "additional_revenue": "Estimated Additional Revenue",
        "total_annual_benefit": "Total Annual Benefit",
    },
    "ja": {
        "parameter": "パラメータ",
        "metric": "指標",
        "value": "値",
        "aum": "運用資産残高",
        "asset_class": "資産クラス",
        "current_yield": "現在の利回り",
        "settlement_cycle": "決済サイクル",
        "transaction_frequency": "年間取引頻度",
        "times_per_year": "回/年",
        "reinvestment_rate": "保守的再投資率",
        "differentiated_alpha": "差別化アルファ",
        "rwa_reduction": "RWA削減",
        "annual_liquidity_release": "年間流動性解放",
        "average_released_capital": "平均解放資本",
        "operating_cost_reduction": "運用コスト削減",
        "reinvestment_roi": "再投資ROI",
        "base_yield": "基本利回り",
        "projected_total_return": "予測総リターン",
        "additional_revenue": "推定追加収益",
        "total_annual_benefit": "年間総利益",
    },
}

ASSET_CLASS_LABELS_JA = {
    "Digital Bonds": "デジタル債券",
    "Tokenized Fund Interests": "トークン化ファンド持分",
    "Trade Finance Assets": "貿易金融資産",
    "Real Estate": "不動産",
    "Other RWA": "その他のRWA",
}


def _labels(language: str) -> Dict[str, str]:
    if language not in REPORT_LABELS:
        raise ValueError(f"Unsupported language: {language}")
    return REPORT_LABELS[language]


def input_table(
    sim_input: SimulationInput,
    result: SimulationResult,
    language: str = "en",
    config: Config = None
) -> pd.DataFrame:
    """Formatted input parameters, one row per parameter."""
    t = _labels(language)
    constants = (config or get_default_config()).constants
    currency = sim_input.currency

    asset_classes = sim_input.to_dict()['assetClasses']
    if language == "ja":
        asset_classes = [ASSET_CLASS_LABELS_JA.get(ac, ac) for ac in asset_classes]

    reinvestment_rate = sim_input.conservative_reinvestment_rate or constants.default_reinvestment_rate
    frequency = f"{sim_input.annual_transaction_frequency:g} {t['times_per_year']}"

    rows = [
        (t["aum"], format_currency(sim_input.aum, currency)),
        (t["asset_class"], ", ".join(asset_classes)),
        (t["current_yield"], format_percentage(sim_input.current_yield)),
        (t["settlement_cycle"], f"T+{sim_input.settlement_cycle}"),
        (t["transaction_frequency"], frequency),
        (t["reinvestment_rate"], format_percentage(reinvestment_rate)),
        (t["differentiated_alpha"], format_percentage(result.differentiated_yield.differentiated_alpha)),
    ]
    return pd.DataFrame(rows, columns=[t["parameter"], t["value"]])


def results_table(
    sim_input: SimulationInput,
    result: SimulationResult,
    language: str = "en"
) -> pd.DataFrame:
    """Formatted result metrics, one row per metric."""
    t = _labels(language)
    currency = sim_input.currency
    ce = result.capital_efficiency
    dy = result.differentiated_yield

    rows = [
        (t["rwa_reduction"], format_currency(ce.rwa_reduction, currency)),
        (t["annual_liquidity_release"], format_currency(ce.annual_liquidity_release, currency)),
        (t["average_released_capital"], format_currency(ce.average_released_capital, currency)),
        (t["operating_cost_reduction"], format_currency(ce.annual_operating_cost_reduction, currency)),
        (t["reinvestment_roi"], format_currency(ce.reinvestment_roi, currency)),
        (t["base_yield"], format_percentage(dy.base_yield)),
        (t["differentiated_alpha"], format_percentage(dy.differentiated_alpha)),
        (t["projected_total_return"], format_percentage(dy.projected_total_return)),
        (t["additional_revenue"], format_currency(dy.estimated_annual_additional_revenue, currency)),
        (t["total_annual_benefit"], format_currency(result.total_annual_benefit, currency)),
    ]
    return pd.DataFrame(rows, columns=[t["metric"], t["value"]])


def result_frame(result: SimulationResult) -> pd.DataFrame:
    """Raw numeric metrics as a single-row DataFrame."""
    data = dict(result.capital_efficiency.to_dict())
    data.update(result.differentiated_yield.to_dict())
    data['totalAnnualBenefit'] = result.total_annual_benefit
    return pd.DataFrame([data])


def export_csv(result: SimulationResult, filepath: str):
    """Export raw simulation metrics to CSV."""
    result_frame(result).to_csv(filepath, index=False)


def build_export_payload(
    sim_input: SimulationInput,
    result: SimulationResult,
    config: Config = None
) -> Dict[str, Any]:
    """JSON-compatible payload of input, result and config hash."""
    config = config or get_default_config()
    return {
        'input': sim_input.to_dict(),
        'results': result.to_dict(),
        'config_hash': config.compute_hash(),
    }


def export_json(
    sim_input: SimulationInput,
    result: SimulationResult,
    filepath: str,
    config: Config = None
):
    """Export input and results to JSON."""
    with open(filepath, 'w') as f:
        json.dump(build_export_payload(sim_input, result, config), f, indent=2, ensure_ascii=False)


def export_html_report(
    sim_input: SimulationInput,
    result: SimulationResult,
    filepath: str,
    language: str = "en",
    config: Config = None
):
    """Export an HTML report with the input/result tables and dashboard charts."""
    config = config or get_default_config()
    currency = sim_input.currency
    figures = [
        create_capital_efficiency_chart(result, currency, language),
        create_yield_comparison_chart(result, language),
        create_benefit_breakdown_chart(result, currency, language),
        create_alpha_sensitivity_chart(alpha_sensitivity(sim_input, result, config=config), currency),
    ]
    charts_html = "\n".join(
        f'<div class="chart">{fig.to_html(full_html=False, include_plotlyjs="cdn" if i == 0 else False)}</div>'
        for i, fig in enumerate(figures)
    )
    total = format_currency(result.total_annual_benefit, currency)

    html = f"""
    <!DOCTYPE html>
    <html lang="{language}">
    <head>
        <meta charset="utf-8">
        <title>RWA Settlement ROI Report</title>
        <style>
            body {{ font-family: Arial, sans-serif; margin: 20px; }}
            h1 {{ color: #333; }}
            .metric {{ margin: 10px 0; padding: 10px; background: #f5f5f5; }}
            .chart {{ margin: 20px 0; }}
        </style>
    </head>
    <body>
        <h1>RWA Settlement ROI Report</h1>

        <div class="metric">
            <h2>{_labels(language)["total_annual_benefit"]}: {total}</h2>
            <p>Config hash: {config.compute_hash()}</p>
        </div>

        <div class="metric">
            {input_table(sim_input, result, language, config).to_html(index=False)}
        </div>

        <div class="metric">
            {results_table(sim_input, result, language).to_html(index=False)}
        </div>

        {charts_html}
    </body>
    </html>
    """

    with open(filepath, 'w', encoding='utf-8') as f:
        f.write(html)
