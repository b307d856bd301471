"""Chart generation using Plotly."""

from typing import List

import plotly.graph_objects as go

from ..analysis.breakdown import (
    benefit_breakdown_series,
    capital_efficiency_series,
    yield_comparison_series,
)
from ..analysis.sensitivity import AlphaSensitivityPoint
from ..engine.models import Currency, SimulationResult

THEME = {
    "text": "#e8eaed",
    "text_secondary": "#9aa0a6",
    "grid": "rgba(30, 33, 36, 0.8)",
    "sky": "#0ea5e9",
    "cyan": "#00d4ff",
    "amber": "#ffab00",
    "green": "#00e676",
    "red": "#ff5252",
}


def apply_dark_layout(fig: go.Figure, title: str, x_title: str, y_title: str, showlegend: bool = False) -> None:
    """Apply the dark dashboard theme to a chart."""
    fig.update_layout(
        title={
            "text": title,
            "x": 0,
            "xanchor": "left",
            "font": {"size": 11, "color": THEME["text_secondary"], "family": "Inter, -apple-system, sans-serif"}
        },
        xaxis_title=x_title,
        yaxis_title=y_title,
        template="plotly_dark",
        height=340,
        margin=dict(l=50, r=20, t=40, b=40),
        showlegend=showlegend,
        plot_bgcolor="rgba(8, 9, 10, 1)",
        paper_bgcolor="rgba(8, 9, 10, 1)",
        font={"color": THEME["text"], "family": "Inter, -apple-system, sans-serif", "size": 11},
        xaxis=dict(gridcolor=THEME["grid"], zerolinecolor=THEME["grid"]),
        yaxis=dict(gridcolor=THEME["grid"], zerolinecolor=THEME["grid"]),
    )


def create_capital_efficiency_chart(
    result: SimulationResult,
    currency: Currency,
    language: str = "en"
) -> go.Figure:
    """Bar chart of capital efficiency metrics."""
    series = capital_efficiency_series(result, language)
    fig = go.Figure(go.Bar(
        x=[item["name"] for item in series],
        y=[item["value"] for item in series],
        marker_color=THEME["sky"],
    ))
    apply_dark_layout(fig, "Capital Efficiency Alpha", "", Currency(currency).value)
    return fig


def create_yield_comparison_chart(result: SimulationResult, language: str = "en") -> go.Figure:
    """Current yield against projected total return."""
    series = yield_comparison_series(result, language)
    fig = go.Figure(go.Bar(
        x=[item["name"] for item in series],
        y=[item["yield"] for item in series],
        marker_color=[THEME["text_secondary"], THEME["green"]],
    ))
    apply_dark_layout(fig, "Yield Comparison", "", "Yield (%)")
    return fig


def create_benefit_breakdown_chart(
    result: SimulationResult,
    currency: Currency,
    language: str = "en"
) -> go.Figure:
    """Total annual benefit split into capital efficiency and yield alpha."""
    series = benefit_breakdown_series(result, language)
    fig = go.Figure(go.Bar(
        x=[item["name"] for item in series],
        y=[item["value"] for item in series],
        marker_color=[THEME["cyan"], THEME["amber"]],
    ))
    apply_dark_layout(fig, "Total Annual Benefit Breakdown", "", Currency(currency).value)
    return fig


def create_alpha_sensitivity_chart(points: List[AlphaSensitivityPoint], currency: Currency) -> go.Figure:
    """Additional revenue across a range of alpha values."""
    fig = go.Figure(go.Scatter(
        x=[p.label for p in points],
        y=[p.revenue for p in points],
        mode='lines+markers',
        line=dict(color=THEME["sky"], width=2),
    ))
    apply_dark_layout(fig, "Alpha Sensitivity", "Differentiated Alpha", Currency(currency).value)
    return fig
