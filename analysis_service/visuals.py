from __future__ import annotations

from typing import Any, Dict, List, Literal

import plotly.graph_objects as go
import plotly.io as pio


PIE_COLORS = ["#0088FE", "#00C49F", "#FFBB28", "#FF8042", "#8884D8"]
BAR_COLOR = "#8884d8"


def monthly_bar(monthly: List[Dict[str, Any]]) -> go.Figure:
    fig = go.Figure(data=[go.Bar(
        x=[row["month"] for row in monthly],
        y=[row["total"] for row in monthly],
        marker_color=BAR_COLOR,
        name="total",
    )])
    fig.update_layout(title_text="Monthly Expenses", xaxis_title="month", yaxis_gridcolor="#dddddd")
    return fig


def category_pie(categories: List[Dict[str, Any]]) -> go.Figure:
    colors = [PIE_COLORS[i % len(PIE_COLORS)] for i in range(len(categories))]
    fig = go.Figure(data=[go.Pie(
        labels=[row["name"] for row in categories],
        values=[row["value"] for row in categories],
        marker=dict(colors=colors),
        sort=False,
    )])
    fig.update_layout(title_text="Spend by Category")
    return fig


def figure_to_response(fig: go.Figure, fmt: Literal["json", "html"] = "json"):
    if fmt == "json":
        return fig.to_plotly_json()
    return pio.to_html(fig, full_html=False, include_plotlyjs="cdn")
