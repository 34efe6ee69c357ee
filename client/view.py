from __future__ import annotations

import html
from typing import Any, Dict, List

import plotly.io as pio

from analysis_service.visuals import category_pie, monthly_bar
from client.state import FinanceState


CURRENCY = "₹"


def _money(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"{CURRENCY}{value}"


def transaction_rows(transactions: List[Dict[str, Any]]) -> List[str]:
    return [
        f"{_money(t.get('amount'))} - {t.get('description')} - {t.get('category')} - {t.get('date')}"
        for t in transactions
    ]


def comparison_rows(comparison: List[Dict[str, Any]]) -> List[str]:
    return [
        f"{row['month']} - {row['category']} | Budget: {_money(row['budget'])} | Spent: {_money(row['spent'])}"
        for row in comparison
    ]


def render_dashboard(state: FinanceState) -> str:
    """Standalone HTML page: transaction list, both charts, budget vs actual."""
    bar_html = pio.to_html(monthly_bar(state.monthly_data), full_html=False, include_plotlyjs="cdn")
    pie_html = pio.to_html(category_pie(state.category_data), full_html=False, include_plotlyjs=False)

    txn_items = "\n".join(
        f'<li data-id="{html.escape(str(t.get("id")))}">{html.escape(row)}</li>'
        for t, row in zip(state.transactions, transaction_rows(state.transactions))
    )
    budget_items = "\n".join(f"<li>{html.escape(row)}</li>" for row in comparison_rows(state.budget_comparison))
    error_html = f'<p style="color: red">{html.escape(state.error)}</p>' if state.error else ""

    return (
        "<!DOCTYPE html>\n<html>\n<head><meta charset=\"utf-8\"><title>Personal Finance Visualizer</title></head>\n"
        "<body style=\"padding: 20px\">\n"
        "<h2>Personal Finance Visualizer</h2>\n"
        f"{error_html}\n"
        f"<h3>Transactions</h3>\n<ul>\n{txn_items}\n</ul>\n"
        f"<h3>Monthly Expenses Bar Chart</h3>\n{bar_html}\n"
        f"<h3>Category Pie Chart</h3>\n{pie_html}\n"
        f"<h3>Budget vs Actual</h3>\n<ul>\n{budget_items}\n</ul>\n"
        "</body>\n</html>\n"
    )
