from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from analysis_service.analysis_service import get_analysis_service, AnalysisService
from analysis_service.visuals import monthly_bar, category_pie, figure_to_response
from budgets.budget_repo import BudgetRepo
from budgets.budget_routes import get_budget_repo
from transactions.transaction_repo import TransactionRepo
from transactions.transaction_routes import get_transaction_repo


router = APIRouter(prefix="/analysis", tags=["analysis"])


@router.get("/monthly-totals")
async def monthly_totals(
    service: AnalysisService = Depends(get_analysis_service),
    transactions: TransactionRepo = Depends(get_transaction_repo),
):
    return service.monthly_totals(await transactions.list_all())


@router.get("/category-totals")
async def category_totals(
    service: AnalysisService = Depends(get_analysis_service),
    transactions: TransactionRepo = Depends(get_transaction_repo),
):
    return service.category_totals(await transactions.list_all())


@router.get("/budget-comparison")
async def budget_comparison(
    service: AnalysisService = Depends(get_analysis_service),
    transactions: TransactionRepo = Depends(get_transaction_repo),
    budgets: BudgetRepo = Depends(get_budget_repo),
):
    return service.compare_to_budget(await transactions.list_all(), await budgets.list_all())


@router.get("/monthly-chart")
async def monthly_chart(
    format: str = Query(default="json", pattern="^(json|html)$"),
    service: AnalysisService = Depends(get_analysis_service),
    transactions: TransactionRepo = Depends(get_transaction_repo),
):
    fig = monthly_bar(service.monthly_totals(await transactions.list_all()))
    payload = figure_to_response(fig, fmt=format)
    return HTMLResponse(payload) if format == "html" else payload


@router.get("/category-chart")
async def category_chart(
    format: str = Query(default="json", pattern="^(json|html)$"),
    service: AnalysisService = Depends(get_analysis_service),
    transactions: TransactionRepo = Depends(get_transaction_repo),
):
    fig = category_pie(service.category_totals(await transactions.list_all()))
    payload = figure_to_response(fig, fmt=format)
    return HTMLResponse(payload) if format == "html" else payload
