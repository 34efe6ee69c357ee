from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from analysis_service.analysis_service import AnalysisService, get_analysis_service
from client.api_client import FinanceApiClient
from client.forms import BudgetForm, TransactionForm, ValidationError


logger = logging.getLogger(__name__)

TRANSACTION_REQUIRED_MESSAGE = "All fields required"


class FinanceState:
    """
    In-memory mirror of the server's transactions and budgets plus the two input forms.
    Every write is followed by a re-fetch; nothing is patched locally.
    """

    def __init__(self, api: FinanceApiClient, analysis: Optional[AnalysisService] = None) -> None:
        self.api = api
        self.analysis = analysis or get_analysis_service()
        self.transactions: List[Dict[str, Any]] = []
        self.budgets: List[Dict[str, Any]] = []
        self.form = TransactionForm()
        self.budget_form = BudgetForm()
        self.error = ""

    def load(self) -> None:
        self.fetch_transactions()
        self.fetch_budgets()

    def fetch_transactions(self) -> None:
        self.transactions = self.api.list_transactions()

    def fetch_budgets(self) -> None:
        self.budgets = self.api.list_budgets()

    def add_transaction(self) -> bool:
        try:
            self.form.validate_fields()
        except ValidationError as exc:
            logger.debug("Transaction form rejected: %s", exc)
            self.error = TRANSACTION_REQUIRED_MESSAGE
            return False
        self.api.create_transaction(self.form.to_payload())
        self.form = TransactionForm()
        self.fetch_transactions()
        return True

    def delete_transaction(self, transaction_id: str) -> None:
        self.api.delete_transaction(transaction_id)
        self.fetch_transactions()

    def add_budget(self) -> bool:
        # Incomplete budget forms are dropped without a message.
        try:
            self.budget_form.validate_fields()
        except ValidationError as exc:
            logger.debug("Budget form rejected: %s", exc)
            return False
        self.api.create_budget(self.budget_form.to_payload())
        self.budget_form = BudgetForm()
        self.fetch_budgets()
        return True

    # Derived chart and comparison data
    @property
    def monthly_data(self) -> List[Dict[str, Any]]:
        return self.analysis.monthly_totals(self.transactions)

    @property
    def category_data(self) -> List[Dict[str, Any]]:
        return self.analysis.category_totals(self.transactions)

    @property
    def budget_comparison(self) -> List[Dict[str, Any]]:
        return self.analysis.compare_to_budget(self.transactions, self.budgets)
