from __future__ import annotations

from budgets.budget_model import Budget
from repositories.record_repo import RecordRepo


class BudgetRepo(RecordRepo[Budget]):
    # Budgets are insert/list only; delete and update are not part of the API yet.
    table = "budget"
    model = Budget
