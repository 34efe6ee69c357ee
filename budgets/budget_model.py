from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class BudgetCreate(BaseModel):
    category: Optional[str] = None
    amount: Optional[float] = None
    month: Optional[str] = None  # short label, e.g. "Jan"


class Budget(BudgetCreate):
    id: str
