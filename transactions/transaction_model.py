from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class TransactionCreate(BaseModel):
    # Every field is optional: the API stores whatever the client sends.
    amount: Optional[float] = None
    description: Optional[str] = None
    date: Optional[str] = None
    category: Optional[str] = None


class Transaction(TransactionCreate):
    id: str
