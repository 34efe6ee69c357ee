from __future__ import annotations

from typing import Iterable, List, Optional

from pydantic import BaseModel

from schemas.category import Category


class ValidationError(Exception):
    """A form is missing one or more required fields."""

    def __init__(self, missing: List[str]) -> None:
        self.missing = missing
        super().__init__(f"Missing required fields: {', '.join(missing)}")


def validate_required(form: BaseModel, required: Iterable[str]) -> None:
    """
    Raise ValidationError naming every required field that is empty.
    Falsy values (None, "", 0) count as empty.
    """
    missing = [name for name in required if not getattr(form, name)]
    if missing:
        raise ValidationError(missing)


class TransactionForm(BaseModel):
    amount: Optional[float] = None
    description: str = ""
    date: str = ""
    category: Category = Category.OTHER

    def validate_fields(self) -> None:
        validate_required(self, ("amount", "description", "date"))

    def to_payload(self) -> dict:
        return {
            "amount": self.amount,
            "description": self.description,
            "date": self.date,
            "category": self.category.value,
        }


class BudgetForm(BaseModel):
    category: Category = Category.FOOD
    amount: Optional[float] = None
    month: str = ""

    def validate_fields(self) -> None:
        validate_required(self, ("amount", "month"))

    def to_payload(self) -> dict:
        return {
            "category": self.category.value,
            "amount": self.amount,
            "month": self.month,
        }
