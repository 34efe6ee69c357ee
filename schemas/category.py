from __future__ import annotations

from enum import Enum
from typing import List


class Category(str, Enum):
    FOOD = "Food"
    TRANSPORT = "Transport"
    UTILITIES = "Utilities"
    ENTERTAINMENT = "Entertainment"
    OTHER = "Other"


# Declared order; drives form choices and category totals.
CATEGORIES: List[str] = [c.value for c in Category]
