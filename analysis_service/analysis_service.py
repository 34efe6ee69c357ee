from __future__ import annotations

import operator
import warnings
from datetime import datetime
from functools import lru_cache, reduce
from typing import Any, Dict, Iterable, List, Mapping, Union

import pandas as pd
from pydantic import BaseModel

from schemas.category import CATEGORIES


MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
INVALID_DATE = "Invalid Date"

Record = Union[BaseModel, Mapping[str, Any]]


def _as_dict(record: Record) -> Dict[str, Any]:
  if isinstance(record, BaseModel):
    return record.model_dump()
  return dict(record)


def _sum_in_order(values: Iterable[float]) -> float:
  # Plain left-to-right addition; groupby().sum() compensates and can differ in the last bits.
  return reduce(operator.add, values, 0.0)


class AnalysisService():
  """
  Chart and comparison data derived from in-memory transactions and budgets.
  Pure: no I/O, same input gives the same output.
  """

  def __init__(self) -> None:
    pass

  def month_label(self, value: Any) -> str:
    """
    Short English month name for a date string ("2024-01-05" -> "Jan").
    Independent of the process locale. Unparseable dates give "Invalid Date".
    """
    # ISO dates (what the form sends) parse directly, including years pandas cannot hold.
    try:
      return MONTH_ABBR[datetime.fromisoformat(str(value).replace("Z", "+00:00")).month - 1]
    except ValueError:
      pass
    with warnings.catch_warnings():
      warnings.simplefilter("ignore", UserWarning)
      ts = pd.to_datetime(value, errors="coerce")
    if ts is None or pd.isna(ts):
      return INVALID_DATE
    return MONTH_ABBR[ts.month - 1]

  def transactions_to_dataframe(self, transactions: Iterable[Record]) -> pd.DataFrame:
    rows = [_as_dict(t) for t in transactions]
    df = pd.DataFrame(rows, columns=["id", "amount", "description", "date", "category"])
    df["amount"] = pd.to_numeric(df["amount"], errors="coerce").fillna(0.0).astype("float64")
    df["month"] = df["date"].map(self.month_label).astype("object")
    return df

  def monthly_totals(self, transactions: Iterable[Record]) -> List[Dict[str, Any]]:
    # Months appear in first-occurrence order; months without transactions are omitted.
    df = self.transactions_to_dataframe(transactions)
    if df.empty:
      return []
    agg = df.groupby("month", sort=False)["amount"].agg(_sum_in_order).reset_index()
    agg = agg.rename(columns={"amount": "total"})
    return agg.to_dict(orient="records")

  def category_totals(self, transactions: Iterable[Record]) -> List[Dict[str, Any]]:
    # All five categories, declared order, zero when nothing matches.
    df = self.transactions_to_dataframe(transactions)
    sums = df.groupby("category")["amount"].agg(_sum_in_order).reindex(CATEGORIES, fill_value=0.0)
    return [{"name": name, "value": float(value)} for name, value in sums.items()]

  def compare_to_budget(self, transactions: Iterable[Record], budgets: Iterable[Record]) -> List[Dict[str, Any]]:
    """
    One row per budget record, in budget order, with the amount spent in the
    same category and month. Month labels must match exactly; a mismatch gives spent=0.
    """
    df = self.transactions_to_dataframe(transactions)
    grouped = df.groupby(["category", "month"])["amount"].agg(_sum_in_order)
    spent_by_key = {key: float(total) for key, total in grouped.items()}

    rows: List[Dict[str, Any]] = []
    for budget in budgets:
      b = _as_dict(budget)
      category = b.get("category")
      month = b.get("month")
      rows.append({
        "category": category,
        "month": month,
        "budget": b.get("amount"),
        "spent": spent_by_key.get((category, month), 0.0),
      })
    return rows


@lru_cache(maxsize=1)
def get_analysis_service() -> "AnalysisService":
  return AnalysisService()
