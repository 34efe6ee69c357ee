from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from settings.config import settings


logger = logging.getLogger(__name__)


class FinanceApiClient:
    """Thin wrapper over the /transactions and /budgets endpoints."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.base_url = (base_url or settings.API_BASE).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _request(self, method: str, path: str, payload: Optional[dict] = None) -> Any:
        r = self.session.request(method, self._url(path), json=payload, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def list_transactions(self) -> List[Dict[str, Any]]:
        return self._request("GET", "transactions")

    def create_transaction(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "transactions", fields)

    def delete_transaction(self, transaction_id: str) -> Dict[str, Any]:
        return self._request("DELETE", f"transactions/{transaction_id}")

    def list_budgets(self) -> List[Dict[str, Any]]:
        return self._request("GET", "budgets")

    def create_budget(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "budgets", fields)
