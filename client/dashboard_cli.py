from __future__ import annotations

import argparse
import json

from client.api_client import FinanceApiClient
from client.state import FinanceState
from client.view import render_dashboard
from settings.config import settings
from settings.logging_config import configure_logging


def main() -> None:
    parser = argparse.ArgumentParser(description="Fetch transactions and budgets and write the finance dashboard as HTML")
    parser.add_argument("--api-base", default=None, help=f"API base URL (default: {settings.API_BASE})")
    parser.add_argument("--out", default="dashboard.html", help="Output HTML path")
    args = parser.parse_args()

    configure_logging(settings.LOG_LEVEL)
    state = FinanceState(FinanceApiClient(base_url=args.api_base))
    state.load()

    with open(args.out, "w", encoding="utf-8") as f:
        f.write(render_dashboard(state))

    print(json.dumps({
        "out": args.out,
        "transactions": len(state.transactions),
        "budgets": len(state.budgets),
    }))


if __name__ == "__main__":
    main()
