from __future__ import annotations

import logging

from repositories.record_repo import RecordRepo, StorageError
from transactions.transaction_model import Transaction


logger = logging.getLogger(__name__)


class TransactionRepo(RecordRepo[Transaction]):
    table = "transaction"
    model = Transaction

    async def delete(self, transaction_id: str) -> None:
        # Deleting a missing record is a no-op in SurrealDB.
        query = "DELETE type::thing($table, $id);"
        try:
            await self.db.query(query, {"table": self.table, "id": transaction_id})
        except Exception as exc:
            logger.exception("Error deleting transaction %s: %s", transaction_id, exc)
            raise StorageError("Error deleting transaction record") from exc
        logger.info("Deleted transaction %s", transaction_id)
