from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Type, TypeVar

from pydantic import BaseModel
from surrealdb import AsyncSurreal


logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class StorageError(Exception):
    """Raised when the document store cannot complete a read or write."""


class RecordRepo(Generic[RecordT]):
    """
    Insert/list access to one SurrealDB table.
    Records come back with their id reduced to the key part ("transaction:abc" -> "abc").
    """

    table: str
    model: Type[RecordT]

    def __init__(self, db: AsyncSurreal) -> None:
        self.db = db

    async def insert(self, fields: BaseModel | Dict[str, Any]) -> RecordT:
        data = fields.model_dump() if isinstance(fields, BaseModel) else dict(fields)
        data.pop("id", None)
        payload = {**data, "created_at": datetime.now(timezone.utc).isoformat()}
        try:
            record = await self.db.create(self.table, payload)
        except Exception as exc:
            logger.exception("Error creating record in '%s': %s", self.table, exc)
            raise StorageError(f"Error creating {self.table} record") from exc
        created = self.model(**self._normalize_record(record))
        logger.info("Created %s %s", self.table, created.id)  # type: ignore[attr-defined]
        return created

    async def list_all(self) -> List[RecordT]:
        query = f"SELECT * FROM {self.table} ORDER BY created_at ASC;"
        try:
            rows = await self.db.query(query)
        except Exception as exc:
            logger.exception("Error listing '%s': %s", self.table, exc)
            raise StorageError(f"Error listing {self.table} records") from exc
        return [self.model(**self._normalize_record(row)) for row in rows or []]

    def _normalize_record(self, record: Dict[str, Any]) -> Dict[str, Any]:
        if "id" in record:
            record = {**record, "id": str(record["id"]).split(":", 1)[-1]}
        return record
