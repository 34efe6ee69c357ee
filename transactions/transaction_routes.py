from __future__ import annotations

from typing import Dict, List

from fastapi import APIRouter, Depends
from surrealdb import AsyncSurreal

from settings.db import get_db
from transactions.transaction_model import Transaction, TransactionCreate
from transactions.transaction_repo import TransactionRepo


router = APIRouter(prefix="/transactions", tags=["transactions"])


def get_transaction_repo(db: AsyncSurreal = Depends(get_db)) -> TransactionRepo:
    return TransactionRepo(db)


@router.get("", response_model=List[Transaction])
async def list_transactions(repo: TransactionRepo = Depends(get_transaction_repo)) -> List[Transaction]:
    return await repo.list_all()


@router.post("", response_model=Transaction)
async def create_transaction(body: TransactionCreate, repo: TransactionRepo = Depends(get_transaction_repo)) -> Transaction:
    return await repo.insert(body)


@router.delete("/{transaction_id}")
async def delete_transaction(transaction_id: str, repo: TransactionRepo = Depends(get_transaction_repo)) -> Dict[str, bool]:
    await repo.delete(transaction_id)
    return {"success": True}
