import pytest
import pytest_asyncio

from budgets.budget_model import BudgetCreate
from budgets.budget_repo import BudgetRepo
from repositories.record_repo import StorageError
from transactions.transaction_model import TransactionCreate
from transactions.transaction_repo import TransactionRepo


@pytest_asyncio.fixture
async def txn_repo(fake_db):
    yield TransactionRepo(fake_db)


@pytest_asyncio.fixture
async def budget_repo(fake_db):
    yield BudgetRepo(fake_db)


@pytest.mark.asyncio
async def test_insert_assigns_id_and_keeps_fields(txn_repo: TransactionRepo):
    fields = {"amount": 120.5, "description": "Groceries", "date": "2024-01-05", "category": "Food"}
    created = await txn_repo.insert(TransactionCreate(**fields))

    assert created.id
    assert ":" not in created.id
    assert created.model_dump(exclude={"id"}) == fields


@pytest.mark.asyncio
async def test_list_returns_insertion_order(txn_repo: TransactionRepo):
    first = await txn_repo.insert({"amount": 1, "description": "a", "date": "2024-01-01", "category": "Food"})
    second = await txn_repo.insert({"amount": 2, "description": "b", "date": "2024-02-01", "category": "Other"})

    listed = await txn_repo.list_all()
    assert [t.id for t in listed] == [first.id, second.id]


@pytest.mark.asyncio
async def test_insert_ignores_client_supplied_id(txn_repo: TransactionRepo):
    created = await txn_repo.insert({"id": "mine", "amount": 5, "description": "x", "date": "2024-03-01"})
    assert created.id != "mine"


@pytest.mark.asyncio
async def test_delete_removes_record(txn_repo: TransactionRepo):
    keep = await txn_repo.insert({"amount": 1, "description": "keep", "date": "2024-01-01", "category": "Food"})
    gone = await txn_repo.insert({"amount": 2, "description": "gone", "date": "2024-01-02", "category": "Food"})

    await txn_repo.delete(gone.id)

    ids = [t.id for t in await txn_repo.list_all()]
    assert gone.id not in ids
    assert ids == [keep.id]


@pytest.mark.asyncio
async def test_delete_missing_id_is_noop(txn_repo: TransactionRepo):
    await txn_repo.insert({"amount": 1, "description": "keep", "date": "2024-01-01", "category": "Food"})
    before = await txn_repo.list_all()

    await txn_repo.delete("does-not-exist")

    assert await txn_repo.list_all() == before


@pytest.mark.asyncio
async def test_budgets_allow_duplicates(budget_repo: BudgetRepo):
    payload = BudgetCreate(category="Food", amount=500, month="Jan")
    a = await budget_repo.insert(payload)
    b = await budget_repo.insert(payload)

    listed = await budget_repo.list_all()
    assert [x.id for x in listed] == [a.id, b.id]
    assert all(x.month == "Jan" and x.amount == 500 for x in listed)


@pytest.mark.asyncio
async def test_collections_are_independent(txn_repo: TransactionRepo, budget_repo: BudgetRepo):
    await budget_repo.insert({"category": "Food", "amount": 100, "month": "Feb"})
    assert await txn_repo.list_all() == []


@pytest.mark.asyncio
async def test_store_failures_raise_storage_error(broken_db):
    repo = TransactionRepo(broken_db)

    with pytest.raises(StorageError):
        await repo.insert({"amount": 1, "description": "x", "date": "2024-01-01"})
    with pytest.raises(StorageError):
        await repo.list_all()
    with pytest.raises(StorageError):
        await repo.delete("abc")
