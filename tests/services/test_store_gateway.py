"""SqlStoreGateway — behaviour against a real (in-memory SQLite) store."""

from datetime import date
from decimal import Decimal

import pytest

from warehouse_api.core.domain_types import EntityId, PageWindow
from warehouse_api.core.errors import ConcurrencyError, ConstraintViolationError
from warehouse_api.models import Category, Product
from warehouse_api.infrastructure.store_gateway import SqlStoreGateway


def _categories(db) -> SqlStoreGateway:
    return SqlStoreGateway(db, Category, ("name",))


def _product_values(category_id: int) -> dict:
    return {
        "name": "Tonic", "category_id": category_id, "brand": "Bitter",
        "volume": Decimal("0.33"), "price": Decimal("0.99"),
        "production_date": date(2026, 5, 1), "expiration_date": date(2027, 5, 1),
        "quantity": 4,
    }


async def test_insert_assigns_sequential_ids(test_db):
    store = _categories(test_db)
    first = await store.insert({"name": "One"})
    second = await store.insert({"name": "Two"})
    assert (first.id, second.id) == (1, 2)
    assert first.is_active is True


async def test_find_by_id_absent_is_none(test_db):
    assert await _categories(test_db).find_by_id(EntityId(1)) is None


async def test_list_page_orders_by_key_and_windows(test_db):
    store = _categories(test_db)
    for name in ("c", "a", "b"):
        await store.insert({"name": name})

    rows = await store.list_page(PageWindow(offset=1, limit=5))
    assert [r.name for r in rows] == ["a", "b"]


async def test_list_page_search_escapes_like_wildcards(test_db):
    store = _categories(test_db)
    await store.insert({"name": "snake_case"})
    await store.insert({"name": "snakeXcase"})

    rows = await store.list_page(PageWindow(offset=0, limit=10), "e_c")
    assert [r.name for r in rows] == ["snake_case"]


async def test_replace_overwrites_row(test_db):
    store = _categories(test_db)
    row = await store.insert({"name": "Old", "description": "keep?"})

    await store.replace(EntityId(row.id), {"name": "New", "description": None})

    reloaded = await store.find_by_id(EntityId(row.id))
    assert reloaded.name == "New"
    assert reloaded.description is None


async def test_replace_missing_row_raises_concurrency_error(test_db):
    with pytest.raises(ConcurrencyError):
        await _categories(test_db).replace(EntityId(8), {"name": "Nobody"})


async def test_delete_reports_whether_a_row_was_removed(test_db):
    store = _categories(test_db)
    row = await store.insert({"name": "Short lived"})

    assert await store.delete(EntityId(row.id)) is True
    assert await store.delete(EntityId(row.id)) is False
    assert await store.exists(EntityId(row.id)) is False


async def test_product_insert_with_unknown_category_is_constraint_violation(test_db):
    products = SqlStoreGateway(test_db, Product, ("name", "brand"))
    with pytest.raises(ConstraintViolationError):
        await products.insert(_product_values(category_id=99))


async def test_product_reads_load_category(test_db):
    category = await _categories(test_db).insert({"name": "Mixers"})
    products = SqlStoreGateway(test_db, Product, ("name", "brand"))

    product = await products.insert(_product_values(category.id))

    assert product.category.name == "Mixers"
    assert product.price == Decimal("0.99")


async def test_session_usable_after_constraint_violation(test_db):
    products = SqlStoreGateway(test_db, Product, ("name", "brand"))
    with pytest.raises(ConstraintViolationError):
        await products.insert(_product_values(category_id=99))

    category = await _categories(test_db).insert({"name": "Recovered"})
    assert category.id == 1


async def test_missed_writes_leave_loaded_rows_usable(test_db):
    store = _categories(test_db)
    row = await store.insert({"name": "Loaded"})

    assert await store.delete(EntityId(row.id + 1)) is False
    with pytest.raises(ConcurrencyError):
        await store.replace(EntityId(row.id + 1), {"name": "Nobody"})

    assert row.name == "Loaded"
    assert await store.exists(EntityId(row.id)) is True
