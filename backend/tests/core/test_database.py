import pytest
from sqlalchemy import inspect

from storefront import database


@pytest.mark.asyncio
async def test_create_and_drop_tables(db_engine, monkeypatch):
    """create_tables / drop_tables agissent sur le moteur du module database."""
    monkeypatch.setattr(database, "engine", db_engine)

    await database.drop_tables()
    async with db_engine.connect() as conn:
        assert await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names()) == []

    await database.create_tables()
    async with db_engine.connect() as conn:
        tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
    assert {"orders", "order_items", "products", "attribute_sets", "currencies"} <= set(tables)
