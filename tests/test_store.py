"""
Tests for order stores: InMemoryOrderStore, SqlOrderStore, open_store.
"""

from dataclasses import replace

import pytest

from ledger_core import InMemoryOrderStore, OrderDraft, OrderNotFoundError, Side, SqlOrderStore, open_store
from ledger_core.errors import StoreError


def _draft(symbol="TCS", side=Side.BUY, quantity=10, price=100.0):
    return OrderDraft(side=side, ticker_symbol=symbol, quantity=quantity, price=price)


def test_insert_assigns_id_and_timestamps(store):
    with store.transaction() as txn:
        order = txn.insert(_draft())
    assert order.id
    assert order.created_at is not None
    assert order.updated_at is not None
    fetched = store.get_order(order.id)
    assert (fetched.id, fetched.side, fetched.ticker_symbol, fetched.quantity, fetched.price) == (
        order.id, Side.BUY, "TCS", 10, 100.0,
    )


def test_list_orders_insertion_order(store):
    with store.transaction() as txn:
        a = txn.insert(_draft("WIPRO"))
        b = txn.insert(_draft("AXIS"))
        c = txn.insert(_draft("WIPRO", Side.SELL, 5))
    assert [o.id for o in store.list_orders()] == [a.id, b.id, c.id]
    with store.transaction() as txn:
        assert [o.id for o in txn.orders_for("WIPRO")] == [a.id, c.id]
        assert txn.orders_for("INFY") == []


def test_rollback_on_exception(store):
    with store.transaction() as txn:
        kept = txn.insert(_draft())
    with pytest.raises(RuntimeError):
        with store.transaction() as txn:
            txn.insert(_draft("AXIS"))
            txn.delete(kept.id)
            raise RuntimeError("boom")
    assert [o.id for o in store.list_orders()] == [kept.id]


def test_writes_visible_inside_transaction(store):
    with store.transaction() as txn:
        order = txn.insert(_draft())
        assert txn.get(order.id) is not None
        assert len(txn.all_orders()) == 1


def test_replace_updates_fields(store):
    with store.transaction() as txn:
        order = txn.insert(_draft())
    with store.transaction() as txn:
        stored = txn.replace(replace(order, side=Side.SELL, ticker_symbol="AXIS", quantity=3, price=50.0))
    assert stored.side == Side.SELL
    assert stored.ticker_symbol == "AXIS"
    assert stored.quantity == 3
    assert stored.price == 50.0
    assert stored.created_at is not None
    assert store.get_order(order.id).ticker_symbol == "AXIS"


def test_delete_returns_removed_order(store):
    with store.transaction() as txn:
        order = txn.insert(_draft())
    with store.transaction() as txn:
        removed = txn.delete(order.id)
    assert removed.id == order.id
    assert store.get_order(order.id) is None
    assert store.list_orders() == []


def test_missing_order(store):
    assert store.get_order("missing") is None
    with pytest.raises(OrderNotFoundError):
        with store.transaction() as txn:
            txn.delete("missing")


# --- open_store ---


def test_open_store_memory():
    assert isinstance(open_store("memory://"), InMemoryOrderStore)


def test_open_store_sqlite_file(tmp_path):
    url = f"sqlite:///{tmp_path / 'ledger.db'}"
    s = open_store(url)
    assert isinstance(s, SqlOrderStore)
    with s.transaction() as txn:
        order = txn.insert(_draft())
    s.close()

    reopened = open_store(url)
    assert [o.id for o in reopened.list_orders()] == [order.id]
    reopened.close()


def test_open_store_bad_url():
    with pytest.raises(StoreError):
        open_store("sqlite:////nonexistent-dir/for/sure/ledger.db")


def test_memory_transactions_do_not_nest():
    s = InMemoryOrderStore()
    with s.transaction():
        assert not s._lock.acquire(blocking=False)
    assert s._lock.acquire(blocking=False)
    s._lock.release()


def test_sql_store_oversized_quantity_is_store_error():
    s = SqlOrderStore("sqlite://")
    with pytest.raises(StoreError):
        with s.transaction() as txn:
            txn.insert(_draft(quantity=2**64))
    assert s.list_orders() == []
    s.close()
