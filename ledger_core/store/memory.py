"""
In-memory order store: process-local, non-durable.

Each transaction works on a copy of the order table and swaps it in on commit.
A store-wide lock serializes transactions.
"""

from __future__ import annotations

import logging
import threading
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import replace
from datetime import datetime, timezone

from ledger_core.errors import OrderNotFoundError
from ledger_core.order import Order, OrderDraft
from ledger_core.store.base import OrderStore, OrderTransaction

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class _MemoryTransaction(OrderTransaction):
    def __init__(self, orders: dict[str, Order]) -> None:
        # dict preserves insertion order; Order is frozen so a shallow copy isolates writes.
        self.orders = dict(orders)

    def get(self, order_id: str) -> Order | None:
        return self.orders.get(order_id)

    def orders_for(self, ticker_symbol: str) -> list[Order]:
        return [o for o in self.orders.values() if o.ticker_symbol == ticker_symbol]

    def all_orders(self) -> list[Order]:
        return list(self.orders.values())

    def insert(self, draft: OrderDraft) -> Order:
        ts = _now()
        order = Order(
            id=uuid.uuid4().hex,
            side=draft.side,
            ticker_symbol=draft.ticker_symbol,
            quantity=draft.quantity,
            price=draft.price,
            created_at=ts,
            updated_at=ts,
        )
        self.orders[order.id] = order
        return order

    def replace(self, order: Order) -> Order:
        current = self.orders.get(order.id)
        if current is None:
            raise OrderNotFoundError(order.id)
        stored = replace(order, created_at=current.created_at, updated_at=_now())
        self.orders[order.id] = stored
        return stored

    def delete(self, order_id: str) -> Order:
        try:
            return self.orders.pop(order_id)
        except KeyError:
            raise OrderNotFoundError(order_id) from None


class InMemoryOrderStore(OrderStore):
    """
    Order store held in a dict. Used for tests, examples and the default
    `memory://` configuration. Contents are lost when the process exits.
    """

    def __init__(self, orders: list[Order] | None = None) -> None:
        self._orders: dict[str, Order] = {o.id: o for o in orders or []}
        self._lock = threading.Lock()

    @contextmanager
    def transaction(self) -> Iterator[OrderTransaction]:
        with self._lock:
            txn = _MemoryTransaction(self._orders)
            try:
                yield txn
            except BaseException:
                logger.debug("In-memory transaction rolled back")
                raise
            self._orders = txn.orders
