"""
Order store abstraction.

OrderStore ABC: transaction, list_orders, get_order, close.
Every read-validate-write sequence runs inside one transaction; transactions on
a store are serialized, so holdings read inside a transaction cannot go stale
before its write commits.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from ledger_core.order import Order, OrderDraft


class OrderTransaction(ABC):
    """
    View of the store inside one transaction. Writes are visible to later reads
    of the same transaction and to nobody else until commit.
    """

    @abstractmethod
    def get(self, order_id: str) -> Order | None:
        """Order with order_id, or None."""
        ...

    @abstractmethod
    def orders_for(self, ticker_symbol: str) -> list[Order]:
        """Orders for ticker_symbol in insertion order."""
        ...

    @abstractmethod
    def all_orders(self) -> list[Order]:
        """Every order in insertion order."""
        ...

    @abstractmethod
    def insert(self, draft: OrderDraft) -> Order:
        """Persist a new order. Assigns id and timestamps."""
        ...

    @abstractmethod
    def replace(self, order: Order) -> Order:
        """Overwrite the stored order with the same id. Refreshes updated_at."""
        ...

    @abstractmethod
    def delete(self, order_id: str) -> Order:
        """Remove an order permanently and return it."""
        ...


class OrderStore(ABC):
    """
    Durable collection of orders keyed by id, queryable by ticker symbol.
    Implementations: InMemoryOrderStore, SqlOrderStore.
    """

    @abstractmethod
    def transaction(self) -> AbstractContextManager[OrderTransaction]:
        """
        Open a serialized transaction. Commits when the block exits normally;
        rolls back and re-raises on any exception. The underlying resource is
        released exactly once on every exit path.
        """
        ...

    def list_orders(self) -> list[Order]:
        """Snapshot of every order in insertion order."""
        with self.transaction() as txn:
            return txn.all_orders()

    def get_order(self, order_id: str) -> Order | None:
        """Order with order_id, or None."""
        with self.transaction() as txn:
            return txn.get(order_id)

    def close(self) -> None:
        """Release connections. The store must not be used afterwards."""
