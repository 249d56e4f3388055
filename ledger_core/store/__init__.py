"""
Order store: abstraction, in-memory adapter, SQL adapter.

open_store(uri) picks the adapter from a configuration URI.
"""

from ledger_core.store.base import OrderStore, OrderTransaction
from ledger_core.store.memory import InMemoryOrderStore
from ledger_core.store.sql import SqlOrderStore

MEMORY_URI = "memory://"


def open_store(uri: str) -> OrderStore:
    """memory:// for an in-memory store; any other value is a SQLAlchemy URL."""
    if uri == MEMORY_URI:
        return InMemoryOrderStore()
    return SqlOrderStore(uri)


__all__ = [
    "MEMORY_URI",
    "OrderStore",
    "OrderTransaction",
    "InMemoryOrderStore",
    "SqlOrderStore",
    "open_store",
]
