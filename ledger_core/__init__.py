"""
ledger-core: securities order ledger.

Records BUY/SELL orders, refuses any mutation that would leave a symbol with a
negative position, and derives portfolio summaries from the order log.
"""

__version__ = "0.1.0"

from ledger_core.order import Order, OrderDraft, OrderPatch, Side
from ledger_core.errors import (
    InsufficientSecuritiesError,
    InvalidOperationError,
    LedgerError,
    OrderNotFoundError,
    OrderRuleViolation,
    StoreError,
)
from ledger_core.store import InMemoryOrderStore, OrderStore, SqlOrderStore, open_store
from ledger_core.mutations import OrderMutationEngine
from ledger_core.queries import PortfolioEntry, QueryService, TradeEntry, TradeGroup
from ledger_core.config import LedgerConfig

__all__ = [
    "Order",
    "OrderDraft",
    "OrderPatch",
    "Side",
    "LedgerError",
    "OrderRuleViolation",
    "InsufficientSecuritiesError",
    "InvalidOperationError",
    "OrderNotFoundError",
    "StoreError",
    "OrderStore",
    "InMemoryOrderStore",
    "SqlOrderStore",
    "open_store",
    "OrderMutationEngine",
    "QueryService",
    "PortfolioEntry",
    "TradeEntry",
    "TradeGroup",
    "LedgerConfig",
]
