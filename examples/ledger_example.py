"""
Ledger example: record orders, hit the position rules, print the portfolio.

Shows: InMemoryOrderStore, OrderMutationEngine, QueryService and the
plain-text report. Swap the store for SqlOrderStore("sqlite:///ledger.db") to
persist between runs.
"""

from __future__ import annotations

from ledger_core import (
    InMemoryOrderStore,
    InsufficientSecuritiesError,
    InvalidOperationError,
    OrderDraft,
    OrderMutationEngine,
    OrderPatch,
    QueryService,
    Side,
)
from ledger_core.report import print_report


def main() -> None:
    store = InMemoryOrderStore()
    engine = OrderMutationEngine(store)
    queries = QueryService(store)

    print("--- Buy TCS twice, sell part of it ---")
    first = engine.create_order(OrderDraft(side=Side.BUY, ticker_symbol="TCS", quantity=10, price=90.0))
    engine.create_order(OrderDraft(side=Side.BUY, ticker_symbol="TCS", quantity=10, price=110.0))
    sell = engine.create_order(OrderDraft(side=Side.SELL, ticker_symbol="TCS", quantity=15, price=120.0))
    print_report(queries)

    print("\n--- Rejected mutations ---")
    try:
        engine.create_order(OrderDraft(side=Side.SELL, ticker_symbol="WIPRO", quantity=5, price=100.0))
    except InsufficientSecuritiesError as exc:
        print(f"  SELL WIPRO: {exc}")
    try:
        engine.delete_order(first.id)
    except InvalidOperationError as exc:
        print(f"  delete BUY {first.id}: {exc}")

    print("\n--- Shrink the SELL, then delete the first BUY ---")
    engine.update_order(sell.id, OrderPatch(quantity=5))
    engine.delete_order(first.id)
    print_report(queries)

    print("\n--- Trades ---")
    for group in queries.get_trades():
        for trade in group.orders:
            print(f"  {group.symbol} {trade.side.value} {trade.quantity} @ {trade.price:.2f} ({trade.id})")


if __name__ == "__main__":
    main()
