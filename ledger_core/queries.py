"""
Query service: read-only projections of the order log.

Trades grouped by symbol, the current portfolio, and projected returns against
a fixed reference price. Each call aggregates a fresh store snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ledger_core.holdings import compute_holdings, orders_frame
from ledger_core.order import Side
from ledger_core.store.base import OrderStore

REFERENCE_PRICE = 100.0


@dataclass(frozen=True)
class TradeEntry:
    id: str
    side: Side
    quantity: int
    price: float


@dataclass(frozen=True)
class TradeGroup:
    """All orders ever placed for one symbol, in insertion order."""

    symbol: str
    orders: list[TradeEntry] = field(default_factory=list)


@dataclass(frozen=True)
class PortfolioEntry:
    """A symbol currently held: net quantity and average BUY price."""

    symbol: str
    quantity: int
    average_price: float


class QueryService:
    """Stateless aggregation over an OrderStore."""

    def __init__(self, store: OrderStore, *, reference_price: float = REFERENCE_PRICE) -> None:
        self.store = store
        self.reference_price = reference_price

    def get_trades(self) -> list[TradeGroup]:
        """Every symbol with its orders, including symbols whose position is now zero."""
        df = orders_frame(self.store.list_orders())
        return [
            TradeGroup(
                symbol=str(symbol),
                orders=[
                    TradeEntry(id=row.id, side=Side(row.side), quantity=int(row.quantity), price=float(row.price))
                    for row in group.itertuples(index=False)
                ],
            )
            for symbol, group in df.groupby("ticker_symbol", sort=False)
        ]

    def get_portfolio(self) -> list[PortfolioEntry]:
        """Symbols with a non-zero net quantity."""
        return [
            PortfolioEntry(symbol=h.ticker_symbol, quantity=h.quantity, average_price=h.average_price)
            for h in compute_holdings(self.store.list_orders())
            if h.quantity != 0
        ]

    def get_returns(self) -> float:
        """
        Sum over all symbols of (reference_price - average_price) * quantity.
        Zero-quantity symbols contribute nothing; 0.0 when there are no orders.
        """
        return float(
            sum((self.reference_price - h.average_price) * h.quantity for h in compute_holdings(self.store.list_orders()))
        )
