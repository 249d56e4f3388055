"""
Holdings calculator: fold a set of orders into per-symbol positions.

Pure functions over orders. Net quantity is BUY minus SELL; average price is the
cost basis over BUY orders only. Callers pass a store snapshot (or the orders of
an open transaction); nothing here reads the store itself.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np
import pandas as pd

from ledger_core.order import Order, Side

ORDER_COLUMNS = ("id", "side", "ticker_symbol", "quantity", "price")
HOLDING_COLUMNS = ("quantity", "bought_quantity", "total_cost", "average_price")


@dataclass(frozen=True)
class Holding:
    """Position in one symbol derived from its order history."""

    ticker_symbol: str
    quantity: int
    bought_quantity: int
    total_cost: float
    average_price: float


def net_quantity(orders: Iterable[Order], ticker_symbol: str) -> int:
    """Signed sum of quantities for ticker_symbol. 0 if there are no orders for it."""
    return sum(o.signed_quantity for o in orders if o.ticker_symbol == ticker_symbol)


def orders_frame(orders: Sequence[Order]) -> pd.DataFrame:
    """One row per order, in the given (insertion) order."""
    rows = [
        {
            "id": o.id,
            "side": o.side.value,
            "ticker_symbol": o.ticker_symbol,
            "quantity": o.quantity,
            "price": o.price,
        }
        for o in orders
    ]
    return pd.DataFrame(rows, columns=list(ORDER_COLUMNS))


def holdings_frame(orders: Sequence[Order]) -> pd.DataFrame:
    """
    Aggregate orders per symbol.

    Parameters
    ----------
    orders : sequence of Order
        Orders in insertion order.

    Returns
    -------
    pd.DataFrame
        Indexed by ticker_symbol (order of first appearance) with columns
        quantity, bought_quantity, total_cost, average_price. A symbol with no
        BUY orders has average_price 0.0.
    """
    df = orders_frame(orders)
    if df.empty:
        empty = pd.DataFrame(columns=list(HOLDING_COLUMNS))
        empty.index.name = "ticker_symbol"
        return empty

    is_buy = (df["side"] == Side.BUY.value).to_numpy()
    # object dtype keeps Python ints; positions may exceed int64
    qty = np.array([o.quantity for o in orders], dtype=object)
    spend = df["quantity"].to_numpy(dtype=float) * df["price"].to_numpy(dtype=float)
    df = df.assign(
        quantity=np.where(is_buy, qty, -qty),
        bought_quantity=np.where(is_buy, qty, 0),
        total_cost=np.where(is_buy, spend, 0.0),
    )
    grouped = df.groupby("ticker_symbol", sort=False)[["quantity", "bought_quantity", "total_cost"]].sum()

    bought = grouped["bought_quantity"].to_numpy(dtype=float)
    cost = grouped["total_cost"].to_numpy(dtype=float)
    grouped["average_price"] = np.divide(cost, bought, out=np.zeros_like(cost), where=bought > 0)
    return grouped


def compute_holdings(orders: Sequence[Order]) -> list[Holding]:
    """Holdings for every symbol with at least one order, zero positions included."""
    frame = holdings_frame(orders)
    return [
        Holding(
            ticker_symbol=str(row.Index),
            quantity=int(row.quantity),
            bought_quantity=int(row.bought_quantity),
            total_cost=float(row.total_cost),
            average_price=float(row.average_price),
        )
        for row in frame.itertuples()
    ]
