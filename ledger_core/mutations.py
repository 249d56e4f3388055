"""
Order mutation engine: create, update and delete orders without ever letting a
symbol's net position go negative.

Each mutation reads holdings, validates and writes inside one store
transaction. A rejected mutation raises and the transaction rolls back.
"""

from __future__ import annotations

import logging

from ledger_core.errors import InsufficientSecuritiesError, InvalidOperationError, OrderNotFoundError
from ledger_core.holdings import net_quantity
from ledger_core.order import Order, OrderDraft, OrderPatch, Side
from ledger_core.store.base import OrderStore, OrderTransaction

logger = logging.getLogger(__name__)


def _holdings(txn: OrderTransaction, ticker_symbol: str) -> int:
    return net_quantity(txn.orders_for(ticker_symbol), ticker_symbol)


def _load(txn: OrderTransaction, order_id: str) -> Order:
    order = txn.get(order_id)
    if order is None:
        raise OrderNotFoundError(order_id)
    return order


class OrderMutationEngine:
    """
    Business rules for writes. BUYs only add to a position and are always
    accepted on creation; SELLs, edits and deletions are checked against the
    holdings visible inside the transaction.
    """

    def __init__(self, store: OrderStore) -> None:
        self.store = store

    def create_order(self, draft: OrderDraft) -> Order:
        """Persist a new order. A SELL larger than current holdings raises InsufficientSecuritiesError."""
        with self.store.transaction() as txn:
            if draft.side == Side.SELL:
                held = _holdings(txn, draft.ticker_symbol)
                if held < draft.quantity:
                    logger.info(
                        "Order rejected: SELL %s %s exceeds holdings %s",
                        draft.quantity,
                        draft.ticker_symbol,
                        held,
                    )
                    raise InsufficientSecuritiesError()
            order = txn.insert(draft)
        logger.info("Order created: id=%s %s %s %s @ %s", order.id, order.side.value, order.quantity, order.ticker_symbol, order.price)
        return order

    def update_order(self, order_id: str, patch: OrderPatch) -> Order:
        """
        Apply patch to an order. Raises OrderNotFoundError for an unknown id and
        InvalidOperationError when the edit would break a position.

        Checks run as independent gates against the holdings before the edit:
        a symbol move of a BUY, a BUY flipped to SELL and a quantity change are
        each guarded separately, then a resulting SELL must be covered by the
        holdings of its symbol excluding the order itself.
        """
        with self.store.transaction() as txn:
            order = _load(txn, order_id)
            updated = patch.resolve(order)

            before = _holdings(txn, order.ticker_symbol)
            after = _holdings(txn, updated.ticker_symbol)
            symbol_changed = order.ticker_symbol != updated.ticker_symbol
            if not symbol_changed:
                # order is still stored unmodified; take its own contribution out
                after -= order.signed_quantity

            if symbol_changed and order.side == Side.BUY and before < order.quantity:
                self._reject(order, "moving a BUY the position depends on")
            elif order.side != updated.side and order.side == Side.BUY and before < order.quantity + updated.quantity:
                self._reject(order, "flipping a BUY the position depends on")
            elif order.quantity != updated.quantity and (
                (order.side == Side.BUY and before < order.quantity - updated.quantity)
                or (order.side == Side.SELL and before < updated.quantity - order.quantity)
            ):
                self._reject(order, "quantity change exceeds holdings")

            if updated.side == Side.SELL and after < updated.quantity:
                self._reject(order, "resulting SELL exceeds holdings")

            result = txn.replace(updated)
        logger.info("Order updated: id=%s fields=%s", result.id, sorted(patch.fields()))
        return result

    def delete_order(self, order_id: str) -> Order:
        """
        Remove an order permanently and return it. Deleting a BUY larger than the
        current position of its symbol raises InvalidOperationError.
        """
        with self.store.transaction() as txn:
            order = _load(txn, order_id)
            if order.side == Side.BUY and order.quantity > _holdings(txn, order.ticker_symbol):
                self._reject(order, "deleting a BUY the position depends on")
            removed = txn.delete(order_id)
        logger.info("Order deleted: id=%s", removed.id)
        return removed

    @staticmethod
    def _reject(order: Order, reason: str) -> None:
        logger.info("Order %s blocked: %s", order.id, reason)
        raise InvalidOperationError()
