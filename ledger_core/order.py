"""
Order: the single persisted record of the ledger.

Immutable. Updates produce a replaced copy; the store owns the persisted form.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum


class Side(Enum):
    BUY = "BUY"
    SELL = "SELL"


@dataclass(frozen=True)
class OrderDraft:
    """User-supplied fields of a new order. Format-checked by the boundary layer."""

    side: Side
    ticker_symbol: str
    quantity: int
    price: float


@dataclass(frozen=True)
class Order:
    """A committed BUY or SELL of quantity units of ticker_symbol at price."""

    id: str
    side: Side
    ticker_symbol: str
    quantity: int
    price: float
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def signed_quantity(self) -> int:
        """+quantity for a BUY, -quantity for a SELL."""
        return self.quantity if self.side == Side.BUY else -self.quantity


PATCH_FIELDS = ("side", "ticker_symbol", "quantity", "price")


@dataclass(frozen=True)
class OrderPatch:
    """
    Partial update of an order. Each field is either present (a value) or
    absent (None); absent fields keep the value of the order being edited.
    """

    side: Side | None = None
    ticker_symbol: str | None = None
    quantity: int | None = None
    price: float | None = None

    def fields(self) -> dict[str, object]:
        """Present fields only."""
        return {name: getattr(self, name) for name in PATCH_FIELDS if getattr(self, name) is not None}

    def resolve(self, order: Order) -> Order:
        """Return the post-update order: present fields override, absent fields are kept."""
        return replace(order, **self.fields())
