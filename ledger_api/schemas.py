"""
Request models for the HTTP boundary and JSON shapes of responses.

Field-format rules live here; the core assumes well-formed input.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ledger_core.order import Order, OrderDraft, OrderPatch, Side
from ledger_core.queries import PortfolioEntry, TradeGroup

# largest quantity a single order may carry
MAX_QUANTITY = 10**12


def _check_symbol(value: str) -> str:
    value = value.strip()
    if not value or value != value.upper():
        raise ValueError("tickerSymbol must be a non-empty upper-case string")
    return value


class OrderCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, json_schema_extra={
        "example": {"type": "BUY", "tickerSymbol": "AXIS", "quantity": 100, "price": 129.3},
    })

    type: Side
    ticker_symbol: str = Field(alias="tickerSymbol")
    quantity: int = Field(ge=1, le=MAX_QUANTITY)
    price: float = Field(ge=0, allow_inf_nan=False)

    @field_validator("ticker_symbol")
    @classmethod
    def _symbol(cls, value: str) -> str:
        return _check_symbol(value)

    def to_draft(self) -> OrderDraft:
        return OrderDraft(side=self.type, ticker_symbol=self.ticker_symbol, quantity=self.quantity, price=self.price)


class OrderUpdateRequest(BaseModel):
    """Any subset of the order fields. Omitted or null fields are left unchanged."""

    model_config = ConfigDict(populate_by_name=True)

    type: Side | None = None
    ticker_symbol: str | None = Field(default=None, alias="tickerSymbol")
    quantity: int | None = Field(default=None, ge=1, le=MAX_QUANTITY)
    price: float | None = Field(default=None, ge=0, allow_inf_nan=False)

    @field_validator("ticker_symbol")
    @classmethod
    def _symbol(cls, value: str | None) -> str | None:
        return None if value is None else _check_symbol(value)

    def to_patch(self) -> OrderPatch:
        return OrderPatch(side=self.type, ticker_symbol=self.ticker_symbol, quantity=self.quantity, price=self.price)


def order_payload(order: Order) -> dict[str, Any]:
    return {
        "id": order.id,
        "type": order.side.value,
        "tickerSymbol": order.ticker_symbol,
        "quantity": order.quantity,
        "price": order.price,
        "createdAt": order.created_at.isoformat() if order.created_at else None,
        "updatedAt": order.updated_at.isoformat() if order.updated_at else None,
    }


def trades_payload(groups: list[TradeGroup]) -> list[dict[str, Any]]:
    return [
        {
            "symbol": g.symbol,
            "orders": [{"id": t.id, "type": t.side.value, "quantity": t.quantity, "price": t.price} for t in g.orders],
        }
        for g in groups
    ]


def portfolio_payload(entries: list[PortfolioEntry]) -> list[dict[str, Any]]:
    return [{"symbol": e.symbol, "quantity": e.quantity, "averagePrice": e.average_price} for e in entries]
