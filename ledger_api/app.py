"""
FastAPI application: the HTTP boundary of the ledger.

Opens the order store on startup, closes it on shutdown, and exposes the
mutation engine and query service under /security.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import APIRouter, Depends, FastAPI, Request

from ledger_core import __version__
from ledger_core.config import LedgerConfig
from ledger_core.mutations import OrderMutationEngine
from ledger_core.queries import QueryService
from ledger_core.store import open_store

from ledger_api.errors import register_error_handlers
from ledger_api.schemas import (
    OrderCreateRequest,
    OrderUpdateRequest,
    order_payload,
    portfolio_payload,
    trades_payload,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/security", tags=["security"])


def get_mutations(request: Request) -> OrderMutationEngine:
    return request.app.state.mutations


def get_queries(request: Request) -> QueryService:
    return request.app.state.queries


@router.get("/test")
def test() -> dict[str, Any]:
    """Check that the API is running."""
    return {"message": "success"}


@router.post("/create")
def create_order(body: OrderCreateRequest, mutations: OrderMutationEngine = Depends(get_mutations)) -> dict[str, Any]:
    """Create a new order. A SELL must be covered by current holdings."""
    return {"message": order_payload(mutations.create_order(body.to_draft()))}


@router.patch("/update/{order_id}")
def update_order(
    order_id: str,
    body: OrderUpdateRequest,
    mutations: OrderMutationEngine = Depends(get_mutations),
) -> dict[str, Any]:
    """Update any subset of an existing order's fields."""
    return {"message": order_payload(mutations.update_order(order_id, body.to_patch()))}


@router.delete("/delete/{order_id}")
def delete_order(order_id: str, mutations: OrderMutationEngine = Depends(get_mutations)) -> dict[str, Any]:
    """Delete an existing order and return it."""
    return {"message": order_payload(mutations.delete_order(order_id))}


@router.get("/getTrades")
def get_trades(queries: QueryService = Depends(get_queries)) -> dict[str, Any]:
    """All securities with their respective orders."""
    return {"message": trades_payload(queries.get_trades())}


@router.get("/getPortfolio")
def get_portfolio(queries: QueryService = Depends(get_queries)) -> dict[str, Any]:
    """Securities currently held, with quantity and average price."""
    return {"message": portfolio_payload(queries.get_portfolio())}


@router.get("/getReturns")
def get_returns(queries: QueryService = Depends(get_queries)) -> dict[str, Any]:
    """Projected returns of the portfolio at the reference price."""
    return {"message": queries.get_returns()}


def create_app(config: LedgerConfig | None = None) -> FastAPI:
    """Build the application. Configuration defaults to the environment."""
    cfg = config or LedgerConfig.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        store = open_store(cfg.database_uri)
        app.state.store = store
        app.state.mutations = OrderMutationEngine(store)
        app.state.queries = QueryService(store, reference_price=cfg.reference_price)
        logger.info("Ledger API started (store=%s)", type(store).__name__)
        try:
            yield
        finally:
            store.close()
            logger.info("Ledger API stopped")

    app = FastAPI(title="Security", version=__version__, lifespan=lifespan)
    register_error_handlers(app)
    app.include_router(router)
    return app
