"""
Shared fixtures: one store per adapter so rule tests run against both.
"""

import pytest

from ledger_core import InMemoryOrderStore, OrderMutationEngine, QueryService, SqlOrderStore


@pytest.fixture(params=["memory", "sqlite"])
def store(request):
    s = InMemoryOrderStore() if request.param == "memory" else SqlOrderStore("sqlite://")
    yield s
    s.close()


@pytest.fixture
def engine(store):
    return OrderMutationEngine(store)


@pytest.fixture
def queries(store):
    return QueryService(store)
