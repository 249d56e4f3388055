"""
Tests for QueryService (trades, portfolio, returns) and the portfolio report.
"""

import pytest

from ledger_core import OrderDraft, PortfolioEntry, QueryService, Side
from ledger_core.report import print_report


def buy(engine, symbol, quantity, price):
    return engine.create_order(OrderDraft(side=Side.BUY, ticker_symbol=symbol, quantity=quantity, price=price))


def sell(engine, symbol, quantity, price):
    return engine.create_order(OrderDraft(side=Side.SELL, ticker_symbol=symbol, quantity=quantity, price=price))


# --- Empty ledger ---


def test_empty_ledger(queries):
    assert queries.get_trades() == []
    assert queries.get_portfolio() == []
    assert queries.get_returns() == 0


# --- get_portfolio ---


def test_portfolio_single_buy(engine, queries):
    buy(engine, "X", 10, 100.0)
    assert queries.get_portfolio() == [PortfolioEntry(symbol="X", quantity=10, average_price=100.0)]


def test_portfolio_average_price(engine, queries):
    buy(engine, "X", 10, 100.0)
    buy(engine, "X", 10, 200.0)
    [entry] = queries.get_portfolio()
    assert entry.quantity == 20
    assert entry.average_price == pytest.approx(150.0)


def test_portfolio_excludes_closed_positions(engine, queries):
    buy(engine, "X", 10, 100.0)
    sell(engine, "X", 10, 120.0)
    buy(engine, "Y", 5, 40.0)
    assert [e.symbol for e in queries.get_portfolio()] == ["Y"]


def test_sells_do_not_move_average_price(engine, queries):
    buy(engine, "X", 10, 100.0)
    sell(engine, "X", 4, 500.0)
    [entry] = queries.get_portfolio()
    assert entry.quantity == 6
    assert entry.average_price == pytest.approx(100.0)


# --- get_trades ---


def test_trades_keep_closed_symbols(engine, queries):
    b = buy(engine, "X", 10, 100.0)
    s = sell(engine, "X", 10, 120.0)
    [group] = queries.get_trades()
    assert group.symbol == "X"
    assert [(t.id, t.side, t.quantity, t.price) for t in group.orders] == [
        (b.id, Side.BUY, 10, 100.0),
        (s.id, Side.SELL, 10, 120.0),
    ]


def test_trades_grouped_by_symbol_in_insertion_order(engine, queries):
    a = buy(engine, "WIPRO", 1, 10.0)
    b = buy(engine, "AXIS", 2, 20.0)
    c = buy(engine, "WIPRO", 3, 30.0)
    groups = queries.get_trades()
    assert [g.symbol for g in groups] == ["WIPRO", "AXIS"]
    assert [t.id for t in groups[0].orders] == [a.id, c.id]
    assert [t.id for t in groups[1].orders] == [b.id]


# --- get_returns ---


def test_returns_single_buy(engine, queries):
    buy(engine, "X", 10, 90.0)
    assert queries.get_returns() == pytest.approx(100.0)


def test_returns_sum_over_symbols(engine, queries):
    buy(engine, "X", 10, 90.0)
    buy(engine, "Y", 2, 150.0)
    buy(engine, "Z", 5, 10.0)
    sell(engine, "Z", 5, 20.0)
    # (100-90)*10 + (100-150)*2 + closed Z contributes 0
    assert queries.get_returns() == pytest.approx(0.0)


def test_returns_custom_reference_price(engine, store):
    buy(engine, "X", 10, 90.0)
    assert QueryService(store, reference_price=95.0).get_returns() == pytest.approx(50.0)


def test_queries_idempotent(engine, queries):
    buy(engine, "X", 10, 90.0)
    buy(engine, "Y", 4, 120.0)
    sell(engine, "X", 3, 100.0)
    first = (queries.get_trades(), queries.get_portfolio(), queries.get_returns())
    second = (queries.get_trades(), queries.get_portfolio(), queries.get_returns())
    assert first == second


# --- print_report ---


def test_print_report(engine, queries, capsys):
    buy(engine, "TCS", 10, 90.0)
    portfolio = print_report(queries)
    out = capsys.readouterr().out
    assert portfolio == queries.get_portfolio()
    assert "TCS" in out
    assert "90.00" in out
    assert "100.00" in out


def test_print_report_empty(queries, capsys):
    assert print_report(queries) == []
    assert "(no holdings)" in capsys.readouterr().out
