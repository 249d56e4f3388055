"""
Portfolio report: print a plain-text summary of holdings and returns.
"""

from __future__ import annotations

from ledger_core.queries import PortfolioEntry, QueryService


def print_report(queries: QueryService) -> list[PortfolioEntry]:
    """
    Print held symbols with quantity and average price, then total returns.

    Returns
    -------
    list of PortfolioEntry
        The portfolio that was printed.
    """
    portfolio = queries.get_portfolio()
    print("--- Portfolio ---")
    if not portfolio:
        print("(no holdings)")
    for entry in portfolio:
        print(f"{entry.symbol:<10} qty={entry.quantity:>8}  avg={entry.average_price:,.2f}")
    print(f"Returns @ {queries.reference_price:,.2f}: {queries.get_returns():,.2f}")
    print("-----------------")
    return portfolio
