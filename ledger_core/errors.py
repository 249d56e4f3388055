"""Exceptions raised by the ledger core."""


class LedgerError(Exception):
    """Base exception for ledger errors."""


class OrderRuleViolation(LedgerError):
    """A mutation would break the no-negative-position rule. Permanent for the given input."""


class InsufficientSecuritiesError(OrderRuleViolation):
    """A SELL exceeds the current holdings of its symbol."""

    def __init__(self, message: str = "Insufficient Securities") -> None:
        super().__init__(message)


class InvalidOperationError(OrderRuleViolation):
    """An update or delete would make a position negative."""

    def __init__(self, message: str = "Invalid Operation") -> None:
        super().__init__(message)


class OrderNotFoundError(LedgerError):
    """No order exists with the given id."""

    def __init__(self, order_id: str) -> None:
        super().__init__(f"Order not found: {order_id}")
        self.order_id = order_id


class StoreError(LedgerError):
    """The order store failed to read or write."""
