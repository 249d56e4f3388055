"""
HTTP boundary for ledger-core: request validation, routing, error mapping.
"""

from ledger_api.app import create_app

__all__ = ["create_app"]
