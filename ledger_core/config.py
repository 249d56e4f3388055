"""
Process configuration read from environment variables.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TypeVar

from ledger_core.queries import REFERENCE_PRICE
from ledger_core.store import MEMORY_URI

DATABASE_URI_ENV = "LEDGER_DATABASE_URI"
HOST_ENV = "LEDGER_HOST"
PORT_ENV = "LEDGER_PORT"
LOG_LEVEL_ENV = "LEDGER_LOG_LEVEL"
REFERENCE_PRICE_ENV = "LEDGER_REFERENCE_PRICE"

T = TypeVar("T")

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _parse(environ: Mapping[str, str], name: str, default: T, cast: Callable[[str], T]) -> T:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be a valid {cast.__name__}, got {raw!r}") from None


def _log_level(environ: Mapping[str, str]) -> str:
    level = (environ.get(LOG_LEVEL_ENV) or "INFO").strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"{LOG_LEVEL_ENV} must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
    return level


@dataclass(frozen=True)
class LedgerConfig:
    """Settings for the store connection and the HTTP process."""

    database_uri: str = MEMORY_URI
    host: str = "127.0.0.1"
    port: int = 3000
    log_level: str = "INFO"
    reference_price: float = REFERENCE_PRICE

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> LedgerConfig:
        env = os.environ if environ is None else environ
        return cls(
            database_uri=env.get(DATABASE_URI_ENV) or MEMORY_URI,
            host=env.get(HOST_ENV) or "127.0.0.1",
            port=_parse(env, PORT_ENV, 3000, int),
            log_level=_log_level(env),
            reference_price=_parse(env, REFERENCE_PRICE_ENV, REFERENCE_PRICE, float),
        )
