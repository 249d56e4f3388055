"""
Run the ledger API: python -m ledger_api

Reads LEDGER_* environment variables (see ledger_core.config).
"""

from __future__ import annotations

import logging

import uvicorn

from ledger_core.config import LedgerConfig

from ledger_api.app import create_app


def main() -> None:
    config = LedgerConfig.from_env()
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info("App is listening on %s:%s", config.host, config.port)
    uvicorn.run(create_app(config), host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
