# dictionary_service/seeds/cli.py
"""Apply pending dictionary seed units outside the HTTP service (deploy hooks, CI)."""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Optional

import click

from dictionary_service.config import settings
from dictionary_service.db.mongodb import close_client, get_db, init_indexes
from dictionary_service.errors import SeedingError
from dictionary_service.infra.logging import setup_logging
from dictionary_service.seeds import run_all_seeds

log = logging.getLogger("dictionary_service.seeds.cli")


async def _bootstrap() -> dict:
    db = get_db()
    try:
        await init_indexes(db)
        return await run_all_seeds(db)
    finally:
        await close_client()


@click.command()
@click.option("--log-level", type=str, default=None, help="Override LOG_LEVEL for this run")
def main(log_level: Optional[str]) -> None:
    """Ensure indexes and apply every seed unit missing from the ledger."""
    setup_logging(settings.service_name, level=log_level)
    try:
        result = asyncio.run(_bootstrap())
    except SeedingError as e:
        log.error("bootstrap aborted at seed %s: %s", e.unit_id or "-", e.message)
        click.echo(f"Seeding failed: {e}", err=True)
        sys.exit(1)

    click.echo(f"Applied {len(result['applied'])} seed(s), skipped {len(result['skipped'])}")


if __name__ == "__main__":
    main()
