# dictionary_service/main.py
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.responses import ORJSONResponse

from dictionary_service.config import settings
from dictionary_service.db.mongodb import close_client, get_db, init_indexes
from dictionary_service.infra.logging import setup_logging
from dictionary_service.seeds import run_all_seeds

log = logging.getLogger("dictionary_service.main")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    App lifespan:
      - configure logging
      - ensure Mongo indexes (natural-key uniqueness)
      - apply pending seed units; a failing unit aborts startup
      - close the Mongo client on shutdown
    """
    setup_logging(settings.service_name)
    log.info("%s starting up", settings.service_name)

    try:
        db = get_db()
        await init_indexes(db)
        log.info("Mongo indexes ensured (db=%s)", settings.mongo_db)

        if settings.seed_on_start:
            await run_all_seeds(db)
            log.info("Seeds executed (SEED_ON_START=true).")

        yield
    finally:
        try:
            await close_client()
            log.info("Mongo client closed")
        except Exception:
            log.warning("Error closing Mongo client", exc_info=True)

        log.info("%s shutdown complete", settings.service_name)


app = FastAPI(
    title="Dictionary Service",
    version="0.1.0",
    default_response_class=ORJSONResponse,
    lifespan=lifespan,
)


@app.get("/health")
async def health() -> dict:
    return {"status": "ok", "service": settings.service_name, "port": settings.app_port}
