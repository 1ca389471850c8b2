# dictionary_service/seeds/ledger.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Dict, List, Optional, Protocol, Sequence

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError, PyMongoError

from dictionary_service.db.mongodb import SEEDS
from dictionary_service.errors import LedgerError, SeedingError, WriteError
from dictionary_service.models import SeedRecord
from dictionary_service.seeds.identity import IdentityMap
from dictionary_service.seeds.operations import Operation, run_operations

log = logging.getLogger("dictionary_service.seeds.ledger")

SeedRun = Callable[[AsyncIOMotorDatabase, IdentityMap], Awaitable[Any]]


@dataclass(frozen=True)
class SeedUnit:
    """
    One named, idempotent batch of bootstrap writes. `run` receives the
    identity map for this pass; it is never shared between units.
    """
    id: str
    description: str
    run: SeedRun


def operation_seed(
    seed_id: str,
    description: str,
    operations: Sequence[Operation],
    *,
    allow_root_fallback: bool = False,
    actor: str = "system",
) -> SeedUnit:
    """Build a seed unit that executes a precompiled, ordered operation list."""
    ops = tuple(operations)

    async def _run(db: AsyncIOMotorDatabase, ids: IdentityMap) -> Dict[str, int]:
        return await run_operations(
            db, ops, ids, allow_root_fallback=allow_root_fallback, actor=actor
        )

    return SeedUnit(id=seed_id, description=description, run=_run)


class SeedTracker(Protocol):
    async def has_run(self, seed_id: str) -> bool: ...

    async def mark_run(self, record: SeedRecord) -> None: ...


class MongoSeedTracker:
    """
    Ledger of applied seed units, collection '_seeds', one document per unit id.
    """

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self.col = db[SEEDS]

    async def has_run(self, seed_id: str) -> bool:
        try:
            doc = await self.col.find_one({"_id": seed_id}, {"_id": 1})
        except PyMongoError as e:
            raise LedgerError(f"failed to check seed status: {e}", unit_id=seed_id) from e
        return doc is not None

    async def get(self, seed_id: str) -> Optional[SeedRecord]:
        try:
            doc = await self.col.find_one({"_id": seed_id})
        except PyMongoError as e:
            raise LedgerError(f"failed to read seed record: {e}", unit_id=seed_id) from e
        return SeedRecord.model_validate(doc) if doc else None

    async def mark_run(self, record: SeedRecord) -> None:
        try:
            await self.col.insert_one(record.model_dump(by_alias=True))
        except DuplicateKeyError:
            # Another process finished the same unit first; the ledger already says "applied".
            log.warning("seed %s already recorded by another runner", record.id)
        except PyMongoError as e:
            raise LedgerError(f"failed to mark seed as run: {e}", unit_id=record.id) from e


async def apply_seeds(
    db: AsyncIOMotorDatabase,
    tracker: SeedTracker,
    seeds: Sequence[SeedUnit],
    application: str,
) -> Dict[str, List[str]]:
    """
    Apply every seed unit that has no ledger record yet, in list order.

    Fail-fast: the first error stops the loop and is re-raised with
    `unit_id` set; anything that is not a SeedingError arrives wrapped in a
    WriteError. No record is written for a failed unit, so it is attempted
    again on the next call. Writes it already made are kept.
    """
    applied: List[str] = []
    skipped: List[str] = []

    for seed in seeds:
        try:
            if await tracker.has_run(seed.id):
                skipped.append(seed.id)
                log.debug("seed %s already applied, skipping", seed.id)
                continue

            log.info("applying seed %s (%s)", seed.id, seed.description)
            result = await seed.run(db, IdentityMap())

            await tracker.mark_run(
                SeedRecord(
                    _id=seed.id,
                    application=application,
                    description=seed.description,
                    applied_at=datetime.now(timezone.utc),
                )
            )
        except SeedingError as e:
            e.unit_id = seed.id
            log.error("seed %s failed: %s", seed.id, e.message)
            raise
        except PyMongoError as e:
            log.error("seed %s failed: %s", seed.id, e)
            raise WriteError(str(e), unit_id=seed.id) from e
        except Exception as e:
            log.exception("seed %s failed", seed.id)
            raise WriteError(f"{type(e).__name__}: {e}", unit_id=seed.id) from e

        applied.append(seed.id)
        log.info("seed %s applied: %s", seed.id, result)

    return {"applied": applied, "skipped": skipped}
