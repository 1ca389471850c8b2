# dictionary_service/seeds/__init__.py
from __future__ import annotations

import logging
from typing import Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from dictionary_service.config import settings
from dictionary_service.db.mongodb import get_db
from dictionary_service.seeds import generated_dictionary
from dictionary_service.seeds.ledger import MongoSeedTracker, SeedUnit, apply_seeds, operation_seed

log = logging.getLogger("dictionary_service.seeds")


def get_dictionary_seeds() -> List[SeedUnit]:
    """
    Seed units in application order. New units are appended, never reordered:
    their ids are the ledger keys.
    """
    return [
        operation_seed(
            generated_dictionary.SEED_ID,
            generated_dictionary.SEED_DESCRIPTION,
            generated_dictionary.OPERATIONS,
            allow_root_fallback=(
                generated_dictionary.ALLOW_ROOT_FALLBACK or settings.seed_allow_root_fallback
            ),
            actor=settings.seed_actor,
        ),
    ]


async def run_all_seeds(db: Optional[AsyncIOMotorDatabase] = None) -> Dict[str, List[str]]:
    """
    Apply every dictionary seed unit that is not yet in the ledger.
    Errors propagate with `unit_id` set; callers decide whether to retry.
    """
    db = db if db is not None else get_db()
    result = await apply_seeds(
        db,
        MongoSeedTracker(db),
        get_dictionary_seeds(),
        settings.seed_application,
    )
    log.info(
        "[dictionary.seeds] applied=%d skipped=%d",
        len(result["applied"]), len(result["skipped"]),
    )
    return result
