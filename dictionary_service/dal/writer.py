# dictionary_service/dal/writer.py
from __future__ import annotations

import logging
from typing import Any, Dict, Tuple

from bson.errors import BSONError
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from dictionary_service.errors import WriteError

log = logging.getLogger("dictionary_service.dal.writer")


async def upsert_if_absent(
    col: AsyncIOMotorCollection,
    filt: Dict[str, Any],
    doc: Dict[str, Any],
) -> Tuple[str, bool]:
    """
    Insert `doc` only if nothing matches `filt`; an existing match is left untouched.

    Returns (persisted_id, inserted). The id is always the one stored in the
    collection, so on a no-op the candidate `doc["_id"]` is NOT what comes back.
    """
    try:
        stored = await col.find_one_and_update(
            filt,
            {"$setOnInsert": doc},
            upsert=True,
            projection={"_id": 1},
            return_document=ReturnDocument.AFTER,
        )
    except DuplicateKeyError:
        # Two upserts raced on the unique index; the other writer won.
        try:
            stored = await col.find_one(filt, {"_id": 1})
        except PyMongoError as e:
            raise WriteError(f"{col.name}: re-read after duplicate key failed: {e}") from e
        if stored is None:
            raise WriteError(f"{col.name}: duplicate key but no document matches {filt!r}")
        log.debug("%s: lost upsert race for %r, using stored id %s", col.name, filt, stored["_id"])
        return str(stored["_id"]), False
    except (PyMongoError, BSONError) as e:
        raise WriteError(f"{col.name}: upsert failed for {filt!r}: {e}") from e

    if stored is None:
        raise WriteError(f"{col.name}: upsert returned no document for {filt!r}")

    persisted_id = str(stored["_id"])
    return persisted_id, persisted_id == str(doc.get("_id"))
