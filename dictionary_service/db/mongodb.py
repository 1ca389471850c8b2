# dictionary_service/db/mongodb.py
from __future__ import annotations

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING

from dictionary_service.config import settings

SETS = "sets"
OPTIONS = "options"
SEEDS = "_seeds"

_client: Optional[AsyncIOMotorClient] = None


def get_client() -> AsyncIOMotorClient:
    """
    Singleton Motor client for the dictionary-service.
    """
    global _client
    if _client is None:
        _client = AsyncIOMotorClient(settings.mongo_uri)
    return _client


def get_db() -> AsyncIOMotorDatabase:
    return get_client()[settings.mongo_db]


async def init_indexes(db: Optional[AsyncIOMotorDatabase] = None) -> None:
    """
    Natural-key uniqueness is what makes seed writes idempotent, so these
    indexes must exist before any seed unit runs.
    """
    db = db if db is not None else get_db()

    # sets: one row per (name, locale)
    await db[SETS].create_index(
        [("name", ASCENDING), ("locale", ASCENDING)], name="uk_name_locale", unique=True
    )

    # options: one row per (set_id, key, locale)
    await db[OPTIONS].create_index(
        [("set_id", ASCENDING), ("key", ASCENDING), ("locale", ASCENDING)],
        name="uk_set_key_locale",
        unique=True,
    )
    await db[OPTIONS].create_index([("parent_id", ASCENDING)], name="ix_parent_id")

    # _seeds is keyed by unit id (_id), already unique


async def close_client() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None
