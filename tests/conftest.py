"""Pytest configuration and fixtures for dictionary-service."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import pytest
from pymongo.errors import DuplicateKeyError

from dictionary_service.seeds.operations import OptionOp, SetOp

# ============================================================================
# In-memory stand-in for the motor collection calls the seeding code makes
# ============================================================================

UNIQUE_KEYS: Dict[str, Tuple[str, ...]] = {
    "sets": ("name", "locale"),
    "options": ("set_id", "key", "locale"),
}


def _matches(doc: Dict[str, Any], filt: Dict[str, Any]) -> bool:
    return all(doc.get(k) == v for k, v in filt.items())


def _project(doc: Dict[str, Any], projection: Optional[Dict[str, int]]) -> Dict[str, Any]:
    if not projection:
        return copy.deepcopy(doc)
    out = {k: copy.deepcopy(doc[k]) for k, on in projection.items() if on and k in doc}
    if projection.get("_id", 1):
        out["_id"] = doc["_id"]
    return out


class FakeCollection:
    def __init__(self, name: str, unique: Sequence[str] = ()) -> None:
        self.name = name
        self.unique = tuple(unique)
        self.docs: List[Dict[str, Any]] = []
        self.calls: Dict[str, int] = {}

    def _count(self, op: str) -> None:
        self.calls[op] = self.calls.get(op, 0) + 1

    def _check_unique(self, doc: Dict[str, Any]) -> None:
        for existing in self.docs:
            if existing["_id"] == doc["_id"]:
                raise DuplicateKeyError(f"E11000 duplicate key {self.name} _id {doc['_id']}")
            if self.unique and all(existing.get(k) == doc.get(k) for k in self.unique):
                raise DuplicateKeyError(f"E11000 duplicate key {self.name} {self.unique}")

    async def find_one(self, filt: Dict[str, Any], projection: Optional[Dict[str, int]] = None):
        self._count("find_one")
        for doc in self.docs:
            if _matches(doc, filt):
                return _project(doc, projection)
        return None

    async def find_one_and_update(
        self,
        filt: Dict[str, Any],
        update: Dict[str, Any],
        upsert: bool = False,
        projection: Optional[Dict[str, int]] = None,
        return_document: Any = None,
    ):
        self._count("find_one_and_update")
        for doc in self.docs:
            if _matches(doc, filt):
                doc.update(update.get("$set", {}))
                return _project(doc, projection)
        if not upsert:
            return None
        new_doc = {**filt, **copy.deepcopy(update.get("$setOnInsert", {})), **update.get("$set", {})}
        self._check_unique(new_doc)
        self.docs.append(new_doc)
        return _project(new_doc, projection)

    async def insert_one(self, doc: Dict[str, Any]):
        self._count("insert_one")
        self._check_unique(doc)
        self.docs.append(copy.deepcopy(doc))

    def find_all(self, **filt: Any) -> List[Dict[str, Any]]:
        return [d for d in self.docs if _matches(d, filt)]

    def get(self, **filt: Any) -> Dict[str, Any]:
        found = self.find_all(**filt)
        assert len(found) == 1, f"expected exactly one {self.name} doc for {filt}, got {len(found)}"
        return found[0]


class FakeDatabase:
    def __init__(self) -> None:
        self.collections: Dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        if name not in self.collections:
            self.collections[name] = FakeCollection(name, UNIQUE_KEYS.get(name, ()))
        return self.collections[name]

    def snapshot(self) -> Dict[str, List[Dict[str, Any]]]:
        return {name: copy.deepcopy(col.docs) for name, col in self.collections.items()}


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def seed_source_path(project_root: Path) -> Path:
    """Return the bundled real estate dictionary source."""
    return project_root / "data" / "dictionary_seed.json"


@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def category_type_ops() -> List[Any]:
    """category(residential) -> type(house), single locale, already ordered."""
    return [
        SetOp(name="category", locale="en", label="Category"),
        SetOp(name="type", locale="en", label="Type"),
        OptionOp(set_name="category", key="residential", locale="en", label="Residential", value="residential"),
        OptionOp(
            set_name="type",
            key="house",
            locale="en",
            label="House",
            value="house",
            parent_set="category",
            parent_key="residential",
        ),
    ]

