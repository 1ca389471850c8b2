# dictionary_service/seeds/operations.py
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, Optional, Sequence, Union

from motor.motor_asyncio import AsyncIOMotorDatabase

from dictionary_service.dal.writer import upsert_if_absent
from dictionary_service.db.mongodb import OPTIONS, SETS
from dictionary_service.errors import ResolutionError
from dictionary_service.models import OptionDoc, SetDoc
from dictionary_service.seeds.identity import (
    IdentityMap,
    option_lookup_key,
    option_natural_key,
    set_lookup_key,
)

log = logging.getLogger("dictionary_service.seeds.operations")


@dataclass(frozen=True)
class SetOp:
    """Ensure one set row exists for (name, locale)."""
    name: str
    locale: str
    label: str
    active: bool = True
    description: str = ""

    @property
    def lookup_key(self) -> str:
        return set_lookup_key(self.name, self.locale)


@dataclass(frozen=True)
class OptionOp:
    """
    Ensure one option row exists for (set, key, locale).
    Parent references are natural keys; ids are resolved at run time.
    """
    set_name: str
    key: str
    locale: str
    label: str
    value: str = ""
    short_code: str = ""
    order: int = 0
    active: bool = True
    description: str = ""
    parent_set: Optional[str] = None
    parent_key: Optional[str] = None

    @property
    def lookup_key(self) -> str:
        return option_lookup_key(self.set_name, self.key, self.locale)

    @property
    def has_parent(self) -> bool:
        return self.parent_key is not None

    @property
    def parent_lookup_key(self) -> Optional[str]:
        if self.parent_key is None:
            return None
        return option_lookup_key(self.parent_set or self.set_name, self.parent_key, self.locale)


Operation = Union[SetOp, OptionOp]


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


async def _apply_set(db: AsyncIOMotorDatabase, op: SetOp, ids: IdentityMap, actor: str) -> bool:
    now = _utcnow()
    doc = SetDoc(
        _id=_new_id(),
        name=op.name,
        locale=op.locale,
        label=op.label,
        description=op.description,
        active=op.active,
        created_at=now,
        updated_at=now,
        created_by=actor,
        updated_by=actor,
    ).model_dump(by_alias=True)
    persisted_id, inserted = await upsert_if_absent(
        db[SETS], {"name": op.name, "locale": op.locale}, doc
    )
    ids.put(op.name, op.locale, persisted_id)
    return inserted


async def _apply_option(
    db: AsyncIOMotorDatabase,
    op: OptionOp,
    ids: IdentityMap,
    actor: str,
    allow_root_fallback: bool,
) -> bool:
    set_id = ids.get(op.set_name, op.locale)
    if set_id is None:
        raise ResolutionError(
            f"option {op.lookup_key}: set {set_lookup_key(op.set_name, op.locale)} was not seeded in this pass"
        )

    parent_id: Optional[str] = None
    if op.has_parent:
        parent_natural = option_natural_key(op.parent_set or op.set_name, op.parent_key)
        parent_id = ids.get(parent_natural, op.locale)
        if parent_id is None:
            if not allow_root_fallback:
                raise ResolutionError(
                    f"option {op.lookup_key}: parent {op.parent_lookup_key} not found"
                )
            log.warning(
                "option %s: parent %s not found, storing as root-level",
                op.lookup_key, op.parent_lookup_key,
            )

    now = _utcnow()
    doc = OptionDoc(
        _id=_new_id(),
        set_id=set_id,
        parent_id=parent_id,
        locale=op.locale,
        short_code=op.short_code,
        key=op.key,
        label=op.label,
        description=op.description,
        value=op.value,
        order=op.order,
        active=op.active,
        created_at=now,
        updated_at=now,
        created_by=actor,
        updated_by=actor,
    ).model_dump(by_alias=True, exclude_none=True)
    persisted_id, inserted = await upsert_if_absent(
        db[OPTIONS], {"set_id": set_id, "key": op.key, "locale": op.locale}, doc
    )
    ids.put(option_natural_key(op.set_name, op.key), op.locale, persisted_id)
    return inserted


async def run_operations(
    db: AsyncIOMotorDatabase,
    operations: Sequence[Operation],
    ids: IdentityMap,
    *,
    allow_root_fallback: bool = False,
    actor: str = "system",
) -> Dict[str, int]:
    """
    Execute an ordered operation list. Stops at the first failure; writes
    already made stay in place (every write is idempotent by natural key).
    """
    inserted = existing = 0
    for op in operations:
        if isinstance(op, SetOp):
            created = await _apply_set(db, op, ids, actor)
        else:
            created = await _apply_option(db, op, ids, actor, allow_root_fallback)
        if created:
            inserted += 1
        else:
            existing += 1
    return {"inserted": inserted, "existing": existing}
