# dictionary_service/compiler/compile.py
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set, Tuple, Union

from pydantic import ValidationError

from dictionary_service.errors import SpecError
from dictionary_service.models import OptionDef, SeedSource, SetDef
from dictionary_service.compiler.partition import order_options
from dictionary_service.seeds.operations import Operation, OptionOp, SetOp

log = logging.getLogger("dictionary_service.compiler")

# Geographic sets are served by a separate location catalogue, not seeded here.
GEO_SETS: Tuple[str, ...] = (
    "country",
    "pl_voivodeship",
    "ar_province",
    "es_autonomous_community",
)


@dataclass
class CompiledSeed:
    seed_id: str
    description: str
    locales: List[str]
    sets: List[SetOp] = field(default_factory=list)
    options: List[OptionOp] = field(default_factory=list)
    allow_root_fallback: bool = False
    set_count: int = 0

    @property
    def operations(self) -> List[Operation]:
        return [*self.sets, *self.options]


def parse_source(raw: Union[str, bytes]) -> SeedSource:
    try:
        data = json.loads(raw)
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError (bytes that are not UTF-8)
        raise SpecError(f"invalid JSON: {e}") from e
    try:
        return SeedSource.model_validate(data)
    except ValidationError as e:
        raise SpecError(f"invalid seed source: {e}") from e


def _index_sets(sets: Iterable[SetDef]) -> Dict[str, SetDef]:
    by_name: Dict[str, SetDef] = {}
    for s in sets:
        if s.name in by_name:
            raise SpecError(f"set {s.name!r} declared twice")
        by_name[s.name] = s
    for s in by_name.values():
        if s.parent is not None and s.parent not in by_name:
            raise SpecError(f"set {s.name!r}: parent set {s.parent!r} is not declared")
    return by_name


def _resolve_parent(opt: OptionDef, sets: Dict[str, SetDef]) -> Tuple[Optional[str], Optional[str]]:
    """
    Natural parent reference -> (parent_set, parent_key).
    'set:key' names the set explicitly; a bare key uses the owning set's parent set.
    """
    if opt.parent_key is None:
        return None, None
    if ":" in opt.parent_key:
        parent_set, parent_key = opt.parent_key.split(":", 1)
        if parent_set not in sets:
            raise SpecError(
                f"option {opt.set_name}:{opt.key}: parent set {parent_set!r} is not declared"
            )
        return parent_set, parent_key
    return sets[opt.set_name].parent or opt.set_name, opt.parent_key


def _locales(sets: Iterable[SetDef], options: Iterable[OptionDef]) -> List[str]:
    found = {o.locale for o in options}
    for s in sets:
        found.update(s.labels)
    return sorted(found)


def compile_source(
    source: SeedSource,
    *,
    exclude_sets: Iterable[str] = (),
    allow_root_fallback: bool = False,
    seed_id: Optional[str] = None,
    description: Optional[str] = None,
) -> CompiledSeed:
    """
    Turn a declarative source into an ordered operation list:
    every set row (set x locale) first, then options parent-before-child.
    """
    excluded = set(exclude_sets)
    set_defs = [s for s in source.sets if s.name not in excluded]
    option_defs = [o for o in source.options if o.set_name not in excluded]
    dropped = (len(source.sets) - len(set_defs), len(source.options) - len(option_defs))
    if excluded:
        log.info("excluded %d sets and %d options", *dropped)

    sets = _index_sets(set_defs)
    locales = _locales(set_defs, option_defs)

    set_ops = [
        SetOp(name=s.name, locale=locale, label=s.label_for(locale), active=s.active)
        for s in set_defs
        for locale in locales
    ]

    option_ops: List[OptionOp] = []
    seen: Set[str] = set()
    for o in option_defs:
        if o.set_name not in sets:
            raise SpecError(f"option {o.key!r} ({o.locale}) belongs to undeclared set {o.set_name!r}")
        parent_set, parent_key = _resolve_parent(o, sets)
        op = OptionOp(
            set_name=o.set_name,
            key=o.key,
            locale=o.locale,
            label=o.label_for(),
            value=o.value,
            short_code=o.short_code,
            order=o.order,
            active=o.active,
            parent_set=parent_set,
            parent_key=parent_key,
        )
        if op.lookup_key in seen:
            raise SpecError(f"option {op.lookup_key} defined twice")
        seen.add(op.lookup_key)
        option_ops.append(op)

    return CompiledSeed(
        seed_id=seed_id or source.seed.id,
        description=description or source.seed.description,
        locales=locales,
        sets=set_ops,
        options=order_options(option_ops, allow_root_fallback=allow_root_fallback),
        allow_root_fallback=allow_root_fallback,
        set_count=len(set_defs),
    )
