# dictionary_service/compiler/partition.py
from __future__ import annotations

import logging
from typing import List, Sequence, Set, Tuple

from dictionary_service.errors import SpecError
from dictionary_service.seeds.operations import OptionOp

log = logging.getLogger("dictionary_service.compiler.partition")


def partition_options(options: Sequence[OptionOp]) -> Tuple[List[OptionOp], List[OptionOp]]:
    """
    Stable split into (no parent, has parent). Relative order inside each bucket is kept.
    """
    roots: List[OptionOp] = []
    children: List[OptionOp] = []
    for op in options:
        (children if op.has_parent else roots).append(op)
    return roots, children


def _drain(pending: List[OptionOp], emitted: Set[str], ordered: List[OptionOp]) -> List[OptionOp]:
    """
    Repeatedly emit every pending option whose parent is already emitted.
    Returns what is left once a full pass makes no progress.
    """
    while pending:
        remaining: List[OptionOp] = []
        for op in pending:
            if op.parent_lookup_key in emitted:
                ordered.append(op)
                emitted.add(op.lookup_key)
            else:
                remaining.append(op)
        if len(remaining) == len(pending):
            return remaining
        pending = remaining
    return []


def _split_stuck(stuck: Sequence[OptionOp]) -> Tuple[List[OptionOp], List[OptionOp]]:
    """
    (missing_parent, cyclic) for options the resolver could not place.
    An option is cyclic unless its parent chain ends at a key nobody defines.
    """
    stuck_keys = {op.lookup_key for op in stuck}
    rooted: Set[str] = {op.lookup_key for op in stuck if op.parent_lookup_key not in stuck_keys}
    changed = True
    while changed:
        changed = False
        for op in stuck:
            if op.lookup_key not in rooted and op.parent_lookup_key in rooted:
                rooted.add(op.lookup_key)
                changed = True

    missing = [op for op in stuck if op.parent_lookup_key not in stuck_keys]
    cyclic = [op for op in stuck if op.lookup_key not in rooted]
    return missing, cyclic


def order_options(
    options: Sequence[OptionOp],
    *,
    allow_root_fallback: bool = False,
) -> List[OptionOp]:
    """
    Order options so every parent is written before its children, at any depth.

    Options without a parent come first in input order, then parent-bearing
    options pass by pass. Cycles are always a SpecError. Parents that are not
    defined anywhere are a SpecError too, unless `allow_root_fallback` is set:
    then those options are emitted as if they were roots and keep their
    parent reference for the runtime to drop.
    """
    roots, children = partition_options(options)
    ordered: List[OptionOp] = list(roots)
    emitted: Set[str] = {op.lookup_key for op in roots}

    stuck = _drain(children, emitted, ordered)
    if not stuck:
        return ordered

    missing, cyclic = _split_stuck(stuck)
    if cyclic:
        keys = ", ".join(op.lookup_key for op in cyclic)
        raise SpecError(f"parent cycle between options: {keys}")

    if not allow_root_fallback:
        refs = ", ".join(f"{op.lookup_key} -> {op.parent_lookup_key}" for op in missing)
        raise SpecError(f"unresolved parent references: {refs}")

    for op in missing:
        log.warning("option %s: parent %s is not defined", op.lookup_key, op.parent_lookup_key)
        ordered.append(op)
        emitted.add(op.lookup_key)

    missing_keys = {op.lookup_key for op in missing}
    rest = _drain([op for op in stuck if op.lookup_key not in missing_keys], emitted, ordered)
    if rest:
        # cannot happen once cycles are excluded
        raise SpecError("could not order options: " + ", ".join(op.lookup_key for op in rest))
    return ordered
