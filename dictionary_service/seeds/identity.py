# dictionary_service/seeds/identity.py
from __future__ import annotations

from typing import Dict, Iterator, Optional


def set_lookup_key(set_name: str, locale: str) -> str:
    return f"{set_name}:{locale}"


def option_natural_key(set_name: str, key: str) -> str:
    return f"{set_name}:{key}"


def option_lookup_key(set_name: str, key: str, locale: str) -> str:
    return f"{option_natural_key(set_name, key)}:{locale}"


class IdentityMap:
    """
    Pass-scoped natural key -> surrogate id map, built while one seed unit runs.

    Keys are "<natural_key>:<locale>" where the natural key of a set is its
    name and of an option is "<set>:<key>". Ids stored here must be the ids
    the store reported back, never ids generated before the write.
    """

    def __init__(self) -> None:
        self._ids: Dict[str, str] = {}

    @staticmethod
    def lookup_key(natural_key: str, locale: str) -> str:
        return f"{natural_key}:{locale}"

    def put(self, natural_key: str, locale: str, id_: str) -> None:
        self._ids[self.lookup_key(natural_key, locale)] = id_

    def get(self, natural_key: str, locale: str) -> Optional[str]:
        return self._ids.get(self.lookup_key(natural_key, locale))

    def __contains__(self, lookup_key: object) -> bool:
        return lookup_key in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[str]:
        return iter(self._ids)
