# dictionary_service/errors.py
from __future__ import annotations

from typing import Optional


class SeedingError(Exception):
    """
    Base class for everything the seeding subsystem raises.
    `unit_id` is filled in by the orchestrator once the failing seed unit is known.
    """

    def __init__(self, message: str, *, unit_id: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.unit_id = unit_id

    def __str__(self) -> str:
        if self.unit_id:
            return f"seed {self.unit_id}: {self.message}"
        return self.message


class SpecError(SeedingError):
    """Malformed or inconsistent declarative source. Fatal for compilation."""


class ResolutionError(SeedingError):
    """A natural key (set or parent option) has no id in the identity map."""


class WriteError(SeedingError):
    """The store rejected a seed write."""


class LedgerError(SeedingError):
    """Reading or writing the seed ledger failed."""
