# dictionary_service/models/seed_models.py
from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class SeedRecord(BaseModel):
    """
    Ledger entry. Its existence in `_seeds` is the at-most-once gate for a unit.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="Seed unit id")
    application: str = ""
    description: str = ""
    applied_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
