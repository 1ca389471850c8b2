# dictionary_service/models/dictionary.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SetDoc(BaseModel):
    """Persisted set row. (name, locale) is unique."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    name: str
    locale: str
    label: str
    description: str = ""
    active: bool = True
    created_at: datetime
    updated_at: datetime
    created_by: str
    updated_by: str


class OptionDoc(BaseModel):
    """Persisted option row. (set_id, key, locale) is unique."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    set_id: str
    parent_id: Optional[str] = None
    locale: str
    short_code: str = ""
    key: str
    label: str
    description: str = ""
    value: str = ""
    order: int = 0
    active: bool = True
    created_at: datetime
    updated_at: datetime
    created_by: str
    updated_by: str
