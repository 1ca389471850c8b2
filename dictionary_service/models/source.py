# dictionary_service/models/source.py
from __future__ import annotations

import re
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ':' joins natural keys into lookup keys; control characters cannot appear in
# an identifier, a comment or a store key.
_BAD_KEY_CHARS = re.compile(r"[:\x00-\x1f\x7f]")


def _natural_key(v: str) -> str:
    if _BAD_KEY_CHARS.search(v):
        raise ValueError(f"{v!r} must not contain ':' or control characters")
    return v


class SetDef(BaseModel):
    """
    Declared set (e.g. 'estate_category'). One row per locale is materialized.
    `parent` names the set that this set's options point to via `parent_key`.
    """
    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1)
    label: str = ""
    labels: Dict[str, str] = Field(default_factory=dict)
    parent: Optional[str] = None
    active: bool = True

    @field_validator("name", "parent")
    @classmethod
    def _check_key(cls, v: Optional[str]) -> Optional[str]:
        return v if v is None else _natural_key(v)

    @field_validator("labels")
    @classmethod
    def _check_locales(cls, v: Dict[str, str]) -> Dict[str, str]:
        for locale in v:
            _natural_key(locale)
        return v

    def label_for(self, locale: str) -> str:
        return self.labels.get(locale) or self.label or self.name


class OptionDef(BaseModel):
    """
    Declared option, one entry per locale. `parent_key` is a natural key:
    'residential' (looked up in the owning set's parent set) or
    'estate_category:residential' (explicit set).
    """
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    set_name: str = Field(..., alias="set", min_length=1)
    key: str = Field(..., min_length=1)
    short_code: str = ""
    value: str = ""
    labels: Dict[str, str] = Field(default_factory=dict)
    parent_key: Optional[str] = None
    locale: str = Field(..., min_length=1)
    active: bool = True
    order: int = 0

    @field_validator("set_name", "key", "locale")
    @classmethod
    def _check_key(cls, v: str) -> str:
        return _natural_key(v)

    @field_validator("parent_key")
    @classmethod
    def _check_parent_key(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        parts = v.split(":")
        if len(parts) > 2 or not all(parts):
            raise ValueError(f"parent_key {v!r} must be 'key' or 'set:key'")
        for part in parts:
            _natural_key(part)
        return v

    def label_for(self) -> str:
        return self.labels.get(self.locale) or self.value


class SeedHeader(BaseModel):
    id: str = "2025-10-30_real_estate_dictionary"
    description: str = "Load real estate dictionary (excluding geographic data)"


class SeedSource(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    format: Optional[str] = Field(None, alias="_format")
    seed: SeedHeader = Field(default_factory=SeedHeader)
    sets: List[SetDef] = Field(default_factory=list)
    options: List[OptionDef] = Field(default_factory=list)
