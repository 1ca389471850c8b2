# dictionary_service/models/__init__.py
from .source import (
    SetDef,
    OptionDef,
    SeedHeader,
    SeedSource,
)

from .dictionary import (
    SetDoc,
    OptionDoc,
)

from .seed_models import SeedRecord

__all__ = [
    # source
    "SetDef",
    "OptionDef",
    "SeedHeader",
    "SeedSource",
    # dictionary
    "SetDoc",
    "OptionDoc",
    # seed_models
    "SeedRecord",
]
