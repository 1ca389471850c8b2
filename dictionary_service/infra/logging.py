# dictionary_service/infra/logging.py
from __future__ import annotations

import logging
from typing import Optional, Tuple

from dictionary_service.config import settings

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | svc={svc} | %(message)s"

# Driver and server loggers never go below WARNING, even when seeding runs at DEBUG.
_DEPENDENCY_LOGGERS: Tuple[str, ...] = ("pymongo", "motor", "uvicorn.access")


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(service_name: str = "dictionary-service", level: Optional[str] = None) -> int:
    """
    Configure root logging for the service or one CLI run.
    `level` overrides LOG_LEVEL; returns the level applied to dictionary_service.* loggers.
    """
    resolved = _resolve_level(level or settings.log_level)
    logging.basicConfig(level=resolved, format=_FORMAT.format(svc=service_name))
    logging.getLogger("dictionary_service").setLevel(resolved)
    logging.getLogger("uvicorn.error").setLevel(resolved)
    for name in _DEPENDENCY_LOGGERS:
        logging.getLogger(name).setLevel(max(resolved, logging.WARNING))
    return resolved
