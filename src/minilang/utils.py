from __future__ import annotations

import logging
import os
from typing import Optional

from .types import MlBoolean, MlDouble, MlInteger, MlValue


def debug_py_trace_enabled() -> bool:
    return bool(os.environ.get("MINILANG_DEBUG_PY_TRACE"))


def log_level_from_env(default: int = logging.WARNING) -> int:
    raw = os.environ.get("MINILANG_LOG_LEVEL")
    if not raw:
        return default

    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


def parse_literal(text: str) -> Optional[MlValue]:
    """Parse a literal written on the command line (`3`, `2.5`, `true`)."""
    raw = text.strip()

    if raw == "true":
        return MlBoolean(True)
    if raw == "false":
        return MlBoolean(False)

    try:
        return MlInteger(int(raw))
    except ValueError:
        pass

    try:
        return MlDouble(float(raw))
    except ValueError:
        return None
