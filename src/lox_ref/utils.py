from __future__ import annotations

import math
import os as _os

from .types import (
    LoxValue,
    LoxNil,
    LoxNumber,
    LoxString,
    LoxBool,
)


def format_number(value: float) -> str:
    """Shortest round-trip text for a number, dropping a trailing `.0`."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    text = repr(value)
    if text.endswith(".0"):
        text = text[:-2]

    return text


def lox_equals(lhs: LoxValue, rhs: LoxValue) -> bool:
    match (lhs, rhs):
        case (LoxNil(), LoxNil()):
            return True
        case (LoxNil(), _) | (_, LoxNil()):
            return False
        case (LoxNumber(value=a), LoxNumber(value=b)):
            return a == b
        case (LoxString(value=a), LoxString(value=b)):
            return a == b
        case (LoxBool(value=a), LoxBool(value=b)):
            return a == b
        case _:
            return False


_TRUTHY_FLAGS = {"1", "true", "yes", "on"}


def debug_py_trace_enabled() -> bool:
    """True when LOX_DEBUG_PY_TRACE asks for Python tracebacks on runtime errors."""
    raw = _os.environ.get("LOX_DEBUG_PY_TRACE", "")
    return raw.strip().lower() in _TRUTHY_FLAGS
