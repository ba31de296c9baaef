from __future__ import annotations

from typing import Any

from ..token_types import Tok
from ..types import LoxBool, LoxNil, LoxNumber, LoxString, LoxTypeError
from ..utils import format_number

def stringify(value: Any) -> str:
    if isinstance(value, LoxString):
        return value.value

    if isinstance(value, LoxNumber):
        return format_number(value.value)

    if isinstance(value, LoxBool):
        return "true" if value.value else "false"

    if isinstance(value, LoxNil):
        return "nil"

    raise TypeError(f"Not a Lox value: {type(value).__name__}")

def require_number(operator: Tok, value: Any) -> float:
    if not isinstance(value, LoxNumber):
        raise LoxTypeError(operator, "Operand must be a number.")

    return value.value

def require_numbers(operator: Tok, lhs: Any, rhs: Any) -> tuple[float, float]:
    if not (isinstance(lhs, LoxNumber) and isinstance(rhs, LoxNumber)):
        raise LoxTypeError(operator, "Operands must be numbers.")

    return lhs.value, rhs.value
