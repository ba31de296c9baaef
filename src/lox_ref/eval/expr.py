from __future__ import annotations

import math
from typing import Callable

from ..token_types import TT, Tok
from ..tree import Binary, Expr, Logical, Unary
from ..types import (
    Environment,
    LoxArithmeticError,
    LoxBool,
    LoxNumber,
    LoxString,
    LoxTypeError,
    LoxValue,
)
from ..utils import format_number, lox_equals
from .common import require_number, require_numbers
from .helpers import is_truthy

EvalFunc = Callable[[Expr, Environment], LoxValue]

# longest string `*` may build, in characters
MAX_REPEAT_LENGTH = 1 << 28

def eval_unary(node: Unary, env: Environment, eval_func: EvalFunc) -> LoxValue:
    rhs = eval_func(node.right, env)
    op = node.operator

    match op.type:
        case TT.MINUS:
            return LoxNumber(-require_number(op, rhs))
        case TT.BANG:
            return LoxBool(not is_truthy(rhs))
        case _:
            raise TypeError(f"Unsupported unary operator: {op.type.name}")

def eval_logical(node: Logical, env: Environment, eval_func: EvalFunc) -> LoxValue:
    lhs = eval_func(node.left, env)

    if node.operator.type == TT.OR:
        if is_truthy(lhs):
            return lhs
    elif not is_truthy(lhs):
        return lhs

    return eval_func(node.right, env)

def eval_binary(node: Binary, env: Environment, eval_func: EvalFunc) -> LoxValue:
    lhs = eval_func(node.left, env)
    rhs = eval_func(node.right, env)

    return apply_binary_operator(node.operator, lhs, rhs)

def apply_binary_operator(op: Tok, lhs: LoxValue, rhs: LoxValue) -> LoxValue:
    match op.type:
        case TT.EQUAL_EQUAL:
            return LoxBool(lox_equals(lhs, rhs))
        case TT.BANG_EQUAL:
            return LoxBool(not lox_equals(lhs, rhs))
        case TT.GREATER:
            a, b = require_numbers(op, lhs, rhs)
            return LoxBool(a > b)
        case TT.GREATER_EQUAL:
            a, b = require_numbers(op, lhs, rhs)
            return LoxBool(a >= b)
        case TT.LESS:
            a, b = require_numbers(op, lhs, rhs)
            return LoxBool(a < b)
        case TT.LESS_EQUAL:
            a, b = require_numbers(op, lhs, rhs)
            return LoxBool(a <= b)
        case TT.MINUS:
            a, b = require_numbers(op, lhs, rhs)
            return LoxNumber(a - b)
        case TT.SLASH:
            a, b = require_numbers(op, lhs, rhs)
            if b == 0.0:
                raise LoxArithmeticError(op, "Division by zero.")
            return LoxNumber(a / b)
        case TT.MODULO:
            a, b = require_numbers(op, lhs, rhs)
            return LoxNumber(_remainder(a, b))
        case TT.STAR:
            return _multiply(op, lhs, rhs)
        case TT.PLUS:
            return _add(op, lhs, rhs)
        case _:
            raise TypeError(f"Unsupported binary operator: {op.type.name}")

def _add(op: Tok, lhs: LoxValue, rhs: LoxValue) -> LoxValue:
    match (lhs, rhs):
        case (LoxNumber(value=a), LoxNumber(value=b)):
            return LoxNumber(a + b)
        case (LoxString(value=a), LoxString(value=b)):
            return LoxString(a + b)
        case (LoxString(value=text), LoxNumber(value=num)):
            return LoxString(text + format_number(num))
        case (LoxNumber(value=num), LoxString(value=text)):
            return LoxString(format_number(num) + text)
        case _:
            raise LoxTypeError(op, "Operands must be numbers or strings.")

def _multiply(op: Tok, lhs: LoxValue, rhs: LoxValue) -> LoxValue:
    match (lhs, rhs):
        case (LoxString(value=text), LoxNumber(value=count)) | (LoxNumber(value=count), LoxString(value=text)):
            if math.isinf(count) and count > 0:
                raise LoxArithmeticError(op, "Repeat count must be finite.")
            if count >= 1 and len(text) * math.trunc(count) > MAX_REPEAT_LENGTH:
                raise LoxArithmeticError(op, "Repeated string is too long.")
            return LoxString(repeat_string(text, count))
        case _:
            a, b = require_numbers(op, lhs, rhs)
            return LoxNumber(a * b)

def repeat_string(text: str, count: float) -> str:
    """Repeat `text` by the truncated count; counts below 1 give the empty string."""
    if not text or math.isnan(count) or count < 1:
        return ""

    return text * int(count)

def _remainder(a: float, b: float) -> float:
    # sign follows the dividend; no exception on a zero divisor
    if b == 0.0 or math.isinf(a) or math.isnan(a) or math.isnan(b):
        return math.nan

    return math.fmod(a, b)
