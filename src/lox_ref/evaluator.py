from __future__ import annotations

from typing import TextIO

from .tree import (
    Assign,
    Binary,
    Block,
    Expr,
    Expression,
    Grouping,
    If,
    Literal,
    Logical,
    Print,
    Stmt,
    Unary,
    Var,
    Variable,
)
from .types import Environment, LoxValue

from .eval.bind import eval_assign, eval_var_decl, eval_variable
from .eval.blocks import eval_block
from .eval.common import stringify
from .eval.control import eval_if_stmt
from .eval.expr import eval_binary, eval_logical, eval_unary

# ---------------- Expressions ----------------

def eval_node(n: Expr, env: Environment) -> LoxValue:
    match n:
        case Literal(value=value):
            return value
        case Grouping(expression=inner):
            return eval_node(inner, env)
        case Variable():
            return eval_variable(n, env)
        case Assign():
            return eval_assign(n, env, eval_node)
        case Unary():
            return eval_unary(n, env, eval_node)
        case Logical():
            return eval_logical(n, env, eval_node)
        case Binary():
            return eval_binary(n, env, eval_node)
        case _:
            raise TypeError(f"Unknown expression node: {type(n).__name__}")

# ---------------- Statements ----------------

def exec_stmt(n: Stmt, env: Environment, out: TextIO) -> None:
    match n:
        case Expression(expression=expr):
            eval_node(expr, env)
        case Print(expression=expr):
            out.write(stringify(eval_node(expr, env)) + "\n")
        case Var():
            eval_var_decl(n, env, eval_node)
        case Block():
            eval_block(n, env, out, exec_stmt)
        case If():
            eval_if_stmt(n, env, out, eval_node, exec_stmt)
        case _:
            raise TypeError(f"Unknown statement node: {type(n).__name__}")
