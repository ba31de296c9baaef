from __future__ import annotations

from typing import Callable, TextIO

from ..tree import Expr, If, Stmt
from ..types import Environment, LoxValue
from .helpers import is_truthy

EvalFunc = Callable[[Expr, Environment], LoxValue]
ExecFunc = Callable[[Stmt, Environment, TextIO], None]

def eval_if_stmt(node: If, env: Environment, out: TextIO, eval_func: EvalFunc, exec_func: ExecFunc) -> None:
    cond_val = eval_func(node.condition, env)

    if is_truthy(cond_val):
        exec_func(node.then_branch, env, out)
    elif node.else_branch is not None:
        exec_func(node.else_branch, env, out)
