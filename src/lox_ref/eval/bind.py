from __future__ import annotations

from typing import Callable

from ..tree import Assign, Expr, Var, Variable
from ..types import NIL, Environment, LoxValue

EvalFunc = Callable[[Expr, Environment], LoxValue]

def eval_variable(node: Variable, env: Environment) -> LoxValue:
    return env.get(node.name)

def eval_assign(node: Assign, env: Environment, eval_func: EvalFunc) -> LoxValue:
    """Rebind the nearest existing `name`; assignment never declares."""
    value = eval_func(node.value, env)
    env.assign(node.name, value)

    return value

def eval_var_decl(node: Var, env: Environment, eval_func: EvalFunc) -> None:
    value = NIL if node.initializer is None else eval_func(node.initializer, env)
    env.define(node.name.lexeme, value)
