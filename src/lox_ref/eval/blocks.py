from __future__ import annotations

from typing import Callable, Iterable, TextIO

from ..tree import Block, Stmt
from ..types import Environment

ExecFunc = Callable[[Stmt, Environment, TextIO], None]

def exec_statements(statements: Iterable[Stmt], env: Environment, out: TextIO, exec_func: ExecFunc) -> None:
    for stmt in statements:
        exec_func(stmt, env, out)

def eval_block(node: Block, env: Environment, out: TextIO, exec_func: ExecFunc) -> None:
    """Run a block in a fresh child scope; nothing keeps the scope once the block exits."""
    exec_statements(node.statements, env.child(), out, exec_func)
