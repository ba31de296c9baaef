"""AST node classes consumed by the evaluator.

Nodes are built once by the parser and never mutated. Each family is a closed
union so dispatch sites can `match` over it exhaustively.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union
from typing_extensions import TypeAlias

from .token_types import Tok
from .types import LoxValue

# ---------- Expressions ----------

@dataclass(frozen=True)
class Literal:
    value: LoxValue

@dataclass(frozen=True)
class Grouping:
    expression: 'Expr'

@dataclass(frozen=True)
class Unary:
    operator: Tok
    right: 'Expr'

@dataclass(frozen=True)
class Binary:
    left: 'Expr'
    operator: Tok
    right: 'Expr'

@dataclass(frozen=True)
class Logical:
    left: 'Expr'
    operator: Tok
    right: 'Expr'

@dataclass(frozen=True)
class Variable:
    name: Tok

@dataclass(frozen=True)
class Assign:
    name: Tok
    value: 'Expr'

Expr: TypeAlias = Literal | Grouping | Unary | Binary | Logical | Variable | Assign

# ---------- Statements ----------

@dataclass(frozen=True)
class Expression:
    expression: Expr

@dataclass(frozen=True)
class Print:
    expression: Expr

@dataclass(frozen=True)
class Var:
    name: Tok
    initializer: Optional[Expr] = None

@dataclass(frozen=True)
class Block:
    statements: Tuple['Stmt', ...]

    def __post_init__(self) -> None:
        # accept any sequence from the parser but store an immutable one
        if not isinstance(self.statements, tuple):
            object.__setattr__(self, 'statements', tuple(self.statements))

@dataclass(frozen=True)
class If:
    condition: Expr
    then_branch: 'Stmt'
    else_branch: Optional['Stmt'] = None

Stmt: TypeAlias = Expression | Print | Var | Block | If

Node: TypeAlias = Union[Expr, Stmt]

# ---------- Printer ----------

def pretty(node: Node) -> str:
    """Render a node as a parenthesised prefix form, e.g. `(* (- 123) (group 45.67))`."""
    match node:
        case Literal(value=value):
            return repr(value)
        case Grouping(expression=inner):
            return _parenthesize("group", inner)
        case Unary(operator=op, right=right):
            return _parenthesize(op.lexeme, right)
        case Binary(left=left, operator=op, right=right) | Logical(left=left, operator=op, right=right):
            return _parenthesize(op.lexeme, left, right)
        case Variable(name=name):
            return name.lexeme
        case Assign(name=name, value=value):
            return _parenthesize("=", name.lexeme, value)
        case Expression(expression=expr):
            return _parenthesize(";", expr)
        case Print(expression=expr):
            return _parenthesize("print", expr)
        case Var(name=name, initializer=None):
            return _parenthesize("var", name.lexeme)
        case Var(name=name, initializer=init):
            return _parenthesize("var", name.lexeme, init)
        case Block(statements=stmts):
            return _parenthesize("block", *stmts)
        case If(condition=cond, then_branch=then, else_branch=None):
            return _parenthesize("if", cond, then)
        case If(condition=cond, then_branch=then, else_branch=other):
            return _parenthesize("if", cond, then, other)
        case _:
            raise TypeError(f"Not an AST node: {type(node).__name__}")

def _parenthesize(name: str, *parts: Union[Node, str]) -> str:
    rendered = [name]

    for part in parts:
        rendered.append(part if isinstance(part, str) else pretty(part))

    return "(" + " ".join(rendered) + ")"
