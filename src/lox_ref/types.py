from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional
from typing_extensions import TypeAlias

from .token_types import Tok

# ---------- Value Model ----------

@dataclass(frozen=True)
class LoxNil:
    def __repr__(self) -> str:
        return "nil"

@dataclass(frozen=True)
class LoxBool:
    value: bool
    def __repr__(self) -> str:
        return "true" if self.value else "false"

@dataclass(frozen=True)
class LoxNumber:
    value: float
    def __repr__(self) -> str:
        from .utils import format_number
        return format_number(self.value)

@dataclass(frozen=True)
class LoxString:
    value: str
    def __repr__(self) -> str:
        return f'"{self.value}"'

LoxValue: TypeAlias = LoxNil | LoxBool | LoxNumber | LoxString

NIL = LoxNil()

# ---------- Scope chain ----------

class Environment:
    """One lexical scope. `enclosing` is a lookup link only; a child never outlives its block."""

    def __init__(self, enclosing: Optional['Environment']=None):
        self.enclosing = enclosing
        self.values: Dict[str, LoxValue] = {}

    def child(self) -> 'Environment':
        return Environment(enclosing=self)

    def define(self, name: str, val: LoxValue) -> None:
        self.values[name] = val

    def get(self, name: Tok) -> LoxValue:
        env: Optional[Environment] = self

        while env is not None:
            if name.lexeme in env.values:
                return env.values[name.lexeme]
            env = env.enclosing

        raise LoxUndefinedVariable(name)

    def assign(self, name: Tok, val: LoxValue) -> None:
        env: Optional[Environment] = self

        while env is not None:
            if name.lexeme in env.values:
                env.values[name.lexeme] = val
                return
            env = env.enclosing

        raise LoxUndefinedVariable(name)

# ---------- Exceptions ----------

class LoxRuntimeError(Exception):
    def __init__(self, token: Tok, message: str):
        super().__init__(message)
        self.token = token
        self.message = message

    @property
    def line(self) -> int:
        return self.token.line

    def __str__(self) -> str:
        return f"{self.message} (line {self.token.line})"

class LoxTypeError(LoxRuntimeError):
    pass

class LoxArithmeticError(LoxRuntimeError):
    pass

class LoxUndefinedVariable(LoxRuntimeError):
    def __init__(self, name: Tok):
        super().__init__(name, f"Undefined variable '{name.lexeme}'.")
        self.name = name.lexeme
