"""
Token Types for the Lox evaluator

Tokens are produced upstream by the scanner; the evaluator only reads the
type tag, the lexeme and the source line.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .types import LoxValue


class TT(Enum):
    """Token Types - mirrors the scanner's terminals"""

    # Literals
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # Keywords
    AND = auto()
    OR = auto()
    VAR = auto()
    PRINT = auto()
    IF = auto()
    ELSE = auto()
    TRUE = auto()
    FALSE = auto()
    NIL = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    MODULO = auto()

    # Comparison
    EQUAL_EQUAL = auto()
    BANG_EQUAL = auto()
    GREATER = auto()
    GREATER_EQUAL = auto()
    LESS = auto()
    LESS_EQUAL = auto()

    # Unary
    BANG = auto()

    # Assignment
    EQUAL = auto()

    # Punctuation
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    SEMICOLON = auto()

    # Special
    EOF = auto()


@dataclass(frozen=True)
class Tok:
    """Token with position info"""

    type: TT
    lexeme: str
    literal: Optional["LoxValue"] = None
    line: int = 0

    def __repr__(self):
        return f"Tok({self.type.name}, {self.lexeme!r}, line {self.line})"
