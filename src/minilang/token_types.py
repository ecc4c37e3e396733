"""
Token Types for minilang

Shared between the front end and the syntax nodes to avoid circular
dependencies.
"""

from typing import Any
from dataclasses import dataclass
from enum import Enum, auto


class TT(Enum):
    """Token Types - mirrors grammar terminals"""

    # Literals
    INT = auto()
    DOUBLE = auto()
    IDENT = auto()
    TRUE = auto()
    FALSE = auto()

    # Keywords
    LET = auto()
    IN = auto()

    # Arithmetic
    ADD = auto()
    SUB = auto()
    MULT = auto()
    DIV = auto()
    MOD = auto()

    # Logical
    AND = auto()
    OR = auto()
    NOT = auto()

    # Comparison (lexed by the full language; no evaluator support here)
    EQ = auto()
    NEQ = auto()
    LT = auto()
    LTE = auto()
    GT = auto()
    GTE = auto()

    # Punctuation
    ASSIGN = auto()
    LPAR = auto()
    RPAR = auto()

    # Special
    EOF = auto()


ARITHMETIC_OPS = frozenset({TT.ADD, TT.SUB, TT.MULT, TT.DIV, TT.MOD})
BOOLEAN_OPS = frozenset({TT.AND, TT.OR})


@dataclass(frozen=True)
class Tok:
    """Token with position info"""

    type: TT
    value: Any
    line: int = 0
    column: int = 0

    def __repr__(self):
        return f"Tok({self.type.name}, {self.value!r}, {self.line}:{self.column})"
