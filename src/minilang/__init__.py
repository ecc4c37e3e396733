"""minilang: evaluation core of a small expression language."""

from .diagnostics import Diagnostic, Diagnostics
from .environment import Environment
from .evaluator import eval_expr
from .nodes import BinOpNode, BoolNode, DoubleNode, IdentNode, IntNode, LetNode, SyntaxNode
from .token_types import TT, Tok
from .types import (
    MlBoolean,
    MlDouble,
    MlInteger,
    MlValue,
    MinilangDivisionByZero,
    MinilangRuntimeError,
    MinilangTypeError,
    MinilangUnboundIdentifier,
    MinilangUnsupportedOperator,
)

__all__ = [
    "BinOpNode",
    "BoolNode",
    "Diagnostic",
    "Diagnostics",
    "DoubleNode",
    "Environment",
    "IdentNode",
    "IntNode",
    "LetNode",
    "MinilangDivisionByZero",
    "MinilangRuntimeError",
    "MinilangTypeError",
    "MinilangUnboundIdentifier",
    "MinilangUnsupportedOperator",
    "MlBoolean",
    "MlDouble",
    "MlInteger",
    "MlValue",
    "SyntaxNode",
    "TT",
    "Tok",
    "eval_expr",
]
