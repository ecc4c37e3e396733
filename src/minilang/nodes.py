"""Syntax node hierarchy.

Each node evaluates itself under an environment and renders itself for
debugging. Nodes are immutable; children are owned by their parent.
"""
from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO

from .diagnostics import Diagnostics
from .environment import Environment
from .eval.binop import apply_binary_operator
from .eval.let import eval_let
from .token_types import TT, Tok
from .types import MlBoolean, MlDouble, MlInteger, MlValue, MinilangUnboundIdentifier


class SyntaxNode:
    line: Optional[int]

    def evaluate(self, env: Environment, diagnostics: Diagnostics) -> MlValue:
        raise NotImplementedError(type(self).__name__)

    def subtree_lines(self, indent: int = 0) -> List[str]:
        raise NotImplementedError(type(self).__name__)

    def display_subtree(self, indent: int = 0, out: Optional[TextIO] = None) -> None:
        stream = out if out is not None else sys.stdout

        for text in self.subtree_lines(indent):
            print(text, file=stream)

    def pretty(self, indent: int = 0) -> str:
        return "\n".join(self.subtree_lines(indent))


def _indented(text: str, amount: int) -> str:
    return " " * amount + text


# ---------------- Leaves ----------------

@dataclass(frozen=True)
class IntNode(SyntaxNode):
    value: int
    line: Optional[int] = None

    def evaluate(self, env: Environment, diagnostics: Diagnostics) -> MlValue:
        return MlInteger(self.value)

    def subtree_lines(self, indent: int = 0) -> List[str]:
        return [_indented(f"Int({self.value})", indent)]


@dataclass(frozen=True)
class DoubleNode(SyntaxNode):
    value: float
    line: Optional[int] = None

    def evaluate(self, env: Environment, diagnostics: Diagnostics) -> MlValue:
        return MlDouble(self.value)

    def subtree_lines(self, indent: int = 0) -> List[str]:
        return [_indented(f"Double({self.value!r})", indent)]


@dataclass(frozen=True)
class BoolNode(SyntaxNode):
    value: bool
    line: Optional[int] = None

    def evaluate(self, env: Environment, diagnostics: Diagnostics) -> MlValue:
        return MlBoolean(self.value)

    def subtree_lines(self, indent: int = 0) -> List[str]:
        return [_indented("Bool(true)" if self.value else "Bool(false)", indent)]


@dataclass(frozen=True)
class IdentNode(SyntaxNode):
    name: Tok
    line: Optional[int] = None

    def evaluate(self, env: Environment, diagnostics: Diagnostics) -> MlValue:
        try:
            return env.lookup(self.name)
        except MinilangUnboundIdentifier as exc:
            diagnostics.report(f"Unbound identifier '{exc.name}'.", self.line)
            if exc.line is None:
                exc.line = self.line
            raise

    def subtree_lines(self, indent: int = 0) -> List[str]:
        return [_indented(f"Id({self.name.value})", indent)]


# ---------------- Compound nodes ----------------

@dataclass(frozen=True)
class BinOpNode(SyntaxNode):
    """A binary operation. Both operands are always evaluated, left first."""

    left: SyntaxNode
    op: TT
    right: SyntaxNode
    line: Optional[int] = None

    def evaluate(self, env: Environment, diagnostics: Diagnostics) -> MlValue:
        lhs = self.left.evaluate(env, diagnostics)
        rhs = self.right.evaluate(env, diagnostics)

        return apply_binary_operator(self.op, lhs, rhs, diagnostics, self.line)

    def subtree_lines(self, indent: int = 0) -> List[str]:
        label = getattr(self.op, "name", self.op)
        lines = [_indented(f"BinOp[{label}](", indent)]
        lines.extend(self.left.subtree_lines(indent + 2))
        lines.extend(self.right.subtree_lines(indent + 2))
        lines.append(_indented(")", indent))
        return lines


@dataclass(frozen=True)
class LetNode(SyntaxNode):
    """`let <ident> = <value_expr> in <body_expr>`

    The binding is visible in `body_expr` only.
    """

    ident: Tok
    value_expr: SyntaxNode
    body_expr: SyntaxNode
    line: Optional[int] = None

    def evaluate(self, env: Environment, diagnostics: Diagnostics) -> MlValue:
        return eval_let(self.ident, self.value_expr, self.body_expr, env, diagnostics)

    def subtree_lines(self, indent: int = 0) -> List[str]:
        lines = [_indented(f"Let: {self.ident.value}", indent)]
        lines.append(_indented(" Value Expression:", indent))
        lines.extend(self.value_expr.subtree_lines(indent + 4))
        lines.append(_indented(" Body Expression:", indent))
        lines.extend(self.body_expr.subtree_lines(indent + 4))
        return lines

    def __str__(self) -> str:
        return f"Let({self.ident.value}, {self.value_expr}, {self.body_expr})"
