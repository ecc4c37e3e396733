"""lark front end: source text -> syntax nodes."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from lark import Lark, Token, Transformer, UnexpectedInput, v_args

from .nodes import BinOpNode, BoolNode, DoubleNode, IdentNode, IntNode, LetNode, SyntaxNode
from .token_types import TT, Tok

GRAMMAR_PATH = Path(__file__).resolve().parent / "grammar.lark"


class ParseError(Exception):
    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        super().__init__(message)
        self.line = line
        self.column = column

    def __str__(self) -> str:
        msg = super().__str__()

        if self.line is None:
            return msg

        if self.column is None:
            return f"{msg} (line {self.line})"

        return f"{msg} (line {self.line}, col {self.column})"


def _ident_tok(token: Token) -> Tok:
    return Tok(TT.IDENT, str(token), token.line or 0, token.column or 0)


@v_args(inline=True)
class ToAst(Transformer):
    """Builds syntax nodes from the lark parse tree, bottom-up."""

    def int_lit(self, tok: Token) -> SyntaxNode:
        return IntNode(int(tok), line=tok.line)

    def double_lit(self, tok: Token) -> SyntaxNode:
        return DoubleNode(float(tok), line=tok.line)

    def true_lit(self, tok: Token) -> SyntaxNode:
        return BoolNode(True, line=tok.line)

    def false_lit(self, tok: Token) -> SyntaxNode:
        return BoolNode(False, line=tok.line)

    def ident(self, tok: Token) -> SyntaxNode:
        return IdentNode(_ident_tok(tok), line=tok.line)

    def binop(self, left: SyntaxNode, op: Token, right: SyntaxNode) -> SyntaxNode:
        # terminal names in the grammar match TT member names
        return BinOpNode(left, TT[op.type], right, line=op.line)

    def let_expr(self, name: Token, value_expr: SyntaxNode, body_expr: SyntaxNode) -> SyntaxNode:
        return LetNode(_ident_tok(name), value_expr, body_expr, line=name.line)


@lru_cache(maxsize=None)
def build_parser() -> Lark:
    grammar = GRAMMAR_PATH.read_text(encoding="utf-8")
    return Lark(grammar, parser="lalr", start="start")


def _first_line(text: str) -> str:
    return text.strip().splitlines()[0] if text.strip() else text


def parse_source(src: str) -> SyntaxNode:
    try:
        tree = build_parser().parse(src)
    except UnexpectedInput as exc:
        line = exc.line if isinstance(exc.line, int) and exc.line > 0 else None
        column = exc.column if isinstance(exc.column, int) and exc.column > 0 else None
        raise ParseError(_first_line(str(exc)), line, column) from exc

    return ToAst().transform(tree)
