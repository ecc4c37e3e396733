from __future__ import annotations

from textwrap import dedent

import pytest

from tests.support.harness import (
    BinOpNode,
    BoolNode,
    DoubleNode,
    IdentNode,
    IntNode,
    LetNode,
    ParseError,
    TT,
    parse_source,
)


def test_binop_shape_and_line() -> None:
    tree = parse_source("1 + 2 * x")

    assert isinstance(tree, BinOpNode)
    assert tree.op is TT.ADD
    assert tree.left == IntNode(1, line=1)
    assert isinstance(tree.right, BinOpNode)
    assert tree.right.op is TT.MULT
    assert isinstance(tree.right.right, IdentNode)
    assert tree.right.right.name.value == "x"
    assert tree.line == 1


def test_let_shape() -> None:
    tree = parse_source("let total = 2.5 in total")

    assert isinstance(tree, LetNode)
    assert tree.ident.type is TT.IDENT
    assert tree.ident.value == "total"
    assert tree.value_expr == DoubleNode(2.5, line=1)
    assert isinstance(tree.body_expr, IdentNode)


def test_nodes_record_their_own_line() -> None:
    src = dedent(
        """\
        let a = 1 in
          let b = true in
            a
              + 2
    """
    )
    tree = parse_source(src)

    assert isinstance(tree, LetNode) and tree.line == 1
    inner = tree.body_expr
    assert isinstance(inner, LetNode) and inner.line == 2
    assert inner.value_expr == BoolNode(True, line=2)
    body = inner.body_expr
    assert isinstance(body, BinOpNode) and body.line == 4


@pytest.mark.parametrize(
    "src, op",
    [
        pytest.param("a + b", TT.ADD, id="add"),
        pytest.param("a - b", TT.SUB, id="sub"),
        pytest.param("a * b", TT.MULT, id="mult"),
        pytest.param("a / b", TT.DIV, id="div"),
        pytest.param("a % b", TT.MOD, id="mod"),
        pytest.param("a and b", TT.AND, id="and"),
        pytest.param("a or b", TT.OR, id="or"),
    ],
)
def test_operator_terminals_map_to_token_types(src: str, op: TT) -> None:
    tree = parse_source(src)

    assert isinstance(tree, BinOpNode)
    assert tree.op is op


def test_keyword_prefixed_identifiers_are_identifiers() -> None:
    tree = parse_source("let letter = 1 in letter + inner")

    assert isinstance(tree, LetNode)
    assert tree.ident.value == "letter"
    body = tree.body_expr
    assert isinstance(body, BinOpNode)
    assert isinstance(body.right, IdentNode)
    assert body.right.name.value == "inner"


@pytest.mark.parametrize(
    "src",
    [
        pytest.param("1 +", id="dangling-operator"),
        pytest.param("let = 3 in 4", id="let-missing-name"),
        pytest.param("let x = 3 x", id="let-missing-in"),
        pytest.param("(1 + 2", id="unclosed-paren"),
        pytest.param("1 $ 2", id="unknown-character"),
        pytest.param("", id="empty"),
    ],
)
def test_malformed_source_raises_parse_error(src: str) -> None:
    with pytest.raises(ParseError):
        parse_source(src)


def test_parse_error_position() -> None:
    with pytest.raises(ParseError) as exc_info:
        parse_source("1 +\n  * 2")

    err = exc_info.value
    assert err.line == 2
    assert err.column == 3
    assert "(line 2, col 3)" in str(err)
