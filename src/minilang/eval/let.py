from __future__ import annotations

from typing import TYPE_CHECKING

from ..diagnostics import Diagnostics
from ..environment import Environment
from ..token_types import TT, Tok
from ..types import MlValue, MinilangRuntimeError

if TYPE_CHECKING:
    from ..nodes import SyntaxNode


def bind_let(ident: Tok, value: MlValue, env: Environment) -> Environment:
    if ident.type != TT.IDENT:
        raise MinilangRuntimeError("let target must be an identifier", ident.line or None)

    return env.extend(ident, value)


def eval_let(
    ident: Tok,
    value_expr: SyntaxNode,
    body_expr: SyntaxNode,
    env: Environment,
    diagnostics: Diagnostics,
) -> MlValue:
    # The binding is not visible to its own value expression.
    value = value_expr.evaluate(env, diagnostics)
    local_env = bind_let(ident, value, env)

    return body_expr.evaluate(local_env, diagnostics)
