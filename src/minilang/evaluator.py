from __future__ import annotations

from typing import Mapping, Optional

from .diagnostics import Diagnostics
from .environment import Environment
from .nodes import SyntaxNode
from .types import MlValue, MinilangRuntimeError


def _maybe_attach_location(exc: MinilangRuntimeError, node: SyntaxNode) -> None:
    if exc.line is not None:
        return

    line = getattr(node, "line", None)
    if line is not None:
        exc.line = line

# ---------------- Public API ----------------

def eval_expr(
    ast: SyntaxNode,
    env: Optional[Environment] = None,
    diagnostics: Optional[Diagnostics] = None,
    bindings: Optional[Mapping[str, MlValue]] = None,
) -> MlValue:
    """Evaluate `ast` under `env` (an empty root scope by default).

    `bindings` seeds extra names on top of `env`. Failures are reported to
    `diagnostics` and raised as `MinilangRuntimeError` subclasses.
    """
    if env is None:
        env = Environment()

    if bindings:
        for name, value in bindings.items():
            env = env.extend(name, value)

    if diagnostics is None:
        diagnostics = Diagnostics()

    try:
        return ast.evaluate(env, diagnostics)
    except MinilangRuntimeError as e:
        _maybe_attach_location(e, ast)
        raise
