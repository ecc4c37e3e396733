from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path
from typing import Dict, List, Optional

from .diagnostics import Diagnostics
from .environment import Environment
from .evaluator import eval_expr
from .parser import ParseError, parse_source
from .types import MlValue, MinilangRuntimeError
from .utils import debug_py_trace_enabled, log_level_from_env, parse_literal


def run(src: str, env: Optional[Environment] = None, diagnostics: Optional[Diagnostics] = None) -> MlValue:
    ast = parse_source(src)
    return eval_expr(ast, env, diagnostics)

def _load_source(arg: Optional[str]) -> str:
    """
    Resolve CLI input into source text.
    - None or "-" => read stdin.
    - Existing path => read file contents.
    - Otherwise treat the argument as literal source.
    """

    if arg is None or arg == "-":
        data = sys.stdin.read()
        if not data:
            raise SystemExit("No input provided on stdin")
        return data

    candidate = Path(arg)
    try:
        is_file = candidate.is_file()
    except OSError:
        # e.g. literal source longer than the filesystem name limit
        is_file = False

    if is_file:
        return candidate.read_text(encoding="utf-8")

    return arg

def _parse_define(spec: str) -> tuple[str, MlValue]:
    name, sep, raw = spec.partition("=")
    name = name.strip()

    if not sep or not name.isidentifier():
        raise SystemExit(f"--define expects NAME=LITERAL, got {spec!r}")

    value = parse_literal(raw)
    if value is None:
        raise SystemExit(f"--define {name}: not a literal: {raw!r}")

    return name, value

def main(argv: Optional[List[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    show_tree = False
    verbose = False
    defines: Dict[str, MlValue] = {}
    arg = None
    it = iter(args)

    for token in it:
        if token == "--tree":
            show_tree = True
            continue

        if token == "--verbose":
            verbose = True
            continue

        if token.startswith("--define="):
            name, value = _parse_define(token.split("=", 1)[1])
            defines[name] = value
            continue

        if token == "--define":
            try:
                name, value = _parse_define(next(it))
            except StopIteration:
                raise SystemExit("--define flag requires NAME=LITERAL") from None
            defines[name] = value
            continue

        if arg is None:
            arg = token
        else:
            raise SystemExit(f"Unexpected argument: {token}")

    logging.basicConfig(level=logging.DEBUG if verbose else log_level_from_env())

    source = _load_source(arg or "-")
    env = Environment.from_bindings(defines)

    try:
        ast = parse_source(source)
        if show_tree:
            ast.display_subtree(0)
        result = eval_expr(ast, env, Diagnostics())
    except (ParseError, MinilangRuntimeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        if debug_py_trace_enabled() and exc.__traceback__ is not None:
            print("".join(traceback.format_tb(exc.__traceback__)), file=sys.stderr, end="")
        return 1

    print(result)
    return 0

if __name__ == "__main__":
    sys.exit(main())
