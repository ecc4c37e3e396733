"""Interactive REPL for minilang, powered by prompt_toolkit."""

from __future__ import annotations

import os
import re
import sys
import traceback
from dataclasses import dataclass, field
from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.shortcuts import clear

from .diagnostics import Diagnostics
from .environment import Environment
from .evaluator import eval_expr
from .parser import ParseError, parse_source
from .types import MinilangRuntimeError
from .utils import debug_py_trace_enabled

# Zero-width and invisible characters to strip from input.
_INVISIBLE_RE = re.compile("[\u200b\u200c\u200d\ufeff\u00a0\r]")

_DEF_RE = re.compile(r"^([A-Za-z_][A-Za-z0-9_]*)\s*=(.*)$", re.DOTALL)

# Slash commands: name => (description, argument_hint).
_SLASH_CMDS = {
    "/clear": ("Clear the terminal screen", ""),
    "/def": ("Bind a name in the session scope", "NAME = EXPR"),
    "/env": ("List session bindings", ""),
    "/py-traceback": ("Toggle Python traceback on errors", "[on|off]"),
    "/reset": ("Reset the REPL environment", ""),
    "/tree": ("Toggle syntax tree display", ""),
}


@dataclass
class ReplState:
    env: Environment = field(default_factory=Environment)
    show_tree: bool = False


class _SlashCompleter(Completer):
    """Autocomplete slash commands on the primary prompt."""

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor
        if not text.startswith("/"):
            return

        for cmd, (desc, hint) in _SLASH_CMDS.items():
            if cmd.startswith(text):
                yield Completion(
                    cmd,
                    start_position=-len(text),
                    display_meta=desc,
                )


def _report(exc: Exception) -> None:
    print(f"Error: {exc}", file=sys.stderr)
    if debug_py_trace_enabled() and exc.__traceback__ is not None:
        print("\nPython traceback:", file=sys.stderr)
        print("".join(traceback.format_tb(exc.__traceback__)), file=sys.stderr, end="")


def _define(arg: str, state: ReplState) -> None:
    match = _DEF_RE.match(arg.strip())
    if match is None:
        print("Usage: /def NAME = EXPR", file=sys.stderr)
        return

    name, src = match.group(1), match.group(2)

    try:
        value = eval_expr(parse_source(src), state.env, Diagnostics())
    except (ParseError, MinilangRuntimeError) as exc:
        _report(exc)
        return

    state.env = state.env.extend(name, value)
    print(f"{name} = {value!r}")


def handle_slash(line: str, state: ReplState) -> bool:
    """Handle slash commands. Returns True if the line was a command."""
    stripped = line.strip()
    if not stripped.startswith("/"):
        return False

    parts = stripped.split(None, 1)
    cmd = parts[0]
    arg = parts[1] if len(parts) > 1 else ""

    if cmd == "/clear":
        clear()
        return True

    if cmd == "/def":
        _define(arg, state)
        return True

    if cmd == "/env":
        bindings = state.env.visible()
        if not bindings:
            print("(no bindings)")
        for name, value in bindings.items():
            print(f"{name} = {value!r}")
        return True

    if cmd == "/py-traceback":
        if arg.lower() in ("on", "1", "true", "yes"):
            os.environ["MINILANG_DEBUG_PY_TRACE"] = "1"
        elif arg.lower() in ("off", "0", "false", "no"):
            os.environ.pop("MINILANG_DEBUG_PY_TRACE", None)
        elif arg == "":
            # Toggle.
            if debug_py_trace_enabled():
                os.environ.pop("MINILANG_DEBUG_PY_TRACE", None)
            else:
                os.environ["MINILANG_DEBUG_PY_TRACE"] = "1"
        else:
            print("Usage: /py-traceback [on|off]", file=sys.stderr)
            return True

        state_label = "on" if debug_py_trace_enabled() else "off"
        print(f"Python traceback: {state_label}")
        return True

    if cmd == "/reset":
        state.env = Environment()
        print("Environment reset.")
        return True

    if cmd == "/tree":
        state.show_tree = not state.show_tree
        print(f"Tree display: {'on' if state.show_tree else 'off'}")
        return True

    print(f"Unknown command: {cmd}", file=sys.stderr)
    return True


def _normalize(text: str) -> str:
    """Strip invisible characters from input."""
    return _INVISIBLE_RE.sub("", text)


def eval_line(text: str, state: ReplState) -> None:
    """Evaluate one entry; `let` bindings stay local to the entry."""
    try:
        ast = parse_source(text)
        if state.show_tree:
            ast.display_subtree(0)
        result = eval_expr(ast, state.env, Diagnostics())
    except (ParseError, MinilangRuntimeError) as exc:
        _report(exc)
        return

    print(result)


def repl() -> None:
    """Interactive read-eval-print loop with prompt_toolkit."""
    state = ReplState()

    session: PromptSession[str] = PromptSession(
        history=InMemoryHistory(),
        completer=_SlashCompleter(),
        complete_while_typing=True,
    )

    print("minilang repl, Ctrl-D to exit, / for commands")

    while True:
        try:
            text = session.prompt(">>> ")
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print("KeyboardInterrupt")
            continue

        text = _normalize(text)
        if not text.strip():
            continue

        if handle_slash(text, state):
            continue

        eval_line(text, state)
