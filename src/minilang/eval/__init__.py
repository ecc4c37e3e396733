"""Evaluator helper modules for the minilang runtime."""

__all__ = [
    "binop",
    "let",
]
