from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from typing_extensions import TypeAlias, TypeGuard

# ---------- Value Model ----------

@dataclass(frozen=True)
class MlInteger:
    value: int
    def __repr__(self) -> str:
        return str(self.value)

@dataclass(frozen=True)
class MlDouble:
    value: float
    def __repr__(self) -> str:
        return repr(self.value)

@dataclass(frozen=True)
class MlBoolean:
    value: bool
    def __repr__(self) -> str:
        return "true" if self.value else "false"

MlValue: TypeAlias = MlInteger | MlDouble | MlBoolean

def is_numeric(value: MlValue) -> TypeGuard[MlInteger | MlDouble]:
    return isinstance(value, (MlInteger, MlDouble))

def kind_name(value: MlValue) -> str:
    """Source-level name of a value's variant, used in error messages."""
    match value:
        case MlInteger():
            return "Integer"
        case MlDouble():
            return "Double"
        case MlBoolean():
            return "Boolean"
        case _:
            return type(value).__name__

# ---------- Exceptions ----------

class MinilangRuntimeError(Exception):
    line: Optional[int]

    def __init__(self, message: str, line: Optional[int] = None):
        super().__init__(message)
        self.line = line

    def __str__(self) -> str:
        msg = super().__str__()

        if self.line is None:
            return msg

        return f"{msg} (line {self.line})"

class MinilangTypeError(MinilangRuntimeError):
    pass

class MinilangDivisionByZero(MinilangRuntimeError):
    pass

class MinilangUnsupportedOperator(MinilangRuntimeError):
    def __init__(self, op: object, line: Optional[int] = None):
        label = getattr(op, "name", op)
        super().__init__(f"Unsupported binary operator: {label}", line)
        self.op = op

class MinilangUnboundIdentifier(MinilangRuntimeError):
    def __init__(self, name: str, line: Optional[int] = None):
        super().__init__(f"Name '{name}' not found", line)
        self.name = name
