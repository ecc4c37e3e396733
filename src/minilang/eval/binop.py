from __future__ import annotations

from typing import NoReturn, Optional

from ..diagnostics import Diagnostics
from ..token_types import ARITHMETIC_OPS, BOOLEAN_OPS, TT
from ..types import (
    MlBoolean,
    MlDouble,
    MlInteger,
    MlValue,
    MinilangDivisionByZero,
    MinilangTypeError,
    MinilangUnsupportedOperator,
    is_numeric,
    kind_name,
)

def apply_binary_operator(
    op: TT,
    lhs: MlValue,
    rhs: MlValue,
    diagnostics: Diagnostics,
    line: Optional[int] = None,
) -> MlValue:
    """Combine two already-evaluated operands with `op`."""
    if isinstance(op, TT) and op in ARITHMETIC_OPS:
        return _apply_arithmetic(op, lhs, rhs, diagnostics, line)

    if isinstance(op, TT) and op in BOOLEAN_OPS:
        return _apply_boolean(op, lhs, rhs, diagnostics, line)

    diagnostics.report(f"Unsupported binary operator: {_op_label(op)}", line, op if isinstance(op, TT) else None)
    raise MinilangUnsupportedOperator(op, line)

def _apply_arithmetic(op: TT, lhs: MlValue, rhs: MlValue, diagnostics: Diagnostics, line: Optional[int]) -> MlValue:
    if not (is_numeric(lhs) and is_numeric(rhs)):
        msg = f"Arithmetic operation '{op.name}' requires numeric operands."
        diagnostics.report(msg, line, op)
        raise MinilangTypeError(f"{msg} Got {kind_name(lhs)} and {kind_name(rhs)}", line)

    try:
        lnum = float(lhs.value)
        rnum = float(rhs.value)
    except OverflowError:
        _report_out_of_range(op, "Integer operand out of range.", diagnostics, line)

    both_int = isinstance(lhs, MlInteger) and isinstance(rhs, MlInteger)

    match op:
        case TT.ADD:
            return _narrow(lnum + rnum, both_int, op, diagnostics, line)
        case TT.SUB:
            return _narrow(lnum - rnum, both_int, op, diagnostics, line)
        case TT.MULT:
            return _narrow(lnum * rnum, both_int, op, diagnostics, line)
        case TT.DIV:
            if rnum == 0:
                diagnostics.report("Division by zero.", line, op)
                raise MinilangDivisionByZero("Division by zero.", line)

            if not both_int:
                msg = f"Arithmetic operation '{op.name}' requires Integer operands."
                diagnostics.report(msg, line, op)
                raise MinilangTypeError(f"{msg} Got {kind_name(lhs)} and {kind_name(rhs)}", line)

            return MlInteger(_trunc_div(lhs.value, rhs.value))
        case TT.MOD:
            if not both_int:
                msg = f"Arithmetic operation '{op.name}' requires Integer operands."
                diagnostics.report(msg, line, op)
                raise MinilangTypeError(f"{msg} Got {kind_name(lhs)} and {kind_name(rhs)}", line)

            if rhs.value == 0:
                diagnostics.report("Mod by zero.", line, op)
                raise MinilangDivisionByZero("Mod by zero.", line)

            return MlInteger(lhs.value - rhs.value * _trunc_div(lhs.value, rhs.value))
        case _:
            diagnostics.report(f"Unsupported binary operator: {op.name}", line, op)
            raise MinilangUnsupportedOperator(op, line)

def _apply_boolean(op: TT, lhs: MlValue, rhs: MlValue, diagnostics: Diagnostics, line: Optional[int]) -> MlValue:
    if not (isinstance(lhs, MlBoolean) and isinstance(rhs, MlBoolean)):
        msg = f"Boolean operation '{op.name}' requires Boolean operands."
        diagnostics.report(msg, line, op)
        raise MinilangTypeError(f"{msg} Got {kind_name(lhs)} and {kind_name(rhs)}", line)

    if op == TT.AND:
        return MlBoolean(lhs.value and rhs.value)

    return MlBoolean(lhs.value or rhs.value)

def _narrow(result: float, to_int: bool, op: TT, diagnostics: Diagnostics, line: Optional[int]) -> MlValue:
    # Integer results are computed in floating point and truncated back.
    if to_int:
        try:
            return MlInteger(int(result))
        except OverflowError:
            _report_out_of_range(op, "Integer result out of range.", diagnostics, line)

    return MlDouble(result)

def _report_out_of_range(op: TT, msg: str, diagnostics: Diagnostics, line: Optional[int]) -> NoReturn:
    diagnostics.report(msg, line, op)
    raise MinilangTypeError(f"Arithmetic operation '{op.name}': {msg}", line)

def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q

def _op_label(op: object) -> str:
    return str(getattr(op, "name", op))
