"""Canonical printed form of every expression."""

from __future__ import annotations

from io import StringIO

from yall import Expression
from yall.types.atoms import Boolean, Number, Quoted, String
from yall.types.cell import Cell
from yall.types.empty import EmptyType
from yall.types.function import Function
from yall.types.symbol import Symbol

# Floats with an integral value below this magnitude print without a fraction.
_INTEGRAL_PRINT_LIMIT = 1e16


def format_number(value: int | float) -> str:
    if isinstance(value, float):
        if value.is_integer() and abs(value) < _INTEGRAL_PRINT_LIMIT:
            return str(int(value))
        return repr(value)
    return str(value)


def to_string(expr: Expression) -> str:
    match expr:
        case EmptyType():
            return "()"
        case Cell():
            with StringIO() as buffer:
                buffer.write("(")
                buffer.write(" ".join(to_string(item) for item in expr))
                buffer.write(")")
                return buffer.getvalue()
        case Number(value):
            return format_number(value)
        case String(value):
            return f'"{value}"'
        case Boolean():
            return expr.name
        case Symbol(name):
            return name
        case Quoted(inner):
            return "'" + to_string(inner)
        case Function():
            return str(expr)
        case _:
            raise TypeError(f"Not a yall expression: {expr!r}")
