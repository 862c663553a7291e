"""Built-in procedures for the yall runtime.

Arithmetic folds over numbers and the primitive list operations. Every
procedure receives its arguments already evaluated, as a yall list.
"""
from __future__ import annotations

import math

from yall import Expression
from yall.types.atoms import FALSE, TRUE, Boolean, Number
from yall.types.cell import Cell, is_list
from yall.types.empty import Empty, EmptyType
from yall.types.errors import YallArityError, YallTypeError
from yall.types.function import Function


def _numbers(name: str, args: Cell | EmptyType) -> list[float]:
    """Payloads of `args` as floats; every argument must be a Number."""
    values = []
    for arg in args:
        if not isinstance(arg, Number):
            raise YallTypeError(f"All arguments to {name} must be numbers, got {arg}")
        try:
            values.append(float(arg.value))
        except OverflowError:
            raise YallTypeError(f"Argument to {name} is too large for a double") from None
    return values


def _single(name: str, args: Cell | EmptyType) -> Expression:
    if len(args) != 1:
        raise YallArityError(f"{name} requires exactly 1 argument")
    return args.car


def _divide(a: float, b: float) -> float:
    """IEEE-754 division: x/0 is a signed infinity, 0/0 is nan."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: Cell | EmptyType) -> Number:
    """Return the numeric sum of all arguments; (+) is 0."""
    result = 0.0
    for x in _numbers("+", args):
        result += x
    return Number(result)


def sub(args: Cell | EmptyType) -> Number:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    values = _numbers("-", args)
    if not values:
        raise YallArityError("- requires at least 1 argument")
    if len(values) == 1:
        return Number(-values[0])
    result = values[0]
    for x in values[1:]:
        result -= x
    return Number(result)


def mul(args: Cell | EmptyType) -> Number:
    """Return the product of all arguments; (*) is 1."""
    result = 1.0
    for x in _numbers("*", args):
        result *= x
    return Number(result)


def div(args: Cell | EmptyType) -> Number:
    """Divide left-to-right; with one arg returns the reciprocal."""
    values = _numbers("/", args)
    if not values:
        raise YallArityError("/ requires at least 1 argument")
    if len(values) == 1:
        return Number(_divide(1.0, values[0]))
    result = values[0]
    for x in values[1:]:
        result = _divide(result, x)
    return Number(result)


# -------------------------------
# Lists
# -------------------------------
def list_(args: Cell | EmptyType) -> Cell | EmptyType:
    return args


def car(args: Cell | EmptyType) -> Expression:
    """Return the first element of a non-empty list."""
    xs = _single("car", args)
    if not isinstance(xs, Cell):
        raise YallTypeError(f"car requires a non-empty list, got {xs}")
    return xs.car


def cdr(args: Cell | EmptyType) -> Cell | EmptyType:
    """Return everything after the first element of a non-empty list."""
    xs = _single("cdr", args)
    if not isinstance(xs, Cell):
        raise YallTypeError(f"cdr requires a non-empty list, got {xs}")
    return xs.cdr


def cons(args: Cell | EmptyType) -> Cell:
    """(cons x xs) => a new list with x in front of xs."""
    if len(args) != 2:
        raise YallArityError("cons requires exactly 2 arguments")
    head, tail = args
    if not is_list(tail):
        raise YallTypeError(f"cons requires a list as its second argument, got {tail}")
    return Cell(head, tail)


def is_null(args: Cell | EmptyType) -> Boolean:
    """Predicate: #t if the single argument is (), else #f."""
    return TRUE if _single("null?", args) is Empty else FALSE


PROCEDURES = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "list": list_,
    "car": car,
    "cdr": cdr,
    "cons": cons,
    "null?": is_null,
}


def register(table: dict[str, Expression]) -> None:
    """Add every builtin procedure to `table` under its yall name."""
    for name, body in PROCEDURES.items():
        table[name] = Function.procedure(name, body)
