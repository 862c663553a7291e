"""Core evaluator for the yall interpreter.

A recursive tree walk: every expression class has exactly one evaluation
rule, chosen by the match in `evaluate`. Applications are handed to
`yall.evaluation.apply`, which knows the procedure and form calling
conventions.
"""

from __future__ import annotations

from yall import Expression
from yall.evaluation.apply import apply, evaluate_args
from yall.types.atoms import Boolean, Number, Quoted, String
from yall.types.cell import Cell
from yall.types.empty import Empty, EmptyType
from yall.types.environment import Environment
from yall.types.errors import YallTypeError
from yall.types.function import Function
from yall.types.symbol import Symbol


def evaluate(expr: Expression, env: Environment) -> Expression:
    match expr:
        # --- Atoms evaluate to themselves ---
        case Number() | String() | Boolean() | EmptyType() | Function():
            return expr
        case Symbol():
            return env.resolve(expr)
        case Quoted(inner):
            return inner
        case Cell(head, args):
            return apply(evaluate(head, env), args, env, evaluate)
        case _:
            raise YallTypeError(f"Cannot evaluate {expr!r}")


def evaluate_each(args: Cell | EmptyType, env: Environment) -> Cell | EmptyType:
    """Evaluate every element of a list, left to right, into a new list."""
    return evaluate_args(args, env, evaluate)


def evaluate_body(body: Cell | EmptyType, env: Environment) -> Expression:
    """Evaluate a sequence of forms in order; the last value wins (Empty if none)."""
    result: Expression = Empty
    for form in body:
        result = evaluate(form, env)
    return result
