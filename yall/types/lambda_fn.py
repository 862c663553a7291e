"""Closures created by the `fn` form."""

from __future__ import annotations

from yall import Expression
from yall.types.cell import Cell
from yall.types.empty import EmptyType
from yall.types.environment import Environment
from yall.types.errors import YallArityError
from yall.types.symbol import Symbol


class Lambda:
    """Formal parameters, a body and the environment captured at creation.

    Instances are the body of a procedure-kind Function: calling one with an
    evaluated argument list runs the body in a fresh frame whose outer is the
    captured environment, never the caller's.
    """

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: Cell | EmptyType, env: Environment):
        self.formals: list[Symbol] = formals
        self.body: Cell | EmptyType = body
        self.env: Environment = env

    def extend_env(self, args: Cell | EmptyType) -> Environment:
        """Bind each formal positionally to the matching argument in a new frame."""
        values = list(args)
        if len(values) != len(self.formals):
            raise YallArityError(
                f"Expected {len(self.formals)} argument(s), got {len(values)}"
            )
        frame = Environment(outer=self.env)
        for formal, value in zip(self.formals, values):
            frame.bind(formal, value)
        return frame

    def __call__(self, args: Cell | EmptyType) -> Expression:
        from yall.evaluation.evaluator import evaluate_body
        return evaluate_body(self.body, self.extend_env(args))
