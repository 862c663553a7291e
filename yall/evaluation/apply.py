"""Application engine for yall.

Two calling conventions, fixed on each Function when it is built:
- procedures receive the argument list already evaluated, left to right;
- forms receive the calling environment and the raw argument list, and
  decide for themselves what to evaluate.
"""

from yall import Expression, EvaluatorFn
from yall.types.cell import Cell, make_list
from yall.types.empty import EmptyType
from yall.types.environment import Environment
from yall.types.errors import YallApplicationError
from yall.types.function import CallableKind, Function


def evaluate_args(
    args: Cell | EmptyType,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Cell | EmptyType:
    """Evaluate each argument, left to right, into a new list."""
    return make_list([evaluate_fn(arg, env) for arg in args])


def apply(
    head: Function | object,
    args: Cell | EmptyType,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """Apply an evaluated operator to the unevaluated argument list `args`."""
    if not isinstance(head, Function):
        raise YallApplicationError(f"Cannot apply non-function {head}")
    if head.kind is CallableKind.FORM:
        return head.body(env, args)
    return head.body(evaluate_args(args, env, evaluate_fn))
