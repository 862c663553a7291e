from yall import Expression
from yall.evaluation.evaluator import evaluate
from yall.types.atoms import FALSE
from yall.types.cell import Cell
from yall.types.empty import EmptyType
from yall.types.environment import Environment
from yall.types.errors import YallArityError


def if_form(env: Environment, args: Cell | EmptyType) -> Expression:
    """(if test then else)"""
    clauses = list(args)
    if len(clauses) != 3:
        raise YallArityError("if requires a condition, a then-expression and an else-expression")

    test, then_expr, else_expr = clauses
    # Anything except the #f singleton counts as true
    if evaluate(test, env) is not FALSE:
        return evaluate(then_expr, env)
    return evaluate(else_expr, env)
