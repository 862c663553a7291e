from yall import Expression
from yall.evaluation.evaluator import evaluate, evaluate_each
from yall.types.cell import Cell
from yall.types.empty import Empty, EmptyType
from yall.types.environment import Environment
from yall.types.errors import YallArityError


def eval_form(env: Environment, args: Cell | EmptyType) -> Expression:
    """(eval expr ...) evaluates every argument, then evaluates the first result again."""
    if args is Empty:
        raise YallArityError("eval expects at least one argument")
    values = evaluate_each(args, env)
    return evaluate(values.car, env)
