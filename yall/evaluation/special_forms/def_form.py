from yall import Expression
from yall.evaluation.evaluator import evaluate
from yall.types.cell import Cell
from yall.types.empty import EmptyType
from yall.types.environment import Environment
from yall.types.errors import YallArityError, YallTypeError
from yall.types.symbol import Symbol


def def_form(env: Environment, args: Cell | EmptyType) -> Expression:
    """
    (def name value)
    Binds in the current frame and returns the symbol itself.
    """
    parts = list(args)
    if len(parts) != 2:
        raise YallArityError("def requires exactly 2 arguments")

    name, val_expr = parts
    if not isinstance(name, Symbol):
        raise YallTypeError(f"def requires a symbol, got {name}")
    env.bind(name, evaluate(val_expr, env))
    return name
