from yall import Expression
from yall.types.cell import Cell, is_list
from yall.types.empty import Empty, EmptyType
from yall.types.environment import Environment
from yall.types.errors import YallArityError, YallTypeError
from yall.types.function import Function
from yall.types.lambda_fn import Lambda
from yall.types.symbol import Symbol

CLOSURE_NAME = "#fn"


def fn_form(env: Environment, args: Cell | EmptyType) -> Expression:
    # (fn (params...) body...) allows zero or more body forms, evaluated in
    # order. With no body forms a call returns ().
    if args is Empty:
        raise YallArityError("fn requires at least a parameter list")

    params = args.car
    if not is_list(params):
        raise YallTypeError(f"fn parameters must be a list, got {params}")
    formals = list(params)
    for formal in formals:
        if not isinstance(formal, Symbol):
            raise YallTypeError(f"fn parameter must be a symbol, got {formal}")

    return Function.procedure(CLOSURE_NAME, Lambda(formals, args.cdr, env))
