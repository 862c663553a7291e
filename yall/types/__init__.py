from yall.types.symbol import Symbol
from yall.types.empty import Empty, EmptyType
from yall.types.cell import Cell, is_list, make_list
from yall.types.atoms import Number, String, Boolean, Quoted, TRUE, FALSE, boolean
from yall.types.function import Function, CallableKind
from yall.types.environment import Environment
from yall.types.lambda_fn import Lambda

__all__ = [
    "Symbol",
    "Empty",
    "EmptyType",
    "Cell",
    "is_list",
    "make_list",
    "Number",
    "String",
    "Boolean",
    "Quoted",
    "TRUE",
    "FALSE",
    "boolean",
    "Function",
    "CallableKind",
    "Environment",
    "Lambda",
]
