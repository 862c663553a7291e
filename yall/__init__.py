# Core type aliases for the yall data model.
# Every term, whether produced by the reader or by the evaluator, is one of
# the expression classes in yall.types: Empty, Cell, Number, String, Boolean,
# Symbol, Quoted or Function. Code and data share the same representation.
#
# Naming guidance:
# - Expression: any member of that closed set.
# - EvaluatorFn: the evaluator entry point, as handed to helpers that need to
#   evaluate sub-expressions.

from typing import Any, Callable

Expression = Any

EvaluatorFn = Callable[..., Expression]
