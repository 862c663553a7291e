"""Registry of special forms for the yall evaluator.

Each form is a Function of kind FORM: it is called with the current
environment and its raw argument list, and evaluates only what it needs.
"""

from yall.types.function import Function
from yall.evaluation.special_forms.if_form import if_form
from yall.evaluation.special_forms.def_form import def_form
from yall.evaluation.special_forms.fn_form import fn_form
from yall.evaluation.special_forms.eval_form import eval_form

SPECIAL_FORMS = {
    "if": Function.form("if", if_form),
    "def": Function.form("def", def_form),
    "fn": Function.form("fn", fn_form),
    "eval": Function.form("eval", eval_form),
}
