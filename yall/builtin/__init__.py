"""The builtin table shared by every root Environment.

Built once at import: the special forms, the primitive procedures and the
two booleans under their printed names. The mapping is read-only; user
definitions go into environments and shadow these entries.
"""

from types import MappingProxyType
from typing import Mapping

from yall import Expression
from yall.builtin.env_builtin import register
from yall.evaluation.special_forms import SPECIAL_FORMS
from yall.types.atoms import FALSE, TRUE


def _build() -> Mapping[str, Expression]:
    table: dict[str, Expression] = dict(SPECIAL_FORMS)
    register(table)
    table[str(TRUE)] = TRUE
    table[str(FALSE)] = FALSE
    return MappingProxyType(table)


BUILTINS = _build()
