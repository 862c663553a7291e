"""Runtime callables: builtin procedures, special forms and closures."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable

from yall import Expression


class CallableKind(enum.Enum):
    # Receives the already-evaluated argument list.
    PROCEDURE = "proc"
    # Receives the calling environment and the raw argument list.
    FORM = "form"


@dataclass(frozen=True, eq=False)
class Function:
    """A named callable. The calling convention is fixed by `kind`."""

    name: str
    kind: CallableKind
    body: Callable[..., Expression]

    @classmethod
    def procedure(cls, name: str, body: Callable[..., Expression]) -> Function:
        return cls(name, CallableKind.PROCEDURE, body)

    @classmethod
    def form(cls, name: str, body: Callable[..., Expression]) -> Function:
        return cls(name, CallableKind.FORM, body)

    @property
    def is_form(self) -> bool:
        return self.kind is CallableKind.FORM

    def __str__(self) -> str:
        return f"#<{self.kind.value} {self.name}>"

    __repr__ = __str__
