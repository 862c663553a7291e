"""Self-evaluating atoms and the quote wrapper."""

from __future__ import annotations

from dataclasses import dataclass

from yall import Expression


@dataclass(frozen=True, slots=True)
class Number:
    # int when read from an integer literal, float otherwise; arithmetic
    # always produces float.
    value: int | float

    def __str__(self) -> str:
        from yall.types.printer import to_string
        return to_string(self)


@dataclass(frozen=True, slots=True)
class String:
    # Raw text between the quotes; escapes are kept verbatim.
    value: str

    def __str__(self) -> str:
        from yall.types.printer import to_string
        return to_string(self)


class Boolean:
    """#t and #f. Only the two module-level instances exist."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __bool__(self) -> bool:
        return self is TRUE

    def __repr__(self) -> str:
        return self.name

    __str__ = __repr__


TRUE = Boolean("#t")
FALSE = Boolean("#f")


def boolean(flag: bool) -> Boolean:
    return TRUE if flag else FALSE


@dataclass(frozen=True, slots=True)
class Quoted:
    expr: Expression

    def __str__(self) -> str:
        from yall.types.printer import to_string
        return to_string(self)
