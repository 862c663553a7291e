"""Cons cells: the links of yall's singly linked, immutable lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from yall import Expression
from yall.types.empty import Empty, EmptyType
from yall.types.errors import YallTypeError


@dataclass(frozen=True, slots=True, eq=False)
class Cell:
    """A (car . cdr) pair whose cdr is always a list: Empty or another Cell.

    Equality is structural: two cells are equal when their cars and cdrs are.
    Both spines are walked in a loop, so long lists compare without recursing
    per element.
    """

    car: Expression
    cdr: Cell | EmptyType = Empty

    def __post_init__(self):
        if not is_list(self.cdr):
            raise YallTypeError(f"Cell tail must be a list, got {self.cdr!r}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        a: Cell | EmptyType = self
        b: Cell | EmptyType = other
        while a is not Empty and b is not Empty:
            if a is b:
                return True
            if a.car != b.car:
                return False
            a, b = a.cdr, b.cdr
        return a is b

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __iter__(self) -> Iterator[Expression]:
        cell: Cell | EmptyType = self
        while cell is not Empty:
            yield cell.car
            cell = cell.cdr

    def __len__(self) -> int:
        n = 0
        cell: Cell | EmptyType = self
        while cell is not Empty:
            n += 1
            cell = cell.cdr
        return n

    def __str__(self) -> str:
        from yall.types.printer import to_string
        return to_string(self)

    __repr__ = __str__


def is_list(expr: Expression) -> bool:
    return expr is Empty or isinstance(expr, Cell)


def make_list(items: Iterable[Expression]) -> Cell | EmptyType:
    """Build a right-nested list from `items`, terminated by Empty."""
    result: Cell | EmptyType = Empty
    for item in reversed(list(items)):
        result = Cell(item, result)
    return result
