"""Runtime environment for yall.

An Environment maps symbol names to expressions and links to an optional
`outer` environment. Closures create a fresh Environment whose outer is the
environment captured when the closure was made, which gives lexical scoping.

Builtins live in a single read-only table shared by every root environment;
it is consulted after the whole chain has been searched, so user definitions
shadow builtins at any level.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional

from yall import Expression
from yall.types.errors import YallTypeError, YallUnboundSymbol
from yall.types.symbol import Symbol


def default_builtins() -> Mapping[str, Expression]:
    from yall.builtin import BUILTINS
    return BUILTINS


class Environment:
    """Hierarchical mapping from names to yall expressions."""

    __slots__ = ("vars", "outer", "builtins")

    def __init__(
        self,
        outer: Optional[Environment] = None,
        builtins: Optional[Mapping[str, Expression]] = None,
    ):
        self.vars: dict[str, Expression] = {}
        self.outer: Environment | None = outer
        # Only a root environment consults the builtin table.
        if outer is None:
            self.builtins = builtins if builtins is not None else default_builtins()
        else:
            self.builtins = None

    def bind(self, name: str | Symbol, value: Expression) -> None:
        """Bind `name` to `value` in this frame only; outer frames are never touched."""
        self.vars[_name_of(name)] = value

    def find(self, name: str | Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        key = _name_of(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env
            env = env.outer
        return None

    def resolve(self, name: str | Symbol) -> Expression:
        """Look up `name` through the chain, then the builtin table.

        Raises YallUnboundSymbol if the name is bound nowhere.
        """
        key = _name_of(name)
        env: Environment = self
        while True:
            if key in env.vars:
                return env.vars[key]
            if env.outer is None:
                break
            env = env.outer
        if env.builtins is not None and key in env.builtins:
            return env.builtins[key]
        raise YallUnboundSymbol(key)

    def __contains__(self, name: str | Symbol) -> bool:
        try:
            self.resolve(name)
        except YallUnboundSymbol:
            return False
        return True

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            chain = []
            while env is not None:
                with StringIO() as frame:
                    env._write_vars(frame)
                    chain.append(frame.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()


def _name_of(name: str | Symbol) -> str:
    if isinstance(name, Symbol):
        return name.id
    if isinstance(name, str):
        return name
    raise YallTypeError(f"Cannot bind {name!r}: not a symbol")
