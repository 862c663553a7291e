from __future__ import annotations


class EmptyType:
    """The empty list. Terminates every proper list; there is only one."""

    _instance: EmptyType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "()"
    def __str__(self): return "()"
    def __bool__(self): return False
    def __len__(self): return 0
    def __iter__(self): return iter(())

    # Equal only to itself
    def __eq__(self, other):
        return other is self

    def __hash__(self):
        return id(self)


Empty = EmptyType()
