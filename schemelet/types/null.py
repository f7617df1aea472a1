from __future__ import annotations


class NullType:
    """The empty list. A single instance exists; it behaves as an empty sequence."""

    __slots__ = ()

    def __repr__(self): return "()"

    def __iter__(self):
        return iter(())

    def __len__(self):
        return 0

    # Null is truthy for the evaluator: only #f is false
    def __bool__(self):
        return True

    def __eq__(self, other):
        return isinstance(other, NullType)

    def __hash__(self):
        return hash(NullType)


Null = NullType()
