"""
structedit.types — value classification
========================================

Every value handed to the differ resolves to exactly one ``Kind``:

    NADA sentinel             → Kind.NIL   ("nothing here")
    Mapping (dict, ...)       → Kind.MAP
    list                      → Kind.VEC   (ordered, index addressed)
    tuple, deque              → Kind.LST   (list-like, diffed as a list)
    Set (set, frozenset, ...) → Kind.SET   (unordered, content addressed)
    anything else             → Kind.VAL   (scalar leaf, None included)

Equality throughout the package is STRICT: two values are equal only when
their concrete types match as well as their contents.  ``1``, ``1.0`` and
``True`` are three different values here even though Python's ``==``
conflates them.
"""

from collections import deque
from collections.abc import Mapping, Set
from enum import Enum
from typing import Any


class Kind(Enum):
    """The closed set of value kinds the differ dispatches on."""
    NIL = "nil"
    VAL = "val"
    MAP = "map"
    VEC = "vec"
    LST = "lst"
    SET = "set"


class _Nada:
    """Sentinel type for an absent value.  Use the ``NADA`` singleton."""
    __slots__ = ()

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NADA"

    def __reduce__(self):
        return (_Nada, ())

    def __bool__(self) -> bool:
        return False


NADA = _Nada()


def get_type(value: Any) -> Kind:
    """Classify a value into its ``Kind``."""
    if value is NADA:
        return Kind.NIL
    # str/bytes are Sequences but must stay scalar, so only concrete
    # container types are checked for the ordered kinds.
    if isinstance(value, list):
        return Kind.VEC
    if isinstance(value, (tuple, deque)):
        return Kind.LST
    if isinstance(value, Mapping):
        return Kind.MAP
    if isinstance(value, Set):
        return Kind.SET
    return Kind.VAL


def strict_key(value: Any) -> Any:
    """
    A hashable stand-in for ``value`` that also carries its type.

    Set members and mapping keys are hashed, and hashing conflates ``1``,
    ``1.0`` and ``True``.  Keying on ``strict_key`` keeps them apart, also
    inside tuples and frozensets used as keys.
    """
    if isinstance(value, tuple):
        return (type(value), tuple(strict_key(x) for x in value))
    if isinstance(value, frozenset):
        return (type(value), frozenset(strict_key(x) for x in value))
    return (type(value), value)


def strict_keys(mapping) -> dict:
    """Index the keys of ``mapping`` by their ``strict_key``."""
    return {strict_key(k): k for k in mapping}


def strict_equal(a: Any, b: Any) -> bool:
    """
    Type-distinguishing equality.

    Concrete types must match at every level.  Mappings match keys by
    ``strict_key`` and then compare values pairwise, sequences compare
    element by element, unordered collections compare their members by
    ``strict_key``.  Bounded deques must also agree on ``maxlen``.
    """
    if a is b:
        return True
    if type(a) is not type(b):
        return False

    kind = get_type(a)
    if kind is Kind.MAP:
        if len(a) != len(b):
            return False
        b_keys = strict_keys(b)
        for k, va in a.items():
            kb = b_keys.get(strict_key(k), NADA)
            if kb is NADA or not strict_equal(va, b[kb]):
                return False
        return True
    if kind is Kind.VEC or kind is Kind.LST:
        if len(a) != len(b):
            return False
        if isinstance(a, deque) and a.maxlen != b.maxlen:
            return False
        return all(strict_equal(x, y) for x, y in zip(a, b))
    if kind is Kind.SET:
        if len(a) != len(b):
            return False
        return {strict_key(x) for x in a} == {strict_key(x) for x in b}
    return a == b
