"""
structedit.edit — the edit script
=================================

An ``EditScript`` is an ordered log of edits.  Each edit names a path from
the root and one of three operations:

    +   add       a value now exists at the path where it did not
    -   delete    the value at the path no longer exists
    r   replace   the value at the path is superseded

Order matters: indices inside sequences are only valid when the edits are
replayed first to last, because every add/delete shifts the positions of
the elements after it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator

from .types import NADA


class EditOp(str, Enum):
    """Edit operations.  Values are the compact wire symbols."""
    ADD = "+"
    DELETE = "-"
    REPLACE = "r"


@dataclass(frozen=True, slots=True)
class Edit:
    """A single edit in an edit script."""
    path: tuple
    op: EditOp
    value: Any = NADA

    def to_list(self) -> list:
        """``[path, op]`` for deletes, ``[path, op, value]`` otherwise."""
        if self.op is EditOp.DELETE:
            return [list(self.path), self.op.value]
        return [list(self.path), self.op.value, self.value]

    def __repr__(self) -> str:
        path_str = "/".join(str(p) for p in self.path) or "(root)"
        if self.op is EditOp.ADD:
            return f"ADD at {path_str}: {self.value!r}"
        if self.op is EditOp.DELETE:
            return f"DELETE at {path_str}"
        return f"REPLACE at {path_str}: {self.value!r}"


class EditScript:
    """
    Accumulates edits produced by the differ.

    The three ``*_data`` methods are the only write calls the differ uses.
    Counts per operation are maintained as edits arrive.
    """

    __slots__ = ("_edits", "_adds", "_dels", "_reps")

    def __init__(self, edits=()) -> None:
        self._edits: list[Edit] = []
        self._adds = 0
        self._dels = 0
        self._reps = 0
        for edit in edits:
            self._append(edit)

    def _append(self, edit: Edit) -> None:
        if edit.op is EditOp.ADD:
            self._adds += 1
        elif edit.op is EditOp.DELETE:
            self._dels += 1
        else:
            self._reps += 1
        self._edits.append(edit)

    # ── writes ───────────────────────────────────────────────────────

    def add_data(self, path: tuple, value: Any) -> None:
        self._append(Edit(tuple(path), EditOp.ADD, value))

    def delete_data(self, path: tuple) -> None:
        self._append(Edit(tuple(path), EditOp.DELETE))

    def replace_data(self, path: tuple, value: Any) -> None:
        self._append(Edit(tuple(path), EditOp.REPLACE, value))

    # ── reads ────────────────────────────────────────────────────────

    @property
    def edits(self) -> tuple[Edit, ...]:
        return tuple(self._edits)

    def get_edits(self) -> list[list]:
        """The script as plain ``[path, op, value?]`` lists."""
        return [edit.to_list() for edit in self._edits]

    def edit_distance(self) -> int:
        """Number of edits in the script."""
        return len(self._edits)

    def get_adds_num(self) -> int:
        return self._adds

    def get_dels_num(self) -> int:
        return self._dels

    def get_reps_num(self) -> int:
        return self._reps

    def combine(self, other: "EditScript") -> "EditScript":
        """
        A new script running this one and then ``other``.

        If this script takes x to y and ``other`` takes y to z, the combined
        script takes x to z.
        """
        return EditScript(self._edits + list(other))

    def __iter__(self) -> Iterator[Edit]:
        return iter(self._edits)

    def __len__(self) -> int:
        return len(self._edits)

    def __bool__(self) -> bool:
        return bool(self._edits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EditScript):
            return NotImplemented
        return self._edits == other._edits

    __hash__ = None

    def __repr__(self) -> str:
        if len(self._edits) <= 5:
            return f"EditScript({self._edits!r})"
        return (f"EditScript([{self._edits[0]!r}, ..., {self._edits[-1]!r}] "
                f"len={len(self._edits)})")
