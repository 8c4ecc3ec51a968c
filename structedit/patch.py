"""
structedit.patch — apply an edit script
=======================================

    patch(a, diff(a, b)) == b      (under strict equality)

Edits are applied first to last.  The input is never mutated: every
container on the path of an edit is copied, everything off the path is
shared with the input.
"""

import copy
import logging
from collections import deque
from collections.abc import MutableMapping, MutableSet
from typing import Any

from .edit import Edit, EditOp, EditScript
from .errors import PatchError
from .types import NADA, Kind, get_type

logger = logging.getLogger(__name__)


def patch(value: Any, script: EditScript) -> Any:
    """
    Apply an edit script to produce the target value.

    Raises:
        PatchError: an edit does not fit the value it is applied to.
    """
    count = 0
    for edit in script:
        value = _apply(value, edit, 0)
        count += 1
    logger.debug("applied %d edits", count)
    return value


def _apply(value: Any, edit: Edit, i: int) -> Any:
    """Apply ``edit`` to ``value``, which sits at ``edit.path[:i]``."""
    path = edit.path
    if i == len(path):
        # Root of the script.
        return NADA if edit.op is EditOp.DELETE else edit.value

    kind = get_type(value)
    seg = path[i]
    if i + 1 < len(path):
        child = _get_child(value, kind, seg, path[:i + 1])
        return _set_child(value, kind, seg, _apply(child, edit, i + 1))

    if kind is Kind.MAP:
        return _patch_map(value, seg, edit)
    if kind is Kind.VEC or kind is Kind.LST:
        return _patch_seq(value, seg, edit)
    if kind is Kind.SET:
        return _patch_set(value, seg, edit)
    raise PatchError(path, f"{type(value).__name__} is not a container")


# ═══════════════════════════════════════════════════════════════════
#  NAVIGATION
# ═══════════════════════════════════════════════════════════════════

def _check_index(seg: Any, size: int, path: tuple) -> int:
    if isinstance(seg, bool) or not isinstance(seg, int):
        raise PatchError(path, f"sequence index must be an int, got {seg!r}")
    if not 0 <= seg < size:
        raise PatchError(path, f"index {seg} out of range for length {size}")
    return seg


def _get_child(value: Any, kind: Kind, seg: Any, path: tuple) -> Any:
    if kind is Kind.MAP:
        if seg not in value:
            raise PatchError(path, f"missing key {seg!r}")
        return value[seg]
    if kind is Kind.VEC or kind is Kind.LST:
        return value[_check_index(seg, len(value), path)]
    if kind is Kind.SET:
        raise PatchError(path, "cannot descend into a set member")
    raise PatchError(path, f"{type(value).__name__} is not a container")


def _set_child(value: Any, kind: Kind, seg: Any, child: Any) -> Any:
    if kind is Kind.MAP:
        entries = _copy_map(value)
        entries[seg] = child
        return entries
    items = list(value)
    items[seg] = child
    return _rebuild_seq(value, items)


def _copy_map(value):
    if isinstance(value, MutableMapping):
        return copy.copy(value)
    return dict(value)


def _rebuild_seq(value, items: list):
    if isinstance(value, list):
        return items
    if isinstance(value, deque):
        return deque(items, maxlen=value.maxlen)
    if hasattr(type(value), "_make"):  # namedtuple
        return type(value)._make(items)
    return type(value)(items)


# ═══════════════════════════════════════════════════════════════════
#  LEAF EDITS
# ═══════════════════════════════════════════════════════════════════

def _patch_map(value, key, edit: Edit):
    if edit.op is not EditOp.ADD and key not in value:
        raise PatchError(edit.path, f"missing key {key!r}")
    entries = _copy_map(value)
    if edit.op is EditOp.DELETE:
        del entries[key]
    elif edit.op is EditOp.ADD:
        # Assignment keeps a stored key that is == but of another type.
        entries.pop(key, None)
        entries[key] = edit.value
    else:
        entries[key] = edit.value
    return entries


def _patch_seq(value, index, edit: Edit):
    items = list(value)
    if edit.op is EditOp.ADD:
        # Adding at len(items) appends.
        _check_index(index, len(items) + 1, edit.path)
        items.insert(index, edit.value)
    elif edit.op is EditOp.DELETE:
        del items[_check_index(index, len(items), edit.path)]
    else:
        items[_check_index(index, len(items), edit.path)] = edit.value
    return _rebuild_seq(value, items)


def _patch_set(value, member, edit: Edit):
    if edit.op is EditOp.REPLACE:
        raise PatchError(edit.path, "set members cannot be replaced")
    members = copy.copy(value) if isinstance(value, MutableSet) else set(value)
    if edit.op is EditOp.ADD:
        members.discard(edit.value)
        members.add(edit.value)
    else:
        if member not in members:
            raise PatchError(edit.path, f"missing member {member!r}")
        members.discard(member)
    if isinstance(value, MutableSet):
        return members
    return type(value)(members)
