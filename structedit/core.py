"""
structedit.core — structural diff
=================================

ALGORITHM
═════════

§1  THE PROBLEM
───────────────

Given two nested values a and b, produce an edit script: an ordered list of
add / delete / replace edits, each addressed by a path from the root, such
that replaying the edits on a in order yields b.

The differ walks both values in parallel and dispatches on the Kind of each
side (see ``structedit.types``):

    a is NADA              → add b
    a scalar               → delete if b is NADA, replace if b differs
    a container, b NADA    → delete
    a container, b other   → replace the whole subtree
    same container type    → recurse:
        Mapping            key by key; keys missing on one side become
                           adds or deletes
        Set                set differences; elements are their own path
                           segment, there is no "replace" for a member
        list               sequence alignment (§2 – §4)
        tuple / deque      converted to lists, then as above

Keys and set members are matched by ``strict_key``, so ``{1}`` against
``{True}`` is a delete and an add.  A changed deque with a ``maxlen`` is
replaced whole.

No global minimality is attempted for nested structures.  Only the flat
alignment of one sequence against another is optimal.


§2  SEQUENCE ALIGNMENT — O(NP)
──────────────────────────────

Wu, Manber, Myers, Miller (1990), "An O(NP) Sequence Comparison
Algorithm", Information Processing Letters 35:6, 317-323.

Let A have n elements and B have m, with n ≥ m (otherwise swap the inputs
and swap every insert/delete of the result).  Diagonal k holds the points
(x, y) with x − y = k.  delta = n − m is the diagonal of the end point.

    FP[k] = (furthest x reached on diagonal k, ops taken to get there)

For p = 0, 1, 2, ... evaluate diagonals

    −p, …, delta − 1        ascending
    delta + p, …, delta + 1  descending
    delta

and for each k:

    x  = max(FP[k−1].x + 1, FP[k+1].x)      (unset entries are −1)
    op = "-" if the k−1 side won, else "+"  (ties go to "+")
    x' = snake(k, x)                        follow A[x] == B[x−k] forward
    FP[k] = (x', ops(k±1) + [op] + [x' − x if x' > x])

Stop once FP[delta].x == n.  The ops on diagonal delta, minus the first
(synthetic) one, are the alignment: insert / delete tags interleaved with
positive ints, each a run of matching elements.

This is optimal for unit-cost insert/delete without substitution.  Running
time is O((n − m)·p) where p is the number of deletions, close to linear
for similar inputs and quadratic only for very different ones.

Matching uses strict equality (type AND value), so ``[1]`` against
``[1.0]`` or ``[True]`` does not match.


§3  RECOVERING REPLACEMENTS
───────────────────────────

The alignment only knows "-" and "+".  An isolated "-" directly followed
by a "+" is turned into a single "r", so the differ can recurse into the
pair instead of deleting one subtree and adding the other.  A "-" that is
itself preceded by a "-" is left alone: which of the deletes belongs with
the insert is ambiguous, and the heuristic does not guess.


§4  POSITION ACCOUNTING
───────────────────────

Paths must be valid when the script is replayed in order, so the emitted
index is the element's position in the partially patched sequence, not
in either input.  Three cursors walk the alignment:

    ia    next unconsumed element of A       "-", "r", run
    ia_   emitted index                      "+", "r", run
    ib    next unconsumed element of B       "+", "r", run

A delete does not advance ia_: the next element slides into the slot.
"""

import logging
from collections import deque
from enum import Enum
from typing import Any, Optional

from .config import DEFAULT_CONFIG, DiffConfig
from .edit import EditScript
from .errors import DepthLimitError
from .types import NADA, Kind, get_type, strict_equal, strict_key, strict_keys

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════
#  SEQUENCE ALIGNMENT
# ═══════════════════════════════════════════════════════════════════

class Align(str, Enum):
    """Alignment tags.  Match runs are plain positive ints."""
    DELETE = "-"
    INSERT = "+"
    REPLACE = "r"


def _np_edits(a, b, n: int, m: int) -> list:
    """
    Raw O(NP) alignment of ``a`` (length n) against ``b`` (length m).

    Requires n ≥ m.  Returns a list of ``Align.DELETE``, ``Align.INSERT``
    and int match runs.
    """
    delta = n - m
    # diagonal -> (furthest x, ops chain).  A chain is a linked list of
    # (op, parent) pairs so neighbouring diagonals share their prefixes.
    fp: dict[int, tuple[int, Optional[tuple]]] = {}

    def snake(k: int, x: int) -> int:
        y = x - k
        while x < n and y < m and strict_equal(a[x], b[y]):
            x += 1
            y += 1
        return x

    def furthest(k: int) -> None:
        x_del, chain_del = fp.get(k - 1, (-1, None))
        x_del += 1
        x_ins, chain_ins = fp.get(k + 1, (-1, None))
        x = max(x_del, x_ins)
        sk = snake(k, x)
        if x_del > x_ins:
            chain = (Align.DELETE, chain_del)
        else:
            chain = (Align.INSERT, chain_ins)
        if sk > x:
            chain = (sk - x, chain)
        fp[k] = (sk, chain)

    p = 0
    while True:
        for k in range(-p, delta):
            furthest(k)
        for k in range(delta + p, delta, -1):
            furthest(k)
        furthest(delta)
        if fp[delta][0] == n:
            break
        p += 1

    ops: list = []
    node = fp[delta][1]
    while node is not None:
        op, node = node
        ops.append(op)
    ops.reverse()
    # The first op stems from the unset neighbours of the start point.
    ops = ops[1:]

    logger.debug("aligned %d against %d items: %d deletions, %d insertions",
                 n, m, ops.count(Align.DELETE), ops.count(Align.INSERT))
    return ops


def swap_ops(ops: list) -> list:
    """Swap every insert for a delete and vice versa."""
    swapped = {Align.DELETE: Align.INSERT, Align.INSERT: Align.DELETE}
    return [op if isinstance(op, int) else swapped.get(op, op) for op in ops]


def min_plus_to_replace(ops: list) -> list:
    """
    Merge isolated ``-`` ``+`` pairs into ``r``.

    A ``-`` preceded by another ``-`` is never merged.
    """
    result: list = []
    n = len(ops)
    j = 0
    while j < n:
        prev = ops[j - 1] if j > 0 else None
        nxt = ops[j + 1] if j + 1 < n else None
        if ops[j] == Align.DELETE and nxt == Align.INSERT and prev != Align.DELETE:
            result.append(Align.REPLACE)
            j += 2
        else:
            result.append(ops[j])
            j += 1
    return result


def vec_edits(a, b) -> list:
    """
    Align two sequences and recover replacements.

    Returns ``-``/``+``/``r`` tags and int match runs.
    """
    n = len(a)
    m = len(b)
    if n < m:
        ops = swap_ops(_np_edits(b, a, m, n))
    else:
        ops = _np_edits(a, b, n, m)
    return min_plus_to_replace(ops)


# ═══════════════════════════════════════════════════════════════════
#  CONTAINER DIFFS
# ═══════════════════════════════════════════════════════════════════

def _diff_map(script: EditScript, path: tuple, a, b, depth: int,
              max_depth: Optional[int]) -> None:
    # Keys are matched by strict_key so 1, 1.0 and True stay distinct.
    b_keys = strict_keys(b)
    for k, va in a.items():
        kb = b_keys.get(strict_key(k), NADA)
        vb = NADA if kb is NADA else b[kb]
        _diff(script, path + (k,), va, vb, depth + 1, max_depth)
    a_keys = strict_keys(a)
    for k, vb in b.items():
        if strict_key(k) not in a_keys:
            _diff(script, path + (k,), NADA, vb, depth + 1, max_depth)


def _diff_vec(script: EditScript, path: tuple, a, b, depth: int,
              max_depth: Optional[int]) -> None:
    ia = ia_ = ib = 0
    for op in vec_edits(a, b):
        if op == Align.DELETE:
            _diff(script, path + (ia_,), a[ia], NADA, depth + 1, max_depth)
            ia += 1
        elif op == Align.INSERT:
            _diff(script, path + (ia_,), NADA, b[ib], depth + 1, max_depth)
            ia_ += 1
            ib += 1
        elif op == Align.REPLACE:
            _diff(script, path + (ia_,), a[ia], b[ib], depth + 1, max_depth)
            ia += 1
            ia_ += 1
            ib += 1
        else:
            ia += op
            ia_ += op
            ib += op


def _diff_set(script: EditScript, path: tuple, a, b, depth: int,
              max_depth: Optional[int]) -> None:
    a_members = {strict_key(x): x for x in a}
    b_members = {strict_key(x): x for x in b}
    for key, va in a_members.items():
        if key not in b_members:
            _diff(script, path + (va,), va, NADA, depth + 1, max_depth)
    for key, vb in b_members.items():
        if key not in a_members:
            _diff(script, path + (vb,), NADA, vb, depth + 1, max_depth)


def _diff_lst(script: EditScript, path: tuple, a, b, depth: int,
              max_depth: Optional[int]) -> None:
    _diff_vec(script, path, list(a), list(b), depth, max_depth)


def _is_bounded(value) -> bool:
    # Replaying inserts on a bounded deque can push items out of its left
    # end, so a change involving one replaces the whole deque.
    return isinstance(value, deque) and value.maxlen is not None


_CONTAINER_DIFFS = {
    Kind.MAP: _diff_map,
    Kind.VEC: _diff_vec,
    Kind.SET: _diff_set,
    Kind.LST: _diff_lst,
}


# ═══════════════════════════════════════════════════════════════════
#  DIFF
# ═══════════════════════════════════════════════════════════════════

def _diff(script: EditScript, path: tuple, a: Any, b: Any, depth: int,
          max_depth: Optional[int]) -> None:
    if a is b:
        return
    if max_depth is not None and depth > max_depth:
        raise DepthLimitError(path, max_depth)

    ka = get_type(a)
    if ka is Kind.NIL:
        script.add_data(path, b)
        return

    kb = get_type(b)
    if ka is Kind.VAL:
        if kb is Kind.NIL:
            script.delete_data(path)
        elif not strict_equal(a, b):
            script.replace_data(path, b)
        return

    if kb is Kind.NIL:
        script.delete_data(path)
    elif kb is not ka or type(a) is not type(b):
        script.replace_data(path, b)
    elif _is_bounded(a) or _is_bounded(b):
        if not strict_equal(a, b):
            script.replace_data(path, b)
    else:
        _CONTAINER_DIFFS[ka](script, path, a, b, depth, max_depth)


def diff(a: Any, b: Any, config: Optional[DiffConfig] = None) -> EditScript:
    """
    Compute an edit script that transforms ``a`` into ``b``.

    ``patch(a, diff(a, b))`` is strictly equal to ``b``, and ``diff(a, a)``
    is empty.  The script is fast to compute but not guaranteed minimal
    for nested values.

    Raises:
        DepthLimitError: the inputs nest deeper than ``config.max_depth``.
    """
    config = config or DEFAULT_CONFIG
    script = EditScript()
    _diff(script, (), a, b, 0, config.max_depth)
    logger.debug("diff produced %d edits (%d adds, %d deletes, %d replaces)",
                 script.edit_distance(), script.get_adds_num(),
                 script.get_dels_num(), script.get_reps_num())
    return script
