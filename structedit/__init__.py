"""
structedit — structural edit scripts
====================================

Compute an edit script that turns one nested Python value into another,
and apply it again.

    diff(1, 1)                          → []
    diff({"x": 1}, {"x": 2})            → [[["x"], "r", 2]]
    diff([1, 2, 3], [1, 3, 2, 4])       → [[[1], "+", 3], [[3], "+", 4], [[4], "-"]]
    diff({1, 2, 3}, {2, 3, 4})          → [[[1], "-"], [[4], "+", 4]]

Values may nest dicts (any Mapping), lists, tuples/deques, sets and
scalars.  Lists are aligned with the O(NP) sequence comparison algorithm,
so an insertion in the middle of a long list is one edit, not a cascade
of replacements.  Paths in the script are valid when the edits are
replayed in order:

    patch(a, diff(a, b)) == b
"""

from structedit.config import DEFAULT_CONFIG, DiffConfig
from structedit.core import Align, diff, min_plus_to_replace, vec_edits
from structedit.edit import Edit, EditOp, EditScript
from structedit.errors import (
    DepthLimitError, PatchError, ScriptFormatError, StructEditError,
)
from structedit.formats import (
    script_from_json, script_from_list, script_to_json, script_to_list,
)
from structedit.patch import patch
from structedit.types import NADA, Kind, get_type, strict_equal, strict_key

__version__ = "0.1.0"
__all__ = [
    "diff", "patch",
    "Edit", "EditOp", "EditScript",
    "Align", "vec_edits", "min_plus_to_replace",
    "NADA", "Kind", "get_type", "strict_equal", "strict_key",
    "DiffConfig", "DEFAULT_CONFIG",
    "StructEditError", "DepthLimitError", "PatchError", "ScriptFormatError",
    "script_to_list", "script_from_list", "script_to_json", "script_from_json",
]
