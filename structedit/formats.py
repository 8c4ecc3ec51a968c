"""
structedit.formats — serialize edit scripts.

Wire form of a script is a list of edits, each edit a list:

    [path, "+", value]     add
    [path, "-"]            delete
    [path, "r", value]     replace

where ``path`` is a list of keys / indices.  For example
``diff({"x": 1}, {"x": 2})`` serializes as ``[[["x"], "r", 2]]``.

JSON round-trips are exact only for JSON-compatible values: tuples come
back as lists and sets cannot be written at all.
"""

import json
from typing import Any

from .edit import Edit, EditOp, EditScript
from .errors import ScriptFormatError


def script_to_list(script: EditScript) -> list[list]:
    """Convert an edit script to plain nested lists."""
    return script.get_edits()


def script_from_list(data: Any) -> EditScript:
    """
    Build an edit script from plain nested lists.

    Inverse of script_to_list.

    Raises:
        ScriptFormatError: an entry is not a valid edit.
    """
    if not isinstance(data, (list, tuple)):
        raise ScriptFormatError(f"edit script must be a list, got {type(data).__name__}")

    edits = []
    for pos, entry in enumerate(data):
        if not isinstance(entry, (list, tuple)) or len(entry) not in (2, 3):
            raise ScriptFormatError(f"edit #{pos} must be [path, op] or [path, op, value]: {entry!r}")
        path, symbol = entry[0], entry[1]
        if not isinstance(path, (list, tuple)):
            raise ScriptFormatError(f"edit #{pos} has a non-list path: {path!r}")
        try:
            op = EditOp(symbol)
        except ValueError:
            raise ScriptFormatError(f"edit #{pos} has unknown op {symbol!r}") from None

        if op is EditOp.DELETE:
            if len(entry) != 2:
                raise ScriptFormatError(f"edit #{pos}: delete takes no value")
            edits.append(Edit(tuple(path), op))
        else:
            if len(entry) != 3:
                raise ScriptFormatError(f"edit #{pos}: {op.name.lower()} needs a value")
            edits.append(Edit(tuple(path), op, entry[2]))

    return EditScript(edits)


def script_to_json(script: EditScript, **kwargs) -> str:
    """Convert an edit script to a JSON string."""
    return json.dumps(script_to_list(script), **kwargs)


def script_from_json(text: str) -> EditScript:
    """Parse a JSON string into an edit script."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ScriptFormatError(f"invalid JSON: {exc}") from exc
    return script_from_list(data)
