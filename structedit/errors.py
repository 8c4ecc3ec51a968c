"""structedit error hierarchy.

All structedit-specific errors inherit from StructEditError for easy catching.
"""


class StructEditError(Exception):
    """Base error for all structedit operations."""


class DepthLimitError(StructEditError):
    """The values nest deeper than the configured ``max_depth``."""

    def __init__(self, path: tuple, max_depth: int):
        self.path = path
        self.max_depth = max_depth
        super().__init__(
            f"nesting depth exceeds max_depth={max_depth} at path {list(path)!r}"
        )


class PatchError(StructEditError):
    """An edit script does not apply to the given value."""

    def __init__(self, path: tuple, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot apply edit at {list(path)!r}: {reason}")


class ScriptFormatError(StructEditError, ValueError):
    """A serialized edit script is malformed."""
