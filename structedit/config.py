"""Diff options."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """
    Options for a single ``diff`` call.

    Attributes:
        max_depth: Deepest nesting level the differ will descend into.
            ``None`` leaves the bound to Python's recursion limit.  The
            root value sits at depth 0.
    """
    max_depth: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")


DEFAULT_CONFIG = DiffConfig()
