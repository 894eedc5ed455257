from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the recursive node type produced by the tree builder and consumed
by every renderer, plus the hard failure raised when the scan root itself
is unreachable.
"""

from dataclasses import dataclass, field
from typing import Tuple

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Node:
    """
    One filesystem entry captured at scan time.

    Attributes:
        name: Display name (final path segment).
        path: Full path the entry was read from.
        is_dir: True if the entry is a directory.
        children: Sorted child nodes. Always empty for files.
    """
    name: str
    path: str = field(compare=False)
    is_dir: bool = False
    children: Tuple["Node", ...] = ()

    def __post_init__(self) -> None:
        if self.children and not self.is_dir:
            raise ValueError(f"File node '{self.name}' cannot have children.")


# -----------------------------------------------------------------------------
# ERRORS
# -----------------------------------------------------------------------------

class TreeAccessError(Exception):
    """
    Raised when the scan root cannot be stat'ed or listed.

    Attributes:
        path: The root path that failed.
        cause: The underlying operating system error.
    """

    def __init__(self, path: str, cause: OSError):
        super().__init__(str(cause))
        self.path = path
        self.cause = cause
