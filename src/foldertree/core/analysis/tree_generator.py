from __future__ import annotations

"""
Directory Tree Generator.

Walks the filesystem from a root path and captures it as an immutable
Node hierarchy. Only the root is allowed to fail hard: any entry below it
that cannot be stat'ed is dropped, and any nested directory that cannot
be listed is kept with no children. The walk keeps its own stack, so
depth is limited by the filesystem, not by the interpreter.
"""

import logging
import os
import stat
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from foldertree.domain.tree_models import Node, TreeAccessError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(path: str) -> Node:
    """
    Build the complete Node tree rooted at ``path``.

    Args:
        path: Directory (or file) to scan. Symlinks are followed.

    Returns:
        Node: The root node with all reachable descendants.

    Raises:
        TreeAccessError: If the root cannot be stat'ed, or if it is a
            directory whose entries cannot be listed.
    """
    logger.info(f"Scanning directory tree: {path}")

    try:
        is_dir = _is_directory(path)
    except OSError as e:
        raise TreeAccessError(path, e) from e

    if not is_dir:
        return Node(name=_display_name(path), path=path, is_dir=False)

    try:
        entries = _sorted_entries(path)
    except OSError as e:
        raise TreeAccessError(path, e) from e

    root = _build_directory(path, entries)

    if logger.isEnabledFor(logging.DEBUG):
        dirs, files = count_nodes(root)
        logger.debug(f"Scan complete: {dirs} directories, {files} files under {path}")
    return root


def count_nodes(root: Node) -> Tuple[int, int]:
    """
    Count descendants of ``root`` by kind.

    Returns:
        Tuple[int, int]: (directories, files), excluding the root itself.
    """
    dirs = 0
    files = 0
    stack: List[Node] = list(root.children)
    while stack:
        node = stack.pop()
        if node.is_dir:
            dirs += 1
            stack.extend(node.children)
        else:
            files += 1
    return dirs, files

# -----------------------------------------------------------------------------
# INTERNAL HELPERS (SCANNING)
# -----------------------------------------------------------------------------

@dataclass
class _PendingDir:
    """A directory whose entries are still being visited."""
    path: str
    entries: Iterator[str]
    children: List[Node] = field(default_factory=list)


def _build_directory(path: str, entries: List[str]) -> Node:
    """
    Build a directory node from its already-listed entries.

    Uses an explicit stack instead of recursion, so tree depth is bounded
    only by the filesystem. Entries that cannot be stat'ed are dropped;
    directories that cannot be listed are kept with no children.
    """
    stack: List[_PendingDir] = [_PendingDir(path, iter(entries))]

    while True:
        current = stack[-1]
        entry = next(current.entries, None)

        if entry is None:
            stack.pop()
            node = Node(
                name=_display_name(current.path),
                path=current.path,
                is_dir=True,
                children=tuple(current.children),
            )
            if not stack:
                return node
            stack[-1].children.append(node)
            continue

        child_path = os.path.join(current.path, entry)
        try:
            is_dir = _is_directory(child_path)
        except OSError as e:
            # Broken symlinks, vanished entries, EPERM, ELOOP
            logger.debug(f"Skipping unreadable entry '{child_path}': {e}")
            continue

        if not is_dir:
            current.children.append(Node(name=_display_name(child_path), path=child_path))
            continue

        try:
            child_entries = _sorted_entries(child_path)
        except OSError as e:
            logger.debug(f"Cannot list '{child_path}', keeping it empty: {e}")
            current.children.append(
                Node(name=_display_name(child_path), path=child_path, is_dir=True)
            )
            continue

        stack.append(_PendingDir(child_path, iter(child_entries)))


def _sorted_entries(path: str) -> List[str]:
    """List directory entries ordered case-insensitively (stable for ties)."""
    return sorted(os.listdir(path), key=str.lower)


def _is_directory(path: str) -> bool:
    return stat.S_ISDIR(os.stat(path).st_mode)


def _display_name(path: str) -> str:
    """Final path segment, or the path itself for roots like '/'."""
    return os.path.basename(os.path.normpath(path)) or path
