from __future__ import annotations

"""
Tree Renderer.

Converts a Node tree into plain-text and Markdown outlines. Both renderers
are pure: they only read the tree and return the complete document. The
walks use an explicit stack so arbitrarily deep trees render safely.
"""

from typing import List, Tuple

from foldertree.domain.tree_models import Node

# Box-drawing connectors
BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE_PAD = "│   "
BLANK_PAD = "    "

DIR_SUFFIX = "/"

FOLDER_GLYPH = "📁"
FILE_GLYPH = "📄"
MD_INDENT = "  "

# -----------------------------------------------------------------------------
# GLYPH TREE
# -----------------------------------------------------------------------------

def render_glyph_tree(root: Node) -> str:
    """
    Render the tree using box-drawing connectors.

    The root name is emitted as-is on the first line; directories below it
    carry a trailing '/'.

    Args:
        root: Tree to render.

    Returns:
        str: Newline-terminated text document.
    """
    lines: List[str] = [root.name]
    stack = _glyph_pending(root, prefix="")

    while stack:
        node, prefix, is_last = stack.pop()
        connector = LAST_BRANCH if is_last else BRANCH

        if not node.is_dir:
            lines.append(f"{prefix}{connector}{node.name}")
            continue

        lines.append(f"{prefix}{connector}{node.name}{DIR_SUFFIX}")
        new_prefix = prefix + (BLANK_PAD if is_last else PIPE_PAD)
        stack.extend(_glyph_pending(node, prefix=new_prefix))

    return "\n".join(lines) + "\n"


def _glyph_pending(node: Node, prefix: str) -> List[Tuple[Node, str, bool]]:
    """Children of ``node`` in reverse, ready to be popped in display order."""
    last = len(node.children) - 1
    return [(child, prefix, i == last) for i, child in reversed(list(enumerate(node.children)))]

# -----------------------------------------------------------------------------
# MARKDOWN
# -----------------------------------------------------------------------------

def render_markdown(root: Node) -> str:
    """
    Render the tree as a nested Markdown list.

    The root becomes a bold folder line; every descendant is a list item
    indented two spaces per depth level.
    """
    lines: List[str] = [f"{FOLDER_GLYPH} **{root.name}**"]
    stack: List[Tuple[Node, int]] = [(child, 1) for child in reversed(root.children)]

    while stack:
        node, depth = stack.pop()
        indent = MD_INDENT * depth

        if node.is_dir:
            lines.append(f"{indent}- {FOLDER_GLYPH} **{node.name}**")
        else:
            lines.append(f"{indent}- {FILE_GLYPH} {node.name}")

        stack.extend((child, depth + 1) for child in reversed(node.children))

    return "\n".join(lines) + "\n"
