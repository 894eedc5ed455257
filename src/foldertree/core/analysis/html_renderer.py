from __future__ import annotations

"""
HTML Tree Renderer.

Produces a single self-contained page (embedded CSS, no scripts) where
every directory is a native <details> block that starts expanded.
"""

import html
from typing import List, Union

from foldertree.core.analysis.tree_renderer import DIR_SUFFIX, FILE_GLYPH, FOLDER_GLYPH
from foldertree.domain.tree_models import Node

# -----------------------------------------------------------------------------
# DOCUMENT TEMPLATE
# -----------------------------------------------------------------------------

HTML_HEAD = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width,initial-scale=1">
<title>Folder tree (WEB)</title>
<style>
body { font-family: Inter, system-ui, -apple-system, "Segoe UI", Roboto, "Helvetica Neue", Arial; padding: 18px; background:#f7f7fb; color:#111 }
.container { max-width: 1100px; margin: 0 auto; background: #fff; padding: 18px; border-radius: 10px; box-shadow: 0 6px 20px rgba(0,0,0,0.06); }
details { margin-left: 8px; }
summary { cursor: pointer; font-weight: 600; padding: 4px 0; }
.file { margin-left: 22px; padding: 2px 0; font-family: monospace; }
.root { text-align: center; font-weight: 800; font-size: 1.35em; margin-bottom: 6px }
</style>
</head>
<body>
<div class="container">
<div class="root">Folder structure (click to expand or collapse)</div>
<hr/>
"""

HTML_TAIL = """
</div>
</body>
</html>
"""

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_html(root: Node) -> str:
    """
    Render the tree as a complete HTML document.

    Only the root's descendants appear in the body; the root itself is
    represented by the page heading.

    Args:
        root: Tree to render.

    Returns:
        str: The full HTML document.
    """
    parts: List[str] = [HTML_HEAD]
    _render_html_children(root, parts)
    parts.append(HTML_TAIL)
    return "".join(parts)


def escape_html(text: str) -> str:
    """Escape '&', '<' and '>' (in that order); quotes are left untouched."""
    return html.escape(text, quote=False)


def _render_html_children(root: Node, parts: List[str]) -> None:
    # Items are nodes to open or closing tags to emit once a block is done
    stack: List[Union[Node, str]] = list(reversed(root.children))

    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
            continue

        name = escape_html(item.name)
        if item.is_dir:
            parts.append("<details open>\n")
            parts.append(f"<summary>{FOLDER_GLYPH} {name}{DIR_SUFFIX}</summary>\n")
            stack.append("</details>\n")
            stack.extend(reversed(item.children))
        else:
            parts.append(f'<div class="file">{FILE_GLYPH} {name}</div>\n')
