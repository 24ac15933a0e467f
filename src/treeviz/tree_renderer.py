"""Box-drawing rendering of a tree.

Example output:
    .
    ├─ src
    │  ├─ main.py
    │  └─ utils.py
    └─ README.md
"""

from __future__ import annotations

from typing import TextIO

from treeviz.models import TreeNode
from treeviz.tree_builder import tree_from_text

BRANCH = "├"
LAST_BRANCH = "└"
DASH = "─ "
PIPE_EXTENSION = "│  "
BLANK_EXTENSION = "   "


def render_lines(root: TreeNode) -> list[str]:
    """Render *root* as a list of diagram lines, root label first."""
    lines = [root.label]
    # Pending (node, prefix, is_last) entries; popped in pre-order.
    stack = _pending(root.children, prefix="")
    while stack:
        node, prefix, is_last = stack.pop()
        connector = LAST_BRANCH if is_last else BRANCH
        lines.append(f"{prefix}{connector}{DASH}{node.label}")

        extension = BLANK_EXTENSION if is_last else PIPE_EXTENSION
        stack.extend(_pending(node.children, prefix + extension))
    return lines


def _pending(
    children: list[TreeNode],
    prefix: str,
) -> list[tuple[TreeNode, str, bool]]:
    """Stack entries for *children*, first child on top."""
    last = len(children) - 1
    entries = [(node, prefix, i == last) for i, node in enumerate(children)]
    entries.reverse()
    return entries


def render_tree(root: TreeNode) -> str:
    """Render *root* as a single string, lines joined by newlines."""
    return "\n".join(render_lines(root))


def draw_tree(root: TreeNode, stream: TextIO) -> None:
    """Write the diagram to *stream*, one newline-terminated write per line."""
    for line in render_lines(root):
        stream.write(line + "\n")


def render_text(text: str) -> str:
    """Parse indented *text* and return its diagram."""
    return render_tree(tree_from_text(text))
