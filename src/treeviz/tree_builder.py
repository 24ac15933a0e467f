"""Group indented lines into a tree."""

from __future__ import annotations

import logging
from typing import Sequence

from treeviz.indent_parser import parse_lines
from treeviz.models import ROOT_LABEL, Line, TreeNode

logger = logging.getLogger(__name__)


def forest_from_lines(lines: Sequence[Line]) -> list[TreeNode]:
    """Build the list of sibling trees described by *lines*.

    Each line starts a node. The run of lines right after it that are
    indented deeper becomes its children, grouped the same way. A line
    that jumps several levels deeper is still a direct child; no
    intermediate nodes are created.

    Example:
        A        ->  A
          B            B
              C          C
        D            D
    """
    forest: list[TreeNode] = []
    # Open nodes, innermost last. Indents strictly increase along the stack,
    # and every line seen since an entry was pushed is deeper than it.
    open_nodes: list[tuple[int, TreeNode]] = []
    for line in lines:
        while open_nodes and open_nodes[-1][0] >= line.indent:
            open_nodes.pop()
        node = TreeNode(line.label)
        if open_nodes:
            open_nodes[-1][1].children.append(node)
        else:
            forest.append(node)
        open_nodes.append((line.indent, node))
    return forest


def tree_from_lines(lines: Sequence[Line]) -> TreeNode:
    """Wrap the forest of *lines* under a root labelled ``"."``."""
    root = TreeNode(ROOT_LABEL, forest_from_lines(lines))
    logger.debug("Built tree with %d nodes", len(lines))
    return root


def tree_from_text(text: str) -> TreeNode:
    """Parse *text* and build its tree."""
    return tree_from_lines(parse_lines(text))
