"""Data classes for treeviz."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

ROOT_LABEL = "."


@dataclass(frozen=True)
class Line:
    indent: int
    label: str


@dataclass
class TreeNode:
    label: str
    children: list[TreeNode] = field(default_factory=list)

    def walk(self, depth: int = 0) -> Iterator[tuple[int, TreeNode]]:
        """Yield ``(depth, node)`` for this node and its descendants in pre-order."""
        stack = [(depth, self)]
        while stack:
            current_depth, node = stack.pop()
            yield current_depth, node
            for child in reversed(node.children):
                stack.append((current_depth + 1, child))

    def count(self) -> int:
        """Return the number of descendants, excluding this node."""
        return sum(1 for _ in self.walk()) - 1


def iter_depths(root: TreeNode) -> Iterator[tuple[int, TreeNode]]:
    """Walk the nodes below *root*; its direct children are at depth 0."""
    for child in root.children:
        yield from child.walk()
