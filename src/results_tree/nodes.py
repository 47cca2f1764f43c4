"""Node model for the scan results tree.

A tree has a hidden root which owns exactly one visible root. The visible
root owns one FileSummary node per file with problems, and each of those owns
one ProblemEntry leaf per problem:

    (root)
    └── RootLabel "3 problems in 2 files"
        ├── FileSummary "Foo.java (2)"
        │   ├── ProblemEntry
        │   └── ProblemEntry
        └── FileSummary "Bar.java (1)"
            └── ProblemEntry

Node values are immutable. A rebuild produces a new tree rather than
patching the old one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple, Union

from .types import Problem, ScannedFile


@dataclass(frozen=True, eq=False)
class RootLabel:
    """Informational node carrying only text."""

    text: str

    @property
    def label(self) -> str:
        return self.text

    @property
    def navigable(self) -> bool:
        return False


@dataclass(frozen=True, eq=False)
class FileSummary:
    """Summary row for one scanned file with at least one problem."""

    file: ScannedFile
    problem_count: int
    label: str

    @property
    def navigable(self) -> bool:
        return False


@dataclass(frozen=True, eq=False)
class ProblemEntry:
    """Leaf row referencing a single problem."""

    file: ScannedFile
    problem: Problem

    @property
    def label(self) -> str:
        description = getattr(self.problem, "description", None)
        return description if description is not None else str(self.problem)

    @property
    def navigable(self) -> bool:
        return self.file is not None and self.problem is not None


ResultNode = Union[RootLabel, FileSummary, ProblemEntry]

TreePath = Tuple["TreeNode", ...]


@dataclass(eq=False)
class TreeNode:
    """Container holding a node value and its ordered children."""

    value: ResultNode
    children: Tuple["TreeNode", ...] = field(default_factory=tuple)

    @property
    def label(self) -> str:
        return self.value.label

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def __repr__(self) -> str:
        return f"TreeNode({type(self.value).__name__}, {self.label!r}, children={len(self.children)})"


class ResultTree:
    """Hidden root plus the single visible root beneath it."""

    ROOT_TEXT = "root"

    def __init__(self, visible_root: TreeNode):
        self.root = TreeNode(RootLabel(self.ROOT_TEXT), (visible_root,))

    @property
    def visible_root(self) -> TreeNode:
        return self.root.children[0]

    @property
    def root_text(self) -> str:
        return self.visible_root.label

    def walk(self, start: Optional[TreeNode] = None) -> Iterator[Tuple[TreePath, TreeNode]]:
        """Yield (path, node) pairs depth-first, children in stored order."""
        start_path = self.path_to(start) if start is not None else (self.root,)
        if start_path is None:
            return
        stack = [start_path]
        while stack:
            path = stack.pop()
            node = path[-1]
            yield path, node
            for child in reversed(node.children):
                stack.append(path + (child,))

    def path_to(self, node: TreeNode) -> Optional[TreePath]:
        """Return the path from the hidden root to ``node``, or None."""
        if node is self.root:
            return (self.root,)
        for path, candidate in self.walk():
            if candidate is node:
                return path
        return None

    def contains(self, node: TreeNode) -> bool:
        return self.path_to(node) is not None

    def file_nodes(self) -> list[TreeNode]:
        return [child for child in self.visible_root.children if isinstance(child.value, FileSummary)]

    def problem_nodes(self) -> list[TreeNode]:
        return [problem for file_node in self.file_nodes() for problem in file_node.children]

    def problem_count(self) -> int:
        return sum(len(file_node.children) for file_node in self.file_nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self.walk())
