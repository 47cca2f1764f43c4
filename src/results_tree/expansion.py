"""Expansion state for a results tree, independent of any widget."""

from __future__ import annotations

import logging
from typing import FrozenSet, Optional, Set

from config.scan_settings import DEFAULT_EXPAND_DEPTH

from .nodes import ResultTree, TreeNode, TreePath

logger = logging.getLogger(__name__)


class TreeExpansionController:
    """Tracks which paths of the current tree are expanded.

    State belongs to one tree instance. Passing a different tree (e.g. after
    a rebuild) starts from an empty expanded set.
    """

    def __init__(self, default_depth: int = DEFAULT_EXPAND_DEPTH):
        self.default_depth = default_depth
        self._tree: Optional[ResultTree] = None
        self._expanded: Set[TreePath] = set()

    @property
    def tree(self) -> Optional[ResultTree]:
        return self._tree

    @property
    def expanded_paths(self) -> FrozenSet[TreePath]:
        return frozenset(self._expanded)

    def attach(self, tree: ResultTree) -> None:
        """Bind to ``tree``; expansion state of any previous tree is dropped."""
        if tree is not self._tree:
            self._tree = tree
            self._expanded = set()

    def expand_to_depth(self, tree: ResultTree, from_node: Optional[TreeNode] = None, depth: Optional[int] = None) -> None:
        """Expand every node within ``depth`` levels of ``from_node``.

        Depth 0 is a no-op. Nodes are visited depth-first in stored child
        order. Leaves are never recorded as expanded.
        """
        self.attach(tree)
        depth = self.default_depth if depth is None else depth
        if depth <= 0:
            return

        start = tree.root if from_node is None else from_node
        start_path = tree.path_to(start)
        if start_path is None:
            logger.debug("Expansion start node is not part of the current tree")
            return

        # Expanding a path also opens its ancestors.
        for i in range(1, len(start_path)):
            self._expanded.add(start_path[:i])

        stack = [(start_path, depth)]
        while stack:
            path, remaining = stack.pop()
            node = path[-1]
            if remaining <= 0 or node.is_leaf:
                continue
            self._expanded.add(path)
            for child in reversed(node.children):
                stack.append((path + (child,), remaining - 1))

    def collapse_to_root(self, tree: ResultTree) -> None:
        """Collapse everything below the visible root."""
        self.attach(tree)
        self._expanded = {(tree.root,)}
        if not tree.visible_root.is_leaf:
            self._expanded.add((tree.root, tree.visible_root))

    def set_expanded(self, node: TreeNode, expanded: bool) -> None:
        """Record a single expand/collapse made by the user."""
        if self._tree is None:
            return
        path = self._tree.path_to(node)
        if path is None or node.is_leaf:
            return
        if expanded:
            self._expanded.add(path)
        else:
            self._expanded.discard(path)

    def is_expanded(self, node: TreeNode) -> bool:
        if self._tree is None:
            return False
        path = self._tree.path_to(node)
        return path is not None and path in self._expanded
