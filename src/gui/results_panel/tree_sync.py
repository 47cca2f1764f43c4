"""Mirror a ResultTree into a QTreeWidget.

The hidden root is not shown; the visible root becomes the single
top-level item. Each item stores its TreeNode under UserRole.
"""

from __future__ import annotations

from typing import Dict, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QTreeWidget, QTreeWidgetItem

from results_tree.expansion import TreeExpansionController
from results_tree.nodes import FileSummary, ProblemEntry, ResultTree, TreeNode

NODE_ROLE = Qt.ItemDataRole.UserRole


def populate(tree_widget: QTreeWidget, result_tree: ResultTree) -> Dict[TreeNode, QTreeWidgetItem]:
    """Replace all items with ones built from ``result_tree``."""
    tree_widget.clear()
    items: Dict[TreeNode, QTreeWidgetItem] = {}

    visible_root = result_tree.visible_root
    root_item = QTreeWidgetItem(tree_widget)
    _decorate(root_item, visible_root)
    items[visible_root] = root_item

    stack = [(visible_root, root_item)]
    while stack:
        node, item = stack.pop()
        for child in node.children:
            child_item = QTreeWidgetItem(item)
            _decorate(child_item, child)
            items[child] = child_item
            stack.append((child, child_item))
    return items


def _decorate(item: QTreeWidgetItem, node: TreeNode) -> None:
    item.setText(0, node.label)
    item.setData(0, NODE_ROLE, node)

    value = node.value
    if isinstance(value, ProblemEntry):
        item.setToolTip(0, f"{getattr(value.file, 'path', value.file.name)}\n{node.label}")
    elif isinstance(value, FileSummary):
        item.setToolTip(0, str(getattr(value.file, "path", value.file.name)))
        font = item.font(0)
        font.setBold(True)
        item.setFont(0, font)


def apply_expansion(items: Dict[TreeNode, QTreeWidgetItem], expansion: TreeExpansionController) -> None:
    """Set each item's expanded flag from the controller's expanded paths."""
    expanded = {path[-1] for path in expansion.expanded_paths}
    for node, item in items.items():
        item.setExpanded(node in expanded)


def node_for(item: Optional[QTreeWidgetItem]) -> Optional[TreeNode]:
    if item is None:
        return None
    node = item.data(0, NODE_ROLE)
    return node if isinstance(node, TreeNode) else None
