"""Event handlers for ResultsPanel.

Translate Qt signals and viewport events into results controller calls.
"""

import logging
from typing import TYPE_CHECKING

from PyQt6.QtCore import QEvent
from PyQt6.QtGui import QMouseEvent
from PyQt6.QtWidgets import QTreeWidgetItem

from results_tree.navigation import ActivationEvent
from .tree_sync import node_for

if TYPE_CHECKING:
    from .panel import ResultsPanel

logger = logging.getLogger(__name__)


def on_selection_changed(panel: "ResultsPanel") -> bool:
    """Navigate to the newly selected row, if it is a problem."""
    selected = panel.tree.selectedItems()
    if not selected:
        return False
    return panel.controller.on_selection_changed(node_for(selected[0]))


def on_activation(panel: "ResultsPanel", event: QMouseEvent, click_count: int = 2) -> bool:
    """Navigate on a double-click over a row."""
    pos = event.position().toPoint()
    activation = ActivationEvent(pos.x(), pos.y(), click_count)
    navigated = panel.controller.on_activated(activation, panel.node_at)
    logger.debug("Activation at (%d, %d) navigated=%s", pos.x(), pos.y(), navigated)
    return navigated


def on_item_expansion_changed(panel: "ResultsPanel", item: QTreeWidgetItem, expanded: bool) -> None:
    """Record an expand/collapse made with the mouse or keyboard."""
    node = node_for(item)
    if node is not None:
        panel.controller.expansion.set_expanded(node, expanded)


def is_activation_event(event: QEvent) -> bool:
    return event.type() == QEvent.Type.MouseButtonDblClick
