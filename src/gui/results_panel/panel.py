"""Results panel - tree of scan problems with a navigation toolbar.

The widget is a thin observer of ResultsPanelController: it mirrors the
controller's tree and expansion state and forwards user events back.
"""

import logging
from typing import Dict, Optional

from PyQt6.QtCore import QEvent, QObject, QPoint, Qt
from PyQt6.QtWidgets import QHBoxLayout, QToolBar, QTreeWidget, QTreeWidgetItem, QVBoxLayout, QWidget

from gui.settings_manager import SettingsManager
from gui.styles import RESULTS_TREE_STYLESHEET
from gui.ui_helpers import create_action, create_styled_label
from results_tree.controller import ResultsPanelController
from results_tree.nodes import ResultTree, TreeNode
from . import event_handlers
from . import tree_sync

logger = logging.getLogger(__name__)


class ResultsPanel(QWidget):
    """Tool window listing scan problems by file."""

    def __init__(
        self,
        controller: ResultsPanelController,
        settings: Optional[SettingsManager] = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self.controller = controller
        self.settings = settings
        self._items: Dict[TreeNode, QTreeWidgetItem] = {}
        self._shown_tree: Optional[ResultTree] = None
        self._syncing = False

        if settings is not None:
            controller.set_scroll_to_source(settings.scroll_to_source)
            controller.set_navigate_on_selection(settings.navigate_on_selection)

        self.setup_ui()
        controller.add_listener(self._on_model_changed)
        self._on_model_changed(controller.tree)

    def setup_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(1, 1, 1, 1)
        layout.setSpacing(0)

        # Toolbar on the left edge
        self.toolbar = QToolBar(self)
        self.toolbar.setOrientation(Qt.Orientation.Vertical)
        self.expand_action = create_action(self, "Expand", "Expand all results", lambda: self.controller.expand_tree())
        self.collapse_action = create_action(self, "Collapse", "Collapse all results", lambda: self.controller.collapse_tree())
        self.scroll_action = create_action(
            self,
            "Scroll to source",
            "Open the problem in the editor on double-click",
            self.set_scroll_to_source,
            checkable=True,
            checked=self.controller.settings.scroll_to_source,
        )
        for action in (self.expand_action, self.collapse_action, self.scroll_action):
            self.toolbar.addAction(action)
        layout.addWidget(self.toolbar)

        body = QVBoxLayout()
        body.setContentsMargins(0, 0, 0, 0)
        body.setSpacing(4)

        header = create_styled_label("Scan Results", "subheader")
        header.setContentsMargins(8, 6, 8, 6)
        body.addWidget(header)

        self.tree = QTreeWidget()
        self.tree.setHeaderHidden(True)
        self.tree.setIndentation(14)
        self.tree.setUniformRowHeights(True)
        self.tree.setStyleSheet(RESULTS_TREE_STYLESHEET)
        self.tree.itemSelectionChanged.connect(self.on_selection_changed)
        self.tree.itemExpanded.connect(lambda item: self._on_item_expansion(item, True))
        self.tree.itemCollapsed.connect(lambda item: self._on_item_expansion(item, False))
        self.tree.viewport().installEventFilter(self)
        body.addWidget(self.tree)

        layout.addLayout(body)

    # ------------------------------------------------------------------
    # Model -> widget
    # ------------------------------------------------------------------

    def _on_model_changed(self, tree: ResultTree) -> None:
        self._syncing = True
        self.tree.blockSignals(True)
        try:
            if tree is not self._shown_tree:
                self._items = tree_sync.populate(self.tree, tree)
                self._shown_tree = tree
            tree_sync.apply_expansion(self._items, self.controller.expansion)
        finally:
            self.tree.blockSignals(False)
            self._syncing = False

    def item_for(self, node: TreeNode) -> Optional[QTreeWidgetItem]:
        return self._items.get(node)

    def node_at(self, x: int, y: int) -> Optional[TreeNode]:
        """Node under viewport coordinates, or None outside any row."""
        return tree_sync.node_for(self.tree.itemAt(QPoint(x, y)))

    # ------------------------------------------------------------------
    # Widget -> model
    # ------------------------------------------------------------------

    def on_selection_changed(self):
        if not self._syncing:
            event_handlers.on_selection_changed(self)

    def _on_item_expansion(self, item: QTreeWidgetItem, expanded: bool):
        if not self._syncing:
            event_handlers.on_item_expansion_changed(self, item, expanded)

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if obj is self.tree.viewport() and event_handlers.is_activation_event(event):
            event_handlers.on_activation(self, event)
        return super().eventFilter(obj, event)

    def set_scroll_to_source(self, enabled: bool):
        """Toggle double-click navigation and remember the choice."""
        self.controller.set_scroll_to_source(enabled)
        if self.settings is not None:
            self.settings.scroll_to_source = enabled
        if self.scroll_action.isChecked() != bool(enabled):
            self.scroll_action.setChecked(bool(enabled))
        logger.debug("Scroll to source %s", "enabled" if enabled else "disabled")
