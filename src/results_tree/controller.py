"""Controller owning the displayed results tree.

Wires the builder, expansion policy and navigation resolver together and is
the only place the tree reference changes. Widgets observe it through
``add_listener`` and forward user events to ``on_selection_changed`` and
``on_activated``.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from config.scan_settings import DEFAULT_EXPAND_DEPTH, NavigationSettings

from .builder import ResultTreeBuilder, ScanResults
from .expansion import TreeExpansionController
from .navigation import ActivationEvent, LocateFn, NavigationResolver, NodeLike, open_and_scroll_to
from .nodes import ResultTree
from .types import FileEditorService, LocalizationProvider

logger = logging.getLogger(__name__)

TreeListener = Callable[[ResultTree], None]


class ResultsPanelController:
    """Display scan results and navigate from them into editors."""

    def __init__(
        self,
        editors: FileEditorService,
        localization: Optional[LocalizationProvider] = None,
        settings: Optional[NavigationSettings] = None,
        expand_depth: int = DEFAULT_EXPAND_DEPTH,
    ) -> None:
        self.editors = editors
        self.builder = ResultTreeBuilder(localization)
        self.expansion = TreeExpansionController(default_depth=expand_depth)
        self.resolver = NavigationResolver(settings)
        self._listeners: List[TreeListener] = []
        self._rebuilding = False

        self._tree = self.builder.initial_tree()
        self.expand_tree()

    @property
    def tree(self) -> ResultTree:
        return self._tree

    @property
    def settings(self) -> NavigationSettings:
        return self.resolver.settings

    def add_listener(self, listener: TreeListener) -> None:
        """Call ``listener(tree)`` after every rebuild and expansion change."""
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._tree)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def display_results(self, results: Optional[ScanResults]) -> ResultTree:
        """Replace the displayed tree with one built from ``results``."""
        self._rebuilding = True
        try:
            tree = self.builder.build(results)
            self._tree = tree
            self.expansion.expand_to_depth(tree, tree.root, self.expansion.default_depth)
        finally:
            self._rebuilding = False

        logger.info(
            "Displaying scan results: %s",
            tree.root_text,
            extra={"event": "display_results", "files": len(tree.file_nodes()), "problems": tree.problem_count()},
        )
        self._notify()
        return tree

    def expand_tree(self, depth: Optional[int] = None) -> None:
        self.expansion.expand_to_depth(self._tree, self._tree.root, depth)
        self._notify()

    def collapse_tree(self) -> None:
        self.expansion.collapse_to_root(self._tree)
        self._notify()

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    def set_scroll_to_source(self, enabled: bool) -> None:
        """Toggle navigation on activation (double-click)."""
        self.settings.scroll_to_source = bool(enabled)

    def set_navigate_on_selection(self, enabled: bool) -> None:
        self.settings.navigate_on_selection = bool(enabled)

    # ------------------------------------------------------------------
    # User events
    # ------------------------------------------------------------------

    def on_selection_changed(self, node: NodeLike) -> bool:
        """Navigate to the selected problem. Returns True if the caret moved."""
        if self._rebuilding:
            return False
        return open_and_scroll_to(self.editors, self.resolver.resolve_selection(node))

    def on_activated(self, event: ActivationEvent, locate: LocateFn) -> bool:
        """Navigate on a double-click when scroll-to-source is enabled."""
        if self._rebuilding:
            return False
        return open_and_scroll_to(self.editors, self.resolver.resolve_activation(event, locate))
