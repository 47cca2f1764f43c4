"""Resolve tree selections and activations into editor navigation.

Two triggers reach the same resolution:
- selection changes navigate immediately (gated only by
  ``navigate_on_selection``, on by default)
- activations (double-clicks) navigate only when ``scroll_to_source`` is
  enabled, the click landed on a row and the click count reaches the
  activation threshold

Nothing in this module raises on a missing or stale target; callers just get
``None``/``False`` back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from config.scan_settings import NavigationSettings
from utils.error_handling import log_exception

from .nodes import ProblemEntry, ResultNode, TreeNode
from .types import FileEditorService, ScannedFile, TextEditor

logger = logging.getLogger(__name__)

NodeLike = Union[TreeNode, ResultNode, None]
LocateFn = Callable[[int, int], Optional[TreeNode]]


@dataclass(frozen=True)
class NavigationTarget:
    """Where the host editor should place the caret."""

    file: ScannedFile
    offset: int


@dataclass(frozen=True)
class ActivationEvent:
    """A click on the tree in widget coordinates."""

    x: int
    y: int
    click_count: int = 1


class NavigationResolver:
    """Decide whether a node event should navigate, and where to."""

    def __init__(self, settings: Optional[NavigationSettings] = None):
        self.settings = settings or NavigationSettings()

    def resolve(self, node: NodeLike) -> Optional[NavigationTarget]:
        """Return the target for ``node`` or None for informational/stale nodes."""
        value = node.value if isinstance(node, TreeNode) else node
        if not isinstance(value, ProblemEntry) or not value.navigable:
            return None

        try:
            offset = value.problem.start_offset
        except (OSError, ValueError, AttributeError, TypeError) as e:
            log_exception(e, "Problem location could not be resolved", level=logging.DEBUG)
            return None

        if not isinstance(offset, int) or offset < 0:
            logger.debug("Problem has no usable offset: %r", offset)
            return None
        return NavigationTarget(value.file, offset)

    def resolve_selection(self, node: NodeLike) -> Optional[NavigationTarget]:
        if not self.settings.navigate_on_selection:
            return None
        return self.resolve(node)

    def resolve_activation(self, event: ActivationEvent, locate: LocateFn) -> Optional[NavigationTarget]:
        """Resolve a click. ``locate`` maps widget coordinates to a node or None."""
        if not self.settings.scroll_to_source:
            return None
        if event.click_count < self.settings.activation_click_count:
            return None

        node = locate(event.x, event.y)
        if node is None:
            logger.debug("Activation at (%d, %d) is not over a row", event.x, event.y)
            return None
        return self.resolve(node)


def open_and_scroll_to(editors: FileEditorService, target: Optional[NavigationTarget]) -> bool:
    """Open the target file, move the caret and centre it. Best effort.

    Returns True only when the caret was placed.
    """
    if target is None:
        return False

    try:
        opened = list(editors.open_file(target.file, focus=True) or ())
    except Exception as e:
        log_exception(e, f"Could not open {getattr(target.file, 'name', target.file)}", level=logging.WARNING)
        return False

    if not opened:
        return False

    editor = opened[0]
    if not isinstance(editor, TextEditor):
        logger.debug("Editor %r does not accept a caret; skipping scroll", editor)
        return False

    try:
        editor.move_caret(target.offset)
        editor.scroll_to_caret(center=True)
    except Exception as e:
        log_exception(e, f"Could not move caret to offset {target.offset}", level=logging.WARNING)
        return False
    return True
