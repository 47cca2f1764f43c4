"""
UI helper functions for styled PyQt6 widgets.
"""

from typing import Callable, Literal, Optional

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QLabel, QWidget

LabelStyle = Literal["header", "subheader", "muted", "small"]


def apply_label_style(label: QLabel, style: LabelStyle) -> None:
    """
    Tag a QLabel with a style class understood by the app stylesheet.

    Args:
        label: The QLabel to style
        style: Label style (header, subheader, muted, small)
    """
    label.setProperty("styleClass", style)

    # Force style refresh
    label.style().unpolish(label)
    label.style().polish(label)


def create_styled_label(text: str, style: LabelStyle) -> QLabel:
    """Create a QLabel with the given style class."""
    label = QLabel(text)
    apply_label_style(label, style)
    return label


def create_action(
    parent: QWidget,
    text: str,
    tooltip: str,
    triggered: Optional[Callable[..., None]] = None,
    checkable: bool = False,
    checked: bool = False,
) -> QAction:
    """
    Create a toolbar action.

    Args:
        parent: Owner of the action
        text: Action text
        tooltip: Tooltip and status tip
        triggered: Slot connected to ``triggered``
        checkable: Whether the action toggles
        checked: Initial checked state for checkable actions
    """
    action = QAction(text, parent)
    action.setToolTip(tooltip)
    action.setStatusTip(tooltip)
    if checkable:
        action.setCheckable(True)
        action.setChecked(checked)
    if triggered is not None:
        action.triggered.connect(triggered)
    return action
