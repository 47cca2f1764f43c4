"""Defaults for results tree expansion and navigation."""

from __future__ import annotations

from dataclasses import dataclass

# Counted from the hidden root: root -> visible root -> files -> problems.
DEFAULT_EXPAND_DEPTH = 4

# Minimum click count that counts as an activation (double-click).
DOUBLE_CLICK_COUNT = 2


@dataclass
class NavigationSettings:
    """Switches that gate navigation from the results tree.

    ``scroll_to_source`` gates activation (double-click) navigation only.
    ``navigate_on_selection`` gates selection navigation and is on by default.
    """

    scroll_to_source: bool = False
    navigate_on_selection: bool = True
    activation_click_count: int = DOUBLE_CLICK_COUNT
