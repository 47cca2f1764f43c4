"""
Dark theme stylesheet for the results browser.
"""

from typing import Dict, Final

PALETTE: Final[Dict[str, str]] = {
    "bg_primary": "#0a0c10",
    "bg_secondary": "#161b22",
    "bg_hover": "rgba(255, 255, 255, 0.03)",
    "text_primary": "#d1d5db",
    "text_secondary": "#9ca3af",
    "text_muted": "#7f8b9a",
    "accent_primary": "#4a7d89",
    "accent_secondary": "#67e8f9",
    "accent_selected": "rgba(74, 125, 137, 0.12)",
    "border_default": "#2c313a",
}

# Tree rows: informational rows are muted, problem rows use the primary text color.
RESULTS_TREE_STYLESHEET = f"""
    QTreeWidget {{
        background-color: transparent;
        border: none;
        outline: none;
        padding: 4px;
    }}
    QTreeWidget::item {{
        padding: 4px 8px;
        border-radius: 4px;
        color: {PALETTE['text_secondary']};
    }}
    QTreeWidget::item:hover {{
        background-color: {PALETTE['bg_hover']};
        color: {PALETTE['text_primary']};
    }}
    QTreeWidget::item:selected {{
        background-color: {PALETTE['accent_selected']};
        color: {PALETTE['accent_secondary']};
    }}
"""

DARK_THEME_STYLESHEET = f"""
QWidget {{
    background-color: {PALETTE['bg_primary']};
    color: {PALETTE['text_primary']};
    font-size: 13px;
}}

QLabel[styleClass="subheader"] {{
    color: {PALETTE['text_primary']};
    font-size: 14px;
    font-weight: 600;
}}

QLabel[styleClass="muted"] {{
    color: {PALETTE['text_muted']};
}}

QToolBar {{
    background-color: {PALETTE['bg_secondary']};
    border: none;
    spacing: 2px;
}}

QTabWidget::pane {{
    border: 1px solid {PALETTE['border_default']};
}}

QTabBar::tab {{
    background-color: {PALETTE['bg_secondary']};
    color: {PALETTE['text_secondary']};
    padding: 6px 12px;
}}

QTabBar::tab:selected {{
    color: {PALETTE['accent_secondary']};
    border-bottom: 2px solid {PALETTE['accent_primary']};
}}

QPlainTextEdit {{
    background-color: {PALETTE['bg_secondary']};
    font-family: "JetBrains Mono", Consolas, monospace;
}}

QSplitter::handle {{
    background-color: {PALETTE['border_default']};
}}
"""


def get_stylesheet() -> str:
    """Return the application stylesheet."""
    return DARK_THEME_STYLESHEET
