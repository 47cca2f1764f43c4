"""Tabbed document host that opens scanned files for navigation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QLabel, QPlainTextEdit, QTabWidget, QWidget

from results_tree.types import ScannedFile

logger = logging.getLogger(__name__)

# Files with NUL bytes in this prefix are shown as non-text placeholders.
BINARY_SNIFF_BYTES = 8192


class TextDocumentView(QPlainTextEdit):
    """Read-only text view that accepts caret placement."""

    def __init__(self, path: Path, text: str, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.path = path
        self.setReadOnly(True)
        self.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        self.setPlainText(text)

    def move_caret(self, offset: int) -> None:
        """Place the caret at character ``offset``, clamped to the document.

        Qt positions count UTF-16 code units, so characters outside the
        BMP before ``offset`` take two positions each.
        """
        text = self.toPlainText()
        prefix = text[: max(0, offset)]
        position = len(prefix.encode("utf-16-le")) // 2
        cursor = self.textCursor()
        limit = max(self.document().characterCount() - 1, 0)
        cursor.setPosition(min(position, limit))
        self.setTextCursor(cursor)

    def scroll_to_caret(self, center: bool = True) -> None:
        if center:
            self.centerCursor()
        else:
            self.ensureCursorVisible()


class BinaryDocumentView(QLabel):
    """Placeholder for files that cannot be shown as text."""

    def __init__(self, path: Path, parent: Optional[QWidget] = None):
        super().__init__(f"{path.name} cannot be displayed as text.", parent)
        self.path = path
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)


class DocumentHost(QTabWidget):
    """Opens one tab per file and reuses it on later navigation."""

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setTabsClosable(True)
        self.setDocumentMode(True)
        self.tabCloseRequested.connect(self.close_tab)
        self._views: Dict[Path, QWidget] = {}

    def open_file(self, file: ScannedFile, focus: bool = True) -> List[QWidget]:
        """Open ``file`` (or reuse its tab). Raises OSError if it cannot be read."""
        path = Path(file.path)
        view = self._views.get(path)
        if view is None:
            view = self._create_view(path)
            self._views[path] = view
            self.addTab(view, path.name)
            self.setTabToolTip(self.indexOf(view), str(path))
            logger.debug("Opened %s", path)

        if focus:
            self.setCurrentWidget(view)
            view.setFocus()
        return [view]

    def _create_view(self, path: Path) -> QWidget:
        data = path.read_bytes()
        if b"\x00" in data[:BINARY_SNIFF_BYTES]:
            return BinaryDocumentView(path)
        text = data.decode("utf-8", errors="replace").replace("\r\n", "\n").replace("\r", "\n")
        return TextDocumentView(path, text)

    def close_tab(self, index: int) -> None:
        view = self.widget(index)
        if view is None:
            return
        self.removeTab(index)
        self._views.pop(getattr(view, "path", None), None)
        view.deleteLater()

    def view_for(self, path: Path) -> Optional[QWidget]:
        return self._views.get(Path(path))
