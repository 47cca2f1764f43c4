"""Main application window: results panel beside the document host."""

import logging
from pathlib import Path
from typing import Optional

from PyQt6.QtCore import QSize, Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QFileDialog, QLabel, QMainWindow, QMessageBox, QSplitter, QWidget

from gui.document_host import DocumentHost
from gui.results_panel import ResultsPanel
from gui.settings_manager import SettingsManager
from results_tree.controller import ResultsPanelController
from results_tree.types import LocalizationProvider
from services.checkstyle_report import ReportError, load_report
from utils.error_handling import format_error_message

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Window hosting the scan results panel and opened documents."""

    def __init__(
        self,
        settings: Optional[SettingsManager] = None,
        localization: Optional[LocalizationProvider] = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self.setWindowTitle("Inspection Results")
        self.setMinimumSize(QSize(1000, 640))

        self.settings = settings or SettingsManager()
        self.documents = DocumentHost()
        self.controller = ResultsPanelController(
            self.documents,
            localization=localization,
            settings=self.settings.navigation_settings(),
            expand_depth=self.settings.expand_depth,
        )
        self.results_panel = ResultsPanel(self.controller, self.settings)
        self.current_report: Optional[Path] = None

        self._create_central_widget()
        self._create_menu()
        self._create_status_bar()

    def _create_central_widget(self):
        splitter = QSplitter(Qt.Orientation.Horizontal)
        splitter.addWidget(self.results_panel)
        splitter.addWidget(self.documents)
        splitter.setStretchFactor(0, 1)
        splitter.setStretchFactor(1, 2)
        self.setCentralWidget(splitter)

    def _create_menu(self):
        file_menu = self.menuBar().addMenu("&File")

        open_action = QAction("&Open Report...", self)
        open_action.setShortcut(QKeySequence.StandardKey.Open)
        open_action.triggered.connect(self._choose_report)
        file_menu.addAction(open_action)

        reload_action = QAction("&Reload", self)
        reload_action.setShortcut(QKeySequence.StandardKey.Refresh)
        reload_action.triggered.connect(self.reload_report)
        file_menu.addAction(reload_action)

        file_menu.addSeparator()
        quit_action = QAction("&Quit", self)
        quit_action.setShortcut(QKeySequence.StandardKey.Quit)
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

    def _create_status_bar(self):
        self.statusBar().showMessage("Ready")
        self.report_label = QLabel("No report loaded")
        self.statusBar().addPermanentWidget(self.report_label)

    def _choose_report(self):
        path, _ = QFileDialog.getOpenFileName(self, "Open Checkstyle Report", "", "Checkstyle XML (*.xml);;All files (*)")
        if path:
            self.open_report(Path(path))

    def open_report(self, report_path: Path) -> bool:
        """Load a Checkstyle XML report and display it. Returns False on error."""
        try:
            results = load_report(report_path)
        except ReportError as e:
            logger.warning("Could not load report: %s", e)
            self.statusBar().showMessage(format_error_message(e, include_type=False))
            QMessageBox.warning(self, "Open Report", format_error_message(e, "Could not load report", include_type=False))
            return False

        tree = self.controller.display_results(results)
        self.current_report = Path(report_path)
        self.report_label.setText(self.current_report.name)
        self.statusBar().showMessage(tree.root_text)
        return True

    def reload_report(self) -> bool:
        if self.current_report is None:
            return False
        return self.open_report(self.current_report)
