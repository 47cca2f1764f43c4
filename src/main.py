"""
Inspection Results - Main Entry Point

Shows a Checkstyle XML report as a tree of problems per file and opens each
problem's location in a document view.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from PyQt6.QtWidgets import QApplication

from gui.main_window import MainWindow
from gui.styles import get_stylesheet
from results_tree.localization import MessageBundle
from utils.env import default_log_level
from utils.logging_utils import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Browse static-analysis scan results.")
    parser.add_argument("report", nargs="?", type=Path, help="Checkstyle XML report to open")
    parser.add_argument("--messages", type=Path, help="JSON file with localized message templates")
    parser.add_argument("--log-file", type=Path, help="Structured log file (default: data/logs/inspectview.log)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)
    log_file = setup_logging(default_log_level(), args.log_file)
    logger.debug("Logging to %s", log_file)

    localization = None
    if args.messages:
        try:
            localization = MessageBundle.from_json(args.messages)
        except (OSError, ValueError) as e:
            logger.error("Could not load messages from %s: %s", args.messages, e)
            return 1

    app = QApplication.instance() or QApplication(sys.argv[:1])
    app.setApplicationName("Inspection Results")
    app.setStyleSheet(get_stylesheet())

    window = MainWindow(localization=localization)
    if args.report is not None and not window.open_report(args.report):
        return 1
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
