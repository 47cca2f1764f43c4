"""Read Checkstyle-format XML reports into scan results.

Report shape:

    <checkstyle version="10.12">
      <file name="src/Foo.java">
        <error line="12" column="5" severity="warning"
               message="Missing javadoc" source="...JavadocMethodCheck"/>
      </file>
    </checkstyle>

Files without <error> children are kept with an empty problem list.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from functools import cached_property
from pathlib import Path
from typing import Dict, List, Optional

from utils.error_handling import timed

logger = logging.getLogger(__name__)


class ReportError(ValueError):
    """The report could not be read or is not a Checkstyle report."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass(eq=False)
class ReportFile:
    """A scanned file named by the report."""

    path: Path

    @property
    def name(self) -> str:
        return self.path.name

    def read_text(self) -> str:
        return self.path.read_text(encoding="utf-8", errors="replace")


@dataclass(eq=False)
class ReportProblem:
    """One <error> entry. Line and column are 1-based; 0 means unknown."""

    file: ReportFile
    line: int
    column: int = 0
    severity: str = "error"
    message: str = ""
    source: str = ""

    @property
    def description(self) -> str:
        location = f"({self.line}:{self.column})" if self.column else f"({self.line})"
        return f"{location} {self.message}".strip()

    @cached_property
    def start_offset(self) -> int:
        """Character offset of (line, column) in the file, read on first access.

        Lines are counted on ``\\n`` only, as Checkstyle counts them. Raises
        OSError if the file is gone and ValueError if the line is past the
        end of the file.
        """
        text = self.file.read_text()
        if self.line <= 0:
            # File-level problem
            return 0

        lines = text.split("\n")
        if text.endswith("\n"):
            lines.pop()
        if self.line > max(len(lines), 1):
            raise ValueError(f"Line {self.line} is outside {self.file.name} ({len(lines)} lines)")

        offset = sum(len(line_text) + 1 for line_text in lines[: self.line - 1])
        if self.column > 0 and lines:
            line_text = lines[self.line - 1].rstrip("\r")
            offset += min(self.column - 1, len(line_text))
        return offset


def _int_attr(element: ET.Element, name: str) -> int:
    try:
        return int(element.get(name, "0"))
    except ValueError:
        return 0


@timed
def load_report(report_path: Path, base_dir: Optional[Path] = None) -> Dict[ReportFile, List[ReportProblem]]:
    """Parse ``report_path``; relative file names resolve against ``base_dir``.

    ``base_dir`` defaults to the report's directory. File order follows the
    report.
    """
    report_path = Path(report_path)
    base_dir = Path(base_dir) if base_dir is not None else report_path.parent

    try:
        root = ET.parse(report_path).getroot()
    except ET.ParseError as e:
        raise ReportError(report_path, f"invalid XML ({e})") from e
    except OSError as e:
        raise ReportError(report_path, f"cannot read report ({e.strerror or e})") from e

    if root.tag != "checkstyle":
        raise ReportError(report_path, f"expected <checkstyle> root, found <{root.tag}>")

    results: Dict[ReportFile, List[ReportProblem]] = {}
    by_path: Dict[Path, ReportFile] = {}
    for file_el in root.iter("file"):
        name = file_el.get("name")
        if not name:
            logger.warning("Skipping <file> without a name in %s", report_path)
            continue

        path = Path(name)
        if not path.is_absolute():
            path = base_dir / path

        # Checkstyle may emit the same file twice; merge them.
        report_file = by_path.get(path)
        if report_file is None:
            report_file = by_path[path] = ReportFile(path)
            results[report_file] = []

        for error_el in file_el.iter("error"):
            results[report_file].append(
                ReportProblem(
                    file=report_file,
                    line=_int_attr(error_el, "line"),
                    column=_int_attr(error_el, "column"),
                    severity=error_el.get("severity", "error"),
                    message=error_el.get("message", ""),
                    source=error_el.get("source", ""),
                )
            )

    logger.info(
        "Loaded report %s: %d file(s), %d problem(s)",
        report_path,
        len(results),
        sum(len(problems) for problems in results.values()),
        extra={"event": "report_loaded"},
    )
    return results
