"""Build the results tree from a scan results snapshot.

Structure:
└── Visible root ("N problems in M files" / "no results")
    ├── File summary ("Foo.java : 2 problem(s)")
    │   ├── Problem
    │   └── Problem
    └── File summary ...
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence

from config import messages
from utils.error_handling import timed

from .localization import MessageBundle
from .nodes import FileSummary, ProblemEntry, ResultTree, RootLabel, TreeNode
from .types import LocalizationProvider, Problem, ScannedFile

logger = logging.getLogger(__name__)

ScanResults = Mapping[ScannedFile, Sequence[Problem]]


class ResultTreeBuilder:
    """Turns a flat file -> problems mapping into a two-level tree."""

    def __init__(self, localization: Optional[LocalizationProvider] = None):
        self.localization = localization or MessageBundle()

    def initial_tree(self) -> ResultTree:
        """Tree shown before any scan has completed."""
        return ResultTree(TreeNode(RootLabel(self.localization.format(messages.NO_SCAN))))

    @timed
    def build(self, results: Optional[ScanResults]) -> ResultTree:
        """Build a fresh tree. Null or empty results give the "no results" label."""
        if not results:
            logger.debug("No scan results to display", extra={"event": "tree_build", "files": 0, "problems": 0})
            return ResultTree(TreeNode(RootLabel(self.localization.format(messages.SCAN_NO_RESULTS))))

        file_nodes = []
        total_problems = 0
        for file, problems in results.items():
            problems = list(problems or ())
            if not problems:
                continue
            file_nodes.append(self._build_file_node(file, problems))
            total_problems += len(problems)

        root_text = self.localization.format(messages.SCAN_RESULTS, total_problems, len(file_nodes))
        visible_root = TreeNode(RootLabel(root_text), tuple(file_nodes))

        logger.debug(
            "Built results tree: %d problem(s) in %d file(s)",
            total_problems,
            len(file_nodes),
            extra={"event": "tree_build", "files": len(file_nodes), "problems": total_problems},
        )
        return ResultTree(visible_root)

    def _build_file_node(self, file: ScannedFile, problems: Sequence[Problem]) -> TreeNode:
        label = self.localization.format(messages.SCAN_FILE_RESULT, _display_name(file), len(problems))
        children = tuple(TreeNode(ProblemEntry(file, problem)) for problem in problems)
        return TreeNode(FileSummary(file, len(problems), label), children)


def _display_name(file: ScannedFile) -> str:
    name = getattr(file, "name", None)
    return name if name else str(file)


def build_result_tree(
    results: Optional[ScanResults],
    localization: Optional[LocalizationProvider] = None,
) -> ResultTree:
    """Convenience wrapper around ResultTreeBuilder.build."""
    return ResultTreeBuilder(localization).build(results)
