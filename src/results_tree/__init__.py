"""Results tree model and navigation for static-analysis scans.

This package has no GUI dependency:
- nodes: node variants and the ResultTree container
- builder: scan results -> tree
- expansion: expanded-path state and expansion policy
- navigation: node/click -> editor navigation target
- controller: ResultsPanelController tying the above together
"""

from .builder import ResultTreeBuilder, build_result_tree
from .controller import ResultsPanelController
from .expansion import TreeExpansionController
from .localization import MessageBundle
from .navigation import ActivationEvent, NavigationResolver, NavigationTarget, open_and_scroll_to
from .nodes import FileSummary, ProblemEntry, ResultTree, RootLabel, TreeNode

__all__ = [
    "ActivationEvent",
    "FileSummary",
    "MessageBundle",
    "NavigationResolver",
    "NavigationTarget",
    "ProblemEntry",
    "ResultTree",
    "ResultTreeBuilder",
    "ResultsPanelController",
    "RootLabel",
    "TreeExpansionController",
    "TreeNode",
    "build_result_tree",
    "open_and_scroll_to",
]
