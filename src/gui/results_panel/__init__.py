"""Results panel package.

- panel: ResultsPanel widget
- tree_sync: ResultTree -> QTreeWidget mirroring
- event_handlers: Qt events -> controller calls
"""

from .panel import ResultsPanel

__all__ = ["ResultsPanel"]
