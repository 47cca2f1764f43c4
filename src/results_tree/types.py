"""Typed interfaces for the collaborators the results tree depends on."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, Sequence, runtime_checkable


class ScannedFile(Protocol):
    """A source file included in a scan. Identity is object identity."""

    name: str
    path: Path


class Problem(Protocol):
    """One reported issue inside a scanned file."""

    description: str

    @property
    def start_offset(self) -> int:
        """Character offset of the problem in its file.

        May be resolved lazily and may raise OSError/ValueError when the
        document is gone or the location no longer exists.
        """
        ...


class LocalizationProvider(Protocol):
    """Localized-string lookup keyed by symbolic message IDs."""

    def format(self, key: str, *args: Any) -> str:
        ...


@runtime_checkable
class TextEditor(Protocol):
    """Editor able to place a caret and scroll to it."""

    def move_caret(self, offset: int) -> None:
        ...

    def scroll_to_caret(self, center: bool = True) -> None:
        ...


class FileEditorService(Protocol):
    """Host that opens files in editors."""

    def open_file(self, file: ScannedFile, focus: bool = True) -> Sequence[Any]:
        ...
