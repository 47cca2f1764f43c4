"""Pytest configuration and fixtures."""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add src directory (and this directory, for scan_fakes) to Python path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))
sys.path.insert(0, str(Path(__file__).parent))

from results_tree.localization import MessageBundle
from scan_fakes import FakeFile, FakeProblem, FakeTextEditor


@pytest.fixture
def file_a() -> FakeFile:
    return FakeFile("Alpha.java")


@pytest.fixture
def file_b() -> FakeFile:
    return FakeFile("Beta.java")


@pytest.fixture
def sample_results(file_a, file_b) -> dict:
    """Two files with problems and one clean file."""
    return {
        file_a: [FakeProblem("Missing javadoc", 10), FakeProblem("Line too long", 42)],
        FakeFile("Clean.java"): [],
        file_b: [FakeProblem("Unused import", 3)],
    }


@pytest.fixture
def localization() -> MessageBundle:
    """Bundle with terse templates so labels are easy to assert."""
    return MessageBundle(
        {
            "plugin.results.no-scan": "no-scan",
            "plugin.results.scan-no-results": "no-results",
            "plugin.results.scan-results": "total={0} files={1}",
            "plugin.results.scan-file-result": "{0} ({1})",
        }
    )


@pytest.fixture
def text_editor() -> FakeTextEditor:
    return FakeTextEditor()


@pytest.fixture
def editor_service(text_editor) -> MagicMock:
    """FileEditorService that always opens ``text_editor``."""
    service = MagicMock()
    service.open_file.return_value = [text_editor]
    return service
