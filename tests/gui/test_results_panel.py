"""Tests for the ResultsPanel widget and its event handlers."""

from unittest.mock import MagicMock

import pytest
from PyQt6.QtCore import QEvent, QPointF

from gui.results_panel import ResultsPanel
from gui.results_panel import event_handlers, tree_sync
from results_tree.controller import ResultsPanelController


@pytest.fixture
def controller(editor_service, localization):
    return ResultsPanelController(editor_service, localization=localization)


@pytest.fixture
def panel(qt_app, controller):
    widget = ResultsPanel(controller)
    yield widget
    widget.deleteLater()


def _mouse_event(x: int, y: int):
    event = MagicMock()
    event.position.return_value = QPointF(x, y)
    return event


class TestTreeMirroring:
    def test_initial_tree_shows_no_scan(self, panel):
        assert panel.tree.topLevelItemCount() == 1
        assert panel.tree.topLevelItem(0).text(0) == "no-scan"

    def test_display_results_rebuilds_items(self, panel, controller, sample_results):
        controller.display_results(sample_results)

        root_item = panel.tree.topLevelItem(0)
        assert panel.tree.topLevelItemCount() == 1
        assert root_item.text(0) == "total=3 files=2"
        assert root_item.childCount() == 2
        assert root_item.child(0).text(0) == "Alpha.java (2)"
        assert root_item.child(0).childCount() == 2
        assert root_item.child(1).child(0).text(0) == "Unused import"

    def test_items_carry_their_nodes(self, panel, controller, sample_results):
        tree = controller.display_results(sample_results)
        for _, node in tree.walk():
            if node is tree.root:
                continue
            item = panel.item_for(node)
            assert tree_sync.node_for(item) is node

    def test_default_expansion_is_applied(self, panel, controller, sample_results):
        tree = controller.display_results(sample_results)
        assert panel.item_for(tree.visible_root).isExpanded()
        assert all(panel.item_for(node).isExpanded() for node in tree.file_nodes())

    def test_collapse_and_expand_actions(self, panel, controller, sample_results):
        tree = controller.display_results(sample_results)

        panel.collapse_action.trigger()
        assert panel.item_for(tree.visible_root).isExpanded()
        assert not any(panel.item_for(node).isExpanded() for node in tree.file_nodes())

        panel.expand_action.trigger()
        assert all(panel.item_for(node).isExpanded() for node in tree.file_nodes())

    def test_user_collapse_is_recorded(self, panel, controller, sample_results):
        tree = controller.display_results(sample_results)
        file_node = tree.file_nodes()[0]

        panel.item_for(file_node).setExpanded(False)

        assert not controller.expansion.is_expanded(file_node)

    def test_rebuild_does_not_navigate(self, panel, controller, sample_results, editor_service):
        tree = controller.display_results(sample_results)
        panel.tree.setCurrentItem(panel.item_for(tree.problem_nodes()[0]))
        editor_service.open_file.reset_mock()

        controller.display_results(None)

        editor_service.open_file.assert_not_called()
        assert panel.tree.topLevelItem(0).text(0) == "no-results"


class TestNavigation:
    def test_selecting_problem_navigates(self, panel, controller, sample_results, text_editor):
        tree = controller.display_results(sample_results)

        panel.tree.setCurrentItem(panel.item_for(tree.problem_nodes()[1]))

        assert text_editor.calls == [("move_caret", 42), ("scroll_to_caret", True)]

    def test_selecting_file_row_does_not_navigate(self, panel, controller, sample_results, editor_service):
        tree = controller.display_results(sample_results)

        panel.tree.setCurrentItem(panel.item_for(tree.file_nodes()[0]))

        editor_service.open_file.assert_not_called()

    def test_double_click_requires_scroll_to_source(self, panel, controller, sample_results, editor_service):
        tree = controller.display_results(sample_results)
        node = tree.problem_nodes()[0]
        panel.node_at = lambda x, y: node

        assert event_handlers.on_activation(panel, _mouse_event(10, 20)) is False
        panel.scroll_action.trigger()
        assert event_handlers.on_activation(panel, _mouse_event(10, 20)) is True
        editor_service.open_file.assert_called_once_with(node.value.file, focus=True)

    def test_double_click_outside_rows(self, panel, controller, sample_results, editor_service):
        controller.display_results(sample_results)
        panel.set_scroll_to_source(True)

        assert panel.node_at(5000, 5000) is None
        assert event_handlers.on_activation(panel, _mouse_event(5000, 5000)) is False
        editor_service.open_file.assert_not_called()

    def test_only_double_clicks_are_activations(self):
        press = MagicMock()
        press.type.return_value = QEvent.Type.MouseButtonPress
        double = MagicMock()
        double.type.return_value = QEvent.Type.MouseButtonDblClick

        assert not event_handlers.is_activation_event(press)
        assert event_handlers.is_activation_event(double)


class TestSettings:
    def test_scroll_to_source_toggle_is_persisted(self, qt_app, controller, settings_manager):
        panel = ResultsPanel(controller, settings_manager)

        panel.scroll_action.trigger()

        assert controller.settings.scroll_to_source is True
        assert settings_manager.scroll_to_source is True
        panel.deleteLater()

    def test_saved_settings_are_applied(self, qt_app, controller, settings_manager):
        settings_manager.scroll_to_source = True
        settings_manager.navigate_on_selection = False

        panel = ResultsPanel(controller, settings_manager)

        assert panel.scroll_action.isChecked()
        assert controller.settings.scroll_to_source is True
        assert controller.settings.navigate_on_selection is False
        panel.deleteLater()
