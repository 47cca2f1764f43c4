"""Tests for TreeExpansionController."""

import pytest

from results_tree.builder import ResultTreeBuilder
from results_tree.expansion import TreeExpansionController
from scan_fakes import FakeFile, FakeProblem


@pytest.fixture
def tree(localization, sample_results):
    return ResultTreeBuilder(localization).build(sample_results)


def _expanded_nodes(controller):
    return {path[-1] for path in controller.expanded_paths}


class TestExpandToDepth:
    def test_depth_zero_is_noop(self, tree):
        controller = TreeExpansionController()
        controller.expand_to_depth(tree, tree.root, 0)
        assert controller.expanded_paths == frozenset()

    def test_default_depth_reveals_problems(self, tree):
        controller = TreeExpansionController()
        controller.expand_to_depth(tree)

        expanded = _expanded_nodes(controller)
        assert tree.root in expanded
        assert tree.visible_root in expanded
        assert all(node in expanded for node in tree.file_nodes())
        # Leaves are never recorded as expanded
        assert not any(node in expanded for node in tree.problem_nodes())

    def test_depth_limits_levels(self, tree):
        controller = TreeExpansionController()
        controller.expand_to_depth(tree, tree.root, 2)

        expanded = _expanded_nodes(controller)
        # File rows are shown but stay closed
        assert expanded == {tree.root, tree.visible_root}
        assert not any(controller.is_expanded(node) for node in tree.file_nodes())

    def test_depth_from_visible_root(self, tree):
        controller = TreeExpansionController()
        controller.expand_to_depth(tree, tree.visible_root, 2)

        expanded = _expanded_nodes(controller)
        # Ancestors of the start node are opened as well
        assert tree.root in expanded
        assert tree.visible_root in expanded
        assert all(node in expanded for node in tree.file_nodes())

    def test_idempotent(self, tree):
        once = TreeExpansionController()
        once.expand_to_depth(tree, tree.root, 3)

        twice = TreeExpansionController()
        twice.expand_to_depth(tree, tree.root, 3)
        twice.expand_to_depth(tree, tree.root, 3)

        assert once.expanded_paths == twice.expanded_paths

    def test_start_node_from_other_tree_is_ignored(self, tree, localization):
        other = ResultTreeBuilder(localization).build({FakeFile("X.java"): [FakeProblem("x")]})
        controller = TreeExpansionController()
        controller.expand_to_depth(tree, other.visible_root, 3)
        assert controller.expanded_paths == frozenset()

    def test_deep_wide_tree_does_not_recurse(self, localization):
        """Expansion uses a worklist, so large trees are fine."""
        results = {FakeFile(f"F{i}.java"): [FakeProblem(str(j)) for j in range(20)] for i in range(500)}
        big = ResultTreeBuilder(localization).build(results)

        controller = TreeExpansionController()
        controller.expand_to_depth(big)

        assert len(controller.expanded_paths) == 2 + 500


class TestCollapseAndState:
    def test_collapse_to_root_leaves_visible_root_open(self, tree):
        controller = TreeExpansionController()
        controller.expand_to_depth(tree)
        controller.collapse_to_root(tree)

        assert _expanded_nodes(controller) == {tree.root, tree.visible_root}
        assert not any(controller.is_expanded(node) for node in tree.file_nodes())

    def test_new_tree_starts_with_no_expansion(self, tree, localization):
        controller = TreeExpansionController()
        controller.expand_to_depth(tree)

        rebuilt = ResultTreeBuilder(localization).build({FakeFile("Z.java"): [FakeProblem("z")]})
        controller.attach(rebuilt)

        assert controller.expanded_paths == frozenset()
        assert controller.tree is rebuilt

    def test_set_expanded_records_user_toggle(self, tree):
        controller = TreeExpansionController()
        controller.expand_to_depth(tree)
        file_node = tree.file_nodes()[0]

        controller.set_expanded(file_node, False)
        assert not controller.is_expanded(file_node)

        controller.set_expanded(file_node, True)
        assert controller.is_expanded(file_node)

    def test_set_expanded_ignores_leaves(self, tree):
        controller = TreeExpansionController()
        controller.attach(tree)
        leaf = tree.problem_nodes()[0]

        controller.set_expanded(leaf, True)
        assert not controller.is_expanded(leaf)
