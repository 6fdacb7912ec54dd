"""Tests for the arena syntax tree: navigation and problem-node location."""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from helpfuljava.syntax import NodeKind, Role, SyntaxNode, SyntaxTree
from tests.helpers.sketches import (
    array_field_sketch,
    find_node,
    for_loop_sketch,
    missing_dimension_sketch,
)


class TestArenaValidation:
    """SyntaxTree rejects inconsistent arenas."""

    def test_empty_rejected(self) -> None:
        with pytest.raises(ValueError, match="root"):
            SyntaxTree([])

    def test_root_with_parent_rejected(self) -> None:
        with pytest.raises(ValueError, match="Root"):
            SyntaxTree([SyntaxNode(0, NodeKind.BLOCK, 0, 2, parent=0)])

    def test_index_mismatch_rejected(self) -> None:
        with pytest.raises(ValueError, match="index"):
            SyntaxTree([SyntaxNode(1, NodeKind.BLOCK, 0, 2)])

    def test_orphan_rejected(self) -> None:
        nodes = [SyntaxNode(0, NodeKind.BLOCK, 0, 4), SyntaxNode(1, NodeKind.SIMPLE_NAME, 1, 2)]
        with pytest.raises(ValueError, match="invalid parent"):
            SyntaxTree(nodes)

    def test_self_parent_rejected(self) -> None:
        nodes = [SyntaxNode(0, NodeKind.BLOCK, 0, 4), SyntaxNode(1, NodeKind.SIMPLE_NAME, 1, 2, parent=1)]
        with pytest.raises(ValueError, match="own parent"):
            SyntaxTree(nodes)

    def test_node_span_validated(self) -> None:
        with pytest.raises(ValueError, match="end"):
            SyntaxNode(0, NodeKind.BLOCK, 5, 3)


class TestNavigation:
    """Parent links, ancestors and role lookups."""

    def test_root_is_first_node(self) -> None:
        tree = for_loop_sketch()
        assert tree.root.kind is NodeKind.METHOD_DECLARATION
        assert tree.parent(tree.root) is None

    def test_ancestors_start_at_node_and_end_at_root(self) -> None:
        tree = for_loop_sketch()
        count = find_node(tree, NodeKind.SIMPLE_NAME, "count")
        kinds = [n.kind for n in tree.ancestors(count)]
        assert kinds == [
            NodeKind.SIMPLE_NAME,
            NodeKind.INFIX_EXPRESSION,
            NodeKind.FOR_STATEMENT,
            NodeKind.BLOCK,
            NodeKind.METHOD_DECLARATION,
        ]

    def test_first_ancestor(self) -> None:
        tree = for_loop_sketch()
        count = find_node(tree, NodeKind.SIMPLE_NAME, "count")
        loop = tree.first_ancestor(count, NodeKind.FOR_STATEMENT)
        assert loop is not None
        assert loop.text.startswith("for (")
        assert tree.first_ancestor(count, NodeKind.ARRAY_ACCESS) is None

    def test_child_by_role(self) -> None:
        tree = for_loop_sketch()
        infix = find_node(tree, NodeKind.INFIX_EXPRESSION, "i < count")
        left = tree.child(infix, Role.LEFT_OPERAND)
        right = tree.child(infix, Role.RIGHT_OPERAND)
        assert left is not None and left.text == "i"
        assert right is not None and right.text == "count"
        assert tree.child(infix, Role.ARGUMENTS) is None

    def test_children_in_source_order(self) -> None:
        tree = for_loop_sketch()
        loop = tree.find(NodeKind.FOR_STATEMENT)
        assert loop is not None
        starts = [child.start for child in tree.children(loop)]
        assert starts == sorted(starts)
        assert len(starts) == 4

    def test_spans_match_source(self) -> None:
        tree = missing_dimension_sketch()
        for current in tree:
            assert tree.source[current.start : current.end] == current.text


class TestNodeAt:
    """node_at prefers exact or covered nodes, then the innermost cover."""

    def test_exact_span(self) -> None:
        tree = for_loop_sketch()
        count = find_node(tree, NodeKind.SIMPLE_NAME, "count")
        assert tree.node_at(count.start, count.end) == count

    def test_range_inside_name(self) -> None:
        tree = for_loop_sketch()
        count = find_node(tree, NodeKind.SIMPLE_NAME, "count")
        assert tree.node_at(count.start + 1, count.end - 1) == count

    def test_exact_match_prefers_outermost(self) -> None:
        tree = array_field_sketch()
        fragment = find_node(tree, NodeKind.VARIABLE_DECLARATION_FRAGMENT, "scores")
        name = find_node(tree, NodeKind.SIMPLE_NAME, "scores")
        assert (fragment.start, fragment.end) == (name.start, name.end)
        assert tree.node_at(name.start, name.end) == fragment

    def test_root_span_is_root(self) -> None:
        tree = for_loop_sketch()
        assert tree.node_at(tree.root.start, tree.root.end) == tree.root

    def test_out_of_range_is_root(self) -> None:
        tree = for_loop_sketch()
        assert tree.node_at(5000, 5010) == tree.root

    def test_range_spanning_siblings_returns_first_covered(self) -> None:
        tree = for_loop_sketch()
        infix = find_node(tree, NodeKind.INFIX_EXPRESSION, "i < count")
        located = tree.node_at(infix.start, infix.start + 3)
        assert located.kind is NodeKind.SIMPLE_NAME
        assert located.text == "i"

    @given(st.data())
    def test_located_node_always_in_tree(self, data: st.DataObject) -> None:
        tree = for_loop_sketch()
        start = data.draw(st.integers(min_value=0, max_value=len(tree.source) + 5))
        end = data.draw(st.integers(min_value=start, max_value=len(tree.source) + 10))
        located = tree.node_at(start, end)
        event(f"located={located.kind}")
        assert tree.node(located.index) is located
        assert located.covers(start, end) or located.is_inside(start, end) or located is tree.root
