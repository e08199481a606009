"""Unit tests for CommentTreeBuilder."""

import pytest

from discuss.domain.error import ValidationError
from discuss.domain.service import CommentTreeBuilder
from discuss.domain.service.comment_tree import count_nodes, walk
from tests.conftest import make_comment, make_thread


def ids(nodes):
    return [node.comment.id for node in nodes]


@pytest.fixture
def builder():
    return CommentTreeBuilder()


@pytest.fixture
def chain():
    """Thread "art-1" with C1 (root) <- C2 <- C3."""
    thread = make_thread("art-1")
    c1 = make_comment(thread, minutes=0)
    c2 = make_comment(thread, parent=c1, minutes=1)
    c3 = make_comment(thread, parent=c2, minutes=2)
    return c1, c2, c3


class TestBuildTree:
    """Tests for build_tree."""

    def test_nests_replies_under_parents(self, builder, chain):
        c1, c2, c3 = chain

        forest = builder.build_tree([c1, c2, c3])

        assert ids(forest) == [c1.id]
        assert ids(forest[0].children) == [c2.id]
        assert ids(forest[0].children[0].children) == [c3.id]

    def test_depth_limit_cuts_deeper_levels(self, builder, chain):
        """With max_depth=1, C3 (depth 2) is left out and C2 has no children."""
        c1, c2, c3 = chain

        forest = builder.build_tree([c1, c2, c3], max_depth=1)

        assert ids(forest) == [c1.id]
        assert ids(forest[0].children) == [c2.id]
        assert forest[0].children[0].children == []

    @pytest.mark.parametrize("max_depth", [None, 0])
    def test_none_and_zero_mean_unlimited(self, builder, chain, max_depth):
        assert count_nodes(builder.build_tree(list(chain), max_depth)) == 3

    def test_negative_depth_rejected(self, builder, chain):
        with pytest.raises(ValidationError):
            builder.build_tree(list(chain), max_depth=-1)

    def test_children_listed_before_parents(self, builder, chain):
        """Newest-first lists put replies ahead of their parents."""
        c1, c2, c3 = chain

        forest = builder.build_tree([c3, c2, c1])

        assert ids(forest) == [c1.id]
        assert ids(forest[0].children) == [c2.id]
        assert ids(forest[0].children[0].children) == [c3.id]

    def test_keeps_input_order_for_roots_and_siblings(self, builder):
        thread = make_thread()
        first = make_comment(thread, minutes=0)
        second = make_comment(thread, minutes=1)
        reply_a = make_comment(thread, parent=first, minutes=2)
        reply_b = make_comment(thread, parent=first, minutes=3)

        forest = builder.build_tree([second, first, reply_b, reply_a])

        assert ids(forest) == [second.id, first.id]
        assert ids(forest[1].children) == [reply_b.id, reply_a.id]

    def test_orphaned_reply_is_dropped(self, builder, chain):
        """A reply whose parent is missing from the list is not promoted."""
        c1, _, c3 = chain

        forest = builder.build_tree([c1, c3])

        assert ids(forest) == [c1.id]
        assert forest[0].children == []

    def test_duplicate_ids_keep_first_occurrence(self, builder, chain):
        c1, c2, _ = chain
        edited = c2.model_copy(update={"body": "edited"})

        forest = builder.build_tree([c1, c2, edited])

        assert count_nodes(forest) == 2
        assert forest[0].children[0].comment.body == c2.body

    def test_same_input_builds_same_tree(self, builder, chain):
        first = builder.build_tree(list(chain), max_depth=2)
        second = builder.build_tree(list(chain), max_depth=2)

        assert first == second

    def test_empty_input(self, builder):
        assert builder.build_tree([]) == []


class TestBuildFlat:
    """Tests for build_flat."""

    def test_leaf_nodes_in_input_order(self, builder, chain):
        c1, c2, c3 = chain

        nodes = builder.build_flat([c3, c1, c2])

        assert ids(nodes) == [c3.id, c1.id, c2.id]
        assert all(node.children == [] for node in nodes)

    def test_depth_limit_applies(self, builder, chain):
        c1, c2, c3 = chain

        nodes = builder.build_flat([c1, c2, c3], max_depth=1)

        assert ids(nodes) == [c1.id, c2.id]


class TestWalk:
    """Tests for the forest helpers."""

    def test_walk_is_depth_first_in_display_order(self, builder):
        thread = make_thread()
        a = make_comment(thread, minutes=0)
        a1 = make_comment(thread, parent=a, minutes=1)
        a1x = make_comment(thread, parent=a1, minutes=2)
        a2 = make_comment(thread, parent=a, minutes=3)
        b = make_comment(thread, minutes=4)

        forest = builder.build_tree([a, a1, a1x, a2, b])

        assert [node.comment.id for node in walk(forest)] == [
            a.id,
            a1.id,
            a1x.id,
            a2.id,
            b.id,
        ]
        assert count_nodes(forest) == 5
