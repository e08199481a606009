"""Comment tree construction.

Turns the flat, store-sorted comment list of one thread into a forest of
nested nodes for rendering.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Optional

from discuss.domain.error import ValidationError
from discuss.domain.model.comment import Comment
from discuss.domain.value import CommentId


@dataclass
class CommentNode:
    """Node in a thread's comment tree.

    Children keep the order in which the comment store returned them.
    """

    comment: Comment
    children: list["CommentNode"] = field(default_factory=list)


def normalize_depth(max_depth: Optional[int]) -> Optional[int]:
    """Turn a requested display depth into a depth limit.

    None and 0 both mean unlimited.

    Raises:
        ValidationError: If max_depth is negative
    """
    if max_depth is None or max_depth == 0:
        return None
    if max_depth < 0:
        raise ValidationError(f"Display depth must not be negative: {max_depth}")
    return max_depth


def walk(forest: Sequence[CommentNode]) -> Iterator[CommentNode]:
    """Iterate over every node of a forest, depth-first, in display order."""
    stack = list(reversed(forest))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def count_nodes(forest: Sequence[CommentNode]) -> int:
    """Count the comments contained in a forest."""
    return sum(1 for _ in walk(forest))


class CommentTreeBuilder:
    """Builds comment trees from flat comment lists.

    Stateless: output depends only on the order of the input list and the
    depth limit, so one instance can serve any number of concurrent reads.
    """

    def retained(
        self, comments: Sequence[Comment], max_depth: Optional[int] = None
    ) -> list[Comment]:
        """Select the comments that make it into the tree, in input order.

        A comment is kept when it lies within the depth limit and every
        comment on its ancestor path is kept too. Cutting a comment therefore
        cuts its whole subtree, and replies whose parent is missing from the
        list are dropped rather than promoted. Repeated ids keep their first
        occurrence.

        Args:
            comments: Flat comment list of one thread, as sorted by the store
            max_depth: Depth limit (None or 0 for unlimited)

        Returns:
            The retained comments
        """
        limit = normalize_depth(max_depth)

        unique: list[Comment] = []
        seen: set[CommentId] = set()
        for comment in comments:
            if comment.id in seen:
                continue
            seen.add(comment.id)
            unique.append(comment)

        in_depth = {
            comment.id
            for comment in unique
            if limit is None or comment.depth <= limit
        }

        return [
            comment
            for comment in unique
            if comment.id in in_depth
            and all(ancestor in in_depth for ancestor in comment.ancestors)
        ]

    def build_tree(
        self, comments: Sequence[Comment], max_depth: Optional[int] = None
    ) -> list[CommentNode]:
        """Build the nested comment forest.

        Nodes are created in a first pass and linked in a second, so parents
        may appear after their replies in the input (newest-first sorts do
        exactly that).

        Args:
            comments: Flat comment list of one thread, as sorted by the store
            max_depth: Depth limit (None or 0 for unlimited)

        Returns:
            Root nodes in store order, each with its replies nested
        """
        kept = self.retained(comments, max_depth)
        nodes = {comment.id: CommentNode(comment=comment) for comment in kept}

        roots: list[CommentNode] = []
        for comment in kept:
            node = nodes[comment.id]
            if comment.ancestors:
                nodes[comment.ancestors[-1]].children.append(node)
            else:
                roots.append(node)
        return roots

    def build_flat(
        self, comments: Sequence[Comment], max_depth: Optional[int] = None
    ) -> list[CommentNode]:
        """Wrap the retained comments as childless nodes.

        Gives flat listings the same node shape as trees.

        Args:
            comments: Flat comment list of one thread, as sorted by the store
            max_depth: Depth limit (None or 0 for unlimited)

        Returns:
            One leaf node per retained comment, in store order
        """
        return [
            CommentNode(comment=comment)
            for comment in self.retained(comments, max_depth)
        ]
