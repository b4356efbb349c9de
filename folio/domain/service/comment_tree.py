"""Comment tree assembly.

Comments are stored flat; readers see them nested. ``build_comment_tree``
turns a post's chronological comment list into a forest of
``CommentNode``s in linear time.
"""

from collections.abc import Iterable, Sequence

import logfire

from folio.domain.model import Comment, CommentNode
from folio.domain.value import CommentId


def build_comment_tree(comments: Sequence[Comment]) -> list[CommentNode]:
    """Build a nested reply tree from a flat list of comments.

    Algorithm:
    1. Index every comment by id into a node with an empty ``replies`` list
    2. Walk the input again in order; attach each node to its parent's
       ``replies`` when the parent is in the index, otherwise make it a root

    Because both passes follow input order, siblings keep the order they
    were given in (``created_at`` ascending) at every level. Nodes are
    linked by reference, never copied.

    A comment whose parent is not in ``comments`` (deleted, or belonging to
    another post) is demoted to a root rather than dropped. A comment that
    names itself as its parent is demoted the same way.

    Args:
        comments: Comments of a single post, oldest first, each at most once

    Returns:
        Root nodes in input order, with replies populated recursively
    """
    nodes: dict[CommentId, CommentNode] = {
        comment.id: CommentNode(comment=comment) for comment in comments
    }
    roots: list[CommentNode] = []

    for comment in comments:
        node = nodes[comment.id]
        parent_id = comment.parent_comment_id

        if parent_id is None:
            roots.append(node)
            continue

        parent = nodes.get(parent_id)
        if parent is None or parent is node:
            logfire.warn(
                "Comment parent not found in post, promoting to root",
                comment_id=str(comment.id),
                parent_comment_id=str(parent_id),
                post_id=str(comment.post_id),
            )
            roots.append(node)
        else:
            parent.replies.append(node)

    return roots


def flatten_comment_tree(nodes: Iterable[CommentNode]) -> list[Comment]:
    """Flatten a comment tree back into a list (pre-order).

    Parents always precede their replies and siblings keep their order.
    """
    flat: list[Comment] = []
    stack = list(reversed(list(nodes)))
    while stack:
        node = stack.pop()
        flat.append(node.comment)
        stack.extend(reversed(node.replies))
    return flat


def count_comment_tree(nodes: Iterable[CommentNode]) -> int:
    """Count every comment in a tree, replies included."""
    return len(flatten_comment_tree(nodes))
