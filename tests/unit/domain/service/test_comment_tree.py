"""Unit tests for comment tree assembly."""

from uuid import uuid4

from folio.domain.model import CommentNode
from folio.domain.service import (
    build_comment_tree,
    count_comment_tree,
    flatten_comment_tree,
)
from folio.domain.value import CommentId, PostId
from tests.conftest import make_comment


def _ids(nodes: list[CommentNode]) -> list[CommentId]:
    return [node.comment.id for node in nodes]


class TestBuildCommentTree:
    """Tests for build_comment_tree."""

    def test_empty_input_gives_empty_forest(self):
        """No comments should produce no roots."""
        assert build_comment_tree([]) == []

    def test_nests_replies_under_parents(self):
        """A -> B -> C should become one root with a chain of replies."""
        # Arrange
        post_id = PostId(uuid4())
        a = make_comment(post_id, minutes=0)
        b = make_comment(post_id, parent=a, minutes=1)
        c = make_comment(post_id, parent=b, minutes=2)

        # Act
        tree = build_comment_tree([a, b, c])

        # Assert
        assert _ids(tree) == [a.id]
        assert _ids(tree[0].replies) == [b.id]
        assert _ids(tree[0].replies[0].replies) == [c.id]
        assert tree[0].replies[0].replies[0].replies == []

    def test_preserves_sibling_order(self):
        """Siblings keep input order at every level."""
        # Arrange
        post_id = PostId(uuid4())
        root1 = make_comment(post_id, minutes=0)
        root2 = make_comment(post_id, minutes=1)
        reply1 = make_comment(post_id, parent=root1, minutes=2)
        root3 = make_comment(post_id, minutes=3)
        reply2 = make_comment(post_id, parent=root1, minutes=4)
        reply3 = make_comment(post_id, parent=root1, minutes=5)

        # Act
        tree = build_comment_tree([root1, root2, reply1, root3, reply2, reply3])

        # Assert
        assert _ids(tree) == [root1.id, root2.id, root3.id]
        assert _ids(tree[0].replies) == [reply1.id, reply2.id, reply3.id]

    def test_reply_listed_before_parent_is_still_attached(self):
        """Attachment does not depend on the parent appearing first."""
        # Arrange
        post_id = PostId(uuid4())
        parent = make_comment(post_id, minutes=1)
        reply = make_comment(post_id, parent=parent, minutes=0)

        # Act
        tree = build_comment_tree([reply, parent])

        # Assert
        assert _ids(tree) == [parent.id]
        assert _ids(tree[0].replies) == [reply.id]

    def test_orphan_is_demoted_to_root(self):
        """A comment whose parent is missing should become a root, not vanish."""
        # Arrange
        post_id = PostId(uuid4())
        root = make_comment(post_id, minutes=0)
        orphan = make_comment(
            post_id, parent_comment_id=CommentId(uuid4()), minutes=1
        )

        # Act
        tree = build_comment_tree([root, orphan])

        # Assert
        assert _ids(tree) == [root.id, orphan.id]
        assert tree[1].comment.parent_comment_id == orphan.parent_comment_id

    def test_orphan_keeps_its_own_replies(self):
        """Replies to a demoted orphan stay nested under it."""
        # Arrange
        post_id = PostId(uuid4())
        orphan = make_comment(post_id, parent_comment_id=CommentId(uuid4()))
        reply = make_comment(post_id, parent=orphan, minutes=1)

        # Act
        tree = build_comment_tree([orphan, reply])

        # Assert
        assert _ids(tree) == [orphan.id]
        assert _ids(tree[0].replies) == [reply.id]

    def test_self_parent_is_demoted_to_root(self):
        """A comment naming itself as parent should not disappear."""
        # Arrange
        post_id = PostId(uuid4())
        comment = make_comment(post_id)
        self_parented = comment.model_copy(update={"parent_comment_id": comment.id})

        # Act
        tree = build_comment_tree([self_parented])

        # Assert
        assert _ids(tree) == [comment.id]
        assert tree[0].replies == []

    def test_every_comment_appears_exactly_once(self):
        """Flattening the tree should give back every input comment once."""
        # Arrange
        post_id = PostId(uuid4())
        a = make_comment(post_id, minutes=0)
        b = make_comment(post_id, parent=a, minutes=1)
        c = make_comment(post_id, minutes=2)
        d = make_comment(post_id, parent=b, minutes=3)
        e = make_comment(post_id, parent=c, minutes=4)
        comments = [a, b, c, d, e]

        # Act
        tree = build_comment_tree(comments)
        flat = flatten_comment_tree(tree)

        # Assert
        assert sorted(x.id for x in flat) == sorted(x.id for x in comments)
        assert count_comment_tree(tree) == len(comments)

    def test_nodes_are_linked_not_copied(self):
        """Nodes wrap the original comment objects."""
        # Arrange
        post_id = PostId(uuid4())
        a = make_comment(post_id)
        b = make_comment(post_id, parent=a, minutes=1)

        # Act
        tree = build_comment_tree([a, b])

        # Assert
        assert tree[0].comment is a
        assert tree[0].replies[0].comment is b


class TestFlattenCommentTree:
    """Tests for flatten_comment_tree."""

    def test_flattens_in_pre_order(self):
        """Parents precede their replies, siblings keep their order."""
        # Arrange
        post_id = PostId(uuid4())
        a = make_comment(post_id, minutes=0)
        b = make_comment(post_id, minutes=1)
        a1 = make_comment(post_id, parent=a, minutes=2)
        a1x = make_comment(post_id, parent=a1, minutes=3)
        a2 = make_comment(post_id, parent=a, minutes=4)

        # Act
        flat = flatten_comment_tree(build_comment_tree([a, b, a1, a1x, a2]))

        # Assert
        assert [c.id for c in flat] == [a.id, a1.id, a1x.id, a2.id, b.id]

    def test_count_of_empty_tree_is_zero(self):
        """An empty forest has no comments."""
        assert count_comment_tree([]) == 0
