"""Comment tree reconstruction.

Comments are stored flat with a nullable parent reference. Reading a post's
thread rebuilds the forest from the flat rows in a single pass.
"""

from dataclasses import dataclass, field
from typing import Sequence

import logfire

from agora.domain.model.comment import CommentView
from agora.domain.value import CommentId


@dataclass
class CommentNode:
    """Comment in a thread, with its direct replies in creation order."""

    view: CommentView
    replies: list["CommentNode"] = field(default_factory=list)

    @property
    def id(self) -> CommentId:
        return self.view.id

    def size(self) -> int:
        """Number of comments in this subtree, including this one."""
        total = 0
        stack = [self]
        while stack:
            node = stack.pop()
            total += 1
            stack.extend(node.replies)
        return total


def build_comment_tree(rows: Sequence[CommentView]) -> list[CommentNode]:
    """Build a forest of comment nodes from a post's flat comment rows.

    Rows must already be ordered by creation time; that order becomes the
    sibling order within each parent. Like aggregates are read from the rows
    as-is.

    A row whose parent is not among the rows is dropped together with its
    subtree and a warning is logged.

    Args:
        rows: Every comment of one post, oldest first

    Returns:
        Root nodes, each with replies populated to arbitrary depth
    """
    nodes: dict[CommentId, CommentNode] = {
        row.id: CommentNode(view=row) for row in rows
    }

    roots: list[CommentNode] = []
    for row in rows:
        node = nodes[row.id]
        if row.parent_comment_id is None:
            roots.append(node)
            continue

        parent = nodes.get(row.parent_comment_id)
        if parent is None:
            logfire.warn(
                "Dropping comment with missing parent",
                comment_id=row.id,
                parent_comment_id=row.parent_comment_id,
                post_id=row.post_id,
            )
            continue
        parent.replies.append(node)

    return roots
