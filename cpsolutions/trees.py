"""Binary tree helpers: right-side view, reconstruction and comparison."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def right_side_view(root: TreeNode | None) -> list[int]:
    """Values seen from the right: the last node on each level."""
    view: list[int] = []
    if root is None:
        return view
    level = deque([root])
    while level:
        view.append(level[-1].val)
        for _ in range(len(level)):
            node = level.popleft()
            if node.left is not None:
                level.append(node.left)
            if node.right is not None:
                level.append(node.right)
    return view


def build_tree(inorder: Sequence[int], postorder: Sequence[int]) -> TreeNode | None:
    """Rebuild a tree from its inorder and postorder traversals."""
    if len(inorder) != len(postorder):
        raise ValueError("traversals must have the same length")
    roots = iter(reversed(postorder))

    def build(start: int, end: int) -> TreeNode | None:
        if start > end:
            return None
        value = next(roots)
        try:
            split = inorder.index(value, start, end + 1)
        except ValueError:
            raise ValueError(f"{value!r} is not in the expected part of inorder") from None
        node = TreeNode(value)
        node.right = build(split + 1, end)
        node.left = build(start, split - 1)
        return node

    return build(0, len(inorder) - 1)


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """Whether two trees have the same shape and values."""
    if p is None and q is None:
        return True
    if p is None or q is None:
        return False
    return p.val == q.val and is_same_tree(p.left, q.left) and is_same_tree(p.right, q.right)