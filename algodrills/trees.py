"""Binary trees: building from a preorder listing and depth/breadth-first traversals."""

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Optional

EMPTY = -1


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_tree(values: Iterable[int]) -> Optional[TreeNode]:
    """Build a tree from a preorder listing where -1 marks an absent child."""
    stream = iter(values)

    def take() -> Optional[TreeNode]:
        try:
            value = next(stream)
        except StopIteration:
            raise ValueError("preorder listing ended before the tree was complete") from None
        if value == EMPTY:
            return None
        node = TreeNode(value)
        node.left = take()
        node.right = take()
        return node

    return take()


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Return node values in left, node, right order."""
    if root is None:
        return []
    return inorder(root.left) + [root.val] + inorder(root.right)


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Return node values in node, left, right order."""
    if root is None:
        return []
    return [root.val] + preorder(root.left) + preorder(root.right)


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return node values grouped by depth, left to right within each level."""
    levels: list[list[int]] = []
    queue = deque([root] if root is not None else [])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.val)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        levels.append(level)
    return levels