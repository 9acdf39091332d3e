"""Binary trees and algorithms over them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_MISSING = object()


@dataclass
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_tree(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree from level-order values, with ``None`` marking absent children."""
    it = iter(values)
    first = next(it, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = next(it, _MISSING)
        if left is _MISSING:
            break
        if left is not None:
            node.left = TreeNode(left)  # type: ignore[arg-type]
            queue.append(node.left)
        right = next(it, _MISSING)
        if right is _MISSING:
            break
        if right is not None:
            node.right = TreeNode(right)  # type: ignore[arg-type]
            queue.append(node.right)
    return root


def inorder(root: TreeNode | None) -> list[int]:
    """Return the values in left, node, right order."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.val)
        node = node.right
    return result


def preorder(root: TreeNode | None) -> list[int]:
    """Return the values in node, left, right order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def postorder(root: TreeNode | None) -> list[int]:
    """Return the values in left, right, node order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def _mirrored_pairs_equal(pairs: list[tuple[TreeNode | None, TreeNode | None]], mirror: bool) -> bool:
    while pairs:
        p, q = pairs.pop()
        if p is None and q is None:
            continue
        if p is None or q is None or p.val != q.val:
            return False
        if mirror:
            pairs.extend([(p.left, q.right), (p.right, q.left)])
        else:
            pairs.extend([(p.left, q.left), (p.right, q.right)])
    return True


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """Tell whether two trees have the same shape and values."""
    return _mirrored_pairs_equal([(p, q)], mirror=False)


def is_symmetric(root: TreeNode | None) -> bool:
    """Tell whether a tree is a mirror image of itself; an empty tree is not."""
    if root is None:
        return False
    return _mirrored_pairs_equal([(root.left, root.right)], mirror=True)


def _levels(root: TreeNode | None):
    level = [root] if root is not None else []
    while level:
        yield level
        level = [child for node in level for child in (node.left, node.right) if child is not None]


def max_depth(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    return sum(1 for _ in _levels(root))


def min_depth(root: TreeNode | None) -> int:
    """Return the number of nodes on the shortest root-to-leaf path."""
    for depth, level in enumerate(_levels(root), start=1):
        if any(node.left is None and node.right is None for node in level):
            return depth
    return 0


def sorted_array_to_bst(nums: Sequence[int]) -> TreeNode | None:
    """Build a height-balanced search tree from sorted ``nums``."""

    def build(low: int, high: int) -> TreeNode | None:
        if low > high:
            return None
        mid = low + (high - low) // 2
        return TreeNode(nums[mid], build(low, mid - 1), build(mid + 1, high))

    return build(0, len(nums) - 1)


def is_balanced(root: TreeNode | None) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""

    def height(node: TreeNode | None) -> int | None:
        if node is None:
            return 0
        left = height(node.left)
        if left is None:
            return None
        right = height(node.right)
        if right is None or abs(left - right) > 1:
            return None
        return 1 + max(left, right)

    return height(root) is not None


def has_path_sum(root: TreeNode | None, target_sum: int) -> bool:
    """Tell whether some root-to-leaf path adds up to ``target_sum``."""
    stack = [(root, target_sum)] if root is not None else []
    while stack:
        node, remaining = stack.pop()
        if node.left is None and node.right is None:
            if remaining == node.val:
                return True
            continue
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, remaining - node.val))
    return False