"""Binary tree helpers: traversals, BST checks and search, heap check."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """A binary tree node."""

    data: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def count_nodes(root: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    count = 0
    stack = [root]
    while stack:
        node = stack.pop()
        if node is not None:
            count += 1
            stack.extend((node.left, node.right))
    return count


def is_bst(root: Optional[Node]) -> bool:
    """Return True if the tree is a binary search tree with distinct keys."""
    stack: list[tuple[Optional[Node], float, float]] = [(root, -math.inf, math.inf)]
    while stack:
        node, low, high = stack.pop()
        if node is None:
            continue
        if not low < node.data < high:
            return False
        stack.append((node.left, low, node.data))
        stack.append((node.right, node.data, high))
    return True


def _is_complete(root: Optional[Node], total: int) -> bool:
    stack = [(root, 0)]
    while stack:
        node, index = stack.pop()
        if node is None:
            continue
        if index >= total:
            return False
        stack.append((node.left, 2 * index + 1))
        stack.append((node.right, 2 * index + 2))
    return True


def _has_max_order(root: Optional[Node]) -> bool:
    stack = [root]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        for child in (node.left, node.right):
            if child is not None:
                if not node.data > child.data:
                    return False
                stack.append(child)
    return True


def is_heap(root: Optional[Node]) -> bool:
    """Return True if the tree is complete and every parent exceeds its children."""
    return _is_complete(root, count_nodes(root)) and _has_max_order(root)


def inorder(root: Optional[Node]) -> list[Any]:
    """Return the node values in in-order sequence."""
    result: list[Any] = []
    stack: list[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.data)
        node = node.right
    return result


def level_order(root: Optional[Node]) -> list[Any]:
    """Return the node values level by level, left to right."""
    if root is None:
        return []
    result: list[Any] = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        result.append(node.data)
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return result


def search(root: Optional[Node], x: Any) -> bool:
    """Return True if ``x`` is a key in the binary search tree."""
    node = root
    while node is not None:
        if node.data == x:
            return True
        node = node.left if node.data > x else node.right
    return False