"""Consistency checks for BalancedIntSet, used by the tests and the demo.

The checks only read the tree through ``root`` and the node fields. Visited
nodes are tracked by identity in a side set, so a node that hangs from two
slots (or a cycle) is reported instead of being walked forever.
"""

import math
from typing import AbstractSet, Optional, Set

from balanced_int_set import BalancedIntSet

Node = BalancedIntSet.Node

HEIGHT_BOUND_FACTOR = 1.45


def subtree_height(node: Optional[Node]) -> int:
    if node is None:
        return 0
    return 1 + max(subtree_height(node.child[0]), subtree_height(node.child[1]))


def _check_node(node: Node, seen: Set[int], low: Optional[int], high: Optional[int]) -> int:
    if id(node) in seen:
        raise ValueError("cycle detected")
    seen.add(id(node))

    if (low is not None and node.value <= low) or (high is not None and node.value >= high):
        raise ValueError("binary search tree order violated")

    heights = [0, 0]
    for i in range(2):
        child = node.child[i]
        if child is not None:
            if i == 0:
                heights[i] = _check_node(child, seen, low, node.value)
            else:
                heights[i] = _check_node(child, seen, node.value, high)

    x = heights[1] - heights[0]
    if not -1 <= x <= 1:
        raise ValueError("node balance is out of permitted range")
    if x != node.balance:
        raise ValueError("node balance is incorrect")
    return 1 + max(heights)


def check_consistent(tree: BalancedIntSet) -> None:
    """Recompute heights bottom-up and verify every stored balance factor.

    Also verifies search-tree order and that no node is reachable twice.
    Raises ValueError on the first violation found.
    """
    if tree.root is None:
        return
    _check_node(tree.root, set(), None, None)


def is_consistent(tree: BalancedIntSet) -> bool:
    try:
        check_consistent(tree)
    except ValueError:
        return False
    return True


def check_with_set(tree: BalancedIntSet, expected: AbstractSet[int]) -> None:
    """Compare the values stored in ``tree`` with a reference set."""
    if tree.root is None:
        if expected:
            raise ValueError("sets do not match")
        if len(tree) != 0:
            raise ValueError("size does not match")
        return

    found: Set[int] = set()
    seen: Set[int] = set()
    stack = [tree.root]
    while stack:
        node = stack.pop()
        if id(node) in seen:
            raise ValueError("cycle detected")
        seen.add(id(node))
        if node.value in found:
            raise ValueError(f"value {node.value} appears twice")
        found.add(node.value)
        stack.extend(c for c in node.child if c is not None)

    if found != set(expected):
        raise ValueError("sets do not match")
    if len(tree) != len(found):
        raise ValueError("size does not match")


def height_bound(n: int) -> float:
    return HEIGHT_BOUND_FACTOR * math.log2(n + 2)


def check_height_bound(tree: BalancedIntSet) -> None:
    height = tree.height()
    if height > height_bound(len(tree)):
        raise ValueError(f"height {height} exceeds AVL bound for {len(tree)} values")
