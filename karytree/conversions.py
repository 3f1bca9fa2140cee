"""Conversions between the array and the linked tree representations."""

from typing import Optional, Sequence, TypeVar

from .index_math import child_index, complete_size
from .tree_structures import ArrayTree, TreeNode

_V = TypeVar("_V")


def build_linked(
    array_tree: Sequence[Optional[_V]],
    k: int,
) -> tuple[Optional[TreeNode[_V]], int, int]:
    """
    Builds the linked representation of a tree stored as an implicit array.

    Positions holding None create no node, so anything stored below an empty
    position is never reached.

    Args:
        array_tree (Sequence[Optional[_V]]): The implicit array representation.
        k (int): The branching factor.

    Returns:
        tuple[Optional[TreeNode], int, int]: The root (None for an empty tree),
            the number of nodes linked and the height reached.
    """
    if len(array_tree) == 0 or array_tree[0] is None:
        return None, 0, 0

    root = TreeNode(array_tree[0], k)
    size, height = _link_children(root, 0, 0, array_tree, k)
    return root, size, height


def _link_children(
    current: TreeNode[_V],
    position: int,
    depth: int,
    array_tree: Sequence[Optional[_V]],
    k: int,
) -> tuple[int, int]:
    size = 1
    height = depth

    for slot in range(k):
        child_position = child_index(position, slot, k)
        if child_position >= len(array_tree) or array_tree[child_position] is None:
            continue

        child = TreeNode(array_tree[child_position], k)
        current.children[slot] = child

        child_size, child_height = _link_children(
            child, child_position, depth + 1, array_tree, k
        )
        size += child_size
        height = max(height, child_height)

    return size, height


def to_array(root: Optional[TreeNode[_V]], k: int, height: int) -> ArrayTree[_V]:
    """Returns the complete array representation of the tree rooted at root."""
    if root is None:
        return []

    array_tree: ArrayTree[_V] = [None] * complete_size(k, height)
    _fill_array(root, 0, array_tree, k)
    return array_tree


def _fill_array(
    current: TreeNode[_V],
    position: int,
    array_tree: ArrayTree[_V],
    k: int,
) -> None:
    array_tree[position] = current.value

    for slot, child in enumerate(current.children):
        if child is not None:
            _fill_array(child, child_index(position, slot, k), array_tree, k)


def subtree_height(current: Optional[TreeNode[_V]]) -> int:
    """Longest edge count from current down to a leaf."""
    if current is None:
        return 0

    return max(
        (1 + subtree_height(child) for child in current.children if child is not None),
        default=0,
    )


def trim_end(array_tree: Sequence[Optional[_V]]) -> ArrayTree[_V]:
    """Drops the empty positions after the last occupied one."""
    end = len(array_tree)
    while end > 0 and array_tree[end - 1] is None:
        end -= 1
    return list(array_tree[:end])


def dense(array_tree: Sequence[Optional[_V]]) -> list[_V]:
    """Drops every empty position, keeping the order of the rest."""
    return [value for value in array_tree if value is not None]
