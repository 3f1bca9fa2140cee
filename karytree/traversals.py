"""Traversal orders and string renderings of a linked tree."""

from typing import Iterable, Optional, Sequence, TypeVar

from .conversions import dense
from .index_math import level_offsets
from .tree_structures import TreeNode

_V = TypeVar("_V")


def level_order(array_tree: Sequence[Optional[_V]]) -> list[_V]:
    """Level order is the array representation without its empty positions."""
    return dense(array_tree)


def pre_order(root: Optional[TreeNode[_V]]) -> list[_V]:
    values: list[_V] = []
    _visit_pre_order(root, values)
    return values


def _visit_pre_order(current: Optional[TreeNode[_V]], values: list[_V]) -> None:
    if current is None:
        return

    values.append(current.value)
    for child in current.children:
        _visit_pre_order(child, values)


def post_order(root: Optional[TreeNode[_V]]) -> list[_V]:
    values: list[_V] = []
    _visit_post_order(root, values)
    return values


def _visit_post_order(current: Optional[TreeNode[_V]], values: list[_V]) -> None:
    if current is None:
        return

    for child in current.children:
        _visit_post_order(child, values)
    values.append(current.value)


def join_values(values: Iterable[object], separator: str = " ") -> str:
    """Concatenates the values, each one followed by a single separator."""
    return "".join(f"{value}{separator}" for value in values)


def render_levels(
    array_tree: Sequence[Optional[_V]],
    k: int,
    height: int,
    separator: str = " ",
    empty_marker: str = "None",
) -> str:
    """
    Renders the full array representation one level per line.

    Empty positions are shown with empty_marker. Every level, including the
    last one, is terminated by a line break.
    """
    if len(array_tree) == 0:
        return ""

    offsets = level_offsets(k, height).tolist()
    lines = []
    for begin, end in zip(offsets, offsets[1:]):
        level = (
            empty_marker if value is None else value for value in array_tree[begin:end]
        )
        lines.append(join_values(level, separator) + "\n")

    return "".join(lines)
