from typing import Generic, Optional, TypeVar

_V = TypeVar("_V")


ArrayTree = list[Optional[_V]]


class TreeNode(Generic[_V]):
    """
    Represents a node in the linked tree structure.
    """

    __slots__ = ("value", "children")

    def __init__(self, value: _V, k: int):
        self.value: _V = value
        self.children: list[Optional[TreeNode[_V]]] = [None] * k

    @property
    def is_leaf(self) -> bool:
        return all(child is None for child in self.children)

    def __repr__(self) -> str:
        return f"TreeNode({self.value!r})"
