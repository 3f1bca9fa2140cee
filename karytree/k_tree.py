"""K-ary tree engine"""

from __future__ import annotations
import logging
import dataclasses
from typing import Generic, Iterator, Optional, Sequence, TypeVar

from .conversions import build_linked, dense, subtree_height, to_array, trim_end
from .decoding import decode as _decode
from .exceptions import InvalidTreeError
from .index_math import complete_size, level_offsets, parent_index, path_to_root
from .iterators import TreeIterator
from .traversals import (
    join_values,
    level_order,
    post_order,
    pre_order,
    render_levels,
)
from .tree_structures import ArrayTree, TreeNode

logging.basicConfig(format="%(asctime)s - %(message)s", level=logging.INFO)

_V = TypeVar("_V")


logger = logging.getLogger(__name__)


class KTree(Generic[_V]):
    """
    A k-ary tree kept as a linked structure and addressed through the
    positions of its complete array representation.

    Position 0 is the root and the child in slot i of position p sits at
    p * k + i + 1. Structural changes (insert and delete) round-trip through
    the array representation and rebuild the linked nodes.
    """

    @dataclasses.dataclass
    class Config:
        """KTree config"""

        k: int = dataclasses.field(default=2)
        separator: str = dataclasses.field(default=" ")
        empty_marker: str = dataclasses.field(default="None")

        def __post_init__(self):
            if self.k < 2:
                raise ValueError("k must be at least 2")

            if not isinstance(self.separator, str):
                raise ValueError("separator must be a string")

            if not isinstance(self.empty_marker, str):
                raise ValueError("empty_marker must be a string")

        def __str__(self) -> str:
            """Returns string formatted config."""
            return f"""
            KTree.Config:
                K: {self.k}
                Separator: {self.separator!r}
                Empty Marker: {self.empty_marker!r}
            """

    def __init__(
        self,
        config: Optional[Config] = None,
        array_tree: Sequence[Optional[_V]] = (),
    ) -> None:
        self.config: KTree.Config = config if config is not None else self.Config()
        self._k = self.config.k

        self._root: Optional[TreeNode[_V]] = None
        self._size = 0
        self._height = 0

        if len(array_tree) > 0 and array_tree[0] is None:
            logger.warning(
                "Array tree has no root, ignoring %s positions", len(array_tree)
            )
        self._rebuild(array_tree)

        logger.info(
            "Successfully initialized KTree with %s nodes and Config %s",
            self._size,
            self.config,
        )

    @classmethod
    def from_array(cls, array_tree: Sequence[Optional[_V]], k: int = 2) -> KTree[_V]:
        """Builds a tree from its implicit array representation."""
        return cls(cls.Config(k=k), array_tree)

    # ---------- Queries ----------

    @property
    def k(self) -> int:
        """Branching factor, the maximum number of children per node."""
        return self._k

    @property
    def size(self) -> int:
        return self._size

    @property
    def height(self) -> int:
        return self._height

    @property
    def root(self) -> Optional[TreeNode[_V]]:
        return self._root

    def __len__(self) -> int:
        return self._size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KTree):
            return NotImplemented
        return self._k == other._k and self.to_array() == other.to_array()

    def get(self, index: int) -> Optional[_V]:
        """
        Returns the value at the given array position, or None if the
        position is not part of the tree.
        """
        node = self._node_at(index)
        return None if node is None else node.value

    def is_leaf(self, index: int) -> bool:
        node = self._node_at(index)
        return node is not None and node.is_leaf

    def _node_at(self, index: int) -> Optional[TreeNode[_V]]:
        if index < 0 or index >= complete_size(self._k, self._height):
            return None

        current = self._root
        for slot in path_to_root(index, self._k):
            if current is None:
                break
            current = current.children[slot]
        return current

    # ---------- Mutation ----------

    def set(self, index: int, value: Optional[_V]) -> bool:
        """
        Sets the value at the given array position.

        A None value deletes the position, an unoccupied position is inserted
        as a new leaf and an occupied one is overwritten in place.

        Args:
            index (int): The array position.
            value (Optional[_V]): The new value, or None to delete.

        Returns:
            bool: Whether the tree was changed.

        Raises:
            InvalidTreeError: If a new leaf would have no parent.
        """
        if index < 0:
            logger.debug("Rejected set at invalid index %s", index)
            return False

        if value is None:
            return self.delete(index)

        node = self._node_at(index)
        if node is not None:
            node.value = value
            return True

        return self.insert(index, value)

    def insert(self, index: int, value: _V) -> bool:
        """
        Adds a new leaf at the given array position.

        The tree grows by at most one level per insertion. A position whose
        parent is unoccupied, including any position more than one level below
        the current height, is rejected with InvalidTreeError.

        Returns:
            bool: False if the index is negative, the value is None or the
                position is already occupied, True otherwise.
        """
        if index < 0 or value is None:
            logger.debug("Rejected insert of %s at index %s", value, index)
            return False

        if self._root is None:
            if index != 0:
                raise InvalidTreeError(index, parent_index(index, self._k))
            self._rebuild([value])
            return True

        array_tree = self.to_array()
        capacity = len(array_tree)

        if index < capacity and array_tree[index] is not None:
            logger.debug("Rejected insert at occupied index %s", index)
            return False

        parent = parent_index(index, self._k)
        if parent >= capacity or array_tree[parent] is None:
            raise InvalidTreeError(index, parent)

        if index >= capacity:
            logger.debug(
                "Growing tree from height %s to %s", self._height, self._height + 1
            )
            array_tree.extend(
                [None] * (complete_size(self._k, self._height + 1) - capacity)
            )

        array_tree[index] = value
        self._rebuild(array_tree)
        return True

    def delete(self, index: int) -> bool:
        """
        Removes the leaf at the given array position. Deleting the root
        empties the tree.

        Returns:
            bool: False if the position is unoccupied or not a leaf.
        """
        node = self._node_at(index)
        if node is None or not node.is_leaf:
            logger.debug("Rejected delete at index %s", index)
            return False

        if index == 0:
            self.clear()
            return True

        array_tree = self.to_array()
        array_tree[index] = None
        self._rebuild(array_tree)
        return True

    def clear(self) -> None:
        self._root = None
        self._size = 0
        self._height = 0

    def _rebuild(self, array_tree: Sequence[Optional[_V]]) -> None:
        root, size, height = build_linked(array_tree, self._k)
        logger.debug("Rebuilt tree with %s nodes and height %s", size, height)
        self._root, self._size, self._height = root, size, height

    # ---------- Array representations ----------

    def to_array(self) -> ArrayTree[_V]:
        """Complete array representation, None where there is no node."""
        return to_array(self._root, self._k, self._height)

    def to_trimmed_array(self) -> ArrayTree[_V]:
        """Array representation without the empty positions at the end."""
        return trim_end(self.to_array())

    def to_dense_array(self) -> list[_V]:
        """Array representation without any empty positions."""
        return dense(self.to_array())

    def subtree(self, index: int) -> Optional[ArrayTree[_V]]:
        """
        Returns the trimmed array representation of the subtree rooted at
        the given position, or None if the position is unoccupied.
        """
        node = self._node_at(index)
        if node is None:
            return None
        return trim_end(to_array(node, self._k, subtree_height(node)))

    def mirror(self) -> ArrayTree[_V]:
        """
        Returns the array representation with the positions of every level
        reversed.
        """
        array_tree = self.to_array()
        if not array_tree:
            return []

        offsets = level_offsets(self._k, self._height).tolist()
        mirrored: ArrayTree[_V] = []
        for begin, end in zip(offsets, offsets[1:]):
            mirrored.extend(reversed(array_tree[begin:end]))
        return mirrored

    # ---------- Traversals ----------

    def level_order(self) -> list[_V]:
        return level_order(self.to_array())

    def pre_order(self) -> list[_V]:
        return pre_order(self._root)

    def post_order(self) -> list[_V]:
        return post_order(self._root)

    def to_string_level_order(self) -> str:
        return join_values(self.level_order(), self.config.separator)

    def to_string_pre_order(self) -> str:
        return join_values(self.pre_order(), self.config.separator)

    def to_string_post_order(self) -> str:
        return join_values(self.post_order(), self.config.separator)

    def __str__(self) -> str:
        return render_levels(
            self.to_array(),
            self._k,
            self._height,
            self.config.separator,
            self.config.empty_marker,
        )

    def __repr__(self) -> str:
        return f"KTree(k={self._k}, array_tree={self.to_trimmed_array()!r})"

    def level_order_iterator(self) -> TreeIterator[_V]:
        return TreeIterator(self.level_order())

    def pre_order_iterator(self) -> TreeIterator[_V]:
        return TreeIterator(self.pre_order())

    def post_order_iterator(self) -> TreeIterator[_V]:
        return TreeIterator(self.post_order())

    def __iter__(self) -> Iterator[_V]:
        return self.level_order_iterator()

    @staticmethod
    def decode(tree: KTree[str], coded_message: str) -> str:
        """Decodes coded_message with tree as the prefix code tree."""
        return _decode(tree, coded_message)
