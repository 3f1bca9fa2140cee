from .decoding import code_table, decode, encode
from .exceptions import InvalidTreeError
from .iterators import TreeIterable, TreeIterator
from .k_tree import KTree
from .tree_structures import ArrayTree, TreeNode


__all__ = (
    "KTree",
    "TreeNode",
    "ArrayTree",
    "TreeIterable",
    "TreeIterator",
    "InvalidTreeError",
    "decode",
    "encode",
    "code_table",
)
