"""
Prefix code decoding with a k-ary code tree.

The leaves of the code tree hold the symbols and the path from the root to a
leaf is that symbol's code, one base 36 digit per level.
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING

from .tree_structures import TreeNode

if TYPE_CHECKING:
    from .k_tree import KTree


logger = logging.getLogger(__name__)

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _step(current: TreeNode[str], digit: str) -> TreeNode[str]:
    slot = int(digit, 36)
    child = current.children[slot]
    if child is None:
        raise LookupError(f"Code tree has no child in slot {slot} of {current!r}")
    return child


def decode(tree: KTree[str], coded_message: str) -> str:
    """
    Decodes a message by walking the code tree one digit at a time.

    Every time the walk reaches a leaf its value is emitted and the walk
    restarts from the root. The last digit always completes a symbol, so the
    message must end exactly on a code boundary.

    Args:
        tree (KTree[str]): The code tree.
        coded_message (str): One digit per tree level, each selecting a child slot.

    Returns:
        str: The decoded message.

    Raises:
        LookupError: If a digit selects a slot with no child.
    """
    if not coded_message:
        return ""

    root = tree.root
    if root is None:
        raise LookupError("Cannot decode with an empty code tree")

    message = []
    current = root
    *steps, last = coded_message

    for digit in steps:
        current = _step(current, digit)
        if current.is_leaf:
            message.append(str(current.value))
            current = root

    message.append(str(_step(current, last).value))
    return "".join(message)


def code_table(tree: KTree[str]) -> dict[str, str]:
    """Maps each leaf symbol to its code. The first leaf in pre-order wins."""
    table: dict[str, str] = {}
    if tree.root is not None:
        _collect_codes(tree.root, "", table)
    return table


def _collect_codes(current: TreeNode[str], code: str, table: dict[str, str]) -> None:
    if current.is_leaf:
        if code:
            table.setdefault(str(current.value), code)
        return

    for slot, child in enumerate(current.children):
        if child is not None:
            _collect_codes(child, code + DIGITS[slot], table)


def encode(tree: KTree[str], message: str) -> str:
    """
    Encodes a message with the code tree, matching the longest symbol first.

    Raises:
        ValueError: If part of the message matches no symbol.
    """
    table = code_table(tree)
    symbols = sorted((symbol for symbol in table if symbol), key=len, reverse=True)

    codes = []
    position = 0
    while position < len(message):
        for symbol in symbols:
            if message.startswith(symbol, position):
                codes.append(table[symbol])
                position += len(symbol)
                break
        else:
            raise ValueError(
                f"No code for {message[position:]!r} at position {position}"
            )

    logger.debug("Encoded %s symbols", len(codes))
    return "".join(codes)
