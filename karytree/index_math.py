"""Implicit array index arithmetic for complete k-ary trees."""

import numpy as np


def child_index(position: int, slot: int, k: int) -> int:
    return position * k + slot + 1


def parent_index(position: int, k: int) -> int:
    return (position - 1) // k


def child_slot(position: int, k: int) -> int:
    return (position - 1) % k


def complete_size(k: int, height: int) -> int:
    """Number of positions in a complete k-ary tree of the given height."""
    return (k ** (height + 1) - 1) // (k - 1)


def level_offsets(k: int, height: int) -> np.ndarray:
    """
    First array position of every level from 0 to height + 1.

    Level e spans [offsets[e], offsets[e + 1] - 1]; the last entry equals
    complete_size(k, height).
    """
    widths = np.power(k, np.arange(height + 1, dtype=np.int64))
    return np.concatenate(([0], np.cumsum(widths)))


def path_to_root(position: int, k: int) -> list[int]:
    """
    Child slots to follow from the root to reach position, top down.

    Raises:
        ValueError: if position is negative.
    """
    if position < 0:
        raise ValueError("position must be >= 0")

    slots = []
    while position > 0:
        slots.append(child_slot(position, k))
        position = parent_index(position, k)
    slots.reverse()
    return slots
