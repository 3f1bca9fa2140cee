"""Index arithmetic tests."""

import pytest
from karytree.index_math import (
    child_index,
    child_slot,
    complete_size,
    level_offsets,
    parent_index,
    path_to_root,
)


def test_child_and_parent_are_inverse():
    """Test that every child position maps back to its parent and slot."""

    for k in (2, 3, 5):
        for position in range(20):
            for slot in range(k):
                child = child_index(position, slot, k)
                assert parent_index(child, k) == position
                assert child_slot(child, k) == slot


def test_complete_size():
    assert complete_size(2, 0) == 1
    assert complete_size(2, 2) == 7
    assert complete_size(3, 2) == 13
    assert complete_size(3, 3) == 40
    assert complete_size(2, -1) == 0


def test_level_offsets():
    """Test that level offsets are the cumulative level widths."""

    assert level_offsets(2, 2).tolist() == [0, 1, 3, 7]
    assert level_offsets(3, 2).tolist() == [0, 1, 4, 13]
    assert level_offsets(4, 0).tolist() == [0, 1]


def test_path_to_root():
    assert path_to_root(0, 2) == []
    assert path_to_root(4, 2) == [0, 1]
    assert path_to_root(10, 3) == [2, 0]


def test_path_to_root_rejects_negative_positions():
    with pytest.raises(ValueError):
        path_to_root(-1, 2)
