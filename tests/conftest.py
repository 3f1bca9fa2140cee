import pytest
from karytree import KTree


@pytest.fixture(scope="session")
def banana_array():
    return ["_", "_", "A", "B", "N", None, None]


@pytest.fixture
def banana_tree(banana_array):
    yield KTree.from_array(banana_array, 2)


@pytest.fixture
def letters_tree():
    yield KTree.from_array(["A", "B", "C", "D", "E", None, None], 2)


@pytest.fixture
def ternary_tree():
    yield KTree.from_array([str(i) for i in range(13)], 3)


@pytest.fixture
def binary_code_tree():
    yield KTree.from_array(
        ["_", "_", "_", "_", "_", "_", "U", "I", "H", "G", None, "M", "-", None, None],
        2,
    )


@pytest.fixture
def ternary_code_tree():
    yield KTree.from_array(
        ["_", "_", "A", "_", "E", "_", "B", None, None, None, "R", None, None], 3
    )
