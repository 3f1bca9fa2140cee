"""Errors raised by the k-ary tree engine."""


class InvalidTreeError(ValueError):
    """Raised when an insertion would leave a node without a parent."""

    def __init__(self, index: int, parent: int):
        super().__init__(
            f"Cannot insert at index {index}: parent position {parent} is empty"
        )
        self.index = index
        self.parent = parent
