from typing import Generic, Iterable, Iterator, Protocol, TypeVar

_V = TypeVar("_V")
_V_co = TypeVar("_V_co", covariant=True)


class TreeIterable(Protocol, Generic[_V_co]):
    """Defines the iterator factories a traversable tree provides."""

    def level_order_iterator(self) -> Iterator[_V_co]: ...

    def pre_order_iterator(self) -> Iterator[_V_co]: ...

    def post_order_iterator(self) -> Iterator[_V_co]: ...


class TreeIterator(Generic[_V]):
    """
    Forward only iterator over a snapshot of one traversal order.

    The values are copied when the iterator is created, so later changes to
    the tree are not reflected.
    """

    def __init__(self, values: Iterable[_V]):
        self._values: tuple[_V, ...] = tuple(values)
        self._current = 0

    def __iter__(self) -> "TreeIterator[_V]":
        return self

    def __next__(self) -> _V:
        if self._current >= len(self._values):
            raise StopIteration("There is no next item in the tree")

        value = self._values[self._current]
        self._current += 1
        return value

    def __len__(self) -> int:
        """Number of values not yet returned."""
        return len(self._values) - self._current

    def has_next(self) -> bool:
        return self._current < len(self._values)
