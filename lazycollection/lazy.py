"""A collection wrapper that only holds an allocation while it is non-empty."""

from __future__ import annotations

from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class LazyCollection(Generic[T]):
    """Holds a collection lazily and drops it whenever it becomes empty.

    While nothing is stored, no collection object is kept at all. Reading an
    unallocated collection yields a fresh empty one made by ``factory``.
    """

    def __init__(self, factory: Callable[[], T] = list, value: Optional[T] = None) -> None:
        self._factory = factory
        self._inner: Optional[T] = value

    def get(self) -> T:
        """Return the stored collection, or a new empty one if none is stored."""
        if self._inner is None:
            return self._factory()
        return self._inner

    def get_mut_or_default(self) -> CollectionRefMut[T]:
        """Return a mutable handle, allocating an empty collection if needed.

        When the handle is released and the collection is empty, the
        allocation is dropped again.
        """
        if self._inner is None:
            self._inner = self._factory()
        return CollectionRefMut(self)

    def is_allocated(self) -> bool:
        """Whether a collection object is currently held."""
        return self._inner is not None

    def _release_if_empty(self) -> None:
        if self._inner is None or len(self._inner) == 0:  # type: ignore[arg-type]
            self._inner = None


class CollectionRefMut(Generic[T]):
    """A mutable borrow of a :class:`LazyCollection`'s contents.

    Use it as a context manager, or call :meth:`release` when done.
    """

    def __init__(self, owner: LazyCollection[T]) -> None:
        self._owner: Optional[LazyCollection[T]] = owner

    @property
    def value(self) -> T:
        """The borrowed collection."""
        if self._owner is None or self._owner._inner is None:
            raise RuntimeError("collection reference has been released")
        return self._owner._inner

    def __enter__(self) -> T:
        return self.value

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def release(self) -> None:
        """End the borrow, dropping the collection if it is empty."""
        if self._owner is None:
            return
        self._owner._release_if_empty()
        self._owner = None