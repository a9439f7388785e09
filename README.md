# lazycollection

`lazycollection` wraps a collection, such as a `list` or `dict`, so that
the collection is only held while it has items in it. An unallocated
wrapper holds nothing. A read of an unallocated wrapper returns a fresh
empty collection. When a mutable borrow ends and the collection is empty,
the wrapper drops it again.

This is useful for long-lived or module-level registries that are usually
empty. They do not keep an empty container alive between uses.

Everything lives in the `lazycollection.lazy` module. It has two classes:
`LazyCollection` and `CollectionRefMut`.

## Installation

```
pip install lazycollection
```

## Usage

```python
from lazycollection.lazy import LazyCollection

# An empty, unallocated collection built from a factory.
items = LazyCollection(list)
assert items.get() == []
assert not items.is_allocated()

# Borrow mutably; the collection is created on demand.
with items.get_mut_or_default() as values:
    values.append(42)

assert items.get() == [42]
assert items.is_allocated()

# Once the collection is empty again, the wrapper drops it
# at the end of the borrow.
with items.get_mut_or_default() as values:
    values.remove(42)

assert not items.is_allocated()
```

You can also start from an existing value:

```python
registry = LazyCollection(dict, {"a": 1})
assert registry.get() == {"a": 1}
```

The factory defaults to `list`, and the initial value defaults to none.
An initial value is held as given, even if it is empty. It is dropped the
first time a borrow of it ends while it is empty.

### `LazyCollection`

- `get()` returns the held collection. Calls on an allocated wrapper return
  the same object each time. On an unallocated wrapper each call returns a
  new empty collection from the factory. Changes to that collection are not
  stored in the wrapper.
- `get_mut_or_default()` allocates an empty collection from the factory if
  none is held. It returns a `CollectionRefMut` borrow.
- `is_allocated()` tells whether a collection object is held.

### `CollectionRefMut`

- Used as a context manager, it gives the held collection on entry. It ends
  the borrow on exit.
- `value` gives the borrowed collection. It raises `RuntimeError` once the
  borrow has ended or the collection has been dropped.
- `release()` ends the borrow, the same as leaving a `with` block. If the
  collection is empty at that point, the wrapper drops it. Further calls do
  nothing.

The emptiness check uses `len()`, so the collection type must support it.

## Running the tests

```
pip install -e ".[test]"
pytest
```