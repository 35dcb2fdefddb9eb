"""A sequence of integers stored in a contiguous array."""

from __future__ import annotations

import argparse


class ArraySequence:
    """Integers addressed by position, kept in a plain list."""

    def __init__(self, items=()):
        self._items = list(items)

    def _check(self, index):
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")

    def insert(self, item, index):
        """Insert ``item`` at ``index``; an index past the end appends."""
        if index < 0:
            raise IndexError(f"index {index} out of range")
        self._items.insert(index, item)
        return self

    def delete(self, index):
        """Remove the item at ``index``, moving later items back by one."""
        self._check(index)
        del self._items[index]
        return self

    def lookup(self, index):
        """Return the item at ``index``."""
        self._check(index)
        return self._items[index]

    def set(self, item, index):
        """Replace the item at ``index`` with ``item``."""
        self._check(index)
        self._items[index] = item
        return self

    def size(self):
        """Return the number of items."""
        return len(self._items)

    def split(self, index):
        """Return two new sequences: items up to ``index`` and the items after it."""
        self._check(index)
        return (
            ArraySequence(self._items[: index + 1]),
            ArraySequence(self._items[index + 1 :]),
        )

    def concat(self, other):
        """Return a new sequence holding this one followed by ``other``."""
        return ArraySequence(self._items + list(other))

    def render(self):
        """Return the items separated by spaces."""
        return " ".join(str(item) for item in self._items)

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __repr__(self):
        return f"ArraySequence({self._items!r})"


def _build(pairs):
    sequence = ArraySequence()
    for index, value in pairs:
        sequence.insert(value, index)
    return sequence


def main(argv=None):
    """Run a demonstration of the array-backed sequence."""
    parser = argparse.ArgumentParser(prog="array-sequence", description=main.__doc__)
    parser.parse_args(argv)

    first = _build(enumerate([99, 21, 10, 12, 40, 521]))
    print(f"Size = {first.size()}")
    print(first.render())
    print(f"LOOKUP(2)={first.lookup(2)}")
    print("SET(2)=500")
    first.set(500, 2)
    print(f"LOOKUP(2)={first.lookup(2)}")

    second = _build(enumerate([2131, 31, 133, 131, 141, 144, 122], start=6))
    print(f"Size = {second.size()}")
    print(second.render())
    print("CONCAT")
    joined = first.concat(second)
    print(f"Size = {joined.size()}")
    print(joined.render())

    print("SPLIT")
    lower, greater = joined.split(5)
    print(f"Lower : {lower.render()}")
    print(f"Greater : {greater.render()}")

    third = _build(enumerate([1, 2, 3, 4, 5, 6, 7]))
    print(third.render())
    print("Delete 3")
    third.delete(3)
    print(third.render())
    return 0