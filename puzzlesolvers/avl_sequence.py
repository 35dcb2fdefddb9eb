"""A sequence of integers stored in an AVL tree keyed by position."""

from __future__ import annotations

import argparse
from dataclasses import dataclass


@dataclass
class _Node:
    value: int
    index: int
    height: int = 1
    left: _Node | None = None
    right: _Node | None = None


def _height(node):
    return node.height if node else 0


def _update(node):
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node):
    return _height(node.left) - _height(node.right) if node else 0


def _rotate_right(node):
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    _update(node)
    _update(pivot)
    return pivot


def _rotate_left(node):
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    _update(node)
    _update(pivot)
    return pivot


def _rebalance(node):
    _update(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node, value, index):
    if node is None:
        return _Node(value, index)
    if index < node.index:
        node.left = _insert(node.left, value, index)
    elif index > node.index:
        node.right = _insert(node.right, value, index)
    else:
        return node
    return _rebalance(node)


def _delete(node, index):
    if node is None:
        return None
    if index < node.index:
        node.left = _delete(node.left, index)
    elif index > node.index:
        node.right = _delete(node.right, index)
    elif node.left is None or node.right is None:
        return node.left or node.right
    else:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.index, node.value = successor.index, successor.value
        node.right = _delete(node.right, successor.index)
    return _rebalance(node)


def _find(node, index):
    while node is not None and node.index != index:
        node = node.right if index > node.index else node.left
    return node


def _walk_preorder(node):
    stack = [node] if node else []
    while stack:
        current = stack.pop()
        yield current
        if current.right:
            stack.append(current.right)
        if current.left:
            stack.append(current.left)


def _walk_inorder(node):
    stack = []
    while stack or node:
        while node:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


class AVLSequence:
    """Integers addressed by position, kept in a height-balanced search tree.

    Positions need not be contiguous; reading a sequence as a list fills any
    gap with 0.
    """

    def __init__(self, items=()):
        self._root = None
        for index, item in enumerate(items):
            self.insert(item, index)

    def insert(self, item, index):
        """Store ``item`` at ``index``; an occupied index is left unchanged."""
        self._root = _insert(self._root, item, index)
        return self

    def delete(self, index):
        """Remove the item at ``index`` and move every later item back by one."""
        if _find(self._root, index) is None:
            raise IndexError(f"no item at index {index}")
        self._root = _delete(self._root, index)
        for node in _walk_preorder(self._root):
            if node.index > index:
                node.index -= 1
        return self

    def lookup(self, index):
        """Return the item at ``index``."""
        node = _find(self._root, index)
        if node is None:
            raise IndexError(f"no item at index {index}")
        return node.value

    def set(self, item, index):
        """Replace the item at ``index`` with ``item``."""
        node = _find(self._root, index)
        if node is None:
            raise IndexError(f"no item at index {index}")
        node.value = item
        return self

    def size(self):
        """Return one more than the highest occupied index."""
        node = self._root
        if node is None:
            return 0
        while node.right is not None:
            node = node.right
        return node.index + 1

    def split(self, index):
        """Return two new sequences: items up to ``index`` and the items after it."""
        values = self.to_list()
        cut = max(index + 1, 0)
        return AVLSequence(values[:cut]), AVLSequence(values[cut:])

    def concat(self, other):
        """Return a new sequence holding this one followed by ``other``."""
        result = AVLSequence()
        for node in _walk_inorder(self._root):
            result.insert(node.value, node.index)
        offset = self.size()
        for position, value in enumerate(other.to_list()):
            result.insert(value, offset + position)
        return result

    def preorder(self):
        """Return the indices of the tree's nodes in preorder."""
        return [node.index for node in _walk_preorder(self._root)]

    def to_list(self):
        """Return the items by position, with 0 in any unoccupied position."""
        values = [0] * self.size()
        for node in _walk_inorder(self._root):
            values[node.index] = node.value
        return values

    def __len__(self):
        return self.size()

    def __iter__(self):
        return iter(self.to_list())

    def __repr__(self):
        return f"AVLSequence({self.to_list()!r})"


def _indices(sequence):
    return "".join(f"{index} " for index in sequence.preorder())


def _build(values):
    sequence = AVLSequence()
    for index, value in enumerate(values):
        sequence.insert(value, index)
    return sequence


def main(argv=None):
    """Run a demonstration of the tree-backed sequence."""
    parser = argparse.ArgumentParser(prog="avl-sequence", description=main.__doc__)
    parser.parse_args(argv)

    print("FIRST TREE")
    tree = _build([10, 212, 99, 54, 121, 31, 56, 75, 87])
    print(f"Size = {tree.size()}")
    print(_indices(tree))
    print(f"LOOKUP(2)={tree.lookup(2)}")
    print("Set(2)=100")
    tree.set(100, 2)
    print(f"LOOKUP(2)={tree.lookup(2)}")

    print("SECOND TREE")
    tree2 = _build([9, 10, 11, 12, 13, 14, 15])
    print(f"Size = {tree2.size()}")
    print(_indices(tree2))
    print("CONCAT")
    joined = tree.concat(tree2)
    print(f"Size = {joined.size()}")
    print(_indices(joined))

    print("SPLIT")
    lower, greater = joined.split(5)
    print(f"Lower : {_indices(lower)}")
    print(f"Greater : {_indices(greater)}")

    print("THIRD TREE")
    tree3 = _build([3, 14, 17, 13, 21, 23])
    print("DELETE")
    print(f"Size = {tree3.size()}")
    print(_indices(tree3))
    tree3.delete(3)
    print(f"Size = {tree3.size()}")
    print(_indices(tree3))
    return 0