"""Ordered set and map that support access by position (order statistics).

Both containers keep their elements sorted and answer "what is the i-th
element" and "at which position is this element" in logarithmic time.
Elements are compared with ``<`` only; two elements are equal when neither
is less than the other.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any


class _Node:
    __slots__ = ("value", "left", "right", "height", "size")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.height = 1
        self.size = 1


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _size(node: _Node | None) -> int:
    return node.size if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))
    node.size = 1 + _size(node.left) + _size(node.right)


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    _update(node)
    _update(pivot)
    return pivot


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    _update(node)
    _update(pivot)
    return pivot


def _balance(node: _Node) -> _Node:
    _update(node)
    skew = _height(node.right) - _height(node.left)
    if skew > 1:
        if _height(node.right.right) < _height(node.right.left):
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    if skew < -1:
        if _height(node.left.left) < _height(node.left.right):
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    return node


def _insert(node: _Node | None, value: Any) -> tuple[_Node, bool]:
    if node is None:
        return _Node(value), True
    if value < node.value:
        node.left, inserted = _insert(node.left, value)
    elif node.value < value:
        node.right, inserted = _insert(node.right, value)
    else:
        return node, False
    return (_balance(node) if inserted else node), inserted


def _pop_min(node: _Node) -> tuple[_Node | None, _Node]:
    if node.left is None:
        return node.right, node
    node.left, smallest = _pop_min(node.left)
    return _balance(node), smallest


def _remove(node: _Node | None, value: Any) -> tuple[_Node | None, bool]:
    if node is None:
        return None, False
    if value < node.value:
        node.left, removed = _remove(node.left, value)
    elif node.value < value:
        node.right, removed = _remove(node.right, value)
    else:
        if node.right is None:
            return node.left, True
        if node.left is None:
            return node.right, True
        rest, successor = _pop_min(node.right)
        successor.left = node.left
        successor.right = rest
        return _balance(successor), True
    return (_balance(node) if removed else node), removed


class IndexedSet:
    """A sorted set with positional access, backed by a size-augmented AVL tree."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        self.update(values)

    def __len__(self) -> int:
        return _size(self._root)

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __contains__(self, value: Any) -> bool:
        return self._locate(value)[1] is not None

    def __getitem__(self, position: int) -> Any:
        size = len(self)
        if position < 0:
            position += size
        if not 0 <= position < size:
            raise IndexError("position out of range")
        node = self._root
        while True:
            left = _size(node.left)
            if position == left:
                return node.value
            if position < left:
                node = node.left
            else:
                position -= left + 1
                node = node.right

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _locate(self, value: Any) -> tuple[int, _Node | None]:
        """Return (rank, node) for ``value``; node is None when absent.

        When absent, rank is the number of stored elements less than ``value``.
        """
        rank = 0
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif node.value < value:
                rank += _size(node.left) + 1
                node = node.right
            else:
                return rank + _size(node.left), node
        return rank, None

    def add(self, value: Any) -> bool:
        """Insert ``value``; return True if it was not already present."""
        self._root, inserted = _insert(self._root, value)
        return inserted

    def discard(self, value: Any) -> bool:
        """Remove ``value``; return True if it was present."""
        self._root, removed = _remove(self._root, value)
        return removed

    def update(self, values: Iterable[Any]) -> int:
        """Insert every value; return how many were new."""
        return sum(self.add(value) for value in list(values))

    def difference_update(self, values: Iterable[Any]) -> int:
        """Remove every value; return how many were present."""
        return sum(self.discard(value) for value in list(values))

    def __iadd__(self, other: Any) -> IndexedSet:
        if isinstance(other, IndexedSet):
            self.update(other)
        else:
            self.add(other)
        return self

    def __isub__(self, other: Any) -> IndexedSet:
        if isinstance(other, IndexedSet):
            self.difference_update(other)
        else:
            self.discard(other)
        return self

    def index(self, value: Any) -> int:
        """Return the position of ``value``; raise ValueError if it is absent."""
        rank, node = self._locate(value)
        if node is None:
            raise ValueError(f"{value!r} is not in the set")
        return rank

    def upper_bound(self, value: Any) -> int:
        """Return the position of ``value``, or where it would be inserted if absent."""
        return self._locate(value)[0]

    def clear(self) -> None:
        """Remove every element."""
        self._root = None


class _Entry:
    __slots__ = ("key", "value")

    def __init__(self, key: Any, value: Any = None) -> None:
        self.key = key
        self.value = value

    def __lt__(self, other: _Entry) -> bool:
        return self.key < other.key


class IndexedMap:
    """A map sorted by key with positional access.

    Inserting a key that is already present keeps the old value.
    Iteration and positional access yield ``(key, value)`` pairs.
    """

    def __init__(self, items: Mapping[Any, Any] | Iterable[tuple[Any, Any]] = ()) -> None:
        self._entries = IndexedSet()
        self.update(items)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return ((entry.key, entry.value) for entry in self._entries)

    def __contains__(self, key: Any) -> bool:
        return _Entry(key) in self._entries

    def __getitem__(self, position: int) -> tuple[Any, Any]:
        entry = self._entries[position]
        return entry.key, entry.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def insert(self, key: Any, value: Any) -> bool:
        """Add ``key`` with ``value``; return False (and change nothing) if the key exists."""
        return self._entries.add(_Entry(key, value))

    def erase(self, key: Any) -> bool:
        """Remove ``key``; return True if it was present."""
        return self._entries.discard(_Entry(key))

    def update(self, other: Mapping[Any, Any] | Iterable[tuple[Any, Any]]) -> int:
        """Insert every pair of ``other``; return how many keys were new."""
        pairs = other.items() if isinstance(other, Mapping) else other
        return sum(self.insert(key, value) for key, value in list(pairs))

    def difference_update(self, other: Any) -> int:
        """Remove the keys of ``other`` (a map or an iterable of keys); return how many went."""
        if isinstance(other, IndexedMap):
            keys = [key for key, _ in other]
        else:
            keys = list(other)
        return sum(self.erase(key) for key in keys)

    def get(self, key: Any) -> Any:
        """Return the value stored under ``key``, or None if it is absent."""
        node = self._entries._locate(_Entry(key))[1]
        return node.value.value if node is not None else None

    def index(self, key: Any) -> int:
        """Return the position of ``key``; raise ValueError if it is absent."""
        rank, node = self._entries._locate(_Entry(key))
        if node is None:
            raise ValueError(f"{key!r} is not in the map")
        return rank

    def upper_bound(self, key: Any) -> int:
        """Return the position of ``key``, or where it would be inserted if absent."""
        return self._entries.upper_bound(_Entry(key))

    def clear(self) -> None:
        """Remove every entry."""
        self._entries.clear()