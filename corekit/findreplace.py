"""Simultaneous search and replacement of many keywords using a trie."""

from __future__ import annotations

from collections.abc import Iterable, Mapping


def to_lower_case(text: str) -> str:
    """Lower-case ASCII letters only; every other character is left as is."""
    return "".join(chr(ord(ch) + 32) if "A" <= ch <= "Z" else ch for ch in text)


class _Node:
    __slots__ = ("children", "key")

    def __init__(self) -> None:
        self.children: dict[str, _Node] = {}
        self.key: str | None = None


class KeywordTrie:
    """A trie of keywords scanned over a text in a single pass.

    A keyword that has another keyword as a prefix is never matched: the
    shorter keyword wins.  Adding the empty keyword disables all matching.
    """

    def __init__(self, keys: Iterable[str] = ()) -> None:
        self._root = _Node()
        for key in keys:
            self.add(key)

    def add(self, key: str) -> None:
        """Add ``key`` to the trie."""
        node = self._root
        for ch in key:
            if node.key is not None:
                return
            node = node.children.setdefault(ch, _Node())
        if node.key is None:
            node.key = key
            node.children.clear()

    def _step(self, active, ch):
        """Advance partial matches by ``ch``; return (completed, still_active)."""
        survivors = []
        for node, start in active:
            child = node.children.get(ch)
            if child is None:
                continue
            if child.key is not None:
                return (child.key, start), []
            survivors.append((child, start))
        return None, survivors

    def find(self, text: str, case_sensitive: bool = True) -> tuple[str, int] | None:
        """Return the first keyword to be completed in ``text`` and its start index.

        Returns None when no keyword occurs.  When case-insensitive, the
        text is lower-cased as it is scanned; keys are compared as stored.
        """
        active: list[tuple[_Node, int]] = []
        for i, ch in enumerate(text):
            probe = ch if case_sensitive else to_lower_case(ch)
            active.append((self._root, i))
            completed, active = self._step(active, probe)
            if completed is not None:
                return completed
        return None

    def replace(self, text: str, replacements: Mapping[str, str], case_sensitive: bool = True) -> str:
        """Replace every keyword found in ``text`` with its value in ``replacements``.

        A keyword missing from ``replacements`` is removed from the text.
        """
        out: list[str] = []
        written = 0
        active: list[tuple[_Node, int]] = []
        for i, ch in enumerate(text):
            probe = ch if case_sensitive else to_lower_case(ch)
            active.append((self._root, i))
            completed, active = self._step(active, probe)
            if completed is not None:
                key, start = completed
                out.append(text[written:start])
                out.append(replacements.get(key, ""))
                written = i + 1
            keep_from = active[0][1] if active else i + 1
            out.append(text[written:keep_from])
            written = keep_from
        out.append(text[written:])
        return "".join(out)


def find_any(text: str, keys: Iterable[str] | str, case_sensitive: bool = False) -> tuple[str, int] | None:
    """Find the first of ``keys`` to be completed in ``text``.

    Returns ``(key, start)`` or None.  When case-insensitive, the returned
    key is in lower case.
    """
    if isinstance(keys, str):
        keys = [keys]
    key_list = list(keys)
    if not text or not key_list:
        return None
    if not case_sensitive:
        key_list = [to_lower_case(key) for key in key_list]
    return KeywordTrie(key_list).find(text, case_sensitive)


def replace_all(text: str, replacements: Mapping[str, str], case_sensitive: bool = False) -> str:
    """Replace every key of ``replacements`` found in ``text`` by its value in one pass.

    When case-insensitive, keys are lower-cased and a key whose lower-case
    form equals its replacement is ignored.
    """
    if not text or not replacements:
        return text
    if case_sensitive:
        table = dict(replacements)
    else:
        table = {}
        for key, value in sorted(replacements.items()):
            lowered = to_lower_case(key)
            if lowered != value:
                table[lowered] = value
    if not table:
        return text
    return KeywordTrie(table).replace(text, table, case_sensitive)


def replace_pairs(
    text: str,
    pairs: Iterable[tuple[str, str]],
    case_sensitive: bool = False,
    reverse: bool = False,
) -> str:
    """Like :func:`replace_all` with ``(key, value)`` pairs; ``reverse`` swaps each pair."""
    table = {value: key for key, value in pairs} if reverse else dict(pairs)
    return replace_all(text, table, case_sensitive)