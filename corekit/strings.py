"""String utilities: cyclic and sequential replacement, delimited lists and maps."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import cycle

from corekit.extraction import contains, extract, get_everything_before

DEFAULT_BEGIN = "_n_"
DEFAULT_END = "_/n_"


def sort_with_follower(keys: Sequence, followers: Sequence) -> tuple[list, list]:
    """Sort ``keys`` and carry ``followers`` along; ties are ordered by follower.

    When the two sequences differ in length both are returned unsorted.
    """
    if len(keys) != len(followers):
        return list(keys), list(followers)
    pairs = sorted(zip(keys, followers))
    return [key for key, _ in pairs], [follower for _, follower in pairs]


def is_letter_or_backslash(char: str) -> bool:
    """Return True for an ASCII letter or a backslash."""
    return "a" <= char <= "z" or "A" <= char <= "Z" or char == "\\"


def first_letter_or_backslash(text: str, start: int = 0) -> int | None:
    """Return the index of the first ASCII letter or backslash at or after ``start``."""
    if start < 0:
        raise ValueError("start must not be negative")
    return next(
        (index for index, ch in enumerate(text[start:], start) if is_letter_or_backslash(ch)),
        None,
    )


def reverse_string(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def replace_cycling(
    text: str,
    search_for: str,
    replacements: Sequence[str],
    replace_all: bool = True,
    case_sensitive: bool = False,
) -> str:
    """Replace occurrences of ``search_for`` with ``replacements`` used in turn.

    The first occurrence gets ``replacements[0]``, the next ``replacements[1]``
    and so on, starting over when the list runs out.  An empty list removes
    the occurrences.  With ``replace_all`` false only the first is replaced.
    """
    if not text or not search_for:
        return text
    choices = cycle(list(replacements) or [""])
    out: list[str] = []
    pos = 0
    while pos < len(text):
        hit = get_everything_before(text, pos, search_for, case_sensitive)
        if not hit.found:
            out.append(text[pos:])
            break
        out.append(hit.text)
        out.append(next(choices))
        pos = hit.pos
        if not replace_all:
            out.append(text[pos:])
            break
    return "".join(out)


def replace(
    text: str,
    search_for: str,
    replacement: str,
    replace_all: bool = True,
    case_sensitive: bool = False,
) -> str:
    """Replace ``search_for`` with ``replacement`` (ASCII case-insensitive by default)."""
    if search_for == replacement or not text:
        return text
    return replace_cycling(text, search_for, [replacement], replace_all, case_sensitive)


def find_first_position(text: str, pos: int, search_for: str, case_sensitive: bool = False) -> int:
    """Return where ``search_for`` first occurs at or after ``pos``, or ``len(text)``."""
    hit = get_everything_before(text, pos, search_for, case_sensitive)
    if not hit.found:
        return len(text)
    return hit.pos - len(search_for)


def _require_needles(search_for: Iterable[str]) -> None:
    if any(not needle for needle in search_for):
        raise ValueError("search strings must not be empty")


def replace_sequence_secure(
    text: str,
    search_for: Sequence[str],
    replacements: Sequence[str],
    case_sensitive: bool = False,
) -> str:
    """Replace every occurrence of each ``search_for[i]`` with ``replacements[i]``.

    Occurrences are handled in the order they appear; when two search
    strings start at the same place the earlier one in the list wins.
    The text is returned unchanged if the lists are empty or differ in length.
    """
    if not search_for or len(replacements) != len(search_for):
        return text
    _require_needles(search_for)
    size = len(text)
    pending: dict[int, int] = {}
    for index, needle in reversed(list(enumerate(search_for))):
        pending[find_first_position(text, 0, needle, case_sensitive)] = index
    out: list[str] = []
    pos = 0
    while pos < size:
        first = min(pending)
        index = pending.pop(first)
        if pos < first:
            out.append(text[pos:first])
            pos = first
        if first < size:
            out.append(replacements[index])
            pos += len(search_for[index])
        pending[find_first_position(text, pos, search_for[index], case_sensitive)] = index
    return "".join(out)


def replace_sequence(
    text: str,
    search_for: Sequence[str],
    replacements: Sequence[str],
    case_sensitive: bool = False,
) -> str:
    """Replace ``search_for[i]`` with ``replacements[i]``, expecting them in list order.

    When the first occurrences appear in strictly increasing order each
    search string is replaced once, at its first occurrence; otherwise
    :func:`replace_sequence_secure` does the work.
    """
    if not search_for or len(replacements) != len(search_for):
        return text
    _require_needles(search_for)
    positions = [find_first_position(text, 0, needle, case_sensitive) for needle in search_for]
    if any(earlier >= later for earlier, later in zip(positions, positions[1:])):
        return replace_sequence_secure(text, search_for, replacements, case_sensitive)
    size = len(text)
    out: list[str] = []
    pos = 0
    for needle, replacement, at in zip(search_for, replacements, positions):
        if pos >= size:
            break
        if pos < at:
            out.append(text[pos:at])
            pos = at
        if at < size:
            out.append(replacement)
            pos += len(needle)
    out.append(text[pos:])
    return "".join(out)


def _require_delimiters(*delimiters: str) -> None:
    if any(not delimiter for delimiter in delimiters):
        raise ValueError("delimiters must not be empty")


def count_in_string(
    items: str,
    begin: str = DEFAULT_BEGIN,
    end: str = DEFAULT_END,
    must_have: str | None = None,
) -> int:
    """Count the ``begin``...``end`` blocks, only those containing ``must_have`` if given."""
    _require_delimiters(begin, end)
    count = 0
    pos = 0
    while True:
        block = extract(items, pos, begin, end)
        if not block.found:
            return count
        if must_have is None or contains(block.text, must_have):
            count += 1
        pos = block.pos


def list_to_string(items: Iterable[str], begin: str = DEFAULT_BEGIN, end: str = DEFAULT_END) -> str:
    """Wrap each item in ``begin`` and ``end`` and join them."""
    return "".join(begin + item + end for item in items)


def string_to_list_and_remove(
    items: str,
    begin: str = DEFAULT_BEGIN,
    end: str = DEFAULT_END,
    remove: bool = True,
    must_have: str | None = None,
) -> tuple[list[str], str]:
    """Collect the ``begin``...``end`` blocks of ``items`` in order.

    Returns the blocks and, when ``remove`` is true, the text with all
    blocks cut out (an empty string otherwise).  With ``must_have`` only
    blocks that contain it are collected; all are still removed.
    """
    _require_delimiters(begin, end)
    found: list[str] = []
    rest: list[str] = []
    pos = 0
    while pos < len(items):
        before = get_everything_before(items, pos, begin)
        block = extract(items, before.pos - len(begin), begin, end) if before.found else None
        if block is None or not block.found:
            if remove:
                rest.append(items[pos:])
            break
        if remove:
            rest.append(before.text)
        if must_have is None or replace(block.text, must_have, "") != block.text:
            found.append(block.text)
        pos = block.pos
    return found, "".join(rest)


def string_to_list(
    items: str,
    begin: str = DEFAULT_BEGIN,
    end: str = DEFAULT_END,
    must_have: str | None = None,
) -> list[str]:
    """Return the ``begin``...``end`` blocks of ``items`` in order."""
    return string_to_list_and_remove(items, begin, end, False, must_have)[0]


def string_to_set(text: str, key_begin: str, key_end: str) -> set[str]:
    """Return the set of ``key_begin``...``key_end`` blocks of ``text``."""
    return set(string_to_list(text, key_begin, key_end))


def set_to_string(items: Iterable[str], key_begin: str, key_end: str, separator: str = "") -> str:
    """Write the items in sorted order, each wrapped and followed by ``separator``."""
    return "".join(key_begin + item + key_end + separator for item in sorted(items))


def string_to_map(
    text: str,
    key_begin: str,
    key_end: str,
    value_begin: str,
    value_end: str,
) -> dict[str, str]:
    """Read alternating key and value blocks into a dictionary.

    Reading stops at the first key without a following value.
    """
    _require_delimiters(key_begin, key_end, value_begin, value_end)
    result: dict[str, str] = {}
    pos = 0
    while True:
        key = extract(text, pos, key_begin, key_end)
        if not key.found:
            return result
        value = extract(text, key.pos, value_begin, value_end)
        if not value.found:
            return result
        result[key.text] = value.text
        pos = value.pos


def increment_string(text: str) -> str:
    """Increment ``text`` as a base-36 counter over the digits ``0-9a-z``.

    ``9`` becomes ``a`` and ``z`` rolls over to ``0`` with a carry; other
    characters are passed over.  A carry out of the front prepends ``1``.
    """
    chars = list(text)
    for index, ch in reversed(list(enumerate(chars))):
        if "0" <= ch < "9" or "a" <= ch < "z":
            chars[index] = chr(ord(ch) + 1)
            return "".join(chars)
        if ch == "9":
            chars[index] = "a"
            return "".join(chars)
        if ch == "z":
            chars[index] = "0"
    return "1" + "".join(chars)