"""Extraction of text between delimiters, with optional nesting."""

from __future__ import annotations

from dataclasses import dataclass

from corekit.findreplace import to_lower_case


@dataclass(frozen=True)
class Extraction:
    """The outcome of a search.

    ``text`` is the extracted or rebuilt text, ``found`` tells whether the
    delimiters were found, and ``pos`` is the position the scan ended at.
    """

    text: str
    found: bool
    pos: int


def _search(src: str, pos: int, needle: str, case_sensitive: bool) -> int:
    """Return the index of ``needle`` in ``src`` at or after ``pos``, or -1."""
    if case_sensitive:
        index = src.find(needle, pos)
    else:
        index = to_lower_case(src).find(to_lower_case(needle), pos)
    # An empty needle matching at the very end counts as not found.
    if index < 0 or index == len(src):
        return -1
    return index


def get_everything_before(src: str, pos: int, end: str, case_sensitive: bool = False) -> Extraction:
    """Return the text from ``pos`` up to the next ``end``.

    On success ``pos`` of the result points just past ``end``.  When ``end``
    does not occur, the whole of ``src`` is returned with ``found`` false and
    ``pos`` at the end of ``src``.
    """
    if pos < 0:
        raise ValueError("position must not be negative")
    index = _search(src, pos, end, case_sensitive)
    if index < 0:
        return Extraction(src, False, len(src))
    return Extraction(src[pos:index], True, index + len(end))


def contains(haystack: str, needle: str, case_sensitive: bool = False) -> bool:
    """Return True if ``needle`` occurs in ``haystack``."""
    return get_everything_before(haystack, 0, needle, case_sensitive).found


def _extract_nested(src: str, pos: int, start: str, end: str, case_sensitive: bool):
    """Scan a balanced ``start``...``end`` block.

    Returns ``(prefix, inner, found, pos)`` where ``prefix`` is the text
    between the initial ``pos`` and the opening delimiter.
    """
    if start == "":
        raise ValueError("an empty opening delimiter cannot be nested")
    opening = get_everything_before(src, pos, start, case_sensitive)
    if not opening.found:
        return opening.text, "", False, opening.pos
    pos = opening.pos
    pieces: list[str] = []
    depth = 1
    while depth > 0:
        next_start = get_everything_before(src, pos, start, case_sensitive)
        next_end = get_everything_before(src, pos, end, case_sensitive)
        if not next_end.found:
            return opening.text, "", False, pos
        if next_start.found and next_start.pos < next_end.pos:
            pieces.append(next_start.text)
            pieces.append(start)
            pos = next_start.pos
            depth += 1
        else:
            depth -= 1
            pieces.append(next_end.text)
            if depth > 0:
                pieces.append(end)
            pos = next_end.pos
    return opening.text, "".join(pieces), True, pos


def extract(src: str, pos: int, start: str, end: str, case_sensitive: bool = False) -> Extraction:
    """Extract the text between ``start`` and ``end`` found at or after ``pos``.

    When the delimiters differ, nested pairs are balanced and the inner
    delimiters are kept in the text.  On failure the text is empty.
    """
    if start != end:
        if pos < 0:
            raise ValueError("position must not be negative")
        prefix, inner, found, new_pos = _extract_nested(src, pos, start, end, case_sensitive)
        if found:
            return Extraction(inner, True, new_pos)
        if not prefix and new_pos == len(src) and _search(src, pos, start, case_sensitive) < 0:
            return Extraction("", False, pos)
        opening = get_everything_before(src, pos, start, case_sensitive)
        if not opening.found:
            return Extraction("", False, pos)
        return Extraction("", False, new_pos)
    opening = get_everything_before(src, pos, start, case_sensitive)
    if not opening.found:
        return Extraction("", False, opening.pos)
    closing = get_everything_before(src, opening.pos, end, case_sensitive)
    if not closing.found:
        return Extraction("", False, closing.pos)
    return closing


def extract_and_replace(
    src: str,
    pos: int,
    start: str,
    end: str,
    case_sensitive: bool = False,
    replace_with: str = "",
) -> Extraction:
    """Replace the first ``start``...``end`` block at or after ``pos`` with ``replace_with``.

    The result text is the part of ``src`` from ``pos`` to the block, then
    ``replace_with``, then the rest of ``src``; ``pos`` of the result points
    just past ``replace_with``.  When the delimiters differ and ``start`` is
    missing, ``src`` is returned unchanged; otherwise a failure gives an
    empty text.
    """
    if start != end:
        if pos < 0:
            raise ValueError("position must not be negative")
        prefix, _inner, found, new_pos = _extract_nested(src, pos, start, end, case_sensitive)
        if not found:
            if get_everything_before(src, pos, start, case_sensitive).found:
                return Extraction("", False, new_pos)
            return Extraction(src, False, len(src))
    else:
        opening = get_everything_before(src, pos, start, case_sensitive)
        if not opening.found:
            return Extraction("", False, opening.pos)
        closing = get_everything_before(src, opening.pos, end, case_sensitive)
        if not closing.found:
            return Extraction("", False, closing.pos)
        prefix, new_pos = opening.text, closing.pos
    head = prefix + replace_with
    return Extraction(head + src[new_pos:], True, len(head))


def erase_stuff_between(
    src: str,
    start: str,
    end: str,
    pos: int = 0,
    case_sensitive: bool = False,
) -> Extraction:
    """Remove the first ``start``...``end`` block, delimiters included."""
    return extract_and_replace(src, pos, start, end, case_sensitive, "")